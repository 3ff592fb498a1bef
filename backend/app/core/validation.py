"""Input Validation: pure rules for the name, age and id fields.

Invariants:
    - Every validator is PURE: returns an error message or None, never raises
    - Shell (route handler) turns a message into InputValidationError
    - MAX_NAME_LENGTH and the age bounds are the single source of truth

Design Decisions:
    - Length is measured on the trimmed value so surrounding whitespace
      never pushes a valid name over the limit
    - Rule order is fixed: name empty, name length, then age
"""

MAX_NAME_LENGTH: int = 50
MIN_AGE: int = 1
MAX_AGE: int = 120

NAME_EMPTY = "Name cannot be empty"
NAME_TOO_LONG = f"Name is too long (max {MAX_NAME_LENGTH} characters)"
INVALID_AGE = "Invalid age"
NO_FIELDS = "At least one field must be provided"
ID_EMPTY = "ID cannot be empty"


def validate_name(name: str) -> str | None:
    """Name must be non-empty after trimming and at most 50 characters."""
    trimmed = name.strip()
    if not trimmed:
        return NAME_EMPTY
    if len(trimmed) > MAX_NAME_LENGTH:
        return NAME_TOO_LONG
    return None


def validate_age(age: int) -> str | None:
    """Age must fall in [MIN_AGE, MAX_AGE]."""
    if age < MIN_AGE or age > MAX_AGE:
        return INVALID_AGE
    return None


def validate_resource_id(resource_id: str) -> str | None:
    if not resource_id.strip():
        return ID_EMPTY
    return None


def validate_person(name: str, age: int) -> str | None:
    """Full record (create/replace): name rules, then age rule."""
    return validate_name(name) or validate_age(age)


def validate_partial_person(
    name: str | None, age: int | None,
) -> str | None:
    """Partial record (patch): present fields checked, at least one required."""
    if name is not None:
        error = validate_name(name)
        if error:
            return error
    if age is not None:
        error = validate_age(age)
        if error:
            return error
    if name is None and age is None:
        return NO_FIELDS
    return None
