"""Response Message Formatting: pure functions building every success message.

Invariants:
    - All functions are pure (no IO, no FastAPI)
    - Values are echoed exactly as supplied (no trimming)
    - format_patch_message assumes validation already rejected the empty patch
"""

WELCOME_MESSAGE = "Welcome to the Python Web Server!"


def format_greeting(name: str) -> str:
    return f"Hello, {name}!"


def format_person_message(name: str, age: int) -> str:
    """Message for create (POST) and replace (PUT)."""
    return f"Hello, {name}! You are {age} years old."


def format_patch_message(name: str | None, age: int | None) -> str:
    """Message reflecting only the fields the patch supplied."""
    if name is not None and age is not None:
        return f"Updated: {name}! You are {age} years old."
    if name is not None:
        return f"Updated name to: {name}"
    if age is not None:
        return f"Updated age to: {age}"
    raise ValueError("patch message requires at least one field")


def format_deleted_message(resource_id: str) -> str:
    return f"Resource with ID '{resource_id}' has been deleted"
