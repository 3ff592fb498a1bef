"""Route Helpers: shared shell glue between pure validators and HTTP errors.

Invariants:
    - A None result from a validator is a pass (logged at debug)
    - A message result is logged at warning and raised as InputValidationError

Design Decisions:
    - Shared by greeting and person routes (DRY over per-route raise blocks)
"""

import logging

from app.core.errors import InputValidationError
from app.schemas.person import ErrorResponse

logger = logging.getLogger(__name__)

# OpenAPI documentation for routes that validate input
VALIDATION_RESPONSES: dict = {400: {"model": ErrorResponse}}


def reject_if_invalid(error: str | None, **fields) -> None:
    """Raise InputValidationError when a validator returned a message."""
    if error is None:
        logger.debug("Validation passed", extra=fields)
        return
    logger.warning(
        f"Validation failed: {error}",
        extra={"error_code": "VALIDATION_ERROR", **fields},
    )
    raise InputValidationError(error)
