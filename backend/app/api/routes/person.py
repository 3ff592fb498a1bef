"""Person Routes: create, replace, patch and delete echo endpoints.

Invariants:
    - Bodies are decoded by Pydantic before reaching the handler
    - Business rules come from core/validation, messages from core/format_messages
    - Nothing is stored: every handler is a pure echo of validated input
    - DELETE /delete/ (empty segment) is routed here so it fails validation (400)

Design Decisions:
    - POST returns 201, PUT/PATCH/DELETE return 200
    - Path parameter named resource_id (not id) to avoid shadowing the builtin
"""

import logging

from fastapi import APIRouter, status

from app.api.routes.route_helpers import VALIDATION_RESPONSES, reject_if_invalid
from app.core.format_messages import (
    format_deleted_message,
    format_patch_message,
    format_person_message,
)
from app.core.validation import (
    validate_partial_person,
    validate_person,
    validate_resource_id,
)
from app.schemas.person import MessageResponse, PersonInput, PersonPatch

logger = logging.getLogger(__name__)
router = APIRouter(tags=["person"])


@router.post(
    "/create", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED, responses=VALIDATION_RESPONSES,
)
async def create_person(body: PersonInput):
    """Validate a full record and greet it."""
    fields = {"person_name": body.name, "age": body.age}
    logger.info("Processing create request", extra=fields)
    reject_if_invalid(validate_person(body.name, body.age), **fields)
    logger.info("Person created", extra=fields)
    return MessageResponse(message=format_person_message(body.name, body.age))


@router.put(
    "/update", response_model=MessageResponse,
    responses=VALIDATION_RESPONSES,
)
async def replace_person(body: PersonInput):
    """Same rules as create; answers 200 instead of 201."""
    fields = {"person_name": body.name, "age": body.age}
    logger.info("Processing replace request", extra=fields)
    reject_if_invalid(validate_person(body.name, body.age), **fields)
    logger.info("Person replaced", extra=fields)
    return MessageResponse(message=format_person_message(body.name, body.age))


@router.patch(
    "/update", response_model=MessageResponse,
    responses=VALIDATION_RESPONSES,
)
async def patch_person(body: PersonPatch):
    """Partial update: only supplied fields are validated and echoed."""
    fields = {"person_name": body.name, "age": body.age}
    logger.info("Processing patch request", extra=fields)
    reject_if_invalid(
        validate_partial_person(body.name, body.age), **fields,
    )
    logger.info("Person patched", extra=fields)
    return MessageResponse(
        message=format_patch_message(body.name, body.age),
    )


@router.delete(
    "/delete/{resource_id}", response_model=MessageResponse,
    responses=VALIDATION_RESPONSES,
)
async def delete_resource(resource_id: str):
    """Confirm a deletion. No storage is touched."""
    logger.info(
        "Processing delete request", extra={"resource_id": resource_id},
    )
    reject_if_invalid(
        validate_resource_id(resource_id), resource_id=resource_id,
    )
    logger.info(
        "Resource deleted successfully", extra={"resource_id": resource_id},
    )
    return MessageResponse(message=format_deleted_message(resource_id))


@router.delete(
    "/delete/", response_model=MessageResponse,
    responses=VALIDATION_RESPONSES, include_in_schema=False,
)
async def delete_resource_empty():
    return await delete_resource("")
