"""Greeting Routes: plain-text welcome and path-parameter greeting.

Invariants:
    - Both routes return text/plain, never JSON, on success
    - GET /hello/ (empty segment) is routed here so it fails validation (400)
      instead of falling through to the framework 404
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.api.routes.route_helpers import VALIDATION_RESPONSES, reject_if_invalid
from app.core.format_messages import WELCOME_MESSAGE, format_greeting
from app.core.validation import validate_name

logger = logging.getLogger(__name__)
router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Static welcome message."""
    return WELCOME_MESSAGE


@router.get(
    "/hello/{name}", response_class=PlainTextResponse,
    responses=VALIDATION_RESPONSES,
)
async def hello(name: str):
    """Greet the name taken from the path."""
    logger.info("Processing hello request", extra={"person_name": name})
    reject_if_invalid(
        validate_name(name), person_name=name, name_length=len(name),
    )
    return format_greeting(name)


@router.get(
    "/hello/", response_class=PlainTextResponse,
    responses=VALIDATION_RESPONSES, include_in_schema=False,
)
async def hello_empty():
    return await hello("")
