"""Person Schemas: JSON bodies for create, replace and patch routes.

Invariants:
    - name is a strict JSON string, age a strict JSON integer in 0..255
    - PersonPatch fields are optional; emptiness is rejected by core/validation
    - MessageResponse / ErrorResponse are the only JSON response shapes

Design Decisions:
    - Decode range 0..255 mirrors an unsigned byte; the 1..120 rule is applied
      after decoding so it produces the domain error message, not a decode error
"""

from typing import Annotated

from pydantic import BaseModel, Field

Age = Annotated[int, Field(ge=0, le=255, strict=True)]
Name = Annotated[str, Field(strict=True)]


class PersonInput(BaseModel):
    """Full person record: body of POST /create and PUT /update."""
    name: Name
    age: Age


class PersonPatch(BaseModel):
    """Partial person record: body of PATCH /update."""
    name: Name | None = None
    age: Age | None = None


class MessageResponse(BaseModel):
    """Success payload."""
    message: str


class ErrorResponse(BaseModel):
    """Error payload."""
    error: str
