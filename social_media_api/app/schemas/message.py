"""
Pydantic models for messages.

Field names follow the JSON wire format (``postedBy``,
``postedAtEpoch``) through aliases; Python code uses the snake_case
attribute names.  Length and blankness rules are enforced by
``MessageService`` rather than here so that a violation produces the
same 400 response as every other rejected request.
"""

from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    """Request body for ``POST /messages``."""

    posted_by: int = Field(..., alias="postedBy", example=1)
    text: str = Field(..., example="hello")
    posted_at_epoch: int = Field(
        ..., alias="postedAtEpoch", example=1669947792000,
        description="Milliseconds since the Unix epoch, supplied by the client",
    )

    model_config = {
        "populate_by_name": True,
    }


class MessageTextUpdate(BaseModel):
    """Request body for ``PATCH /messages/{message_id}``."""

    text: str


class MessageRead(BaseModel):
    """Schema for reading a message from the API."""

    id: int
    posted_by: int = Field(..., alias="postedBy")
    text: str
    posted_at_epoch: int = Field(..., alias="postedAtEpoch")

    model_config = {
        "populate_by_name": True,
    }
