"""
Pydantic models for messages.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field

from ..core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN


# Integers outside SQLite's signed 64-bit range cannot be bound to a
# statement; they are rejected while parsing the request.
SqlInteger = Annotated[int, Field(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]


class MessageCreate(BaseModel):
    """Schema for posting a new message.

    ``time_posted_epoch`` is stored exactly as the client sends it; the
    API does not interpret the unit.  A missing or ``null`` value is
    stored as 0.
    """

    posted_by: Optional[SqlInteger] = Field(None, example=1)
    message_text: Optional[str] = Field(None, example="hello")
    time_posted_epoch: Optional[SqlInteger] = Field(0, example=1000)


class MessageUpdate(BaseModel):
    """Schema for ``PATCH /messages/{message_id}``.  Only the text can change."""

    message_text: Optional[str] = Field(None, example="hi")


class Message(BaseModel):
    """A message as stored in the ``message`` table."""

    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: int

    model_config = {
        "from_attributes": True,
    }
