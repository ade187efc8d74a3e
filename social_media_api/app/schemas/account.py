"""
Pydantic models for account data.

``AccountCreate`` is the body accepted by both ``/register`` and
``/login``.  Its fields are optional so that a missing username or
password is rejected by ``AccountService`` with the usual 400/401
rather than by request parsing.  ``Account`` is the persisted record;
like the rest of this API it is returned including the password.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    """Credentials sent by a client to register or log in."""

    username: Optional[str] = Field(None, example="sam")
    password: Optional[str] = Field(None, example="pass1")


class Account(BaseModel):
    """A registered account as stored in the ``account`` table."""

    account_id: int
    username: str
    password: str

    model_config = {
        "from_attributes": True,
    }
