"""
Top-level router for version 1 of the API.

The account router defines its own paths (``/register``, ``/login``,
``/accounts/{account_id}/messages``) and is included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages


router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
