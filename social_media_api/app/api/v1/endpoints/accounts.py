"""
Account endpoints for API v1.

Registration, login and the per-account message listing.  Login only
checks the username/password pair and returns the account; no token
or session is issued.
"""

from typing import Annotated, List

from fastapi import APIRouter, Path, Response, status

from social_media_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN
from social_media_api.app.schemas.account import Account, AccountCreate
from social_media_api.app.schemas.message import Message
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


AccountId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]

router = APIRouter()


@router.post("/register", response_model=Account)
async def register(account: AccountCreate):
    """Register a new account.

    Responds 400 with an empty body if the username is blank, the
    password is shorter than four characters or the username is taken.
    """
    created = await AccountService.create_account(account)
    if created is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return created


@router.post("/login", response_model=Account)
async def login(account: AccountCreate):
    """Check credentials and return the matching account, or 401."""
    if not await AccountService.authenticate_account(account.username, account.password):
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return await AccountService.get_account_by_username(account.username)


@router.get("/accounts/{account_id}/messages", response_model=List[Message])
async def list_account_messages(account_id: AccountId) -> List[Message]:
    """List the messages posted by an account.  Always 200, possibly empty."""
    return await MessageService.get_all_messages_from_user(account_id)
