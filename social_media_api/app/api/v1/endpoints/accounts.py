"""
Account endpoints for API v1.

Registration, login and the per-account message listing.  Rejected
requests are raised by ``AccountService`` and turned into empty 400 or
401 responses by the handlers installed in ``main.py``.
"""

from typing import List

from fastapi import APIRouter

from social_media_api.app.schemas.account import AccountCredentials, AccountRead
from social_media_api.app.schemas.message import MessageRead
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


router = APIRouter()


@router.post("/register", response_model=AccountRead)
async def register_account(credentials: AccountCredentials) -> AccountRead:
    """Register a new account and return it with its generated id."""
    return await AccountService.register(credentials.username, credentials.password)


@router.post("/login", response_model=AccountRead)
async def login(credentials: AccountCredentials) -> AccountRead:
    """Return the stored account if username and password match."""
    return await AccountService.login(credentials.username, credentials.password)


@router.get("/accounts/{account_id}/messages", response_model=List[MessageRead])
async def list_account_messages(account_id: int) -> List[MessageRead]:
    """List every message posted by an account.

    An unknown account and an account without messages both produce
    an empty list.
    """
    return await MessageService.list_messages_by_account(account_id)
