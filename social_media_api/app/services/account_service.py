"""
Business logic for accounts.

Registration and login rules live here and run before any write.
Rules are checked in order and the first one that fails rejects the
request.  Passwords are stored and compared as plain text; accounts
are never updated or deleted.
"""

import logging
from typing import Optional

from social_media_api.app.core.errors import (
    AuthenticationFailed,
    DuplicateUsername,
    StoreError,
    ValidationFailed,
)
from social_media_api.app.repositories.account_repository import AccountRepository
from social_media_api.app.schemas.account import AccountRead

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Service for registering and authenticating accounts."""

    @classmethod
    async def register(cls, username: str, password: str) -> AccountRead:
        """Create a new account.

        Raises ``ValidationFailed`` if the password is shorter than
        ``MIN_PASSWORD_LENGTH``, the username is blank, the username is
        already taken, or the store refuses the insert.
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            logger.info("Registration rejected: password too short")
            raise ValidationFailed("Password must be at least 4 characters")
        if not username.strip():
            logger.info("Registration rejected: blank username")
            raise ValidationFailed("Username must not be blank")
        try:
            existing = AccountRepository.find_account_by_username(username)
        except StoreError as e:
            raise ValidationFailed("Account could not be created") from e
        if existing is not None:
            logger.info("Registration rejected: username %r taken", username)
            raise ValidationFailed("Username is already taken")
        try:
            return AccountRepository.insert_account(username, password)
        except DuplicateUsername as e:
            # Lost a race with a concurrent registration of the same name.
            raise ValidationFailed("Username is already taken") from e
        except StoreError as e:
            raise ValidationFailed("Account could not be created") from e

    @classmethod
    async def login(cls, username: str, password: str) -> AccountRead:
        """Return the stored account whose credentials match exactly."""
        account = AccountRepository.find_account_by_username(username)
        if account is None:
            logger.info("Login rejected: unknown username %r", username)
            raise AuthenticationFailed("Invalid username or password")
        if account.password != password:
            logger.info("Login rejected: wrong password for %r", username)
            raise AuthenticationFailed("Invalid username or password")
        return account

    @classmethod
    async def get_account(cls, account_id: int) -> Optional[AccountRead]:
        return AccountRepository.find_account_by_id(account_id)
