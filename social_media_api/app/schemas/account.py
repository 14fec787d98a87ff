"""
Pydantic models for account data.

The same credentials shape is used for registration and login.  The
stored password is returned as-is in responses; accounts carry no
other secret.
"""

from pydantic import BaseModel, Field


class AccountCredentials(BaseModel):
    """Request body for ``POST /register`` and ``POST /login``."""

    username: str = Field(..., example="bob")
    password: str = Field(..., example="pass")


class AccountRead(BaseModel):
    """Schema for reading an account from the API."""

    id: int
    username: str
    password: str
