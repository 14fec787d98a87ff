"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages

router = APIRouter()

# The accounts router defines ``/register``, ``/login`` and
# ``/accounts/...`` itself, so it is included without a prefix.
router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
