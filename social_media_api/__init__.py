"""
Top‑level package for the Social Media API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``social_media_api.app.main:app``.
"""

__all__ = []
