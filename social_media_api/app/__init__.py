"""
Application package initializer.

The API is split into layers: ``api`` parses requests and shapes
responses, ``services`` applies business rules, ``repositories`` talks
to the SQLite store and ``core`` holds configuration, logging, errors
and database wiring.
"""

from .main import app  # noqa: F401
