"""
Pydantic schema definitions for API payloads.

Each domain (accounts, messages) defines its own Pydantic models for
request and response bodies.  Schemas are separated from the SQL in
``repositories`` to decouple API representation from persistence.
"""
