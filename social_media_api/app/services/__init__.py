"""
Service layer abstraction.

Each service encapsulates the business rules for a domain and calls
into ``repositories`` only after those rules pass, so API handlers
stay limited to translating requests and responses.
"""
