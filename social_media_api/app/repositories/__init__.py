"""
Persistence gateway for accounts and messages.

Repositories issue parameterized SQL against the SQLite store and
convert rows into schema objects.  They apply no business rules.
"""
