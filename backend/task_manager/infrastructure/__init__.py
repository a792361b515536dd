"""Infrastructure Layer — database, authentication, and cross-cutting concerns.

Invariants:
    - Infrastructure may import core/ types and errors, never the API layer
    - All SQLAlchemy failures surface as core.errors.DatabaseError
"""
