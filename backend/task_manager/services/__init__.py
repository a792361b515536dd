"""Services Layer — orchestration between API routes and repositories.

Invariants:
    - Services depend on repository Protocols, never on SQLAlchemy directly
    - Store misses become ResourceNotFoundError here, not in routes
"""
