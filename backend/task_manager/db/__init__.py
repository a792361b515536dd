"""Database Package — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - Only metadata lives here; engines and sessions belong to infrastructure/database.py
"""
