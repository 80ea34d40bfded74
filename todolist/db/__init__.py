"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Every ORM model inherits from db/base.Base
    - Engines and sessions live in infrastructure/database.py
"""
