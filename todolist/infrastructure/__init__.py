"""Infrastructure Layer — database sessions, category source, and logging setup.

Invariants:
    - Infrastructure modules may import core/, never api/ or services/

Design Decisions:
    - SQLAlchemy async engine: one engine per process, initialized on startup
"""
