"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except the text report)

Design Decisions:
    - Thin routes delegate to TodoListService (ADR: impureim sandwich)
"""
