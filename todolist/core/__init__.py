"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, db/ or models/
    - Every TodoItem mutation goes through the TodoList aggregate

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
