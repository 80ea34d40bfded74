"""Services Layer — imperative shell around the TodoList aggregate.

Invariants:
    - Repositories implement core/repository_protocols.TodoListRepository
    - TodoListService is the only caller of aggregate commands outside tests

Design Decisions:
    - Aggregate rebuilt per command from storage; no cached domain state
"""
