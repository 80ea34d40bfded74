"""Todo Items — CRUD and progression endpoints over the TodoList aggregate.

Invariants:
    - Failed Results are translated to TodoListError via error_from_result (never ad hoc)
    - Item ids are allocated by the repository, never by the client
    - GET responses list items ascending by id

Design Decisions:
    - Static paths (/report, /categories) declared before /{item_id}
    - DELETE returns 204 with an empty body
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from todolist.api.dependencies import get_todo_list_service
from todolist.core.domain_types import ItemId
from todolist.core.errors import error_from_result
from todolist.core.format_items import format_items
from todolist.core.result import Result
from todolist.schemas.todo import (
    CategoriesResponse,
    ProgressionCreate,
    TodoItemCreate,
    TodoItemListResponse,
    TodoItemResponse,
    TodoItemUpdate,
)
from todolist.services.todo_list_service import TodoListService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/todo-items", tags=["todo-items"])


def _raise_on_failure(result: Result) -> None:
    if result.is_failure:
        raise error_from_result(result)


@router.get("", response_model=TodoItemListResponse)
async def list_items(service: TodoListService = Depends(get_todo_list_service)):
    """All items ordered by id, with progressions and derived progress."""
    items = await service.get_all_items()
    return TodoItemListResponse(
        items=[TodoItemResponse.from_domain(item) for item in items],
    )


@router.post(
    "", response_model=TodoItemResponse, status_code=status.HTTP_201_CREATED,
)
async def add_item(
    body: TodoItemCreate,
    service: TodoListService = Depends(get_todo_list_service),
):
    result = await service.add_item(body.title, body.description, body.category)
    _raise_on_failure(result)
    return TodoItemResponse.from_domain(result.value)


@router.get("/report", response_class=PlainTextResponse)
async def report(service: TodoListService = Depends(get_todo_list_service)):
    """Plain-text listing with cumulative progress bars."""
    items = await service.get_all_items()
    return PlainTextResponse(format_items(items))


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories(
    service: TodoListService = Depends(get_todo_list_service),
):
    return CategoriesResponse(categories=service.get_valid_categories())


@router.get("/{item_id}", response_model=TodoItemResponse)
async def get_item(
    item_id: int, service: TodoListService = Depends(get_todo_list_service),
):
    result = await service.get_item(ItemId(item_id))
    _raise_on_failure(result)
    return TodoItemResponse.from_domain(result.value)


@router.put("/{item_id}", response_model=TodoItemResponse)
async def update_item(
    item_id: int,
    body: TodoItemUpdate,
    service: TodoListService = Depends(get_todo_list_service),
):
    result = await service.update_item(ItemId(item_id), body.description)
    _raise_on_failure(result)
    return TodoItemResponse.from_domain(result.value)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_item(
    item_id: int, service: TodoListService = Depends(get_todo_list_service),
):
    result = await service.remove_item(ItemId(item_id))
    _raise_on_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{item_id}/progressions",
    response_model=TodoItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_progression(
    item_id: int,
    body: ProgressionCreate,
    service: TodoListService = Depends(get_todo_list_service),
):
    result = await service.register_progression(
        ItemId(item_id), body.date, body.percent,
    )
    _raise_on_failure(result)
    return TodoItemResponse.from_domain(result.value)
