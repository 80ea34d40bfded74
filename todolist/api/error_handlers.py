"""Error Handlers — map exceptions escaping the todo item routes to the JSON error envelope.

Invariants:
    - TodoListError → its own http_status and to_response() body
    - RequestValidationError → 400 VALIDATION_ERROR with one entry per bad field
    - ResultError (stored rows breaking a domain rule on load) → 500 STORED_STATE_INVALID
    - Any other exception → 500 INTERNAL_ERROR; the exception text never reaches the client

Design Decisions:
    - Business failures arrive here only as TodoListError: routes translate failed
      Results with error_from_result before raising
    - 4xx logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from todolist.core.errors import ErrorCategory, ErrorSeverity, TodoListError
from todolist.core.result import ResultError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach every handler below to the app."""
    app.add_exception_handler(TodoListError, handle_todolist_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(ResultError, handle_stored_state_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _envelope(
    code: str, message: str, category: str, severity: ErrorSeverity, **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category,
            "severity": severity.value,
            **extra,
        },
    }


async def handle_todolist_error(request: Request, exc: TodoListError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "item_id": exc.context.item_id,
            "path": request.url.path,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request body: {[f['field'] for f in fields]}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION.value, ErrorSeverity.ERROR,
            details=fields,
        ),
    )


async def handle_stored_state_error(request: Request, exc: ResultError):
    logger.error(
        f"Stored todo list violates a domain rule: {exc}",
        extra={"error_code": "STORED_STATE_INVALID", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "STORED_STATE_INVALID", "Stored todo list data is inconsistent",
            ErrorCategory.DATABASE.value, ErrorSeverity.CRITICAL,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all — logs the traceback, returns a generic body."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL.value, ErrorSeverity.CRITICAL,
        ),
    )
