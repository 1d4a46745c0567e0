"""
Todo API controller.

Every endpoint answers with the caller's full, refreshed todo list so the
client can re-render without a second request.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...shared.exceptions import TodoTrackerException
from ..dependencies import get_request_context, get_todo_service
from ..request_context import RequestContext
from ..services.todo_service import TodoService
from .dto.requests.todo_requests import (
    CreateTodoRequest,
    DeleteTodoRequest,
    UpdateTodoRequest,
)
from .dto.responses.todo_responses import TodoDisplayResponse, TodoResponse

log = logging.getLogger(__name__)

router = APIRouter()


def _server_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.get("/todos", response_model=List[TodoResponse])
async def list_todos(
    context: RequestContext = Depends(get_request_context),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Get all todos visible to the caller, oldest first.
    """
    try:
        return todo_service.list_todos(context)
    except TodoTrackerException:
        raise
    except Exception as e:
        log.error("Error fetching todos for owner %s: %s", context.owner_id, e)
        raise _server_error("Failed to fetch todos")


@router.get("/todos/display", response_model=TodoDisplayResponse)
async def get_todo_display(
    context: RequestContext = Depends(get_request_context),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Get the todos in display order with due labels and the progress summary.
    """
    try:
        return todo_service.get_display(context)
    except TodoTrackerException:
        raise
    except Exception as e:
        log.error("Error building todo display for owner %s: %s", context.owner_id, e)
        raise _server_error("Failed to fetch todos")


@router.post("/todos", response_model=List[TodoResponse])
async def create_todo(
    request: CreateTodoRequest,
    context: RequestContext = Depends(get_request_context),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Create a todo. Returns 400 when the task text is empty.
    """
    try:
        return todo_service.create_todo(
            context,
            task=request.task,
            due_date=request.due_date,
            creation_date=request.creation_date,
        )
    except TodoTrackerException:
        raise
    except Exception as e:
        log.error("Error adding todo for owner %s: %s", context.owner_id, e)
        raise _server_error("Failed to add todo")


async def _update(
    todo_id, request: UpdateTodoRequest, context: RequestContext, todo_service: TodoService
):
    try:
        return todo_service.update_todo(context, todo_id, request.provided_fields())
    except TodoTrackerException:
        raise
    except Exception as e:
        log.error("Error updating todo %s for owner %s: %s", todo_id, context.owner_id, e)
        raise _server_error("Failed to update todo")


async def _delete(todo_id, context: RequestContext, todo_service: TodoService):
    try:
        return todo_service.delete_todo(context, todo_id)
    except TodoTrackerException:
        raise
    except Exception as e:
        log.error("Error deleting todo %s for owner %s: %s", todo_id, context.owner_id, e)
        raise _server_error("Failed to delete todo")


@router.put("/todos/{todo_id}", response_model=List[TodoResponse])
async def update_todo(
    todo_id: str,
    request: UpdateTodoRequest,
    context: RequestContext = Depends(get_request_context),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Partially update a todo. 400 for a malformed id, 404 for an unknown one.
    """
    return await _update(todo_id, request, context, todo_service)


@router.put("/todos", response_model=List[TodoResponse])
async def update_todo_legacy(
    request: UpdateTodoRequest,
    context: RequestContext = Depends(get_request_context),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Legacy form of the update with the id in the body.
    """
    return await _update(request.id, request, context, todo_service)


@router.delete("/todos/{todo_id}", response_model=List[TodoResponse])
async def delete_todo(
    todo_id: str,
    context: RequestContext = Depends(get_request_context),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Delete a todo. 400 for a malformed id, 404 for an unknown one.
    """
    return await _delete(todo_id, context, todo_service)


@router.delete("/todos", response_model=List[TodoResponse])
async def delete_todo_legacy(
    request: DeleteTodoRequest,
    context: RequestContext = Depends(get_request_context),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Legacy form of the delete with the id in the body.
    """
    return await _delete(request.id, context, todo_service)
