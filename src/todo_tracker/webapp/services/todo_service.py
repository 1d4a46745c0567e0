"""
Business service for todo-related operations.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, List

from ...shared import now_epoch_ms
from ...shared.exceptions import EntityNotFoundError, EntityOperation, ValidationError
from ..repository.interfaces import ITodoRepository
from ..request_context import RequestContext
from ..utils.todo_normalizer import (
    is_valid_todo_id,
    normalize_creation_date,
    normalize_due_date,
    normalize_task_text,
    normalize_update_fields,
    to_view,
)
from .display_service import build_display

TodoView = Dict[str, Any]


class TodoService:
    """Service layer for todo business logic.

    Every mutating operation returns the caller's full, refreshed todo list.
    """

    def __init__(
        self,
        todo_repository: ITodoRepository,
        today_provider: Callable[[], date] = date.today,
        now_provider: Callable[[], int] = now_epoch_ms,
    ):
        self.todo_repository = todo_repository
        self.today_provider = today_provider
        self.now_provider = now_provider
        self.logger = logging.getLogger(__name__)

    def list_todos(self, context: RequestContext) -> List[TodoView]:
        """
        List the caller's todos, each with its derived days_until_due field.

        Returns:
            List[TodoView]: Views ordered by creation date ascending
        """
        today = self.today_provider()
        todos = self.todo_repository.list_todos(context.owner_id)
        return [to_view(todo, today=today) for todo in todos]

    def create_todo(
        self,
        context: RequestContext,
        task: Any,
        due_date: Any = None,
        creation_date: Any = None,
    ) -> List[TodoView]:
        """
        Create a todo for the caller.

        Raises:
            ValidationError: If the task text is empty after trimming
        """
        text = normalize_task_text(task)
        todo = self.todo_repository.create_todo(
            owner_id=context.owner_id,
            task=text,
            creation_date=normalize_creation_date(creation_date, self.now_provider()),
            due_date=normalize_due_date(due_date),
            completed=False,
        )
        self.logger.info("Created todo %s for owner %s", todo.id, context.owner_id)
        return self.list_todos(context)

    def update_todo(
        self, context: RequestContext, todo_id: Any, fields: Dict[str, Any]
    ) -> List[TodoView]:
        """
        Apply a partial update to one of the caller's todos.

        Args:
            context: The request context
            todo_id: Identifier of the todo to update
            fields: Only the fields present are changed (task, due_date,
                creation_date, completed)

        Raises:
            ValidationError: If the identifier is malformed or the new task text is empty
            EntityNotFoundError: If no visible todo has the identifier
        """
        self._validate_id(todo_id)
        updates = normalize_update_fields(fields, self.now_provider())

        updated = self.todo_repository.update_todo(todo_id, context.owner_id, updates)
        if updated is None:
            self.logger.info("Update of unknown todo %s by owner %s", todo_id, context.owner_id)
            raise EntityNotFoundError("todo", todo_id, EntityOperation.UPDATE)

        self.logger.info("Updated todo %s fields %s", todo_id, sorted(updates))
        return self.list_todos(context)

    def delete_todo(self, context: RequestContext, todo_id: Any) -> List[TodoView]:
        """
        Delete one of the caller's todos.

        Raises:
            ValidationError: If the identifier is malformed
            EntityNotFoundError: If no visible todo has the identifier
        """
        self._validate_id(todo_id)

        if not self.todo_repository.delete_todo(todo_id, context.owner_id):
            self.logger.info("Delete of unknown todo %s by owner %s", todo_id, context.owner_id)
            raise EntityNotFoundError("todo", todo_id, EntityOperation.DELETE)

        self.logger.info("Deleted todo %s", todo_id)
        return self.list_todos(context)

    def get_display(self, context: RequestContext) -> Dict[str, Any]:
        """Display-ordered, labelled todos and the progress summary."""
        return build_display(self.list_todos(context))

    @staticmethod
    def _validate_id(todo_id: Any) -> None:
        if not is_valid_todo_id(todo_id):
            raise ValidationError("Invalid ID format", field="id")
