"""
In-memory repositories used when no database is configured.
"""

import logging
import threading
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from ...shared import now_epoch_ms
from .entities import Todo, User
from .interfaces import ITodoRepository, IUserRepository
from .todo_repository import UPDATABLE_FIELDS

log = logging.getLogger(__name__)


class InMemoryTodoRepository(ITodoRepository):
    """
    In-memory todo repository.

    Provides the same interface as TodoRepository but keeps todos in a dict.
    Data is not persisted across restarts.
    """

    def __init__(self):
        self._todos: Dict[str, Todo] = {}
        self._lock = threading.Lock()
        log.info("Initialized in-memory todo repository (data not persisted)")

    def list_todos(self, owner_id: Optional[str]) -> List[Todo]:
        with self._lock:
            todos = [t for t in self._todos.values() if t.is_visible_to(owner_id)]
        # dict order is insertion order, so equal creation dates keep it
        todos.sort(key=lambda t: t.creation_date)
        return [t.model_copy() for t in todos]

    def create_todo(
        self,
        owner_id: Optional[str],
        task: str,
        creation_date: int,
        due_date: Optional[date] = None,
        completed: bool = False,
    ) -> Todo:
        todo = Todo(
            id=str(uuid.uuid4()),
            task=task,
            creation_date=creation_date,
            due_date=due_date,
            completed=completed,
            owner_id=owner_id,
        )
        with self._lock:
            self._todos[todo.id] = todo
        return todo.model_copy()

    def update_todo(
        self, todo_id: str, owner_id: Optional[str], update_data: Dict[str, Any]
    ) -> Optional[Todo]:
        changes = {k: v for k, v in update_data.items() if k in UPDATABLE_FIELDS}
        with self._lock:
            todo = self._todos.get(todo_id)
            if not todo or not todo.is_visible_to(owner_id):
                return None
            updated = todo.model_copy(update=changes)
            self._todos[todo_id] = updated
        return updated.model_copy()

    def delete_todo(self, todo_id: str, owner_id: Optional[str]) -> bool:
        with self._lock:
            todo = self._todos.get(todo_id)
            if not todo or not todo.is_visible_to(owner_id):
                return False
            del self._todos[todo_id]
        return True


class InMemoryUserRepository(IUserRepository):
    """In-memory user repository keyed by GitHub id."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def find_by_github_id(self, github_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(github_id)
        return user.model_copy() if user else None

    def upsert_github_user(
        self,
        github_id: str,
        username: str,
        display_name: str,
        avatar_url: str,
    ) -> User:
        with self._lock:
            existing = self._users.get(github_id)
            if existing is None:
                user = User(
                    id=str(uuid.uuid4()),
                    github_id=github_id,
                    username=username,
                    display_name=display_name,
                    avatar_url=avatar_url,
                    created_at=now_epoch_ms(),
                )
            else:
                user = existing.model_copy(
                    update={
                        "username": username or existing.username,
                        "display_name": display_name or existing.display_name,
                        "avatar_url": avatar_url or existing.avatar_url,
                        "updated_at": now_epoch_ms(),
                    }
                )
            self._users[github_id] = user
        return user.model_copy()
