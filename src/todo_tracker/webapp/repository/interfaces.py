"""
Repository interfaces defining contracts for data access.

Handlers depend only on these contracts, so the same service logic runs
against the in-memory store and the SQLAlchemy-backed database.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from .entities import Todo, User


class ITodoRepository(ABC):
    """Interface for todo data access operations.

    ``owner_id`` scopes every operation; None means unscoped access.
    """

    @abstractmethod
    def list_todos(self, owner_id: Optional[str]) -> List[Todo]:
        """List todos ordered by creation date ascending."""
        pass

    @abstractmethod
    def create_todo(
        self,
        owner_id: Optional[str],
        task: str,
        creation_date: int,
        due_date: Optional[date] = None,
        completed: bool = False,
    ) -> Todo:
        """Store a new todo and assign it an identifier."""
        pass

    @abstractmethod
    def update_todo(
        self, todo_id: str, owner_id: Optional[str], update_data: Dict[str, Any]
    ) -> Optional[Todo]:
        """Apply a partial update; None when no visible todo matched."""
        pass

    @abstractmethod
    def delete_todo(self, todo_id: str, owner_id: Optional[str]) -> bool:
        """Delete a todo; False when no visible todo matched."""
        pass


class IUserRepository(ABC):
    """Interface for user data access operations."""

    @abstractmethod
    def find_by_github_id(self, github_id: str) -> Optional[User]:
        pass

    @abstractmethod
    def upsert_github_user(
        self,
        github_id: str,
        username: str,
        display_name: str,
        avatar_url: str,
    ) -> User:
        """Create the user on first login, refresh profile fields afterwards."""
        pass
