"""
Repository layer: storage contracts, SQLAlchemy and in-memory implementations.
"""

from .interfaces import ITodoRepository, IUserRepository
from .todo_repository import TodoRepository
from .user_repository import UserRepository
from .in_memory_todo_repository import InMemoryTodoRepository, InMemoryUserRepository

__all__ = [
    "ITodoRepository",
    "IUserRepository",
    "TodoRepository",
    "UserRepository",
    "InMemoryTodoRepository",
    "InMemoryUserRepository",
]
