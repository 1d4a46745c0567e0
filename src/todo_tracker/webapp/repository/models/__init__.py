"""
SQLAlchemy models for database persistence.
"""

from .base import Base
from .todo_model import TodoModel
from .user_model import UserModel

__all__ = [
    "Base",
    "TodoModel",
    "UserModel",
]
