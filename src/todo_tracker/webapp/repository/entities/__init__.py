"""
Domain entities for the repository layer.
"""

from .todo import Todo
from .user import User

__all__ = ["Todo", "User"]
