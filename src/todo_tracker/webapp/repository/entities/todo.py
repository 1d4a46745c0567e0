"""
Todo domain entity.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """A dated task as stored; the derived day offset is never part of it."""

    id: str
    task: str = Field(..., min_length=1)
    creation_date: int  # Epoch timestamp in milliseconds
    due_date: Optional[date] = None
    completed: bool = False
    owner_id: Optional[str] = None

    def is_visible_to(self, owner_id: Optional[str]) -> bool:
        """Unscoped callers (owner_id None) see every todo."""
        return owner_id is None or self.owner_id == owner_id
