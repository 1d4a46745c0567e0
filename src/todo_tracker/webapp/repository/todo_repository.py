"""
Repository implementation for todo data access operations.
"""
from datetime import date
from typing import Any, Dict, List, Optional
import uuid

from sqlalchemy.orm import Session as DBSession

from .interfaces import ITodoRepository
from .models import TodoModel
from .entities import Todo

UPDATABLE_FIELDS = ("task", "creation_date", "due_date", "completed")


class TodoRepository(ITodoRepository):
    """SQLAlchemy implementation of todo repository."""

    def __init__(self, db: DBSession):
        self.db = db

    def _scoped_query(self, owner_id: Optional[str]):
        query = self.db.query(TodoModel)
        if owner_id is not None:
            query = query.filter(TodoModel.owner_id == owner_id)
        return query

    def list_todos(self, owner_id: Optional[str]) -> List[Todo]:
        models = (
            self._scoped_query(owner_id)
            .order_by(TodoModel.creation_date.asc(), TodoModel.id.asc())
            .all()
        )
        return [self._model_to_entity(model) for model in models]

    def create_todo(
        self,
        owner_id: Optional[str],
        task: str,
        creation_date: int,
        due_date: Optional[date] = None,
        completed: bool = False,
    ) -> Todo:
        model = TodoModel(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            task=task,
            creation_date=creation_date,
            due_date=due_date,
            completed=completed,
        )
        self.db.add(model)
        self.db.commit()
        self.db.refresh(model)
        return self._model_to_entity(model)

    def update_todo(
        self, todo_id: str, owner_id: Optional[str], update_data: Dict[str, Any]
    ) -> Optional[Todo]:
        model = self._scoped_query(owner_id).filter(TodoModel.id == todo_id).first()
        if not model:
            return None

        for field, value in update_data.items():
            if field in UPDATABLE_FIELDS:
                setattr(model, field, value)

        self.db.commit()
        self.db.refresh(model)
        return self._model_to_entity(model)

    def delete_todo(self, todo_id: str, owner_id: Optional[str]) -> bool:
        result = self._scoped_query(owner_id).filter(TodoModel.id == todo_id).delete()
        self.db.commit()
        return result > 0

    def _model_to_entity(self, model: TodoModel) -> Todo:
        """Convert SQLAlchemy model to domain entity."""
        return Todo(
            id=model.id,
            task=model.task,
            creation_date=model.creation_date,
            due_date=model.due_date,
            completed=bool(model.completed),
            owner_id=model.owner_id,
        )
