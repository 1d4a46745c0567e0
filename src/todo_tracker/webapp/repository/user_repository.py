"""
Repository implementation for user data access operations.
"""
from typing import Optional
import uuid

from sqlalchemy.orm import Session as DBSession

from ...shared import now_epoch_ms
from .interfaces import IUserRepository
from .models import UserModel
from .entities import User


class UserRepository(IUserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, db: DBSession):
        self.db = db

    def find_by_github_id(self, github_id: str) -> Optional[User]:
        model = self.db.query(UserModel).filter(UserModel.github_id == github_id).first()
        return self._model_to_entity(model) if model else None

    def upsert_github_user(
        self,
        github_id: str,
        username: str,
        display_name: str,
        avatar_url: str,
    ) -> User:
        model = self.db.query(UserModel).filter(UserModel.github_id == github_id).first()
        if model is None:
            model = UserModel(
                id=str(uuid.uuid4()),
                github_id=github_id,
                username=username,
                display_name=display_name,
                avatar_url=avatar_url,
                created_at=now_epoch_ms(),
            )
            self.db.add(model)
        else:
            model.username = username or model.username
            model.display_name = display_name or model.display_name
            model.avatar_url = avatar_url or model.avatar_url
            model.updated_at = now_epoch_ms()

        try:
            self.db.commit()
        except Exception:
            # leave the request session usable for the caller
            self.db.rollback()
            raise
        self.db.refresh(model)
        return self._model_to_entity(model)

    def _model_to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            github_id=model.github_id,
            username=model.username or "",
            display_name=model.display_name or "",
            avatar_url=model.avatar_url or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
