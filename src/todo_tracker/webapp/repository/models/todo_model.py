"""
SQLAlchemy model for todo data.
"""

from sqlalchemy import Column, String, Boolean, BigInteger, Date, Text, Index

from .base import Base


class TodoModel(Base):
    """SQLAlchemy model for todos."""

    __tablename__ = "todos"

    id = Column(String, primary_key=True)
    owner_id = Column(String, nullable=True)  # Null when authorization is disabled
    task = Column(Text, nullable=False)
    creation_date = Column(BigInteger, nullable=False)  # Epoch timestamp in milliseconds
    due_date = Column(Date, nullable=True)
    completed = Column(Boolean, default=False, nullable=False)

    __table_args__ = (
        Index("ix_todos_owner_id_creation_date", "owner_id", "creation_date"),
    )
