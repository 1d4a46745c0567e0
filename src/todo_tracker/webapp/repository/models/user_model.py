"""
SQLAlchemy model for users created on first GitHub login.
"""

from sqlalchemy import Column, String, BigInteger, Index

from .base import Base


class UserModel(Base):
    """SQLAlchemy model for users."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    github_id = Column(String, nullable=False)
    username = Column(String, nullable=True)
    display_name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=True)

    __table_args__ = (
        Index("ix_users_github_id", "github_id", unique=True),
    )
