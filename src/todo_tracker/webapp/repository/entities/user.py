"""
User domain entity for accounts created through GitHub login.
"""

from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    id: str
    github_id: str
    username: str = ""
    display_name: str = ""
    avatar_url: str = ""
    created_at: int
    updated_at: Optional[int] = None
