"""
Request-scoped identity passed explicitly into every todo operation.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RequestContext:
    """Who is calling.

    ``owner_id`` is the authenticated GitHub id, or None when authorization is
    disabled and todos are not owner-scoped.
    """

    owner_id: Optional[str] = None
    username: str = ""
