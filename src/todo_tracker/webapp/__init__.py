"""
FastAPI web application: todo CRUD API, GitHub login and the static frontend.
"""

from .main import create_app

__all__ = ["create_app"]
