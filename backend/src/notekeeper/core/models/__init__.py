"""
Database models for the Notekeeper application.

SQLAlchemy ORM models defining the schema. All models are used through the
async repositories in ``core.repositories``.

Models included:
    - User: account identified by email, with a hashed password
    - Note: note content, tags and pin flag, owned by one user
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
