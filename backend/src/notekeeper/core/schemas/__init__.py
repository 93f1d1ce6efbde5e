"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserProfileResponse,
    UserResponse,
)
from .common import ErrorResponse, MessageResponse
from .notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListResponse,
    NotePinUpdate,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    # Auth schemas
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserResponse",
    "UserProfileResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NotePinUpdate",
    "NoteResponse",
    "NoteEnvelope",
    "NoteListResponse",
    # Common schemas
    "MessageResponse",
    "ErrorResponse",
]
