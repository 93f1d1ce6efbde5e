"""
Service interfaces for the Notekeeper application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union
from uuid import UUID

from ..schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserProfileResponse,
)
from ..schemas.common import MessageResponse
from ..schemas.notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListResponse,
    NotePinUpdate,
    NoteUpdate,
)


class IAuthService(ABC):
    """Auth service for account management."""

    @abstractmethod
    async def register_user(
        self, request: RegisterRequest
    ) -> Union[RegisterResponse, MessageResponse]:
        """Register new user."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> LoginResponse:
        """Login user and return an access token."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> Optional[UserProfileResponse]:
        """Get user profile by ID."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteEnvelope:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(self, note_id: str, user_id: UUID, request: NoteUpdate) -> NoteEnvelope:
        """Partially update a note."""
        pass

    @abstractmethod
    async def set_pinned(self, note_id: str, user_id: UUID, request: NotePinUpdate) -> NoteEnvelope:
        """Set the pin flag of a note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: str, user_id: UUID) -> MessageResponse:
        """Delete note."""
        pass

    @abstractmethod
    async def list_user_notes(self, user_id: UUID) -> NoteListResponse:
        """List all notes of a user, pinned first."""
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
