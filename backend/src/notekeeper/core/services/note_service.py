"""Note service implementation."""

from typing import NoReturn
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..schemas.common import MessageResponse
from ..schemas.notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListResponse,
    NotePinUpdate,
    NoteResponse,
    NoteUpdate,
)
from .interfaces import INoteService

logger = get_logger("notes")

NOTE_NOT_FOUND = "Note not found"


class NoteService(INoteService):
    """Note service implementation.

    Lookups are always scoped to the calling user; notes owned by someone
    else are reported as not found (404), never as forbidden.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteEnvelope:
        """Create new note."""
        note_data = {
            "title": request.title,
            "content": request.content,
            "tags": list(request.tags),
            "is_pinned": False,
            "user_id": user_id,
        }

        try:
            note = await self.note_repo.create_note(note_data)
        except SQLAlchemyError as e:
            await self._persistence_failure("create note", e)

        logger.info("Note created", extra={"note_id": str(note.id), "user_id": str(user_id)})

        return NoteEnvelope(
            note=NoteResponse.model_validate(note), message="Note added successfully"
        )

    async def update_note(self, note_id: str, user_id: UUID, request: NoteUpdate) -> NoteEnvelope:
        """Apply the fields present in ``request``; everything else is left alone."""
        note_uuid = self._parse_note_id(note_id)
        update_data = request.changes()

        try:
            if update_data:
                note = await self.note_repo.update_note(note_uuid, user_id, update_data)
            else:
                note = await self.note_repo.get_by_id_and_user(note_uuid, user_id)
        except SQLAlchemyError as e:
            await self._persistence_failure("update note", e)

        if not note:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOTE_NOT_FOUND)

        logger.info(
            "Note updated",
            extra={"note_id": note_id, "user_id": str(user_id), "fields": sorted(update_data)},
        )

        return NoteEnvelope(
            note=NoteResponse.model_validate(note), message="Note updated successfully"
        )

    async def set_pinned(self, note_id: str, user_id: UUID, request: NotePinUpdate) -> NoteEnvelope:
        """Set the pin flag of a note."""
        note_uuid = self._parse_note_id(note_id)

        try:
            note = await self.note_repo.update_note(
                note_uuid, user_id, {"is_pinned": request.is_pinned}
            )
        except SQLAlchemyError as e:
            await self._persistence_failure("update note pin", e)

        if not note:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOTE_NOT_FOUND)

        return NoteEnvelope(
            note=NoteResponse.model_validate(note), message="Note pin updated successfully"
        )

    async def delete_note(self, note_id: str, user_id: UUID) -> MessageResponse:
        """Delete note."""
        note_uuid = self._parse_note_id(note_id)

        try:
            deleted = await self.note_repo.delete_note(note_uuid, user_id)
        except SQLAlchemyError as e:
            await self._persistence_failure("delete note", e)

        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOTE_NOT_FOUND)

        logger.info("Note deleted", extra={"note_id": note_id, "user_id": str(user_id)})

        return MessageResponse(message="Note deleted successfully")

    async def list_user_notes(self, user_id: UUID) -> NoteListResponse:
        """List all notes of a user, pinned first."""
        try:
            notes = await self.note_repo.list_user_notes(user_id)
        except SQLAlchemyError as e:
            await self._persistence_failure("list notes", e)

        return NoteListResponse(notes=[NoteResponse.model_validate(n) for n in notes])

    def _parse_note_id(self, note_id: str) -> UUID:
        """Malformed ids are indistinguishable from missing notes."""
        try:
            return UUID(note_id)
        except (TypeError, ValueError):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOTE_NOT_FOUND) from None

    async def _persistence_failure(self, action: str, exc: SQLAlchemyError) -> NoReturn:
        """Roll back, log, and surface a generic 500."""
        await self.session.rollback()
        logger.error(f"Failed to {action}", exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error"
        ) from exc
