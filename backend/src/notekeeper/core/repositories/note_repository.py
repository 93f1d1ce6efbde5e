"""Note repository for database operations.

Every lookup is scoped by both note id and owner id, so a note that belongs
to someone else looks exactly like a missing one.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, asc, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note at the end of its owner's insertion order."""
        note = Note(**note_data)
        note.position = await self._next_position(note.user_id)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note_id: UUID, user_id: UUID, update_data: dict) -> Optional[Note]:
        """Apply ``update_data`` to a note owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return None

        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete note if owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return False

        await self.session.delete(note)
        await self.session.commit()
        return True

    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes of a user, pinned first, then in insertion order."""
        stmt = (
            select(Note)
            .where(Note.user_id == user_id)
            .order_by(desc(Note.is_pinned), asc(Note.created_on), asc(Note.position))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _next_position(self, user_id: UUID) -> int:
        stmt = select(func.coalesce(func.max(Note.position), 0)).where(Note.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one() + 1
