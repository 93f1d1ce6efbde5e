"""Notes API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteEnvelope,
    NoteListResponse,
    NotePinUpdate,
    NoteUpdate,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(
    tags=["notes"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request body"},
        401: {"model": ErrorResponse, "description": "Missing bearer token"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
        404: {"model": ErrorResponse, "description": "Note not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)


@router.post("/add-note", response_model=NoteEnvelope)
async def add_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(current_user_id, request)


@router.put("/edit-note/{note_id}", response_model=NoteEnvelope)
async def edit_note(
    note_id: str,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update the given fields of a note."""
    note_service = NoteService(session)
    return await note_service.update_note(note_id, current_user_id, request)


@router.get("/get-notes", response_model=NoteListResponse)
async def get_notes(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes, pinned first."""
    note_service = NoteService(session)
    return await note_service.list_user_notes(current_user_id)


@router.delete("/delete-note/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    return await note_service.delete_note(note_id, current_user_id)


@router.put("/update-note-pinned/{note_id}", response_model=NoteEnvelope)
async def update_note_pinned(
    note_id: str,
    request: NotePinUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Pin or unpin a note."""
    note_service = NoteService(session)
    return await note_service.set_pinned(note_id, current_user_id, request)
