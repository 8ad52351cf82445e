"""Notes API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.repositories import NoteRepository
from ..core.schemas.common import ErrorResponse, UnauthorizedResponse
from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import require_api_token

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    dependencies=[Depends(require_api_token)],
    responses={401: {"model": UnauthorizedResponse}},
)


def get_note_service(session: AsyncSession = Depends(get_db_session)) -> NoteService:
    return NoteService(NoteRepository(session))


@router.get("", response_model=List[NoteResponse])
async def list_notes(service: NoteService = Depends(get_note_service)):
    """List all notes."""
    return await service.list_notes()


@router.post(
    "",
    response_model=NoteResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_note(
    request: Request,
    response: Response,
    payload: Optional[NoteCreate] = None,
    service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    note = await service.create_note(payload or NoteCreate())
    response.headers["Location"] = request.app.url_path_for("get_note", note_id=str(note.id))
    return note


@router.get("/{note_id}", response_model=NoteResponse, responses={404: {"model": ErrorResponse}})
async def get_note(note_id: int, service: NoteService = Depends(get_note_service)):
    """Get a specific note."""
    return await service.get_note(note_id)


@router.patch(
    "/{note_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_note(
    note_id: int,
    payload: Optional[NoteUpdate] = None,
    service: NoteService = Depends(get_note_service),
):
    """Update any subset of note_name, content and folder_id."""
    await service.update_note(note_id, payload or NoteUpdate())


@router.delete("/{note_id}", status_code=204, responses={404: {"model": ErrorResponse}})
async def delete_note(note_id: int, service: NoteService = Depends(get_note_service)):
    """Delete a note."""
    await service.delete_note(note_id)
