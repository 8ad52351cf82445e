"""Folders API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.repositories import FolderRepository
from ..core.schemas.common import ErrorResponse, UnauthorizedResponse
from ..core.schemas.folders import FolderCreate, FolderResponse, FolderUpdate
from ..core.services import FolderService
from ..database import get_db_session
from ..middleware.auth import require_api_token

router = APIRouter(
    prefix="/folders",
    tags=["folders"],
    dependencies=[Depends(require_api_token)],
    responses={401: {"model": UnauthorizedResponse}},
)


def get_folder_service(session: AsyncSession = Depends(get_db_session)) -> FolderService:
    return FolderService(FolderRepository(session))


@router.get("", response_model=List[FolderResponse])
async def list_folders(service: FolderService = Depends(get_folder_service)):
    """List all folders."""
    return await service.list_folders()


@router.post(
    "",
    response_model=FolderResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_folder(
    request: Request,
    response: Response,
    payload: Optional[FolderCreate] = None,
    service: FolderService = Depends(get_folder_service),
):
    """Create a new folder."""
    folder = await service.create_folder(payload or FolderCreate())
    response.headers["Location"] = request.app.url_path_for("get_folder", folder_id=str(folder.id))
    return folder


@router.get("/{folder_id}", response_model=FolderResponse, responses={404: {"model": ErrorResponse}})
async def get_folder(folder_id: int, service: FolderService = Depends(get_folder_service)):
    """Get a specific folder."""
    return await service.get_folder(folder_id)


@router.patch(
    "/{folder_id}",
    status_code=204,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_folder(
    folder_id: int,
    payload: Optional[FolderUpdate] = None,
    service: FolderService = Depends(get_folder_service),
):
    """Rename a folder."""
    await service.update_folder(folder_id, payload or FolderUpdate())


@router.delete("/{folder_id}", status_code=204, responses={404: {"model": ErrorResponse}})
async def delete_folder(folder_id: int, service: FolderService = Depends(get_folder_service)):
    """Delete a folder and the notes filed under it."""
    await service.delete_folder(folder_id)
