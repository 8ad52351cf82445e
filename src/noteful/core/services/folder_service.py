"""Folder service implementation."""

from typing import List, Optional

from ..exceptions import NotFoundError, ValidationError
from ..logging import get_logger
from ..models.folder import Folder
from ..repositories.folder_repository import FolderRepository
from ..sanitize import escape_text
from ..schemas.folders import FolderCreate, FolderResponse, FolderUpdate
from ..validation import is_missing
from .interfaces import IFolderService

logger = get_logger("services.folders")


class FolderService(IFolderService):
    """Folder service implementation."""

    def __init__(self, folder_repo: FolderRepository):
        self.folder_repo = folder_repo

    async def list_folders(self) -> List[FolderResponse]:
        folders = await self.folder_repo.list_all()
        return [FolderResponse.model_validate(folder) for folder in folders]

    async def get_folder(self, folder_id: int) -> FolderResponse:
        folder = await self._get_or_404(folder_id)
        return FolderResponse.model_validate(folder)

    async def create_folder(self, request: FolderCreate) -> FolderResponse:
        """Create new folder.

        The error message names ``name`` rather than ``folder_name``; clients
        match on it.
        """
        folder_name = self._clean_name(request.folder_name)
        if is_missing(folder_name):
            raise ValidationError("'name' is required", field="folder_name")

        folder = await self.folder_repo.create({"folder_name": folder_name})
        logger.info(f"Created folder {folder.id}")
        return FolderResponse.model_validate(folder)

    async def update_folder(self, folder_id: int, request: FolderUpdate) -> None:
        """Rename folder. Existence is checked before the payload."""
        folder = await self._get_or_404(folder_id)

        folder_name = self._clean_name(request.folder_name)
        if is_missing(folder_name):
            raise ValidationError("Request body must contain 'folder_name'", field="folder_name")

        await self.folder_repo.update(folder, {"folder_name": folder_name})
        logger.info(f"Updated folder {folder_id}")

    async def delete_folder(self, folder_id: int) -> None:
        folder = await self._get_or_404(folder_id)
        await self.folder_repo.delete(folder)
        logger.info(f"Deleted folder {folder_id}")

    async def _get_or_404(self, folder_id: int) -> Folder:
        folder = await self.folder_repo.get_by_id(folder_id)
        if folder is None:
            logger.debug(f"Folder {folder_id} not found")
            raise NotFoundError("Folder", folder_id)
        return folder

    @staticmethod
    def _clean_name(name: Optional[str]) -> Optional[str]:
        """Escaped name; markup that cleans away to nothing counts as missing."""
        return None if is_missing(name) else escape_text(name)
