"""
Service interfaces for Noteful.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..schemas.common import HealthCheckResponse
from ..schemas.folders import FolderCreate, FolderResponse, FolderUpdate
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate


class IFolderService(ABC):
    """Folder CRUD."""

    @abstractmethod
    async def list_folders(self) -> List[FolderResponse]:
        """All folders, ordered by id."""
        pass

    @abstractmethod
    async def get_folder(self, folder_id: int) -> FolderResponse:
        """Get folder by ID."""
        pass

    @abstractmethod
    async def create_folder(self, request: FolderCreate) -> FolderResponse:
        """Create new folder."""
        pass

    @abstractmethod
    async def update_folder(self, folder_id: int, request: FolderUpdate) -> None:
        """Rename folder."""
        pass

    @abstractmethod
    async def delete_folder(self, folder_id: int) -> None:
        """Delete folder."""
        pass


class INoteService(ABC):
    """Note CRUD."""

    @abstractmethod
    async def list_notes(self) -> List[NoteResponse]:
        """All notes, ordered by id."""
        pass

    @abstractmethod
    async def get_note(self, note_id: int) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create_note(self, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(self, note_id: int, request: NoteUpdate) -> None:
        """Partially update note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: int) -> None:
        """Delete note."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
