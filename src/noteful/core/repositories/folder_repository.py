"""Folder repository for database operations."""

from ..models.folder import Folder
from .base import BaseRepository


class FolderRepository(BaseRepository[Folder]):
    """Repository for folder database operations."""

    model = Folder
