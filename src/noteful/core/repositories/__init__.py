"""Repository layer for data access."""

from .base import BaseRepository
from .folder_repository import FolderRepository
from .note_repository import NoteRepository

__all__ = [
    "BaseRepository",
    "FolderRepository",
    "NoteRepository",
]
