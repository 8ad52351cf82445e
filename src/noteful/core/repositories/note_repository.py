"""Note repository for database operations."""

from ..models.note import Note
from .base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """Repository for note database operations."""

    model = Note
