"""
Database models for Noteful.

    - Folder: named group of notes (``noteful_folders``)
    - Note: note content filed under a folder (``noteful_notes``)
"""

from .base import BaseModel
from .folder import Folder
from .note import Note

__all__ = [
    "BaseModel",
    "Folder",
    "Note",
]
