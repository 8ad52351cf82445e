"""
Request and response schemas for the folders and notes API.
"""

from .common import ErrorResponse, HealthCheckResponse, UnauthorizedResponse
from .folders import FolderCreate, FolderResponse, FolderUpdate
from .notes import NoteCreate, NoteResponse, NoteUpdate

__all__ = [
    "ErrorResponse",
    "UnauthorizedResponse",
    "HealthCheckResponse",
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
]
