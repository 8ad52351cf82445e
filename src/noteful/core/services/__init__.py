"""
Service layer interfaces and implementations.

Services receive their repository through the constructor; routers build
both from the per-request session.
"""

from .interfaces import IFolderService, IHealthService, INoteService
from .folder_service import FolderService
from .health_service import HealthService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IFolderService",
    "INoteService",
    "IHealthService",

    # Implementations
    "FolderService",
    "NoteService",
    "HealthService",
]
