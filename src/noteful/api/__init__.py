"""API routers for Noteful."""

from .folders import router as folders_router
from .health import router as health_router
from .notes import router as notes_router

__all__ = ["folders_router", "notes_router", "health_router"]
