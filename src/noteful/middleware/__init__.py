"""Middleware for authentication and other cross-cutting concerns."""

from .auth import APITokenBearer, require_api_token

__all__ = ["APITokenBearer", "require_api_token"]
