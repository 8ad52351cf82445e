"""
Application exceptions.

Services and repositories raise these; the handlers registered in
``noteful.main`` turn them into JSON responses:

    NotefulError
    ├── UnauthorizedError  -> 401 {"error": "Unauthorized request"}
    ├── ValidationError    -> 400 {"error": {"message": ...}}
    ├── NotFoundError      -> 404 {"error": {"message": ...}}
    └── StoreError         -> 500 {"error": {"message": "server error"}}
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """Base class for all application errors.

    ``message`` is safe to return to the client, ``context`` is only logged.
    """

    status_code = 500

    def __init__(self, message: str = "server error", context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(NotefulError):
    """Missing or wrong bearer credential."""

    status_code = 401

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Unauthorized request", context=context)


class ValidationError(NotefulError):
    """Request payload is missing a required field or has a bad value."""

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotefulError):
    """Referenced id is not in the store."""

    status_code = 404

    def __init__(self, resource: str, resource_id: Any = None, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} doesn't exist", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class StoreError(NotefulError):
    """The database failed underneath a repository call.

    The original exception is kept on ``__cause__`` for logging; the client
    only ever sees the generic message.
    """

    status_code = 500

    def __init__(self, operation: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["operation"] = operation
        super().__init__(message="server error", context=ctx)
        self.operation = operation
