"""Bearer token authentication."""

import secrets
from typing import Optional

from fastapi import Depends, Request

from ..config import Settings, get_settings
from ..core.exceptions import UnauthorizedError
from ..core.logging import get_logger

logger = get_logger("auth")


class APITokenBearer:
    """Checks ``Authorization: Bearer <token>`` against the configured token.

    Used as a router-level dependency, so it runs before path and body field
    validation. FastAPI decodes a JSON body before any dependency runs; for
    guarded routes the request validation handler calls ``verify`` first.
    """

    scheme = "Bearer"

    def _expected_header(self, settings: Settings) -> Optional[str]:
        if not settings.api_token:
            return None
        return f"{self.scheme} {settings.api_token}"

    def verify(self, request: Request, settings: Settings) -> None:
        """Raise ``UnauthorizedError`` unless the request carries the token."""
        authorization = request.headers.get("Authorization")
        expected = self._expected_header(settings)

        if (
            authorization is None
            or expected is None
            or not secrets.compare_digest(authorization.encode(), expected.encode())
        ):
            logger.warning(
                "Unauthorized request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "has_header": authorization is not None,
                },
            )
            raise UnauthorizedError(context={"path": request.url.path})

    async def __call__(self, request: Request, settings: Settings = Depends(get_settings)) -> None:
        self.verify(request, settings)

    def guards(self, request: Request) -> bool:
        """Whether the route matched for ``request`` depends on this gate."""
        dependant = getattr(request.scope.get("route"), "dependant", None)
        if dependant is None:
            return False
        return any(dep.call is self for dep in dependant.dependencies)


require_api_token = APITokenBearer()


def settings_for(request: Request) -> Settings:
    """Settings as the app's dependency overrides would resolve them."""
    return request.app.dependency_overrides.get(get_settings, get_settings)()
