"""Health endpoints; these sit outside the bearer token gate."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])


def get_health_service(session: AsyncSession = Depends(get_db_session)) -> HealthService:
    return HealthService(session)


@router.get("", response_model=HealthCheckResponse, responses={503: {"model": HealthCheckResponse}})
async def health_check(response: Response, service: HealthService = Depends(get_health_service)):
    """Overall status; 503 when the database is unreachable."""
    status = await service.get_health_status()
    if status.status != "healthy":
        response.status_code = 503
    return status


@router.get("/database", response_model=Dict[str, Any])
async def database_health(service: HealthService = Depends(get_health_service)):
    return await service.check_database_health()
