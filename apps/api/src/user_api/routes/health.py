"""Health check routes."""

from fastapi import APIRouter, Depends
from usercore.services.user_service import UserService

from user_api.config import Settings, get_settings
from user_api.models.health import HealthCheckResponse
from user_api.services import get_user_service

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    service: UserService = Depends(get_user_service),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and user count
    """
    users = await service.store.list_all()
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=len(users),
    )
