"""Health check routes."""

from fastapi import APIRouter, Depends
from users_api.config import Settings, get_settings
from users_api.models.health import HealthCheckResponse
from users_api.services import get_user_service
from users_common.services.user_service import UserService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(
    settings: Settings = Depends(get_settings),
    service: UserService = Depends(get_user_service),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status and version information
    """
    return HealthCheckResponse(
        status="ok",
        version=settings.app_version,
        environment=settings.environment,
        user_count=len(service.list_all()),
    )
