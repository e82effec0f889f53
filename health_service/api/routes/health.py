"""Health check endpoint."""

from fastapi import APIRouter, Depends

from health_service.api.models.health import HealthResponse
from health_service.config.settings import BuildInfo, get_build_info

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
@router.head("/health", response_model=HealthResponse)
async def health_check(build_info: BuildInfo = Depends(get_build_info)) -> HealthResponse:
    """Report liveness and the deployed version."""
    return HealthResponse(status="ok", version=build_info.version)
