"""Root endpoint."""

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

router = APIRouter(tags=["health"])


@router.get("/", include_in_schema=False)
@router.head("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/health", status_code=status.HTTP_302_FOUND)
