"""Health check routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from inkwell.application.usecase.base import ResponseModel
from inkwell.config import APP_VERSION, Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(ResponseModel):
    """Health check response."""

    ok: bool
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Liveness probe."""
    return HealthResponse(ok=True, version=APP_VERSION, git_sha=settings.git_sha)
