"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from agora.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)

API_VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Liveness report with the deployed build and thread limits."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    max_depth: int


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the service is up. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=API_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        max_depth=settings.comments.max_depth,
    )
