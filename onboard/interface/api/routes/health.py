"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from onboard.config import Settings
from onboard.domain.service import ChatPlatform

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    discord_ready: bool


@router.get("/", response_class=PlainTextResponse)
async def liveness(settings: FromDishka[Settings]) -> str:
    """Plain-text liveness probe."""
    return f"{settings.business_name} Discord Bot is running."


@router.get("/health", response_model=HealthResponse)
async def health_check(platform: FromDishka[ChatPlatform]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status; ``discord_ready`` is False until the gateway is up
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        discord_ready=platform.is_ready(),
    )
