"""
Status and health check endpoints.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from ..models.envelope import DataResponse

router = APIRouter()

STARTED_AT = datetime.now(timezone.utc)


class APIStatus(BaseModel):
    """API name, version and uptime."""

    name: str
    version: str
    uptime: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def format_uptime(seconds: float) -> str:
    """
    Render the time since start as relative text, e.g. "7 minutes ago".

    Units switch at the usual "time ago" thresholds (45 s, 45 min, 22 h,
    26 d, 11 months); counts are rounded half up.
    """
    seconds = max(seconds, 0)
    minutes = _round_half_up(seconds / 60)
    hours = _round_half_up(seconds / 3600)
    days = _round_half_up(seconds / 86400)
    months = _round_half_up(seconds / 86400 / 30.436875)
    years = _round_half_up(seconds / 86400 / 365.25)

    if seconds < 45:
        text = "a few seconds"
    elif minutes <= 1:
        text = "a minute"
    elif minutes < 45:
        text = f"{minutes} minutes"
    elif hours <= 1:
        text = "an hour"
    elif hours < 22:
        text = f"{hours} hours"
    elif days <= 1:
        text = "a day"
    elif days < 26:
        text = f"{days} days"
    elif months <= 1:
        text = "a month"
    elif months < 11:
        text = f"{months} months"
    elif years <= 1:
        text = "a year"
    else:
        text = f"{years} years"
    return f"{text} ago"


@router.get("", response_model=DataResponse[APIStatus])
async def get_api_status() -> DataResponse[APIStatus]:
    """
    Get API uptime status and version info.
    """
    settings = get_settings()
    uptime = int((datetime.now(timezone.utc) - STARTED_AT).total_seconds())
    return DataResponse[APIStatus](
        data=APIStatus(
            name=settings.app_name,
            version=settings.app_version,
            uptime=format_uptime(uptime),
        )
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)
