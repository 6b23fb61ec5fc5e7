"""API request and response schemas."""

from typing import Any, Optional

from pydantic import BaseModel

from ..state.models import ParkingSpot


class MessageResponse(BaseModel):
    """Error response carrying a human-readable message."""

    message: str
    errors: Optional[list[dict[str, Any]]] = None


class SpotActionResponse(BaseModel):
    """Response for book and vacate requests."""

    message: str
    spot: ParkingSpot


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    total_spots: int
    occupied: int
    available: int
    uptime_seconds: float
