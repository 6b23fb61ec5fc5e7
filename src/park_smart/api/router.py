"""FastAPI route definitions."""

import logging
import re
from datetime import datetime
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..metrics import get_metrics
from ..state.models import BookingRequest, ParkingSpot
from ..state.spot_store import SpotStore
from .schemas import HealthResponse, SpotActionResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_LEADING_INT = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))", re.ASCII)


def parse_spot_id(raw: str) -> Optional[int]:
    """
    Parse a path identifier, keeping only its leading integer.

    Leading whitespace and sign are accepted, a ``0x`` prefix reads the
    digits as hex, and trailing garbage is ignored ("2abc" -> 2, "0x1f" -> 31).
    Returns None when there are no leading digits or the number is too long
    to convert, neither of which matches a spot.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None

    sign, hex_digits, digits = match.groups()
    try:
        value = int(hex_digits, 16) if hex_digits else int(digits)
    except ValueError:
        return None
    return -value if sign == "-" else value


def get_spot_store(request: Request) -> SpotStore:
    """Dependency returning the store attached to the running app."""
    return request.app.state.spot_store


@router.get("/spots", response_model=list[ParkingSpot])
async def list_spots(store: SpotStore = Depends(get_spot_store)) -> list[ParkingSpot]:
    """Retrieve a list of all parking spots."""
    return store.list_all()


@router.get("/spots/{spot_id}", response_model=ParkingSpot)
async def get_spot(spot_id: str, store: SpotStore = Depends(get_spot_store)) -> ParkingSpot:
    """
    Get a single parking spot by ID.

    Args:
        spot_id: The numeric ID of the parking spot
    """
    return store.get(parse_spot_id(spot_id))


@router.post("/spots/{spot_id}/book", response_model=SpotActionResponse)
async def book_spot(
    spot_id: str,
    payload: Any = Body(default=None),
    store: SpotStore = Depends(get_spot_store),
) -> SpotActionResponse:
    """
    Book a specific parking spot.

    The spot is looked up before the body is validated, so an unknown
    spot is reported as 404 even when the body is also invalid.
    """
    parsed_id = parse_spot_id(spot_id)
    store.get(parsed_id)

    try:
        request_body = BookingRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        )

    spot = store.book(parsed_id, request_body.reserved_by)
    return SpotActionResponse(
        message=f"Spot {spot.spot_number} booked successfully by {spot.reserved_by}.",
        spot=spot,
    )


@router.post("/spots/{spot_id}/vacate", response_model=SpotActionResponse)
async def vacate_spot(spot_id: str, store: SpotStore = Depends(get_spot_store)) -> SpotActionResponse:
    """Vacate a specific parking spot. Vacating a free spot also succeeds."""
    spot = store.vacate(parse_spot_id(spot_id))
    return SpotActionResponse(
        message=f"Spot {spot.spot_number} vacated successfully.",
        spot=spot,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request, store: SpotStore = Depends(get_spot_store)) -> HealthResponse:
    """
    Health check endpoint.

    Returns basic health information about the service.
    """
    uptime = (datetime.now() - request.app.state.started_at).total_seconds()
    total, occupied, available = store.counts()

    return HealthResponse(
        status="healthy",
        total_spots=total,
        occupied=occupied,
        available=available,
        uptime_seconds=uptime,
    )


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format including:
    - parking_bookings_total: Counter of successful bookings by spot
    - parking_booking_conflicts_total: Counter of rejected bookings by spot
    - parking_vacates_total: Counter of vacate requests by spot
    - parking_spot_occupied: Gauge of current spot status (1=occupied, 0=free)
    - parking_spots_total: Total number of parking spots
    - parking_spots_available: Number of free spots
    - parking_spots_occupied: Number of occupied spots
    """
    return Response(
        content=get_metrics(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
