"""State management module."""

from .booking import ParkingError, SpotNotFoundError, SpotOccupiedError, book, vacate
from .models import BookingRequest, ParkingSpot, SpotStatus
from .spot_store import SpotStore

__all__ = [
    "BookingRequest",
    "ParkingError",
    "ParkingSpot",
    "SpotNotFoundError",
    "SpotOccupiedError",
    "SpotStatus",
    "SpotStore",
    "book",
    "vacate",
]
