"""Free/occupied transitions for a single parking spot."""

import logging

from .models import ParkingSpot

logger = logging.getLogger(__name__)


class ParkingError(Exception):
    """Base class for parking domain errors."""

    status_code = 500
    message = "Parking error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class SpotNotFoundError(ParkingError):
    """No spot matches the requested identifier."""

    status_code = 404
    message = "Parking spot not found."


class SpotOccupiedError(ParkingError):
    """Booking was attempted on a spot that is already occupied."""

    status_code = 409
    message = "Conflict: This spot is already occupied."


def book(spot: ParkingSpot, reserver: str) -> ParkingSpot:
    """
    Mark a free spot as occupied by ``reserver``.

    Args:
        spot: The spot to book, mutated in place
        reserver: Name of the party reserving the spot

    Returns:
        The updated spot

    Raises:
        SpotOccupiedError: If the spot is already occupied, even by the
            same reserver. The spot is left untouched.
    """
    if spot.is_occupied:
        raise SpotOccupiedError()

    spot.is_occupied = True
    spot.reserved_by = reserver
    logger.info(f"Spot {spot.spot_number} booked by {reserver}")
    return spot


def vacate(spot: ParkingSpot) -> ParkingSpot:
    """Mark a spot as free. Vacating a free spot is a no-op."""
    was_occupied = spot.is_occupied

    spot.is_occupied = False
    spot.reserved_by = None

    if was_occupied:
        logger.info(f"Spot {spot.spot_number} vacated")
    else:
        logger.debug(f"Spot {spot.spot_number} was already free")
    return spot
