"""In-memory parking spot store."""

import logging
import threading
from collections.abc import Iterable
from typing import Optional

from ..metrics import (
    record_booking,
    record_booking_conflict,
    record_vacate,
    reset_spot_status,
    update_spot_counts,
    update_spot_status,
)
from . import booking
from .models import ParkingSpot

logger = logging.getLogger(__name__)


class SpotStore:
    """
    Owns the canonical, ordered collection of parking spots.

    Spots are created once from seed data and never added or removed.
    Book and vacate run look-up and transition under a single lock so
    two concurrent bookings cannot both succeed against the same free spot.
    """

    def __init__(self, spots: list[ParkingSpot]):
        """
        Initialize the store.

        Args:
            spots: Spot records, in display order. Ids must be unique.

        Raises:
            ValueError: If two spots share an id
        """
        seen: set[int] = set()
        for spot in spots:
            if spot.id in seen:
                raise ValueError(f"Duplicate parking spot id: {spot.id}")
            seen.add(spot.id)

        self._spots: list[ParkingSpot] = list(spots)
        self._lock = threading.Lock()

        self._refresh_gauges()
        logger.info(f"Initialized SpotStore with {len(self._spots)} spots")

    @classmethod
    def from_seed(cls, seed: Iterable[ParkingSpot | dict]) -> "SpotStore":
        """Build a store from seed records, copying them so the seed is never mutated."""
        spots = [
            s.model_copy() if isinstance(s, ParkingSpot) else ParkingSpot.model_validate(s)
            for s in seed
        ]
        return cls(spots)

    def list_all(self) -> list[ParkingSpot]:
        """Get all spots in seed order."""
        return list(self._spots)

    def find_by_id(self, spot_id: int) -> Optional[ParkingSpot]:
        """Get the spot with ``spot_id``, or None."""
        for spot in self._spots:
            if spot.id == spot_id:
                return spot
        return None

    def get(self, spot_id: int | None) -> ParkingSpot:
        """
        Get the spot with ``spot_id``.

        Raises:
            SpotNotFoundError: If no spot matches. A None id never matches.
        """
        spot = self.find_by_id(spot_id) if spot_id is not None else None
        if spot is None:
            logger.debug(f"Parking spot {spot_id!r} not found")
            raise booking.SpotNotFoundError()
        return spot

    def book(self, spot_id: int | None, reserver: str) -> ParkingSpot:
        """Book a spot by id. Raises SpotNotFoundError or SpotOccupiedError."""
        with self._lock:
            spot = self.get(spot_id)
            try:
                booking.book(spot, reserver)
            except booking.SpotOccupiedError:
                logger.info(
                    f"Booking conflict on spot {spot.spot_number} "
                    f"(held by {spot.reserved_by}, requested by {reserver})"
                )
                record_booking_conflict(spot_id=spot.id, spot_number=spot.spot_number)
                raise

            record_booking(spot_id=spot.id, spot_number=spot.spot_number)
            self._refresh_gauges()
            return spot

    def vacate(self, spot_id: int | None) -> ParkingSpot:
        """Vacate a spot by id. Raises SpotNotFoundError."""
        with self._lock:
            spot = self.get(spot_id)
            booking.vacate(spot)

            record_vacate(spot_id=spot.id, spot_number=spot.spot_number)
            self._refresh_gauges()
            return spot

    def counts(self) -> tuple[int, int, int]:
        """Get (total, occupied, available) spot counts."""
        occupied = sum(1 for s in self._spots if s.is_occupied)
        return len(self._spots), occupied, len(self._spots) - occupied

    def _refresh_gauges(self) -> None:
        reset_spot_status()
        for spot in self._spots:
            update_spot_status(
                spot_id=spot.id,
                spot_number=spot.spot_number,
                is_occupied=spot.is_occupied,
            )

        total, occupied, available = self.counts()
        update_spot_counts(total=total, available=available, occupied=occupied)
