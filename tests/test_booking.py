import pytest
from pydantic import ValidationError

from park_smart.state.booking import SpotNotFoundError, SpotOccupiedError, book, vacate
from park_smart.state.models import BookingRequest, ParkingSpot, SpotStatus


@pytest.fixture
def free_spot():
    return ParkingSpot(id=1, location_name="Quantum Cortex HQ - Basement 1", spot_number="A01")


@pytest.fixture
def occupied_spot():
    return ParkingSpot(
        id=2,
        location_name="Quantum Cortex HQ - Basement 1",
        spot_number="A02",
        is_occupied=True,
        reserved_by="Arjun",
    )


class TestBook:
    """Test the free -> occupied transition."""

    def test_book_free_spot(self, free_spot):
        """Booking a free spot occupies it with the reserver."""
        result = book(free_spot, "Alister")

        assert result is free_spot
        assert free_spot.is_occupied is True
        assert free_spot.reserved_by == "Alister"
        assert free_spot.status == SpotStatus.OCCUPIED

    def test_book_occupied_spot_conflicts(self, occupied_spot):
        """Booking an occupied spot fails and leaves it untouched."""
        with pytest.raises(SpotOccupiedError):
            book(occupied_spot, "Bob")

        assert occupied_spot.is_occupied is True
        assert occupied_spot.reserved_by == "Arjun"

    def test_book_by_same_reserver_conflicts(self, occupied_spot):
        """Re-booking by the current holder is still a conflict."""
        with pytest.raises(SpotOccupiedError):
            book(occupied_spot, "Arjun")

        assert occupied_spot.reserved_by == "Arjun"

    def test_conflict_message(self, occupied_spot):
        with pytest.raises(SpotOccupiedError) as exc_info:
            book(occupied_spot, "Bob")

        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "Conflict: This spot is already occupied."


class TestVacate:
    """Test the transition back to free."""

    def test_vacate_occupied_spot(self, occupied_spot):
        result = vacate(occupied_spot)

        assert result is occupied_spot
        assert occupied_spot.is_occupied is False
        assert occupied_spot.reserved_by is None
        assert occupied_spot.status == SpotStatus.FREE

    def test_vacate_free_spot_is_noop(self, free_spot):
        """Vacating a free spot succeeds and keeps it free."""
        vacate(free_spot)

        assert free_spot.is_occupied is False
        assert free_spot.reserved_by is None

    def test_vacate_twice_is_idempotent(self, occupied_spot):
        vacate(occupied_spot)
        first = occupied_spot.model_dump()
        vacate(occupied_spot)

        assert occupied_spot.model_dump() == first

    def test_book_after_vacate(self, occupied_spot):
        """A vacated spot can be booked again."""
        vacate(occupied_spot)
        book(occupied_spot, "Bob")

        assert occupied_spot.reserved_by == "Bob"


class TestOccupancyInvariant:
    """isOccupied holds exactly when reservedBy is set."""

    def test_invariant_across_transitions(self, free_spot):
        for step in (
            lambda s: book(s, "A"),
            vacate,
            vacate,
            lambda s: book(s, "B"),
            vacate,
        ):
            step(free_spot)
            assert free_spot.is_occupied == (free_spot.reserved_by is not None)

    def test_occupied_without_reserver_rejected(self):
        with pytest.raises(ValidationError):
            ParkingSpot(id=1, location_name="HQ", spot_number="A01", is_occupied=True)

    def test_reserver_without_occupied_rejected(self):
        with pytest.raises(ValidationError):
            ParkingSpot(id=1, location_name="HQ", spot_number="A01", reserved_by="Arjun")

    def test_non_positive_id_rejected(self):
        with pytest.raises(ValidationError):
            ParkingSpot(id=0, location_name="HQ", spot_number="A01")


class TestModels:
    """Test wire format of the models."""

    def test_spot_serializes_camel_case(self, occupied_spot):
        assert occupied_spot.model_dump(by_alias=True) == {
            "id": 2,
            "locationName": "Quantum Cortex HQ - Basement 1",
            "spotNumber": "A02",
            "isOccupied": True,
            "reservedBy": "Arjun",
        }

    def test_spot_accepts_camel_case(self):
        spot = ParkingSpot.model_validate(
            {"id": 4, "locationName": "Quantum Cortex HQ - Rooftop", "spotNumber": "R01"}
        )

        assert spot.location_name == "Quantum Cortex HQ - Rooftop"
        assert spot.is_occupied is False
        assert spot.reserved_by is None

    def test_booking_request_valid(self):
        request = BookingRequest.model_validate({"reservedBy": "Alister"})
        assert request.reserved_by == "Alister"

    @pytest.mark.parametrize("payload", [{}, {"reservedBy": ""}, {"reservedBy": "   "}, {"reservedBy": 42}, None])
    def test_booking_request_invalid(self, payload):
        with pytest.raises(ValidationError):
            BookingRequest.model_validate(payload)

    def test_not_found_error_defaults(self):
        error = SpotNotFoundError()
        assert error.status_code == 404
        assert str(error) == "Parking spot not found."
