"""Prometheus metrics for parking spot bookings."""

from prometheus_client import Counter, Gauge, CollectorRegistry, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

BOOKINGS = Counter(
    "parking_bookings_total",
    "Total number of successful spot bookings",
    ["spot_id", "spot_number"],
    registry=REGISTRY,
)

BOOKING_CONFLICTS = Counter(
    "parking_booking_conflicts_total",
    "Bookings rejected because the spot was already occupied",
    ["spot_id", "spot_number"],
    registry=REGISTRY,
)

VACATES = Counter(
    "parking_vacates_total",
    "Total number of vacate requests on existing spots",
    ["spot_id", "spot_number"],
    registry=REGISTRY,
)

# Current spot status gauge
SPOT_STATUS = Gauge(
    "parking_spot_occupied",
    "Current status of parking spot (1=occupied, 0=free)",
    ["spot_id", "spot_number"],
    registry=REGISTRY,
)

# Total spots gauges
TOTAL_SPOTS = Gauge(
    "parking_spots_total",
    "Total number of parking spots",
    registry=REGISTRY,
)

AVAILABLE_SPOTS = Gauge(
    "parking_spots_available",
    "Number of free parking spots",
    registry=REGISTRY,
)

OCCUPIED_SPOTS = Gauge(
    "parking_spots_occupied",
    "Number of occupied parking spots",
    registry=REGISTRY,
)


def record_booking(spot_id: int, spot_number: str) -> None:
    """Record a successful booking."""
    BOOKINGS.labels(spot_id=str(spot_id), spot_number=spot_number).inc()


def record_booking_conflict(spot_id: int, spot_number: str) -> None:
    """Record a booking rejected with a conflict."""
    BOOKING_CONFLICTS.labels(spot_id=str(spot_id), spot_number=spot_number).inc()


def record_vacate(spot_id: int, spot_number: str) -> None:
    """Record a vacate request."""
    VACATES.labels(spot_id=str(spot_id), spot_number=spot_number).inc()


def update_spot_status(spot_id: int, spot_number: str, is_occupied: bool) -> None:
    """Update current spot status gauge."""
    SPOT_STATUS.labels(spot_id=str(spot_id), spot_number=spot_number).set(1 if is_occupied else 0)


def reset_spot_status() -> None:
    """Drop per-spot status series, e.g. for spots no longer served."""
    SPOT_STATUS.clear()


def update_spot_counts(total: int, available: int, occupied: int) -> None:
    """Update overall spot count gauges."""
    TOTAL_SPOTS.set(total)
    AVAILABLE_SPOTS.set(available)
    OCCUPIED_SPOTS.set(occupied)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
