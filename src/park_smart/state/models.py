"""Data models for parking spot state."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class SpotStatus(str, Enum):
    """Status of a parking spot."""

    FREE = "free"
    OCCUPIED = "occupied"


class ParkingSpot(BaseModel):
    """A bookable parking spot.

    Serialised with camelCase keys (``locationName``, ``isOccupied``, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(gt=0)
    location_name: str
    spot_number: str
    is_occupied: bool = False
    reserved_by: Optional[str] = None

    @model_validator(mode="after")
    def check_occupancy(self) -> "ParkingSpot":
        """A spot is occupied exactly when someone has reserved it."""
        if self.is_occupied != (self.reserved_by is not None):
            raise ValueError("isOccupied must be true if and only if reservedBy is set")
        return self

    @property
    def status(self) -> SpotStatus:
        return SpotStatus.OCCUPIED if self.is_occupied else SpotStatus.FREE


class BookingRequest(BaseModel):
    """Request body for booking a spot."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reserved_by: str

    @field_validator("reserved_by")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("reservedBy must not be empty")
        return v
