"""Configuration models and loading utilities."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .state.models import ParkingSpot


def _resolve_env_var(v):
    """Resolve environment variable references like ${VAR_NAME}."""
    if isinstance(v, str) and v.startswith("${") and v.endswith("}"):
        env_var = v[2:-1]
        return os.environ.get(env_var, "")
    return v


def default_spots() -> list[ParkingSpot]:
    """Spots the service starts with when none are configured."""
    basement = "Quantum Cortex HQ - Basement 1"
    return [
        ParkingSpot(id=1, location_name=basement, spot_number="A01"),
        ParkingSpot(id=2, location_name=basement, spot_number="A02", is_occupied=True, reserved_by="Arjun"),
        ParkingSpot(id=3, location_name=basement, spot_number="A03"),
        ParkingSpot(id=4, location_name="Quantum Cortex HQ - Rooftop", spot_number="R01"),
    ]


class APIConfig(BaseModel):
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    @field_validator("host", mode="before")
    @classmethod
    def resolve_env_var(cls, v):
        return _resolve_env_var(v)


class DocsConfig(BaseModel):
    """API documentation metadata."""

    title: str = "Park-Smart API"
    version: str = "1.0.0"
    description: str = "API for managing parking spots for the Park-Smart application."
    contact_name: str = "Alister"
    contact_email: str = "your.email@example.com"
    server_url: Optional[str] = None  # Defaults to http://localhost:<api.port>

    @field_validator("server_url", "contact_email", mode="before")
    @classmethod
    def resolve_env_var(cls, v):
        return _resolve_env_var(v)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    api: APIConfig = APIConfig()
    docs: DocsConfig = DocsConfig()
    logging: LoggingConfig = LoggingConfig()
    spots: list[ParkingSpot] = Field(default_factory=default_spots)

    @field_validator("spots")
    @classmethod
    def unique_spot_ids(cls, v: list[ParkingSpot]) -> list[ParkingSpot]:
        ids = [s.id for s in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate parking spot ids: {duplicates}")
        return v

    @property
    def server_url(self) -> str:
        """Public base URL advertised in the API documentation."""
        return self.docs.server_url or f"http://localhost:{self.api.port}"


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return AppConfig(**(data or {}))


def get_config_path() -> Path:
    """Get the default configuration file path."""
    # Check for config in current directory first
    local_config = Path("config/config.yaml")
    if local_config.exists():
        return local_config

    # Check for config in parent directory (for Docker)
    parent_config = Path("/app/config/config.yaml")
    if parent_config.exists():
        return parent_config

    return local_config  # Return default even if doesn't exist
