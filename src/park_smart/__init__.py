"""Park-Smart: in-memory parking spot booking API."""

__version__ = "1.0.0"
