# ABOUTME: Exception types shared by the lookup pipelines and configuration loader.
# ABOUTME: Mirrors the browser geolocation error codes so failures can be classified by code.

from enum import IntEnum


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


class LocationResolutionError(Exception):
    """Raised when a reverse geocode answer lacks a city or a state."""


class PositionErrorCode(IntEnum):
    """Platform position error codes, numbered as in the W3C Geolocation API."""

    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3


class GeolocationPositionError(Exception):
    """Raised by a position provider when the platform cannot produce a position."""

    def __init__(self, code: int, message: str = "") -> None:
        super().__init__(message or f"geolocation error code {code}")
        self.code = code
