# ABOUTME: Position providers standing in for the platform geolocation capability.
# ABOUTME: Includes an IP-based lookup against ip-api.com and a fixed-coordinate provider.

from typing import Protocol

import httpx

from weather_lookup.errors import GeolocationPositionError, PositionErrorCode
from weather_lookup.models import Position, PositionOptions

IP_API_URL = "http://ip-api.com/json/"


class PositionProvider(Protocol):
    async def current_position(self, options: PositionOptions) -> Position:
        """Return the device position or raise GeolocationPositionError."""
        ...


class IPGeolocationProvider:
    """Approximate the device position from its public IP address.

    Each call is a fresh request, so a maximum_age of 0 always holds.
    """

    def __init__(self, http_client: httpx.AsyncClient, url: str = IP_API_URL) -> None:
        self.http_client = http_client
        self.url = url

    async def current_position(self, options: PositionOptions) -> Position:
        try:
            resp = await self.http_client.get(
                self.url,
                params={"fields": "status,message,lat,lon"},
                timeout=options.timeout,
            )
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise GeolocationPositionError(PositionErrorCode.TIMEOUT, str(e)) from e
        except httpx.HTTPStatusError as e:
            if e.response.status_code in (401, 403):
                raise GeolocationPositionError(PositionErrorCode.PERMISSION_DENIED, str(e)) from e
            raise GeolocationPositionError(PositionErrorCode.POSITION_UNAVAILABLE, str(e)) from e
        except httpx.HTTPError as e:
            raise GeolocationPositionError(PositionErrorCode.POSITION_UNAVAILABLE, str(e)) from e

        data = resp.json()
        if data.get("status") != "success":
            raise GeolocationPositionError(
                PositionErrorCode.POSITION_UNAVAILABLE, data.get("message", "IP lookup failed")
            )
        return Position.model_validate({"latitude": data.get("lat"), "longitude": data.get("lon")})


class FixedPositionProvider:
    """Always reports the same coordinates, e.g. ones given on the command line."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self.position = Position(latitude=latitude, longitude=longitude)

    async def current_position(self, options: PositionOptions) -> Position:
        return self.position
