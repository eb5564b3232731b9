# ABOUTME: Geolocation pipeline resolving the device position to a "City, State, Country" string.
# ABOUTME: Tracks busy/error state and classifies every failure into a user-facing message.

import logging
from enum import Enum

import httpx

from weather_lookup.errors import GeolocationPositionError, LocationResolutionError, PositionErrorCode
from weather_lookup.geocoding import reverse_geocode
from weather_lookup.location import REVERSE_CITY_FIELDS, build_location_string, pick_city
from weather_lookup.models import PositionOptions
from weather_lookup.position import PositionProvider

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "Seu dispositivo não suporta geolocalização"
UNRESOLVED_MESSAGE = "Não foi possível determinar sua localização"
RESOLUTION_ERROR_MESSAGE = "Erro ao determinar sua localização"
PLATFORM_ERROR_MESSAGE = "Erro ao obter localização"

POSITION_ERROR_MESSAGES = {
    PositionErrorCode.PERMISSION_DENIED: "Permissão de localização negada",
    PositionErrorCode.POSITION_UNAVAILABLE: "Informações de localização indisponíveis",
    PositionErrorCode.TIMEOUT: "Tempo de requisição de localização expirou",
}


class GeoState(str, Enum):
    """IDLE -> REQUESTING -> RESOLVED | FAILED.

    The outcome is kept until the next resolve(), which always moves back to REQUESTING.
    """

    IDLE = "idle"
    REQUESTING = "requesting"
    RESOLVED = "resolved"
    FAILED = "failed"


def position_error_message(code: int) -> str:
    """Map a platform error code to its message, falling back to the generic one."""
    return POSITION_ERROR_MESSAGES.get(code, PLATFORM_ERROR_MESSAGE)


class GeolocationPipeline:
    """One-shot position request followed by a reverse geocode.

    A `provider` of None means the platform has no geolocation capability.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        provider: PositionProvider | None,
        *,
        country_name: str = "Brasil",
        options: PositionOptions = PositionOptions(),
    ) -> None:
        self.http_client = http_client
        self.provider = provider
        self.country_name = country_name
        self.options = options
        self.state = GeoState.IDLE
        self.busy = False
        self.error: str | None = None

    async def resolve(self) -> str | None:
        """Resolve the current position to a location string, or None with `error` set."""
        self.error = None
        self.busy = True
        self.state = GeoState.REQUESTING
        try:
            if self.provider is None:
                return self._fail(UNSUPPORTED_MESSAGE)

            position = await self.provider.current_position(self.options)
            address = await reverse_geocode(self.http_client, position.latitude, position.longitude)

            city = pick_city(address, REVERSE_CITY_FIELDS)
            location = build_location_string(city, address.state, self.country_name)
            if location is None:
                raise LocationResolutionError(f"No city/state for {position.latitude},{position.longitude}")
        except GeolocationPositionError as e:
            logger.warning("Geolocation failed with code %s: %s", e.code, e)
            return self._fail(position_error_message(e.code))
        except LocationResolutionError as e:
            logger.warning("%s", e)
            return self._fail(UNRESOLVED_MESSAGE)
        except Exception:
            logger.exception("Reverse geocoding failed")
            return self._fail(RESOLUTION_ERROR_MESSAGE)
        finally:
            self.busy = False

        self.state = GeoState.RESOLVED
        return location

    def _fail(self, message: str) -> None:
        self.error = message
        self.state = GeoState.FAILED
        return None
