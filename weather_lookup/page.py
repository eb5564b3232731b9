# ABOUTME: Page-level weather orchestration: fetches a snapshot for a resolved location string.
# ABOUTME: Tracks loading/error/weather state and decides which one is displayed.

import logging
from enum import Enum

import httpx

from weather_lookup.models import WeatherSnapshot
from weather_lookup.weather_service import get_weather

logger = logging.getLogger(__name__)

WEATHER_ERROR_MESSAGE = "Erro ao buscar dados meteorológicos"


class PageView(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    WEATHER = "weather"


class WeatherPage:
    """Holds the latest weather snapshot and the state of the current fetch.

    A failed fetch sets `error` but leaves the previous snapshot in place.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, *, language: str = "pt") -> None:
        self.http_client = http_client
        self.api_key = api_key
        self.language = language
        self.weather: WeatherSnapshot | None = None
        self.loading = False
        self.error: str | None = None

    @property
    def view(self) -> PageView:
        if self.loading:
            return PageView.LOADING
        if self.error:
            return PageView.ERROR
        if self.weather is not None:
            return PageView.WEATHER
        return PageView.IDLE

    async def search(self, location: str) -> None:
        location = location.strip()
        if not location:
            return

        self.loading = True
        self.error = None
        try:
            self.weather = await get_weather(self.http_client, location, self.api_key, self.language)
        except Exception:
            logger.exception("Weather lookup failed for %r", location)
            self.error = WEATHER_ERROR_MESSAGE
        finally:
            self.loading = False
