# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides canned Nominatim and Visual Crossing payloads and a Settings instance.

import pytest

from weather_lookup.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(weather_api_key="test-key")


@pytest.fixture
def search_payload() -> list[dict]:
    """Nominatim search answer mixing cities, a town, and a landmark without either."""
    return [
        {
            "place_id": 1,
            "display_name": "Curitiba, Região Metropolitana de Curitiba, Paraná, Brasil",
            "address": {"city": "Curitiba", "state": "Paraná", "country": "Brasil"},
        },
        {
            "place_id": 2,
            "display_name": "Jardim Botânico, Curitiba, Paraná, Brasil",
            "address": {"tourism": "Jardim Botânico", "state": "Paraná", "country": "Brasil"},
        },
        {
            "place_id": 3,
            "display_name": "Curiúva, Paraná, Brasil",
            "address": {"town": "Curiúva", "state": "Paraná", "country": "Brasil"},
        },
    ]


@pytest.fixture
def timeline_payload() -> dict:
    """Visual Crossing timeline answer with 26 hourly entries on the first day."""
    hours = [{"datetime": f"{h % 24:02d}:00:00", "temp": 15.5 + h, "conditions": "Parcialmente nublado"} for h in range(26)]
    return {
        "resolvedAddress": "Curitiba, Paraná, Brasil",
        "currentConditions": {
            "temp": 22.5,
            "windspeed": 12.4,
            "precipprob": 32.6,
            "humidity": 71.49,
            "conditions": "Parcialmente nublado",
        },
        "days": [{"hours": hours}],
    }
