# ABOUTME: Service layer for Visual Crossing timeline API calls and response parsing.
# ABOUTME: Fetches current conditions plus the hourly forecast and builds a WeatherSnapshot.

import math
from urllib.parse import quote

import httpx

from weather_lookup.models import HourlyForecast, WeatherSnapshot

TIMELINE_URL = "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline/{location}"

FORECAST_HOURS = 24


async def get_weather(
    client: httpx.AsyncClient,
    location: str,
    api_key: str,
    language: str = "pt",
) -> WeatherSnapshot:
    """Fetch current conditions and the 24-hour forecast for a location string."""
    resp = await client.get(
        TIMELINE_URL.format(location=quote(location, safe="")),
        params={
            "unitGroup": "metric",
            "include": "current,hours",
            "hours": FORECAST_HOURS,
            "key": api_key,
            "contentType": "json",
            "lang": language,
        },
    )
    resp.raise_for_status()
    return parse_snapshot(resp.json())


def parse_snapshot(data: dict) -> WeatherSnapshot:
    """Build a WeatherSnapshot from a timeline response.

    Raises KeyError when the response carries no current conditions.
    """
    current = data["currentConditions"]
    days = data.get("days") or []
    hours = (days[0].get("hours") or []) if days else []

    return WeatherSnapshot(
        location=data["resolvedAddress"],
        temperature=round_half_up(current["temp"]),
        wind_speed=round_half_up(current["windspeed"]),
        precipitation=round_half_up(current.get("precipprob") or 0),
        humidity=round_half_up(current.get("humidity") or 0),
        conditions=current["conditions"],
        hourly_forecast=parse_hourly_forecast(hours),
    )


def parse_hourly_forecast(hours: list[dict]) -> list[HourlyForecast]:
    """Convert the first day's hour entries into HourlyForecast rows, in source order."""
    return [
        HourlyForecast(
            datetime=hour["datetime"],
            temp=round_half_up(hour["temp"]),
            conditions=hour["conditions"],
        )
        for hour in hours[:FORECAST_HOURS]
    ]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, as JavaScript's Math.round does."""
    return math.floor(value + 0.5)
