# ABOUTME: Service layer for Nominatim (OpenStreetMap) geocoding calls.
# ABOUTME: Handles forward place search for suggestions and reverse geocoding of coordinates.

import httpx

from weather_lookup.models import Address, Suggestion

SEARCH_URL = "https://nominatim.openstreetmap.org/search"
REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"


async def search_places(
    client: httpx.AsyncClient,
    query: str,
    country_code: str,
    limit: int = 5,
) -> list[Suggestion]:
    """Search places matching free text, restricted to one country, with address details."""
    resp = await client.get(
        SEARCH_URL,
        params={
            "q": query,
            "format": "json",
            "addressdetails": 1,
            "limit": limit,
            "countrycodes": country_code,
        },
    )
    resp.raise_for_status()
    data = resp.json()

    return [Suggestion.model_validate(item) for item in data]


async def reverse_geocode(client: httpx.AsyncClient, latitude: float, longitude: float) -> Address:
    """Reverse geocode a coordinate pair into an Address.

    Nominatim answers with an "error" object and no address for places it cannot name;
    that comes back as an empty Address.
    """
    resp = await client.get(
        REVERSE_URL,
        params={"lat": latitude, "lon": longitude, "format": "json"},
    )
    resp.raise_for_status()
    data = resp.json()

    return Address.model_validate(data.get("address") or {})
