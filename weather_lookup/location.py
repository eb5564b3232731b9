# ABOUTME: Builds the canonical "City, State, Country" string from geocoded addresses.
# ABOUTME: Shared by suggestion selection and geolocation so both emit identical strings.

from weather_lookup.models import Address, Suggestion

# Field order in which a city-like name is looked up
SUGGESTION_CITY_FIELDS = ("city", "town")
REVERSE_CITY_FIELDS = ("city", "town", "village", "municipality")


def pick_city(address: Address, fields: tuple[str, ...] = SUGGESTION_CITY_FIELDS) -> str | None:
    """Return the first non-blank city-like value from `address` in `fields` order."""
    for field in fields:
        value = getattr(address, field)
        if value and value.strip():
            return value.strip()
    return None


def has_city(address: Address) -> bool:
    return pick_city(address) is not None


def build_location_string(city: str | None, state: str | None, country: str) -> str | None:
    """Join city, state and country, or return None when city or state is missing."""
    if not city or not state or not state.strip():
        return None
    return f"{city}, {state.strip()}, {country}"


def resolve_suggestion(suggestion: Suggestion, country: str) -> str | None:
    address = suggestion.address
    return build_location_string(pick_city(address), address.state, country)
