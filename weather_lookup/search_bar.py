# ABOUTME: Search input component owning the query text and both location pipelines.
# ABOUTME: Emits resolved location strings to the weather page on selection, submit, or geolocation.

import logging
from collections.abc import Awaitable, Callable

from weather_lookup.geolocation import GeolocationPipeline
from weather_lookup.location import resolve_suggestion
from weather_lookup.models import Bounds, Suggestion
from weather_lookup.suggestions import SuggestionPipeline

logger = logging.getLogger(__name__)

SearchCallback = Callable[[str], Awaitable[None]]


class SearchBar:
    """Text input with autocomplete and a "use my location" trigger."""

    def __init__(
        self,
        suggestions: SuggestionPipeline,
        geolocation: GeolocationPipeline,
        on_search: SearchCallback,
        *,
        country_name: str = "Brasil",
        panel_bounds: Bounds | None = None,
    ) -> None:
        self.suggestions = suggestions
        self.geolocation = geolocation
        self.on_search = on_search
        self.country_name = country_name
        self.panel_bounds = panel_bounds
        self.query = ""

    @property
    def geolocation_enabled(self) -> bool:
        """The location trigger is disabled while a request is in progress."""
        return not self.geolocation.busy

    def type(self, text: str) -> None:
        """Store the text right away and debounce the suggestion lookup."""
        self.query = text
        self.suggestions.schedule(text)

    def focus(self) -> None:
        self.suggestions.open_if_ready(self.query)

    async def select(self, suggestion: Suggestion) -> None:
        location = resolve_suggestion(suggestion, self.country_name)
        if location is None:
            logger.warning("Ignoring suggestion %s without city and state", suggestion.place_id)
            return
        self.query = location
        self.suggestions.close()
        await self.on_search(location)

    async def submit(self) -> None:
        if self.query.strip():
            await self.on_search(self.query)

    async def use_current_location(self) -> None:
        if not self.geolocation_enabled:
            return
        location = await self.geolocation.resolve()
        if location is None:
            return
        self.query = location
        await self.on_search(location)

    def pointer_down(self, x: float, y: float) -> None:
        """Close the suggestion panel on a press outside it; the query text is kept."""
        if self.panel_bounds is not None and not self.panel_bounds.contains(x, y):
            self.suggestions.close()
