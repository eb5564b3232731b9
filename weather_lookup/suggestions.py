# ABOUTME: Suggestion pipeline turning keystrokes into a short list of candidate cities.
# ABOUTME: Debounces lookups, skips short queries, filters results, and drops stale completions.

import logging

import httpx

from weather_lookup.debounce import Debouncer
from weather_lookup.geocoding import search_places
from weather_lookup.location import has_city, resolve_suggestion
from weather_lookup.models import Suggestion

logger = logging.getLogger(__name__)

DEBOUNCE_SECONDS = 0.3
MIN_QUERY_LENGTH = 3
SUGGESTION_LIMIT = 5


class SuggestionPipeline:
    """Holds the suggestion list and the open/closed state of the suggestion panel.

    Every lookup takes a sequence number when it starts. A response is applied only if
    no later lookup has started since, so overlapping requests cannot apply out of order.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        country_code: str = "br",
        country_name: str = "Brasil",
        limit: int = SUGGESTION_LIMIT,
        min_query_length: int = MIN_QUERY_LENGTH,
        debounce_seconds: float = DEBOUNCE_SECONDS,
    ) -> None:
        self.http_client = http_client
        self.country_code = country_code
        self.country_name = country_name
        self.limit = limit
        self.min_query_length = min_query_length
        self.suggestions: list[Suggestion] = []
        self.is_open = False
        self._debouncer = Debouncer(debounce_seconds)
        self._latest = 0

    @property
    def visible(self) -> list[Suggestion]:
        """Suggestions shown in the panel: only those that resolve to a full location string."""
        if not self.is_open:
            return []
        return [s for s in self.suggestions if resolve_suggestion(s, self.country_name)]

    def schedule(self, query: str) -> None:
        self._debouncer.schedule(self.lookup, query)

    async def lookup(self, query: str) -> None:
        """Fetch suggestions for `query` and replace the list, unless a newer lookup has started."""
        self._latest += 1
        seq = self._latest

        query = query.strip()
        if len(query) < self.min_query_length:
            self.suggestions = []
            return

        try:
            results = await search_places(self.http_client, query, self.country_code, self.limit)
        except Exception:
            logger.exception("Suggestion lookup failed for %r", query)
            if seq == self._latest:
                self.suggestions = []
            return

        if seq != self._latest:
            logger.debug("Discarding stale suggestions for %r", query)
            return

        self.suggestions = [s for s in results if has_city(s.address)]
        self.is_open = True

    def open(self) -> None:
        self.is_open = True

    def open_if_ready(self, query: str) -> None:
        if len(query) >= self.min_query_length:
            self.open()

    def close(self) -> None:
        self.is_open = False

    def cancel(self) -> None:
        self._debouncer.cancel()

    async def wait_idle(self) -> None:
        await self._debouncer.wait_idle()
