# ABOUTME: Dependency container for the lookup components using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and the loaded Settings.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_lookup.config import Settings


class LookupDeps(BaseModel):
    """Collaborators shared by the search bar and the weather page."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(user_agent: str) -> httpx.AsyncClient:
    """Create the httpx client used for every upstream call.

    Nominatim rejects requests without an identifying User-Agent, so one is always sent.
    """
    return httpx.AsyncClient(headers={"User-Agent": user_agent, "Accept": "application/json"})
