# ABOUTME: Settings for the weather lookup, read from the environment and an optional .env file.
# ABOUTME: Validates values into a frozen pydantic model and reports problems as ConfigError.

import os
from collections.abc import Mapping
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from weather_lookup.errors import ConfigError

# Settings field -> environment variable
ENV_VARS = {
    "weather_api_key": "WEATHER_API_KEY",
    "weather_language": "WEATHER_LANGUAGE",
    "country_code": "COUNTRY_CODE",
    "country_name": "COUNTRY_NAME",
    "debounce_seconds": "DEBOUNCE_SECONDS",
    "min_query_length": "MIN_QUERY_LENGTH",
    "suggestion_limit": "SUGGESTION_LIMIT",
    "geolocation_timeout": "GEOLOCATION_TIMEOUT",
    "geolocation_enabled": "GEOLOCATION_ENABLED",
    "user_agent": "HTTP_USER_AGENT",
    "log_level": "LOG_LEVEL",
}


class Settings(BaseModel):
    """Process-wide configuration, loaded once at startup."""

    model_config = ConfigDict(frozen=True)

    weather_api_key: str = Field(min_length=1, repr=False)
    weather_language: str = "pt"
    country_code: str = "br"
    country_name: str = "Brasil"
    debounce_seconds: float = Field(default=0.3, ge=0)
    min_query_length: int = Field(default=3, ge=1)
    suggestion_limit: int = Field(default=5, ge=1)
    geolocation_timeout: float = Field(default=5.0, gt=0)
    geolocation_enabled: bool = True
    user_agent: str = "weather-lookup/0.1"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from `env`, or from os.environ after loading .env when `env` is None."""
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    values = {field: env[name].strip() for field, name in ENV_VARS.items() if name in env}
    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        problems = ", ".join(ENV_VARS[str(err["loc"][0])] for err in e.errors() if err["loc"])
        raise ConfigError(f"Invalid or missing configuration: {problems}") from e
