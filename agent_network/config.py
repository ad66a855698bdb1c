"""Settings for the agent network, read from the environment (and .env)."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from agent_network.errors import ConfigurationError

# load environment variables
load_dotenv()

DEFAULT_MODEL = "anthropic:claude-3-5-sonnet-20240620"
DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


class Settings(BaseModel):
    """Runtime settings.

    API keys are not stored here: the LangChain provider packages read
    ANTHROPIC_API_KEY / OPENAI_API_KEY themselves when a model is built.
    """

    model_config = {"frozen": True}

    model: str = DEFAULT_MODEL  # "provider:model_name"
    log_level: str = "WARNING"

    geocoding_url: str = DEFAULT_GEOCODING_URL
    forecast_url: str = DEFAULT_FORECAST_URL
    weather_timeout: float = Field(default=10.0, gt=0)


def load_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults.

    Raises:
        ConfigurationError: if a variable holds a value of the wrong type.
    """
    try:
        return Settings(
            model=os.getenv("AGENT_NETWORK_MODEL", DEFAULT_MODEL),
            log_level=os.getenv("AGENT_NETWORK_LOG_LEVEL", "WARNING").upper(),
            geocoding_url=os.getenv("OPEN_METEO_GEOCODING_URL", DEFAULT_GEOCODING_URL),
            forecast_url=os.getenv("OPEN_METEO_FORECAST_URL", DEFAULT_FORECAST_URL),
            weather_timeout=os.getenv("WEATHER_TIMEOUT", "10.0"),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in environment: {e}") from e
