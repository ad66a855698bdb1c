"""Current-weather tool backed by the Open-Meteo geocoding and forecast APIs."""

import logging

import httpx
from langchain_core.tools import tool
from pydantic import BaseModel

from agent_network.config import Settings, load_settings
from agent_network.errors import ConfigurationError, WeatherToolError

logger = logging.getLogger(__name__)

# WMO weather interpretation codes used by Open-Meteo
WEATHER_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

CURRENT_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "wind_gusts_10m",
    "weather_code",
)


class WeatherReport(BaseModel):
    """Current conditions for a resolved location."""

    temperature: float
    feels_like: float
    humidity: float
    wind_speed: float
    wind_gust: float
    conditions: str
    location: str


def describe_weather_code(code: int) -> str:
    return WEATHER_CONDITIONS.get(code, "Unknown")


def _get_json(client: httpx.Client, url: str, params: dict) -> dict:
    try:
        response = client.get(url, params=params)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        logger.warning("Weather API returned %s for %s", e.response.status_code, url)
        raise WeatherToolError(
            f"Weather API error {e.response.status_code} from {url}"
        ) from e
    except httpx.RequestError as e:
        logger.warning("Weather API request failed: %s", e)
        raise WeatherToolError(f"Failed to reach weather API at {url}: {e}") from e
    except ValueError as e:
        logger.warning("Weather API returned a non-JSON body from %s", url)
        raise WeatherToolError(f"Invalid JSON from weather API at {url}") from e


def get_weather(
    location: str,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> WeatherReport:
    """Look up the current weather for a place name.

    Args:
        location: place name, e.g. "New York"
        settings: API endpoints and timeout; read from the environment if None
        client: optional pre-configured httpx client (mainly for tests)

    Raises:
        WeatherToolError: if the location cannot be geocoded or an API call fails.
    """
    settings = settings or load_settings()
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=settings.weather_timeout)

    try:
        geocoding = _get_json(
            client,
            settings.geocoding_url,
            {"name": location, "count": 1},
        )
        results = geocoding.get("results") or []
        if not results:
            raise WeatherToolError(f"Location '{location}' not found")
        place = results[0]

        try:
            latitude, longitude, name = place["latitude"], place["longitude"], place["name"]
        except (KeyError, TypeError) as e:
            raise WeatherToolError(f"Malformed geocoding result for '{location}': missing {e}") from e

        forecast = _get_json(
            client,
            settings.forecast_url,
            {
                "latitude": latitude,
                "longitude": longitude,
                "current": ",".join(CURRENT_FIELDS),
            },
        )
    finally:
        if owns_client:
            client.close()

    try:
        current = forecast["current"]
        return WeatherReport(
            temperature=current["temperature_2m"],
            feels_like=current["apparent_temperature"],
            humidity=current["relative_humidity_2m"],
            wind_speed=current["wind_speed_10m"],
            wind_gust=current["wind_gusts_10m"],
            conditions=describe_weather_code(current["weather_code"]),
            location=name,
        )
    except (KeyError, TypeError) as e:
        raise WeatherToolError(f"Malformed forecast for '{name}': missing {e}") from e


@tool
def weather_tool(location: str) -> dict | str:
    """Get current weather for a location (city name)."""
    try:
        return get_weather(location).model_dump()
    except (WeatherToolError, ConfigurationError) as exc:
        return f"Weather lookup failed: {exc}"
