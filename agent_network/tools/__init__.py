"""Tools that agents in the network can call."""

from agent_network.tools.weather import (
    WeatherReport,
    describe_weather_code,
    get_weather,
    weather_tool,
)
from agent_network.tools.web_search import WEB_SEARCH_PREVIEW, web_search_preview

__all__ = [
    "WeatherReport",
    "describe_weather_code",
    "get_weather",
    "weather_tool",
    "WEB_SEARCH_PREVIEW",
    "web_search_preview",
]
