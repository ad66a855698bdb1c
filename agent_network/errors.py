"""Exceptions raised by the agent network configuration layer."""


class AgentNetworkError(Exception):
    """Base class for errors raised by this package."""
    pass


class ConfigurationError(AgentNetworkError):
    """Raised when a model, provider or registry cannot be configured."""
    pass


class AgentNotFoundError(AgentNetworkError, KeyError):
    """Raised when an agent name is not present in a registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Agent not found: {self.name!r}"


class NavigationLookupError(AgentNetworkError, KeyError):
    """Raised when a slug is not present in a navigation table."""

    def __init__(self, slug: str) -> None:
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"Navigation slug not found: {self.slug!r}"


class WeatherToolError(AgentNetworkError):
    """Raised when the weather lookup fails."""
    pass
