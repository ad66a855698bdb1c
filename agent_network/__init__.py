"""Agent network: agent configuration records and RAG reference navigation labels."""

from agent_network.agents import (
    AgentRegistry,
    agent_registry,
    build_agent_registry,
)
from agent_network.docs import RAG_REFERENCE_NAV
from agent_network.errors import (
    AgentNetworkError,
    AgentNotFoundError,
    ConfigurationError,
    NavigationLookupError,
    WeatherToolError,
)
from agent_network.models import (
    AgentConfig,
    AgentSummary,
    ModelHandle,
    NavigationEntry,
    NavigationTable,
)
from agent_network.providers import anthropic, openai, resolve_model
from agent_network.runtime import to_langchain_agent

__all__ = [
    # Models
    "AgentConfig",
    "AgentSummary",
    "ModelHandle",
    "NavigationEntry",
    "NavigationTable",
    # Registry
    "AgentRegistry",
    "agent_registry",
    "build_agent_registry",
    # Navigation
    "RAG_REFERENCE_NAV",
    # Providers
    "anthropic",
    "openai",
    "resolve_model",
    # Runtime
    "to_langchain_agent",
    # Errors
    "AgentNetworkError",
    "AgentNotFoundError",
    "ConfigurationError",
    "NavigationLookupError",
    "WeatherToolError",
]
