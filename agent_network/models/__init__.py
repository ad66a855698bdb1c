"""Core data models for the agent network."""

from agent_network.models.agent_config import (
    AgentConfig,
    AgentSummary,
    ModelHandle,
)
from agent_network.models.navigation import (
    NavigationEntry,
    NavigationTable,
)

__all__ = [
    # Agents
    "AgentConfig",
    "AgentSummary",
    "ModelHandle",
    # Navigation
    "NavigationEntry",
    "NavigationTable",
]
