"""Read-only registry of named agent configurations."""

import logging
from collections.abc import Iterable, Iterator

from agent_network.errors import AgentNotFoundError, ConfigurationError
from agent_network.models.agent_config import AgentConfig, AgentSummary

logger = logging.getLogger(__name__)


class AgentRegistry:
    """Fixed set of AgentConfig values, looked up by name.

    Usage:
        registry = AgentRegistry([weather_agent, web_search_agent])
        agent = registry.get("Weather Agent")
    """

    def __init__(self, agents: Iterable[AgentConfig]) -> None:
        by_name: dict[str, AgentConfig] = {}
        for agent in agents:
            if agent.name in by_name:
                raise ConfigurationError(f"Duplicate agent name: {agent.name!r}")
            by_name[agent.name] = agent
        self._agents = by_name
        logger.debug("Registered %d agents: %s", len(by_name), ", ".join(by_name))

    def get(self, name: str) -> AgentConfig:
        """Return the agent registered under ``name``.

        Raises:
            AgentNotFoundError: if no agent has that name.
        """
        try:
            return self._agents[name]
        except KeyError:
            raise AgentNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._agents)

    def summaries(self) -> list[AgentSummary]:
        return [agent.summary() for agent in self._agents.values()]

    def __getitem__(self, name: str) -> AgentConfig:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._agents

    def __iter__(self) -> Iterator[AgentConfig]:
        return iter(self._agents.values())

    def __len__(self) -> int:
        return len(self._agents)

    def __repr__(self) -> str:
        return f"AgentRegistry(agents={self.names()!r})"
