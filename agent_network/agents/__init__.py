"""Agent registry and the research network's agent definitions."""

from agent_network.agents.definitions import (
    academic_research_agent,
    agent_registry,
    build_agent_registry,
    build_agents,
    data_analysis_agent,
    fact_checking_agent,
    primary_research_agent,
    synthesize_agent,
    weather_agent,
    web_search_agent,
)
from agent_network.agents.registry import AgentRegistry

__all__ = [
    "AgentRegistry",
    "build_agent_registry",
    "build_agents",
    "agent_registry",
    # Agents
    "weather_agent",
    "primary_research_agent",
    "web_search_agent",
    "academic_research_agent",
    "fact_checking_agent",
    "data_analysis_agent",
    "synthesize_agent",
]
