"""Hand-off from AgentConfig records to the LangChain agent runtime."""

import logging
from typing import Any

from langchain.agents import create_agent

from agent_network.models.agent_config import AgentConfig

logger = logging.getLogger(__name__)


def to_langchain_agent(config: AgentConfig, **kwargs: Any):
    """Build a runnable LangChain agent from a configuration record.

    The model is instantiated here, so provider credentials must be present.

    Args:
        config: the agent to build
        **kwargs: passed through to create_agent (e.g. checkpointer)

    Returns:
        The compiled agent graph returned by create_agent.

    Raises:
        ConfigurationError: if the model cannot be built.
    """
    llm = config.model.build()
    logger.debug(
        "Creating agent %r with model %s and tools %s",
        config.name,
        config.model.identifier,
        list(config.tools),
    )
    return create_agent(
        model=llm,
        tools=list(config.tools.values()),
        system_prompt=config.instructions,
        name=config.name,
        **kwargs,
    )
