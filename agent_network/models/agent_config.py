"""Data models for agent configuration.

An AgentConfig is the declarative record handed to the agent runtime:
name, instruction prompt, model handle and tool bindings. Records are
created once at import time and never modified.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel
from pydantic import BaseModel, Field, field_serializer, field_validator

from agent_network.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ModelHandle(BaseModel):
    """Reference to a provider model, resolved to a chat model on demand."""

    model_config = {"frozen": True, "extra": "forbid", "protected_namespaces": ()}

    provider: str  # "anthropic", "openai", etc.
    model_name: str  # "claude-3-5-sonnet-20240620", "gpt-4o", etc.

    # provider-specific extras (e.g., temperature, max_tokens)
    params: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("params")
    @classmethod
    def _read_only_params(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("params")
    def _dump_params(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @property
    def identifier(self) -> str:
        return f"{self.provider}:{self.model_name}"

    def build(self) -> BaseChatModel:
        """Instantiate the LangChain chat model for this handle.

        Raises:
            ConfigurationError: if the provider package is missing or the
                provider rejects the model settings.
        """
        logger.debug("Building chat model %s", self.identifier)
        try:
            return init_chat_model(
                self.model_name,
                model_provider=self.provider,
                **self.params,
            )
        except (ImportError, ValueError) as e:
            raise ConfigurationError(
                f"Cannot build model {self.identifier}: {e}"
            ) from e

    def __str__(self) -> str:
        return self.identifier


class AgentConfig(BaseModel):
    """A named agent: instructions, model and optional tools.

    Tool values are opaque here (a LangChain tool or a provider built-in
    tool dict); the runtime decides how to bind them.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    name: str  # lookup key, e.g. "Weather Agent"
    instructions: str
    model: ModelHandle
    tools: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("name", "instructions")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("tools")
    @classmethod
    def _read_only_tools(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("tools")
    def _dump_tools(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @property
    def has_tools(self) -> bool:
        return bool(self.tools)

    def summary(self) -> "AgentSummary":
        """Short description for listings."""
        return AgentSummary(
            name=self.name,
            model=self.model.identifier,
            tools=list(self.tools),
            has_tools=self.has_tools,
        )


class AgentSummary(BaseModel):
    """Name, model and tool names of an agent, without its prompt."""

    name: str
    model: str
    tools: list[str] = Field(default_factory=list)
    has_tools: bool = False
