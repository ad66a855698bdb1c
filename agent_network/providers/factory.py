"""Model provider factories.

Each factory returns a ModelHandle; nothing is instantiated or contacted
until the runtime calls ModelHandle.build().

    model = anthropic("claude-3-5-sonnet-20240620")
    model = resolve_model("openai:gpt-4o")
"""

from typing import Any

from agent_network.errors import ConfigurationError
from agent_network.models.agent_config import ModelHandle

# providers we know how to hand to init_chat_model, with their partner package
SUPPORTED_PROVIDERS: dict[str, str] = {
    "anthropic": "langchain-anthropic",
    "openai": "langchain-openai",
}


def _handle(provider: str, model_name: str, params: dict[str, Any]) -> ModelHandle:
    if provider not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            f"Unknown model provider {provider!r}; "
            f"expected one of {sorted(SUPPORTED_PROVIDERS)}"
        )
    if not model_name or not model_name.strip():
        raise ConfigurationError(f"Empty model name for provider {provider!r}")
    return ModelHandle(provider=provider, model_name=model_name.strip(), params=params)


def anthropic(model_name: str, **params: Any) -> ModelHandle:
    """Handle for an Anthropic chat model."""
    return _handle("anthropic", model_name, params)


def openai(model_name: str, **params: Any) -> ModelHandle:
    """Handle for an OpenAI chat model."""
    return _handle("openai", model_name, params)


def resolve_model(identifier: str, **params: Any) -> ModelHandle:
    """Parse a "provider:model_name" identifier into a ModelHandle.

    Args:
        identifier: e.g. "anthropic:claude-3-5-sonnet-20240620"
        params: extra keyword arguments for the chat model

    Raises:
        ConfigurationError: if the identifier is malformed or the provider
            is not supported.
    """
    provider, sep, model_name = identifier.partition(":")
    if not sep:
        raise ConfigurationError(
            f"Model identifier must look like 'provider:model', got {identifier!r}"
        )
    return _handle(provider.strip().lower(), model_name, params)
