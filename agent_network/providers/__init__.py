"""Model provider integrations."""

from agent_network.providers.factory import (
    SUPPORTED_PROVIDERS,
    anthropic,
    openai,
    resolve_model,
)

__all__ = [
    "SUPPORTED_PROVIDERS",
    "anthropic",
    "openai",
    "resolve_model",
]
