"""Tests for agent configuration models."""

import pytest
from pydantic import ValidationError

from agent_network.errors import ConfigurationError
from agent_network.models import agent_config
from agent_network.models.agent_config import AgentConfig, ModelHandle


def _handle() -> ModelHandle:
    return ModelHandle(provider="anthropic", model_name="claude-3-5-sonnet-20240620")


class TestAgentConfig:
    """Test AgentConfig validation and immutability."""

    def test_minimal_config(self):
        """Tools should default to an empty mapping."""
        config = AgentConfig(name="Helper", instructions="Be helpful.", model=_handle())
        assert config.tools == {}
        assert config.has_tools is False

    def test_requires_name(self):
        """Blank name should fail validation."""
        with pytest.raises(ValidationError) as exc_info:
            AgentConfig(name="   ", instructions="Be helpful.", model=_handle())
        assert "name" in str(exc_info.value)

    def test_requires_instructions(self):
        """Whitespace-only instructions should fail validation."""
        with pytest.raises(ValidationError) as exc_info:
            AgentConfig(name="Helper", instructions="\n   \n", model=_handle())
        assert "instructions" in str(exc_info.value)

    def test_is_frozen(self):
        """Fields cannot be reassigned after construction."""
        config = AgentConfig(name="Helper", instructions="Be helpful.", model=_handle())
        with pytest.raises(ValidationError):
            config.instructions = "Something else."

    def test_rejects_unknown_fields(self):
        """Unexpected fields should be rejected."""
        with pytest.raises(ValidationError):
            AgentConfig(
                name="Helper",
                instructions="Be helpful.",
                model=_handle(),
                temperature=0.2,
            )

    def test_summary(self):
        """summary() should list tool names and the model identifier."""
        config = AgentConfig(
            name="Searcher",
            instructions="Search the web.",
            model=_handle(),
            tools={"web_search_preview": {"type": "web_search_preview"}},
        )
        summary = config.summary()
        assert summary.name == "Searcher"
        assert summary.model == "anthropic:claude-3-5-sonnet-20240620"
        assert summary.tools == ["web_search_preview"]
        assert summary.has_tools is True


class TestModelHandle:
    """Test ModelHandle identity and lazy model building."""

    def test_identifier(self):
        """identifier and str() should be provider:model."""
        handle = _handle()
        assert handle.identifier == "anthropic:claude-3-5-sonnet-20240620"
        assert str(handle) == handle.identifier

    def test_equal_handles(self):
        """Handles with the same fields should compare equal."""
        assert _handle() == _handle()

    def test_build_passes_provider_and_params(self, monkeypatch):
        """build() should call init_chat_model with the handle's settings."""
        calls = []

        def fake_init_chat_model(model, **kwargs):
            calls.append((model, kwargs))
            return "chat-model"

        monkeypatch.setattr(agent_config, "init_chat_model", fake_init_chat_model)
        handle = ModelHandle(provider="openai", model_name="gpt-4o", params={"temperature": 0.5})

        assert handle.build() == "chat-model"
        assert calls == [("gpt-4o", {"model_provider": "openai", "temperature": 0.5})]

    def test_build_wraps_import_error(self, monkeypatch):
        """A missing provider package should surface as ConfigurationError."""

        def fake_init_chat_model(model, **kwargs):
            raise ImportError("langchain-anthropic is not installed")

        monkeypatch.setattr(agent_config, "init_chat_model", fake_init_chat_model)
        with pytest.raises(ConfigurationError) as exc_info:
            _handle().build()
        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_build_anthropic_chat_model(self, monkeypatch):
        """build() should return a ChatAnthropic without any network call."""
        from langchain_anthropic import ChatAnthropic

        monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
        llm = _handle().build()
        assert isinstance(llm, ChatAnthropic)
        assert llm.model == "claude-3-5-sonnet-20240620"


class TestReadOnlyMappings:
    """Test that tools and params cannot change after construction."""

    def test_tools_reject_item_assignment(self):
        """Adding a tool to a built config should fail."""
        config = AgentConfig(
            name="Searcher",
            instructions="Search the web.",
            model=_handle(),
            tools={"web_search_preview": {"type": "web_search_preview"}},
        )
        with pytest.raises(TypeError):
            config.tools["injected"] = object()
        assert list(config.tools) == ["web_search_preview"]

    def test_default_tools_are_read_only(self):
        """The empty default mapping is read-only too."""
        config = AgentConfig(name="Helper", instructions="Be helpful.", model=_handle())
        with pytest.raises(TypeError):
            config.tools["injected"] = object()

    def test_params_reject_item_assignment(self):
        """Model params should not be editable through a handle."""
        handle = ModelHandle(provider="openai", model_name="gpt-4o", params={"temperature": 0.5})
        with pytest.raises(TypeError):
            handle.params["temperature"] = 0.0
        with pytest.raises(TypeError):
            _handle().params["max_tokens"] = 10

    def test_source_dict_is_copied(self):
        """Mutating the dict passed in does not reach the config."""
        tools = {"a": {"type": "web_search_preview"}}
        config = AgentConfig(name="Helper", instructions="Be helpful.", model=_handle(), tools=tools)
        tools["b"] = "later"
        assert list(config.tools) == ["a"]

    def test_model_dump_gives_plain_dicts(self):
        """Serialization should still produce ordinary dicts."""
        handle = ModelHandle(provider="openai", model_name="gpt-4o", params={"temperature": 0.5})
        data = handle.model_dump()
        assert data["params"] == {"temperature": 0.5}
        assert type(data["params"]) is dict
