"""Tests for PromptRegistry."""

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.prompts import PromptTemplate

from docqa.observability.prompt_registry.models import ModelConfig
from docqa.observability.prompt_registry.registry import PromptRegistry


@pytest.fixture
def mock_settings() -> MagicMock:
    """Mock settings with Langfuse enabled."""
    settings = MagicMock()
    settings.observability.enabled = True
    settings.observability.public_key = "pk-test"
    settings.observability.secret_key = "sk-test"
    settings.observability.host = "http://localhost:3000"
    return settings


@pytest.fixture
def mock_langfuse() -> MagicMock:
    """Mock Langfuse client."""
    return MagicMock()


@pytest.fixture(autouse=True)
def reset_singleton() -> None:
    """Reset singleton before each test."""
    PromptRegistry._instance = None
    PromptRegistry._client = None
    PromptRegistry._enabled = False


class TestPromptRegistrySingleton:
    """Tests for singleton pattern."""

    def test_singleton_returns_same_instance(self, mock_settings: MagicMock) -> None:
        """Multiple instantiations return same instance."""
        with patch("docqa.observability.prompt_registry.registry.get_settings", return_value=mock_settings):
            with patch("docqa.observability.prompt_registry.registry.Langfuse"):
                registry1 = PromptRegistry()
                registry2 = PromptRegistry()
                assert registry1 is registry2

    def test_enabled_with_keys(self, mock_settings: MagicMock) -> None:
        """Client is built from the configured keys and host."""
        with patch("docqa.observability.prompt_registry.registry.get_settings", return_value=mock_settings):
            with patch("docqa.observability.prompt_registry.registry.Langfuse") as langfuse_cls:
                registry = PromptRegistry()

        assert registry.is_enabled
        langfuse_cls.assert_called_once_with(
            public_key="pk-test",
            secret_key="sk-test",
            host="http://localhost:3000",
        )

    def test_disabled_when_langfuse_off(self, mock_settings: MagicMock) -> None:
        """Registry disabled when Langfuse disabled."""
        mock_settings.observability.enabled = False
        with patch("docqa.observability.prompt_registry.registry.get_settings", return_value=mock_settings):
            registry = PromptRegistry()
            assert not registry.is_enabled

    def test_disabled_when_keys_missing(self, mock_settings: MagicMock) -> None:
        """Registry disabled when Langfuse keys missing."""
        mock_settings.observability.public_key = None
        with patch("docqa.observability.prompt_registry.registry.get_settings", return_value=mock_settings):
            registry = PromptRegistry()
            assert not registry.is_enabled


class TestRegisterPrompt:
    """Tests for register_prompt method."""

    def test_register_text_prompt(
        self, mock_settings: MagicMock, mock_langfuse: MagicMock
    ) -> None:
        """Register PromptTemplate creates text type prompt."""
        mock_prompt = MagicMock()
        mock_prompt.version = 1
        mock_langfuse.create_prompt.return_value = mock_prompt

        with patch("docqa.observability.prompt_registry.registry.get_settings", return_value=mock_settings):
            with patch("docqa.observability.prompt_registry.registry.Langfuse", return_value=mock_langfuse):
                registry = PromptRegistry()

                template = PromptTemplate.from_template("Context: {context}\nQuestion: {question}")
                config = ModelConfig(model="gemini-2.5-pro", temperature=0.3, prompt_version="1.0.0")

                result = registry.register_prompt(
                    name="document-qa",
                    template=template,
                    config=config,
                    labels=["production"],
                )

                assert result == mock_prompt
                mock_langfuse.create_prompt.assert_called_once()
                call_kwargs = mock_langfuse.create_prompt.call_args[1]
                assert call_kwargs["name"] == "document-qa"
                assert call_kwargs["type"] == "text"
                assert call_kwargs["prompt"] == "Context: {{context}}\nQuestion: {{question}}"
                assert call_kwargs["labels"] == ["production"]
                assert call_kwargs["config"] == {
                    "model": "gemini-2.5-pro",
                    "temperature": 0.3,
                    "prompt_version": "1.0.0",
                }

    def test_register_without_labels(
        self, mock_settings: MagicMock, mock_langfuse: MagicMock
    ) -> None:
        """Missing labels are sent as an empty list."""
        mock_langfuse.create_prompt.return_value = MagicMock(version=2)

        with patch("docqa.observability.prompt_registry.registry.get_settings", return_value=mock_settings):
            with patch("docqa.observability.prompt_registry.registry.Langfuse", return_value=mock_langfuse):
                registry = PromptRegistry()
                registry.register_prompt(
                    "greeting", PromptTemplate.from_template("Hello {name}!"), ModelConfig(model="m")
                )

                assert mock_langfuse.create_prompt.call_args[1]["labels"] == []

    def test_register_when_disabled(self, mock_settings: MagicMock) -> None:
        """Register returns None when disabled."""
        mock_settings.observability.enabled = False
        with patch("docqa.observability.prompt_registry.registry.get_settings", return_value=mock_settings):
            registry = PromptRegistry()

            template = PromptTemplate.from_template("test")
            config = ModelConfig(model="test")

            result = registry.register_prompt("test", template, config)
            assert result is None
