"""Tests for prompt registry models."""

import pytest
from pydantic import ValidationError

from docqa.observability.prompt_registry.models import ModelConfig


class TestModelConfig:
    """Tests for ModelConfig Pydantic schema."""

    def test_model_required(self) -> None:
        """Model field is required."""
        with pytest.raises(ValidationError):
            ModelConfig()  # type: ignore[call-arg]

    def test_minimal_config(self) -> None:
        """Create config with only required model field."""
        config = ModelConfig(model="gemini-2.5-flash")
        assert config.model == "gemini-2.5-flash"
        assert config.temperature is None
        assert config.max_tokens is None
        assert config.prompt_version is None
        assert config.extra is None

    def test_temperature_bounds(self) -> None:
        """Temperature must be between 0.0 and 2.0."""
        ModelConfig(model="test", temperature=0.0)
        ModelConfig(model="test", temperature=2.0)

        with pytest.raises(ValidationError):
            ModelConfig(model="test", temperature=-0.1)

        with pytest.raises(ValidationError):
            ModelConfig(model="test", temperature=2.1)

    def test_max_tokens_positive(self) -> None:
        """Max tokens must be positive."""
        ModelConfig(model="test", max_tokens=1)

        with pytest.raises(ValidationError):
            ModelConfig(model="test", max_tokens=0)

    def test_to_langfuse_config_minimal(self) -> None:
        """Convert minimal config to Langfuse format."""
        assert ModelConfig(model="gemini-2.5-pro").to_langfuse_config() == {"model": "gemini-2.5-pro"}

    def test_to_langfuse_config_full(self) -> None:
        """Extra parameters are merged at the top level."""
        config = ModelConfig(
            model="gemini-2.5-pro",
            temperature=0.3,
            max_tokens=1000,
            prompt_version="1.0.0",
            extra={"top_p": 0.9},
        )

        assert config.to_langfuse_config() == {
            "model": "gemini-2.5-pro",
            "temperature": 0.3,
            "max_tokens": 1000,
            "prompt_version": "1.0.0",
            "top_p": 0.9,
        }
