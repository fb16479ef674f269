"""
Pydantic models for prompt registry configuration.

Defines the model configuration tracked alongside a published prompt.

Dependencies: pydantic
System role: Configuration validation for prompt-model pairs
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    LLM configuration stored with a prompt version in Langfuse.

    Attributes:
        model: LLM model identifier (e.g., "gemini-2.5-pro")
        temperature: Sampling temperature (0.0-2.0)
        max_tokens: Maximum tokens in response
        prompt_version: Local semantic version of the template
        extra: Additional model-specific parameters
    """

    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    max_tokens: int | None = Field(
        default=None,
        gt=0,
        description="Maximum tokens in response",
    )
    prompt_version: str | None = Field(
        default=None,
        description="Semantic version of the local template and citation grammar",
    )
    extra: dict[str, Any] | None = Field(
        default=None,
        description="Additional model-specific parameters",
    )

    def to_langfuse_config(self) -> dict[str, Any]:
        """
        Convert to Langfuse config dictionary, omitting unset values.

        Returns:
            dict: Configuration dict for Langfuse prompt creation
        """
        config: dict[str, Any] = self.model_dump(exclude_none=True, exclude={"extra"})
        if self.extra:
            config.update(self.extra)
        return config
