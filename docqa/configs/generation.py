"""
Generation configuration settings.

Model tiers and sampling defaults for answer generation.

Dependencies: pydantic, pydantic_settings
System role: LLM configuration for the answer generator
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import SectionSettings


class GenerationSettings(SectionSettings):
    """Answer generation configuration."""

    model_config = SettingsConfigDict(env_prefix="GENERATION_")

    simple_model: str = Field(
        default="gemini-2.5-flash",
        description="Cheaper, faster model for simple questions",
    )
    complex_model: str = Field(
        default="gemini-2.5-pro",
        description="Higher-capability model for analytical questions",
    )
    temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (low for grounded answers)",
    )
    max_tokens: int = Field(default=1000, gt=0, description="Maximum tokens in response")

    use_prompt_registry: bool = Field(
        default=False,
        description="Publish the QA prompt to Langfuse on pipeline creation",
    )
    prompt_label: str | None = Field(default=None, description="Langfuse label for the QA prompt")
