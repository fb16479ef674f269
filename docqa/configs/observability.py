"""
Observability configuration settings.

Langfuse credentials for publishing the Q&A prompt.

Dependencies: pydantic_settings
System role: Observability configuration for prompt versioning
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import SectionSettings


class ObservabilitySettings(SectionSettings):
    """Langfuse connection; the registry stays inactive without both keys."""

    model_config = SettingsConfigDict(env_prefix="LANGFUSE_")

    public_key: str | None = Field(default=None, description="Langfuse public key")
    secret_key: str | None = Field(default=None, description="Langfuse secret key")
    host: str = Field(
        default="http://localhost:3000",
        description="Langfuse server host URL",
    )
    enabled: bool = Field(default=True, description="Enable Langfuse integration")
