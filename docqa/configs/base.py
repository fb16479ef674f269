"""
Base configuration settings.

SectionSettings carries the .env loading shared by every prefixed
section (VECTOR_STORE_, GENERATION_, LANGFUSE_). BaseSettings adds the
unprefixed runtime fields of the aggregated settings.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE = ".env"


class SectionSettings(PydanticBaseSettings):
    """One configuration concern; subclasses set env_prefix."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class BaseSettings(SectionSettings):
    """Runtime settings shared by the whole application."""

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(
        default="INFO",
        description="Level passed to configure_logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()
