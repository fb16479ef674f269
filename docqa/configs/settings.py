"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides a cached factory for callers that build the pipeline.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docqa.configs.base import BaseSettings
from docqa.configs.generation import GenerationSettings
from docqa.configs.observability import ObservabilitySettings
from docqa.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are loaded once, on first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from docqa.configs import get_settings
        settings = get_settings()
    """
    return Settings()
