"""
Observability module.

Provides logging configuration, correlation ID tracking,
and prompt version management.
"""

from docqa.observability.logger import configure_logging, get_logger
from docqa.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = ["configure_logging", "get_logger", "PromptRegistry", "ModelConfig"]
