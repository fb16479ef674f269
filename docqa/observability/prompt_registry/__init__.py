"""
Langfuse prompt registry module.

Publishes versioned LangChain text templates with model configuration.

Dependencies: langfuse, langchain_core, pydantic
System role: Prompt version management
"""

from docqa.observability.prompt_registry.models import ModelConfig
from docqa.observability.prompt_registry.registry import PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
