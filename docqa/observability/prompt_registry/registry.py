"""
Langfuse prompt registry for versioned prompt publishing.

Singleton registry that publishes LangChain text templates to Langfuse
together with the model configuration they are used with.

Dependencies: langfuse, docqa.configs, docqa.observability.prompt_registry
System role: Prompt version control
"""

import logging
from typing import Any

from langchain_core.prompts import PromptTemplate
from langfuse import Langfuse

from docqa.configs import get_settings
from docqa.observability.prompt_registry.converter import convert_text_template
from docqa.observability.prompt_registry.models import ModelConfig

logger = logging.getLogger(__name__)


class PromptRegistry:
    """
    Singleton registry for Langfuse prompt management.

    Inactive (every call a no-op) when Langfuse is disabled or its keys
    are not configured.

    Example:
        >>> registry = PromptRegistry()
        >>> registry.register_prompt(
        ...     name="document-qa",
        ...     template=PromptTemplate.from_template("Question: {question}"),
        ...     config=ModelConfig(model="gemini-2.5-pro", temperature=0.3),
        ...     labels=["production"],
        ... )
    """

    _instance: "PromptRegistry | None" = None
    _client: Langfuse | None = None
    _enabled: bool = False

    def __new__(cls) -> "PromptRegistry":
        """Singleton pattern for registry instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize Langfuse client with configuration."""
        obs_settings = get_settings().observability

        if not obs_settings.enabled:
            logger.info("Langfuse disabled, prompt registry inactive")
            self._enabled = False
            return

        if not obs_settings.public_key or not obs_settings.secret_key:
            logger.warning("Langfuse keys not configured, prompt registry inactive")
            self._enabled = False
            return

        self._client = Langfuse(
            public_key=obs_settings.public_key,
            secret_key=obs_settings.secret_key,
            host=obs_settings.host,
        )
        self._enabled = True
        logger.info("Prompt registry initialized: host=%s", obs_settings.host)

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._enabled

    def register_prompt(
        self,
        name: str,
        template: PromptTemplate,
        config: ModelConfig,
        labels: list[str] | None = None,
    ) -> Any | None:
        """
        Publish a text prompt version in Langfuse.

        Langfuse creates a new version when the name already exists.

        Args:
            name: Unique prompt identifier
            template: LangChain PromptTemplate
            config: Model configuration to store with prompt
            labels: Optional labels (e.g., ["production", "staging"])

        Returns:
            The created Langfuse prompt, or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug("Prompt registry disabled, skipping registration: name=%s", name)
            return None

        labels = labels or []
        prompt = self._client.create_prompt(
            name=name,
            type="text",
            prompt=convert_text_template(template),
            config=config.to_langfuse_config(),
            labels=labels,
        )
        logger.info(
            "Registered text prompt: name=%s version=%s labels=%s",
            name, prompt.version, labels,
        )
        return prompt
