"""
LLM client factories.

Builds the embedding and chat model clients from configuration as explicit
objects, so tests can substitute fakes and several configurations can run
side by side.

Dependencies: langchain_google_genai, docqa.configs
System role: LLM client instantiation
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from docqa.boundary.llm.embeddings_wrapper import FixedDimensionEmbeddings
from docqa.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def create_embeddings(settings: Settings | None = None) -> FixedDimensionEmbeddings:
    """Create the embedding client with the collection's dimension."""
    config = (settings or get_settings()).vector_store
    return FixedDimensionEmbeddings(
        model=config.embedding_model,
        output_dimensionality=config.embedding_dimension,
    )


def create_chat_model(model: str, temperature: float, max_tokens: int) -> BaseChatModel:
    """
    Create a Gemini chat model.

    Args:
        model: Gemini model identifier
        temperature: Sampling temperature
        max_tokens: Maximum output tokens

    Returns:
        BaseChatModel: Streaming-capable chat model
    """
    logger.debug(
        "Creating chat model: model=%s temperature=%s max_tokens=%s",
        model, temperature, max_tokens,
    )
    return ChatGoogleGenerativeAI(
        model=model,
        temperature=temperature,
        max_output_tokens=max_tokens,
    )
