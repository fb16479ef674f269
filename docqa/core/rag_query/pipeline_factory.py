"""
Pipeline factory.

Builds a RAGPipeline and every client it needs from configuration.

Dependencies: docqa.configs, docqa.boundary, docqa.core
System role: Pipeline instantiation
"""

import logging

from langchain_core.embeddings import Embeddings
from qdrant_client import AsyncQdrantClient

from docqa.boundary.llm.model_factory import create_chat_model, create_embeddings
from docqa.boundary.vdb.vector_store_factory import get_passage_store
from docqa.configs import Settings, get_settings
from docqa.core.answering.answer_generator import AnswerGenerator, ChatModelFactory
from docqa.core.answering.qa_prompt import register_qa_prompt
from docqa.core.embedding_generator import EmbeddingGenerator
from docqa.core.rag_query.pipeline import RAGPipeline
from docqa.core.retriever import Retriever
from docqa.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def create_pipeline(
    settings: Settings | None = None,
    *,
    embeddings: Embeddings | None = None,
    qdrant_client: AsyncQdrantClient | None = None,
    model_factory: ChatModelFactory | None = None,
) -> RAGPipeline:
    """
    Create a pipeline from settings.

    Any client passed in replaces the one that would be built from settings.
    Logging is configured from settings.log_level, or DEBUG when
    settings.debug is set.

    Args:
        settings: Application settings (defaults to cached settings)
        embeddings: Embedding client override
        qdrant_client: Qdrant client override
        model_factory: Chat model factory override

    Returns:
        RAGPipeline: Ready pipeline; call retriever.ensure_collection() at start-up
    """
    settings = settings or get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    vector_config = settings.vector_store
    generation_config = settings.generation

    embedding_generator = EmbeddingGenerator(
        embeddings or create_embeddings(settings),
        batch_size=vector_config.embedding_batch_size,
    )
    retriever = Retriever(
        get_passage_store(settings, client=qdrant_client),
        top_k=vector_config.top_k,
        score_threshold=vector_config.similarity_threshold,
    )
    answer_generator = AnswerGenerator(
        simple_model=generation_config.simple_model,
        complex_model=generation_config.complex_model,
        temperature=generation_config.temperature,
        max_tokens=generation_config.max_tokens,
        model_factory=model_factory or create_chat_model,
    )

    if generation_config.use_prompt_registry:
        register_qa_prompt(
            model_id=generation_config.complex_model,
            temperature=generation_config.temperature,
            max_tokens=generation_config.max_tokens,
            labels=[generation_config.prompt_label] if generation_config.prompt_label else None,
        )

    logger.info(
        f"{__name__}:create_pipeline - environment={settings.environment}, "
        f"collection={vector_config.collection_name}, "
        f"simple_model={generation_config.simple_model}, "
        f"complex_model={generation_config.complex_model}"
    )
    return RAGPipeline(
        embedding_generator=embedding_generator,
        retriever=retriever,
        answer_generator=answer_generator,
    )
