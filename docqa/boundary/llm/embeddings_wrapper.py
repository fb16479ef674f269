"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so every embedding call, sync or async,
returns vectors of the dimension the Qdrant collection was created with.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the vector index schema
"""

import logging
from typing import Any

from dotenv import load_dotenv
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from docqa.configs.vector_store import EMBEDDING_DIMENSIONS

logger = logging.getLogger(__name__)
load_dotenv()


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings with a fixed output dimensionality.

    The base class does not apply output_dimensionality from the
    constructor, so it is injected on each call unless the caller
    overrides it explicitly.
    """

    _output_dimensionality: int = EMBEDDING_DIMENSIONS

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = EMBEDDING_DIMENSIONS,
        **kwargs: Any,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings

        Note:
            gemini-embedding-001 supports up to 3072 dimensions, reducible to 1536.
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def embed_documents(self, texts: list[str], **kwargs: Any) -> list[list[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_documents(texts, **kwargs)

    async def aembed_documents(self, texts: list[str], **kwargs: Any) -> list[list[float]]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return await super().aembed_documents(texts, **kwargs)

    def embed_query(self, text: str, **kwargs: Any) -> list[float]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return super().embed_query(text, **kwargs)

    async def aembed_query(self, text: str, **kwargs: Any) -> list[float]:
        kwargs.setdefault("output_dimensionality", self._output_dimensionality)
        return await super().aembed_query(text, **kwargs)
