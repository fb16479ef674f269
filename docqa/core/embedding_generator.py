"""
Embedding generation.

Turns text into fixed-dimension vectors through a LangChain Embeddings
client, batching large inputs to respect provider request limits.

Dependencies: langchain_core.embeddings
System role: Query and passage embedding for retrieval
"""

import logging
from collections.abc import Callable, Sequence

from langchain_core.embeddings import Embeddings

from docqa.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class EmbeddingGenerator:
    """
    Embedding generation over an injected Embeddings client.

    Provider errors propagate unchanged; no retry is attempted.
    """

    def __init__(self, embeddings: Embeddings, batch_size: int = 100) -> None:
        """
        Initialize generator.

        Args:
            embeddings: LangChain embeddings client
            batch_size: Default maximum texts per provider request
        """
        if batch_size < 1:
            raise ValidationError("batch_size must be at least 1", field="batch_size")
        self._embeddings = embeddings
        self.batch_size = batch_size

    async def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """
        Embed texts in a single provider request.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per text, in input order
        """
        if not texts:
            return []

        logger.info(f"Generating embeddings: count={len(texts)}")
        vectors = await self._embeddings.aembed_documents(list(texts))
        logger.info(
            f"Embeddings generated: count={len(vectors)}, "
            f"dimensions={len(vectors[0]) if vectors else 0}"
        )
        return vectors

    async def embed_query(self, text: str) -> list[float]:
        """Embed a single search query."""
        return await self._embeddings.aembed_query(text)

    async def embed_batched(
        self,
        texts: Sequence[str],
        batch_size: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> list[list[float]]:
        """
        Embed texts in sequential contiguous batches.

        Batches run one after another so a large ingestion does not
        overrun provider rate limits.

        Args:
            texts: Texts to embed
            batch_size: Maximum texts per request (defaults to configured size)
            on_progress: Called with (processed, total) after each batch

        Returns:
            list[list[float]]: One vector per text, in input order

        Raises:
            ValidationError: If batch_size is less than 1
        """
        size = self.batch_size if batch_size is None else batch_size
        if size < 1:
            raise ValidationError("batch_size must be at least 1", field="batch_size")

        total = len(texts)
        results: list[list[float]] = []
        for start in range(0, total, size):
            batch = texts[start:start + size]
            results.extend(await self.embed(batch))

            processed = start + len(batch)
            logger.info(f"Batch embedding progress: {processed}/{total}")
            if on_progress is not None:
                on_progress(processed, total)

        return results
