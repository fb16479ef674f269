"""
Retrieval logic with metadata filtering.

Handles owner-scoped similarity search over the passage store and the
store's lifecycle operations (collection setup, upsert, deletion).

Dependencies: docqa.boundary.vdb, docqa.models
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Sequence

from docqa.boundary.vdb import PassageFilter, PassageRecord, QdrantPassageStore
from docqa.models.passage import RetrievedPassage

logger = logging.getLogger(__name__)


class Retriever:
    """Retrieval business logic."""

    def __init__(
        self,
        store: QdrantPassageStore,
        top_k: int = 5,
        score_threshold: float = 0.7,
    ) -> None:
        """
        Initialize retriever with a passage store.

        Args:
            store: Qdrant passage store
            top_k: Default maximum number of passages per query
            score_threshold: Default minimum similarity
        """
        self._store = store
        self.top_k = top_k
        self.score_threshold = score_threshold

    async def retrieve(
        self,
        query_vector: list[float],
        owner_user_id: str,
        document_ids: Sequence[str] | None = None,
        top_k: int | None = None,
        score_threshold: float | None = None,
    ) -> list[RetrievedPassage]:
        """
        Retrieve the passages most similar to a query vector.

        The store's ranking (descending similarity) is passed through as is.
        That order is the citation numbering used downstream.

        Args:
            query_vector: Query embedding vector
            owner_user_id: Only passages owned by this user are searched
            document_ids: Optional document scope
            top_k: Maximum number of passages (defaults to configured value)
            score_threshold: Minimum similarity (defaults to configured value)

        Returns:
            list[RetrievedPassage]: At most top_k passages, best first
        """
        limit = self.top_k if top_k is None else top_k
        threshold = self.score_threshold if score_threshold is None else score_threshold
        passage_filter = self.apply_filters(owner_user_id, document_ids)

        logger.info(
            f"Retrieving passages: top_k={limit}, threshold={threshold}, "
            f"document_scope={len(passage_filter.document_ids) or 'all'}"
        )
        try:
            results = await self._store.search(
                query_vector=query_vector,
                passage_filter=passage_filter,
                limit=limit,
                score_threshold=threshold,
            )
        except Exception as e:
            logger.error(f"Passage retrieval failed: {type(e).__name__}: {e}")
            raise

        passages = results[:limit]
        logger.info(f"Passages retrieved: count={len(passages)}")
        return passages

    @staticmethod
    def apply_filters(
        owner_user_id: str,
        document_ids: Sequence[str] | None = None,
    ) -> PassageFilter:
        """
        Build the search filter for a request.

        Args:
            owner_user_id: Required owner clause
            document_ids: Optional document scope; empty means no scope

        Returns:
            PassageFilter: Typed filter for the store
        """
        return PassageFilter(
            owner_user_id=owner_user_id,
            document_ids=tuple(document_ids or ()),
        )

    async def ensure_collection(self) -> bool:
        """Create the collection if missing; see QdrantPassageStore.ensure_collection."""
        return await self._store.ensure_collection()

    async def store(
        self,
        document_id: str,
        owner_user_id: str,
        passages: Sequence[PassageRecord],
    ) -> int:
        """
        Store a document's passages, overwriting earlier ingestions of the same chunks.

        Args:
            document_id: Document identifier
            owner_user_id: Owner of the document
            passages: Passages with embedding vectors

        Returns:
            int: Number of passages written
        """
        try:
            return await self._store.upsert_passages(document_id, owner_user_id, list(passages))
        except Exception as e:
            logger.error(f"Failed to store passages for document {document_id}: {e}")
            raise

    async def delete_by_document(self, document_id: str) -> None:
        """Remove every passage of a document."""
        try:
            await self._store.delete_by_document(document_id)
        except Exception as e:
            logger.error(f"Failed to delete passages for document {document_id}: {e}")
            raise
