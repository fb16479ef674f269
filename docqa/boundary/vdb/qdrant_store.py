"""
Qdrant passage store.

Async wrapper over one Qdrant collection: schema setup, passage upsert,
filtered similarity search and document-level deletion.

Dependencies: qdrant_client, docqa.core.exceptions, docqa.models
System role: Vector store client for passage storage and retrieval
"""

import logging

from qdrant_client import AsyncQdrantClient, models

from docqa.boundary.vdb.vector_schemas import (
    CHUNK_INDEX_KEY,
    CONTENT_KEY,
    DOCUMENT_ID_KEY,
    PAGE_NUMBER_KEY,
    PassageFilter,
    PassageRecord,
    StoredPassage,
)
from docqa.core.exceptions import CollectionSetupError, EmbeddingDimensionError
from docqa.models.passage import RetrievedPassage

logger = logging.getLogger(__name__)


class QdrantPassageStore:
    """
    Qdrant collection holding passages of every user.

    Tenancy is enforced with payload filters rather than one collection
    per user. Search and write errors from the client propagate unchanged.
    """

    def __init__(
        self,
        client: AsyncQdrantClient,
        collection_name: str,
        embedding_dimension: int,
    ) -> None:
        """
        Initialize store.

        Args:
            client: Async Qdrant client (remote or local mode)
            collection_name: Collection holding the passages
            embedding_dimension: Vector size of the collection schema
        """
        self.client = client
        self.collection_name = collection_name
        self.embedding_dimension = embedding_dimension

    async def ensure_collection(self) -> bool:
        """
        Create the collection and its documentId index if missing.

        Idempotent, but not safe against two processes creating the
        collection at the same time; call it once at start-up.

        Returns:
            bool: True if the collection was created, False if it existed

        Raises:
            CollectionSetupError: If existence cannot be determined or creation fails
        """
        try:
            exists = await self.client.collection_exists(collection_name=self.collection_name)
        except Exception as e:
            raise CollectionSetupError(
                message="Could not determine whether the collection exists",
                operation="probe_collection",
                details={"collection": self.collection_name, "error": str(e)},
            ) from e

        if exists:
            logger.info(f"Collection already exists: {self.collection_name}")
            return False

        logger.info(f"Creating collection: {self.collection_name} (dim={self.embedding_dimension})")
        try:
            await self.client.create_collection(
                collection_name=self.collection_name,
                vectors_config=models.VectorParams(
                    size=self.embedding_dimension,
                    distance=models.Distance.COSINE,
                ),
                optimizers_config=models.OptimizersConfigDiff(default_segment_number=2),
                replication_factor=1,
            )
            await self.client.create_payload_index(
                collection_name=self.collection_name,
                field_name=DOCUMENT_ID_KEY,
                field_schema=models.PayloadSchemaType.KEYWORD,
            )
        except Exception as e:
            raise CollectionSetupError(
                message="Failed to create collection",
                operation="create_collection",
                details={"collection": self.collection_name, "error": str(e)},
            ) from e

        logger.info(f"Collection created: {self.collection_name}")
        return True

    async def upsert_passages(
        self,
        document_id: str,
        owner_user_id: str,
        records: list[PassageRecord],
    ) -> int:
        """
        Upsert one point per passage and wait until applied.

        Args:
            document_id: Document the passages belong to
            owner_user_id: Owner used for retrieval filtering
            records: Passages with their embedding vectors

        Returns:
            int: Number of points written

        Raises:
            EmbeddingDimensionError: If any vector has the wrong length
        """
        if not records:
            return 0

        for record in records:
            if len(record.vector) != self.embedding_dimension:
                raise EmbeddingDimensionError(
                    expected=self.embedding_dimension,
                    actual=len(record.vector),
                    details={"document_id": document_id, "chunk_index": record.chunk_index},
                )

        points = [
            StoredPassage.from_record(document_id, owner_user_id, record).to_point()
            for record in records
        ]
        await self.client.upsert(
            collection_name=self.collection_name,
            points=points,
            wait=True,
        )
        logger.info(f"Upserted {len(points)} passages for document: {document_id}")
        return len(points)

    async def search(
        self,
        query_vector: list[float],
        passage_filter: PassageFilter,
        limit: int,
        score_threshold: float,
    ) -> list[RetrievedPassage]:
        """
        Filtered similarity search.

        Args:
            query_vector: Query embedding
            passage_filter: Owner and document scope
            limit: Maximum number of results
            score_threshold: Minimum cosine similarity

        Returns:
            list[RetrievedPassage]: Results in the order Qdrant ranked them
        """
        response = await self.client.query_points(
            collection_name=self.collection_name,
            query=query_vector,
            query_filter=passage_filter.to_qdrant(),
            limit=limit,
            score_threshold=score_threshold,
            with_payload=True,
        )
        return [self._to_passage(point) for point in response.points]

    async def delete_by_document(self, document_id: str) -> None:
        """
        Delete every point of a document and wait until applied.

        Args:
            document_id: Document whose passages are removed
        """
        await self.client.delete(
            collection_name=self.collection_name,
            points_selector=models.FilterSelector(
                filter=models.Filter(
                    must=[
                        models.FieldCondition(
                            key=DOCUMENT_ID_KEY,
                            match=models.MatchValue(value=document_id),
                        )
                    ]
                )
            ),
            wait=True,
        )
        logger.info(f"Deleted passages for document: {document_id}")

    @staticmethod
    def _to_passage(point: models.ScoredPoint) -> RetrievedPassage:
        payload = point.payload or {}
        return RetrievedPassage(
            id=str(point.id),
            content=payload.get(CONTENT_KEY, ""),
            document_id=payload.get(DOCUMENT_ID_KEY, ""),
            page_number=payload.get(PAGE_NUMBER_KEY),
            chunk_index=payload.get(CHUNK_INDEX_KEY, 0),
            similarity_score=point.score,
        )
