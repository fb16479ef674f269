"""
Vector database schemas.

Pydantic models for passage storage and the typed search filter.
Payload keys match the collection schema shared with ingestion.

Dependencies: pydantic, qdrant_client
System role: Type definitions for vector operations
"""

from typing import Any
import uuid

from pydantic import BaseModel, ConfigDict, Field
from qdrant_client import models

# Payload keys written by ingestion and read by retrieval
DOCUMENT_ID_KEY = "documentId"
OWNER_USER_ID_KEY = "userId"
CONTENT_KEY = "content"
PAGE_NUMBER_KEY = "pageNumber"
CHUNK_INDEX_KEY = "chunkIndex"
TOKEN_COUNT_KEY = "tokenCount"


def generate_passage_id(document_id: str, chunk_index: int) -> str:
    """
    Generate deterministic point ID for a document chunk.

    Re-ingesting the same chunk index overwrites the existing point.

    Args:
        document_id: Document identifier
        chunk_index: Index of chunk within document

    Returns:
        UUID string (Qdrant accepts UUIDs or unsigned integers as IDs)
    """
    return str(uuid.uuid5(uuid.NAMESPACE_DNS, f"{document_id}:{chunk_index}"))


class PassageFilter(BaseModel):
    """
    Typed search filter: required owner clause plus optional document scope.

    An empty or missing document scope means every document of the owner.
    """

    model_config = ConfigDict(frozen=True)

    owner_user_id: str = Field(min_length=1, description="Exact-match owner of the passages")
    document_ids: tuple[str, ...] = Field(
        default=(),
        description="Restrict to these documents when non-empty",
    )

    def to_qdrant(self) -> models.Filter:
        """Build the Qdrant filter for this scope."""
        must: list[models.Condition] = [
            models.FieldCondition(
                key=OWNER_USER_ID_KEY,
                match=models.MatchValue(value=self.owner_user_id),
            )
        ]
        if self.document_ids:
            must.append(
                models.FieldCondition(
                    key=DOCUMENT_ID_KEY,
                    match=models.MatchAny(any=list(self.document_ids)),
                )
            )
        return models.Filter(must=must)


class PassageRecord(BaseModel):
    """A chunk with its embedding, as handed over by ingestion."""

    content: str = Field(description="Chunk text content")
    vector: list[float] = Field(description="Embedding vector")
    page_number: int | None = Field(default=None, description="Page number in source document")
    chunk_index: int = Field(ge=0, description="Index of chunk within document")
    token_count: int = Field(default=0, ge=0, description="Token count of the chunk")


class StoredPassage(BaseModel):
    """Point written to the vector index."""

    passage_id: str
    vector: list[float]
    document_id: str
    owner_user_id: str
    content: str
    page_number: int | None = None
    chunk_index: int
    token_count: int = 0

    @classmethod
    def from_record(
        cls,
        document_id: str,
        owner_user_id: str,
        record: PassageRecord,
    ) -> "StoredPassage":
        """Attach ownership and the deterministic ID to an ingested record."""
        return cls(
            passage_id=generate_passage_id(document_id, record.chunk_index),
            vector=record.vector,
            document_id=document_id,
            owner_user_id=owner_user_id,
            content=record.content,
            page_number=record.page_number,
            chunk_index=record.chunk_index,
            token_count=record.token_count,
        )

    def payload(self) -> dict[str, Any]:
        """Payload in the collection schema; pageNumber omitted when unknown."""
        data: dict[str, Any] = {
            DOCUMENT_ID_KEY: self.document_id,
            OWNER_USER_ID_KEY: self.owner_user_id,
            CONTENT_KEY: self.content,
            CHUNK_INDEX_KEY: self.chunk_index,
            TOKEN_COUNT_KEY: self.token_count,
        }
        if self.page_number is not None:
            data[PAGE_NUMBER_KEY] = self.page_number
        return data

    def to_point(self) -> models.PointStruct:
        """Convert to a Qdrant point."""
        return models.PointStruct(
            id=self.passage_id,
            vector=self.vector,
            payload=self.payload(),
        )
