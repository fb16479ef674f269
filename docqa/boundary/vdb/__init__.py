"""
Vector database boundary layer.

Provides the Qdrant passage store and its schemas.

Dependencies: qdrant_client
System role: Vector store adapter for RAG retrieval
"""

from docqa.boundary.vdb.qdrant_store import QdrantPassageStore
from docqa.boundary.vdb.vector_schemas import (
    PassageFilter,
    PassageRecord,
    StoredPassage,
    generate_passage_id,
)
from docqa.boundary.vdb.vector_store_factory import create_qdrant_client, get_passage_store

__all__ = [
    "PassageFilter",
    "PassageRecord",
    "QdrantPassageStore",
    "StoredPassage",
    "create_qdrant_client",
    "generate_passage_id",
    "get_passage_store",
]
