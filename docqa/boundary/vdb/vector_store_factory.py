"""
Vector store factory.

Builds the Qdrant client and passage store from configuration.

Dependencies: qdrant_client, docqa.configs
System role: Vector store instantiation
"""

import logging

from qdrant_client import AsyncQdrantClient

from docqa.boundary.vdb.qdrant_store import QdrantPassageStore
from docqa.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def create_qdrant_client(settings: Settings | None = None) -> AsyncQdrantClient:
    """
    Create an async Qdrant client.

    A url of ":memory:" selects Qdrant local mode.
    """
    config = (settings or get_settings()).vector_store
    if config.url == ":memory:":
        logger.info(f"{__name__}:create_qdrant_client - Using in-memory Qdrant (local mode)")
        return AsyncQdrantClient(location=":memory:")

    logger.info(f"{__name__}:create_qdrant_client - Connecting to Qdrant at {config.url}")
    return AsyncQdrantClient(
        url=config.url,
        api_key=config.api_key,
        timeout=config.timeout,
    )


def get_passage_store(
    settings: Settings | None = None,
    client: AsyncQdrantClient | None = None,
) -> QdrantPassageStore:
    """
    Factory function to get the passage store.

    Args:
        settings: Application settings (defaults to cached settings)
        client: Existing client to reuse

    Returns:
        QdrantPassageStore: Store bound to the configured collection
    """
    settings = settings or get_settings()
    return QdrantPassageStore(
        client=client or create_qdrant_client(settings),
        collection_name=settings.vector_store.collection_name,
        embedding_dimension=settings.vector_store.embedding_dimension,
    )
