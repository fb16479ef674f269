"""
Vector store configuration settings.

Manages Qdrant connection, collection schema and embedding settings
for passage storage and retrieval.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import SectionSettings

# Shared by the embedding capability and the collection schema.
EMBEDDING_DIMENSIONS = 1536


class VectorStoreSettings(SectionSettings):
    """Qdrant and embedding configuration."""

    model_config = SettingsConfigDict(env_prefix="VECTOR_STORE_")

    url: str = Field(default="http://localhost:6333", description="Qdrant server URL")
    api_key: str | None = Field(default=None, description="Qdrant API key (Qdrant Cloud)")
    timeout: int = Field(default=30, gt=0, description="Qdrant request timeout in seconds")
    collection_name: str = Field(default="documents", description="Qdrant collection name")

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID (gemini-embedding-001 supports 1536-dim output)",
    )
    embedding_dimension: int = Field(
        default=EMBEDDING_DIMENSIONS,
        gt=0,
        description="Embedding vector dimension, must match the collection schema",
    )
    embedding_batch_size: int = Field(
        default=100,
        ge=1,
        description="Maximum texts per embedding request",
    )

    top_k: int = Field(default=5, ge=1, le=100, description="Number of passages to retrieve")
    similarity_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Minimum cosine similarity for retrieval (0.0-1.0)",
    )
