"""
Core business logic module.

Contains the retrieval-augmented answer pipeline, its components,
and the exception hierarchy.
"""

from docqa.core.exceptions import (
    DocQAException,
    ValidationError,
    EmbeddingDimensionError,
    VectorStoreError,
    CollectionSetupError,
    StreamConsumedError,
)

__all__ = [
    # Exceptions
    "DocQAException",
    "ValidationError",
    "EmbeddingDimensionError",
    "VectorStoreError",
    "CollectionSetupError",
    "StreamConsumedError",
]
