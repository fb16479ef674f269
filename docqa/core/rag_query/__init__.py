"""
RAG query pipeline.
"""

from docqa.core.rag_query.pipeline import (
    NO_MODEL_USED,
    NO_PASSAGES_ANSWER,
    RAGPipeline,
    TokenSink,
)
from docqa.core.rag_query.pipeline_factory import create_pipeline

__all__ = [
    "NO_MODEL_USED",
    "NO_PASSAGES_ANSWER",
    "RAGPipeline",
    "TokenSink",
    "create_pipeline",
]
