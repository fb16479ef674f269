"""
Grounded question answering over a user's own documents.

Retrieves owner-scoped passages from Qdrant, answers with a Gemini chat
model instructed to cite them as [n], and maps those markers back to
structured citations.
"""

from docqa.core.rag_query import RAGPipeline, create_pipeline
from docqa.models import PipelineResult, Query

__all__ = ["PipelineResult", "Query", "RAGPipeline", "create_pipeline"]
