"""
Domain models for the document Q&A pipeline.

Pydantic models for queries, retrieved passages, citations,
generation results and streaming events.
"""

from docqa.models.citation import Citation
from docqa.models.generation import GenerationResult, QuestionComplexity
from docqa.models.passage import RetrievedPassage
from docqa.models.pipeline_result import PipelineResult
from docqa.models.query import Query
from docqa.models.streaming import StreamEvent, StreamEventType

__all__ = [
    "Citation",
    "GenerationResult",
    "PipelineResult",
    "Query",
    "QuestionComplexity",
    "RetrievedPassage",
    "StreamEvent",
    "StreamEventType",
]
