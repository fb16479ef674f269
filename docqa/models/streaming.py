"""
Streaming event schemas for incremental answer delivery.

Defines event types and payloads emitted by RAGPipeline.astream().

Dependencies: pydantic
System role: Streaming protocol schemas
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class StreamEventType(str, Enum):
    """Pipeline-to-consumer event types."""

    CONTEXT = "context"
    TOKEN = "token"
    CITATIONS = "citations"
    COMPLETE = "complete"


class StreamEvent(BaseModel):
    """
    Base streaming event model.

    Attributes:
        event: Event type identifier
        data: Event-specific payload
    """

    event: StreamEventType
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"event": self.event.value, "data": self.data}


class ContextChunk(BaseModel):
    """
    Retrieved passage metadata sent ahead of generation.

    Attributes:
        citation_number: 1-based number the passage carries in the prompt
        passage_id: Passage identifier
        document_id: Source document identifier
        page_number: Source page number
        relevance_score: Similarity score
    """

    citation_number: int
    passage_id: str
    document_id: str
    page_number: int | None = None
    relevance_score: float
