"""
Citation domain model.

Represents a citation from generated answer text back to a source passage.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, Field


class Citation(BaseModel):
    """Citation model for source attribution."""

    passage_id: str = Field(description="Identifier of the cited passage")
    document_id: str = Field(description="Document the passage belongs to")
    page_number: int | None = Field(default=None, description="Page number in source")
    snippet: str = Field(description="Bounded-length excerpt of the passage content")
    similarity_score: float = Field(description="Retrieval similarity of the passage")
