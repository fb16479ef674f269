"""
Retrieved passage domain model.

Represents an indexed document chunk returned by similarity search.

Dependencies: pydantic
System role: Passage data structure shared by prompt assembly and citation mapping
"""

from pydantic import BaseModel, Field


class RetrievedPassage(BaseModel):
    """
    Passage returned by the retriever.

    Sequences of these are ordered by descending similarity. Position N
    in the sequence is citation [N+1] in the prompt and in the answer.
    """

    id: str = Field(description="Deterministic passage identifier")
    content: str = Field(description="Passage text content")
    document_id: str = Field(description="Source document identifier")
    page_number: int | None = Field(default=None, description="Page number in source document")
    chunk_index: int = Field(ge=0, description="Index of the chunk within its document")
    similarity_score: float = Field(description="Cosine similarity to the query")
