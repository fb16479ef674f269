"""
Pipeline result model.

Dependencies: pydantic, docqa.models.citation
System role: Terminal artifact returned by the RAG pipeline
"""

from pydantic import BaseModel, Field

from docqa.models.citation import Citation


class PipelineResult(BaseModel):
    """Grounded answer with citations."""

    answer: str = Field(description="Full generated answer text")
    citations: list[Citation] = Field(
        default_factory=list,
        description="Citations in order of first appearance in the answer",
    )
    model_used: str = Field(description="Model identifier, or 'none' when generation was skipped")
    token_count: int = Field(default=0, ge=0, description="Tokens reported by the provider")
    latency_ms: int = Field(ge=0, description="Total pipeline latency")
