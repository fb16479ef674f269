"""
Answer generation models.

Dependencies: pydantic
System role: Model tier selection and non-streaming generation output
"""

from enum import Enum

from pydantic import BaseModel, Field


class QuestionComplexity(str, Enum):
    """Coarse question complexity used to pick a generation tier."""

    SIMPLE = "simple"
    COMPLEX = "complex"


class GenerationResult(BaseModel):
    """Output of a non-streaming generation call."""

    text: str = Field(description="Generated answer text")
    model_used: str = Field(description="Model identifier that produced the text")
    token_count: int = Field(default=0, ge=0, description="Total tokens reported by the provider")
    latency_ms: int = Field(ge=0, description="Wall-clock generation latency")
