"""
Query domain model.

Dependencies: pydantic
System role: Per-request pipeline input
"""

from pydantic import BaseModel, ConfigDict, Field


class Query(BaseModel):
    """A user's question, scoped to their own documents."""

    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1, description="Natural-language question")
    user_id: str = Field(min_length=1, description="Requesting user identifier")
    document_ids: tuple[str, ...] | None = Field(
        default=None,
        description="Optional document scope; None or empty searches all user documents",
    )
