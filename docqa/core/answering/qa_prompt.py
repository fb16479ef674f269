"""
Grounded Q&A prompt.

Defines the instructional template that numbers retrieved passages as
citable sources. The template and the [n] numbering are versioned as a
unit with the citation grammar in docqa.core.citation_builder.

Dependencies: langchain_core.prompts, docqa.observability.prompt_registry
System role: Prompt template for grounded answer generation
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from langchain_core.prompts import PromptTemplate

from docqa.observability.prompt_registry.models import ModelConfig
from docqa.observability.prompt_registry.registry import PromptRegistry

logger = logging.getLogger(__name__)

QA_PROMPT_NAME = "document-qa"
QA_PROMPT_VERSION = "1.0.0"

PROMPT_VERSIONS: dict[str, dict[str, str]] = {
    "qa_v1": {
        "version": QA_PROMPT_VERSION,
        "created_at": "2025-01-10",
        "description": "Initial Q&A prompt with citation support",
    },
}

CONTEXT_SEPARATOR = "\n\n"

QA_TEMPLATE = """You are an intelligent document assistant. Your role is to answer questions based ONLY on the provided context from documents.

CRITICAL RULES:
1. Answer ONLY using information from the context below
2. If the answer is not in the context, say "I cannot find that information in the provided documents"
3. Include citation numbers [1], [2], etc. after statements that come from specific sources
4. Be concise but complete
5. If the context is contradictory, acknowledge different perspectives
6. Never make up or infer information not present in the context

Context:
{context}

Question: {question}

Answer with citations:"""

QA_PROMPT = PromptTemplate.from_template(QA_TEMPLATE)


class PromptPassage(Protocol):
    """Anything with passage content and an id, e.g. RetrievedPassage."""

    id: str
    content: str


def format_context(passages: Sequence[PromptPassage]) -> str:
    """
    Number passages as citable sources, preserving input order.

    Example:
        [1] first passage

        [2] second passage
    """
    return CONTEXT_SEPARATOR.join(
        f"[{number}] {passage.content}"
        for number, passage in enumerate(passages, start=1)
    )


def build_qa_prompt(question: str, passages: Sequence[PromptPassage]) -> str:
    """
    Build the grounded Q&A prompt.

    Args:
        question: Raw user question
        passages: Passages in retrieval order; position N becomes citation [N+1]

    Returns:
        str: Rendered prompt
    """
    return QA_PROMPT.format(context=format_context(passages), question=question)


def get_prompt_version(key: str) -> str:
    """Version string for a prompt key, or "unknown"."""
    entry = PROMPT_VERSIONS.get(key)
    return entry["version"] if entry else "unknown"


def register_qa_prompt(
    model_id: str,
    temperature: float = 0.3,
    max_tokens: int | None = None,
    labels: list[str] | None = None,
) -> None:
    """
    Publish the Q&A prompt to Langfuse.

    Generation always uses the local template; the published copy is for
    version tracking only.

    Args:
        model_id: Model the prompt is used with
        temperature: Model temperature
        max_tokens: Maximum output tokens
        labels: Optional labels (e.g., ["production", "staging"])
    """
    registry = PromptRegistry()

    if not registry.is_enabled:
        logger.debug("Prompt registry disabled, skipping registration")
        return

    config = ModelConfig(
        model=model_id,
        temperature=temperature,
        max_tokens=max_tokens,
        prompt_version=QA_PROMPT_VERSION,
    )

    registry.register_prompt(
        name=QA_PROMPT_NAME,
        template=QA_PROMPT,
        config=config,
        labels=labels or ["development"],
    )
    logger.info("Registered QA prompt: name=%s version=%s", QA_PROMPT_NAME, QA_PROMPT_VERSION)
