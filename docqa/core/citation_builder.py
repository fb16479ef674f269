"""
Citation extraction and mapping.

Parses [n] markers out of generated text and resolves them against the
passages the prompt was built from.

The grammar is deliberately narrow: a literal "[", one or more ASCII
digits, "]". It depends on the generator following the prompt's citation
instruction; markers such as "[1a]", "[1, 2]" or an unterminated "[1" are
not citations and are skipped. Any change to the citation syntax in
docqa.core.answering.qa_prompt must be mirrored in CITATION_PATTERN.

Dependencies: docqa.models
System role: Citation formatting business logic
"""

import re
from collections.abc import Sequence

from docqa.models.citation import Citation
from docqa.models.passage import RetrievedPassage

CITATION_PATTERN = re.compile(r"\[([0-9]+)\]")
SNIPPET_LENGTH = 200
SNIPPET_CONTINUATION = "..."


def extract_citation_numbers(text: str) -> list[int]:
    """
    Extract citation numbers in order of appearance.

    Duplicates are kept; numbers are not range-checked here.

    Example:
        >>> extract_citation_numbers("Sales rose [2] while costs fell [1][2].")
        [2, 1, 2]
    """
    return [int(match) for match in CITATION_PATTERN.findall(text)]


def build_snippet(content: str, max_length: int = SNIPPET_LENGTH) -> str:
    """Prefix of content, marked with a continuation when truncated."""
    if len(content) <= max_length:
        return content
    return content[:max_length] + SNIPPET_CONTINUATION


def map_citations(
    numbers: Sequence[int],
    passages: Sequence[RetrievedPassage],
    snippet_length: int = SNIPPET_LENGTH,
) -> list[Citation]:
    """
    Resolve 1-based citation numbers to passages.

    Numbers outside [1, len(passages)] are dropped.

    Args:
        numbers: Citation numbers in appearance order
        passages: Passages in the exact order used to build the prompt
        snippet_length: Maximum snippet length before truncation

    Returns:
        list[Citation]: One citation per valid number, same order
    """
    citations = []
    for number in numbers:
        if not 1 <= number <= len(passages):
            continue
        passage = passages[number - 1]
        citations.append(
            Citation(
                passage_id=passage.id,
                document_id=passage.document_id,
                page_number=passage.page_number,
                snippet=build_snippet(passage.content, snippet_length),
                similarity_score=passage.similarity_score,
            )
        )
    return citations


class CitationBuilder:
    """Citation building business logic."""

    def __init__(self, snippet_length: int = SNIPPET_LENGTH) -> None:
        """
        Initialize citation builder.

        Args:
            snippet_length: Maximum snippet length before truncation
        """
        self.snippet_length = snippet_length

    def build_citations(
        self,
        text: str,
        passages: Sequence[RetrievedPassage],
    ) -> list[Citation]:
        """
        Build citations for an answer, one per cited passage.

        A passage cited several times appears once, at its first marker:
        "[1] [2] [1]" gives A, B rather than A, B, A. Use map_citations
        with extract_citation_numbers to get one citation per marker.

        Args:
            text: Generated answer text
            passages: Passages in prompt order

        Returns:
            list[Citation]: Citations in order of first appearance in the text
        """
        citations = map_citations(
            extract_citation_numbers(text),
            passages,
            snippet_length=self.snippet_length,
        )
        seen: set[str] = set()
        unique = []
        for citation in citations:
            if citation.passage_id in seen:
                continue
            seen.add(citation.passage_id)
            unique.append(citation)
        return unique
