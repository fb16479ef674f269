"""
Question complexity classification.

Routes analytical or long questions to the higher-capability model.
A wrong call only shifts the cost/quality trade-off.

Dependencies: docqa.models.generation
System role: Generation tier selection
"""

from docqa.models.generation import QuestionComplexity

COMPLEX_INDICATORS: tuple[str, ...] = (
    "compare",
    "analyze",
    "evaluate",
    "synthesize",
    "explain how",
    "explain why",
    "relationship",
    "multiple",
    "differences",
    "similarities",
)

MAX_SIMPLE_QUESTION_LENGTH = 100


def classify_question(question: str) -> QuestionComplexity:
    """
    Classify a question as simple or complex.

    Args:
        question: Raw question text

    Returns:
        QuestionComplexity: COMPLEX on an indicator keyword or a question
            longer than 100 characters, SIMPLE otherwise
    """
    lowered = question.lower()
    if any(indicator in lowered for indicator in COMPLEX_INDICATORS):
        return QuestionComplexity.COMPLEX
    if len(question) > MAX_SIMPLE_QUESTION_LENGTH:
        return QuestionComplexity.COMPLEX
    return QuestionComplexity.SIMPLE
