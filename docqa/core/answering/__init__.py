"""
Grounded answering: prompt assembly and answer generation.
"""

from docqa.core.answering.answer_generator import AnswerGenerator, AnswerStream
from docqa.core.answering.qa_prompt import (
    QA_PROMPT_VERSION,
    build_qa_prompt,
    get_prompt_version,
    register_qa_prompt,
)

__all__ = [
    "AnswerGenerator",
    "AnswerStream",
    "QA_PROMPT_VERSION",
    "build_qa_prompt",
    "get_prompt_version",
    "register_qa_prompt",
]
