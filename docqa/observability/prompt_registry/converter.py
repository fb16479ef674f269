"""
LangChain to Langfuse prompt converter.

Langfuse text prompts use {{variable}} where LangChain uses {variable}.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re

from langchain_core.prompts import PromptTemplate

# Single braces not already doubled
_VARIABLE_PATTERN = re.compile(r"(?<!\{)\{([^{}]+)\}(?!\})")


def convert_variables(content: str) -> str:
    """
    Convert LangChain variable syntax to Langfuse format.

    Args:
        content: Template string with {variable} placeholders

    Returns:
        str: Template string with {{variable}} placeholders
    """
    return _VARIABLE_PATTERN.sub(r"{{\1}}", content)


def convert_text_template(template: PromptTemplate) -> str:
    """
    Convert LangChain PromptTemplate to Langfuse text format.

    Example:
        >>> template = PromptTemplate.from_template("Question: {question}")
        >>> convert_text_template(template)
        'Question: {{question}}'
    """
    return convert_variables(template.template)
