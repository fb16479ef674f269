"""
Answer generation.

Runs a rendered prompt through a chat model picked by question
complexity, either as one call or as a single-use stream of text
fragments.

Dependencies: langchain_core, docqa.boundary.llm, docqa.models
System role: LLM invocation for grounded answers
"""

import logging
import time
from collections.abc import AsyncGenerator, AsyncIterator, Callable
from contextlib import aclosing
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_core.messages.ai import UsageMetadata, add_usage

from docqa.boundary.llm.model_factory import create_chat_model
from docqa.core.exceptions import StreamConsumedError
from docqa.models.generation import GenerationResult, QuestionComplexity

logger = logging.getLogger(__name__)

ChatModelFactory = Callable[[str, float, int], BaseChatModel]

DEFAULT_TEMPERATURE = 0.3
DEFAULT_MAX_TOKENS = 1000


def content_to_text(content: Any) -> str:
    """Flatten message content; some providers return a list of parts."""
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str)
            else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content) if content else ""


class AnswerStream:
    """
    Single-use async stream of answer text fragments.

    Iterating pulls the next fragment from the model only after the
    consumer has finished with the previous one. Token usage and
    completion are available once the stream is exhausted.
    """

    def __init__(
        self,
        model: BaseChatModel,
        messages: list[BaseMessage],
        model_used: str,
    ) -> None:
        self._model = model
        self._messages = messages
        self.model_used = model_used
        self._started = False
        self._iterator: AsyncGenerator[str, None] | None = None
        self._usage: UsageMetadata | None = None
        self.completed = False

    @property
    def token_count(self) -> int:
        """Total tokens reported by the provider, 0 if none were reported."""
        return self._usage["total_tokens"] if self._usage else 0

    def __aiter__(self) -> AsyncIterator[str]:
        if self._started:
            raise StreamConsumedError(
                "Answer stream can only be consumed once",
                details={"model": self.model_used},
            )
        self._started = True
        self._iterator = self._iterate()
        return self._iterator

    async def aclose(self) -> None:
        """Close the model stream if iteration stopped before it was drained."""
        if self._iterator is not None:
            await self._iterator.aclose()

    async def _iterate(self) -> AsyncGenerator[str, None]:
        logger.info(f"Starting answer stream: model={self.model_used}")
        fragment_count = 0
        try:
            async with aclosing(self._model.astream(self._messages)) as chunks:
                async for chunk in chunks:
                    usage = getattr(chunk, "usage_metadata", None)
                    if usage:
                        self._usage = add_usage(self._usage, usage)
                    text = content_to_text(chunk.content)
                    if text:
                        fragment_count += 1
                        yield text
        except Exception as e:
            logger.error(f"Stream failed: model={self.model_used} - {type(e).__name__}: {e}")
            raise

        self.completed = True
        logger.info(
            f"Stream completed: model={self.model_used}, fragments={fragment_count}, "
            f"tokens={self.token_count}"
        )


class AnswerGenerator:
    """
    Chat model invocation with complexity-based model selection.

    Failures propagate unmodified; there is no retry and no fallback tier.
    """

    def __init__(
        self,
        simple_model: str,
        complex_model: str,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        model_factory: ChatModelFactory = create_chat_model,
    ) -> None:
        """
        Initialize generator.

        Args:
            simple_model: Model for SIMPLE questions
            complex_model: Model for COMPLEX questions
            temperature: Default sampling temperature
            max_tokens: Default maximum output tokens
            model_factory: Builds a chat model from (model, temperature, max_tokens)
        """
        self.simple_model = simple_model
        self.complex_model = complex_model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._model_factory = model_factory
        self._models: dict[tuple[str, float, int], BaseChatModel] = {}

    def model_for(self, tier: QuestionComplexity) -> str:
        """Model identifier for a complexity tier."""
        if tier == QuestionComplexity.COMPLEX:
            return self.complex_model
        return self.simple_model

    def _get_model(
        self,
        tier: QuestionComplexity,
        temperature: float | None,
        max_tokens: int | None,
    ) -> tuple[str, BaseChatModel]:
        name = self.model_for(tier)
        key = (
            name,
            self.temperature if temperature is None else temperature,
            self.max_tokens if max_tokens is None else max_tokens,
        )
        if key not in self._models:
            self._models[key] = self._model_factory(*key)
        return name, self._models[key]

    async def generate(
        self,
        prompt: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
        tier: QuestionComplexity = QuestionComplexity.SIMPLE,
    ) -> GenerationResult:
        """
        Generate a complete answer in one call.

        Args:
            prompt: Rendered prompt
            temperature: Override sampling temperature
            max_tokens: Override maximum output tokens
            tier: Complexity tier selecting the model

        Returns:
            GenerationResult: Text, model, token usage and latency
        """
        start = time.perf_counter()
        model_used, model = self._get_model(tier, temperature, max_tokens)
        logger.info(f"Generating answer: model={model_used}, complexity={tier.value}")

        try:
            message = await model.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"Failed to generate answer: model={model_used} - {type(e).__name__}: {e}")
            raise

        usage = getattr(message, "usage_metadata", None)
        latency_ms = int((time.perf_counter() - start) * 1000)
        result = GenerationResult(
            text=content_to_text(message.content),
            model_used=model_used,
            token_count=usage["total_tokens"] if usage else 0,
            latency_ms=latency_ms,
        )
        logger.info(
            f"Answer generated: model={model_used}, tokens={result.token_count}, "
            f"latency_ms={latency_ms}"
        )
        return result

    def generate_stream(
        self,
        prompt: str,
        temperature: float | None = None,
        max_tokens: int | None = None,
        tier: QuestionComplexity = QuestionComplexity.SIMPLE,
    ) -> AnswerStream:
        """
        Open a fresh answer stream.

        Nothing is sent to the model until the stream is iterated.

        Args:
            prompt: Rendered prompt
            temperature: Override sampling temperature
            max_tokens: Override maximum output tokens
            tier: Complexity tier selecting the model

        Returns:
            AnswerStream: Single-use async iterable of text fragments
        """
        model_used, model = self._get_model(tier, temperature, max_tokens)
        return AnswerStream(model, [HumanMessage(content=prompt)], model_used)
