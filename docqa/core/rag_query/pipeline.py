"""
Retrieval-augmented answer pipeline.

Sequences embedding, retrieval, prompt assembly, model selection,
streamed generation and citation mapping for one question.

Dependencies: docqa.core, docqa.models, docqa.observability
System role: RAG pipeline orchestration
"""

import inspect
import logging
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import aclosing

from docqa.core.answering.answer_generator import AnswerGenerator
from docqa.core.answering.qa_prompt import build_qa_prompt
from docqa.core.citation_builder import CitationBuilder
from docqa.core.complexity import classify_question
from docqa.core.embedding_generator import EmbeddingGenerator
from docqa.core.retriever import Retriever
from docqa.models.passage import RetrievedPassage
from docqa.models.pipeline_result import PipelineResult
from docqa.models.query import Query
from docqa.models.streaming import ContextChunk, StreamEvent, StreamEventType
from docqa.observability.correlation import (
    bind_correlation_id,
    get_correlation_id,
    reset_correlation_id,
)
from docqa.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

TokenSink = Callable[[str], Awaitable[None] | None]

NO_PASSAGES_ANSWER = (
    "I couldn't find any relevant information in your documents to answer this question."
)
NO_MODEL_USED = "none"


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class RAGPipeline:
    """
    Grounded Q&A over a user's documents.

    Holds no per-request state, so one instance serves concurrent requests.
    Any failure from embedding, retrieval or generation propagates to the
    caller and no partial result is produced.
    """

    def __init__(
        self,
        embedding_generator: EmbeddingGenerator,
        retriever: Retriever,
        answer_generator: AnswerGenerator,
        citation_builder: CitationBuilder | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            embedding_generator: Embeds the question
            retriever: Owner-scoped passage search
            answer_generator: Tiered chat model invocation
            citation_builder: Maps [n] markers back to passages
        """
        self.embedding_generator = embedding_generator
        self.retriever = retriever
        self.answer_generator = answer_generator
        self.citation_builder = citation_builder or CitationBuilder()

    async def run(self, query: Query, on_token: TokenSink | None = None) -> PipelineResult:
        """
        Answer a question and return the complete result.

        Args:
            query: Question, user and optional document scope
            on_token: Optional sink, sync or async, called with each answer
                fragment before the next one is requested

        Returns:
            PipelineResult: Answer, citations, model, token count, latency
        """
        result: PipelineResult | None = None
        async with aclosing(self.astream(query)) as events:
            async for event in events:
                if event.event == StreamEventType.TOKEN and on_token is not None:
                    await self._deliver(on_token, event, query)
                elif event.event == StreamEventType.COMPLETE:
                    result = PipelineResult.model_validate(event.data["result"])

        if result is None:
            raise RuntimeError("Pipeline finished without a COMPLETE event")
        return result

    @staticmethod
    async def _deliver(on_token: TokenSink, event: StreamEvent, query: Query) -> None:
        try:
            outcome = on_token(event.data["token"])
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            log_exception_with_context(
                logger,
                "Token sink failed",
                e,
                request_id=get_correlation_id(),
                user_id=query.user_id,
                token_index=event.data["index"],
            )
            raise

    async def astream(self, query: Query) -> AsyncGenerator[StreamEvent, None]:
        """
        Answer a question as a stream of events.

        Yields CONTEXT (retrieved passages), TOKEN per answer fragment,
        CITATIONS and COMPLETE. When nothing relevant is retrieved only
        COMPLETE is emitted, carrying the fixed not-found answer.

        Args:
            query: Question, user and optional document scope

        Yields:
            StreamEvent: Pipeline events in order
        """
        start = time.perf_counter()
        request_id, correlation_token = bind_correlation_id()
        logger.info(
            f"{__name__}:astream - START request_id={request_id}, "
            f"question_len={len(query.question)}"
        )

        try:
            # Step 1: Retrieve passages
            query_vector = await self.embedding_generator.embed_query(query.question)
            passages = await self.retriever.retrieve(
                query_vector,
                owner_user_id=query.user_id,
                document_ids=query.document_ids,
            )

            if not passages:
                logger.warning(f"{__name__}:astream - No relevant passages found")
                result = PipelineResult(
                    answer=NO_PASSAGES_ANSWER,
                    citations=[],
                    model_used=NO_MODEL_USED,
                    token_count=0,
                    latency_ms=_elapsed_ms(start),
                )
                yield StreamEvent(
                    event=StreamEventType.COMPLETE,
                    data={"result": result.model_dump()},
                )
                return

            yield StreamEvent(
                event=StreamEventType.CONTEXT,
                data={"passages": self._context_chunks(passages)},
            )

            # Step 2: Build prompt and pick the model tier
            prompt = build_qa_prompt(query.question, passages)
            complexity = classify_question(query.question)
            logger.info(
                f"{__name__}:astream - Prompt built: passages={len(passages)}, "
                f"complexity={complexity.value}"
            )

            # Step 3: Stream the answer
            stream = self.answer_generator.generate_stream(prompt, tier=complexity)
            fragments: list[str] = []
            async with aclosing(stream):
                async for fragment in stream:
                    fragments.append(fragment)
                    yield StreamEvent(
                        event=StreamEventType.TOKEN,
                        data={"token": fragment, "index": len(fragments) - 1},
                    )
            answer = "".join(fragments)

            # Step 4: Map citations against the same passages used in the prompt
            citations = self.citation_builder.build_citations(answer, passages)
            yield StreamEvent(
                event=StreamEventType.CITATIONS,
                data={"citations": [citation.model_dump() for citation in citations]},
            )

            result = PipelineResult(
                answer=answer,
                citations=citations,
                model_used=stream.model_used,
                token_count=stream.token_count,
                latency_ms=_elapsed_ms(start),
            )
            logger.info(
                f"{__name__}:astream - END latency_ms={result.latency_ms}, "
                f"passages={len(passages)}, citations={len(citations)}"
            )
            yield StreamEvent(
                event=StreamEventType.COMPLETE,
                data={"result": result.model_dump()},
            )

        except Exception as e:
            log_exception_with_context(
                logger,
                "RAG pipeline failed",
                e,
                request_id=request_id,
                user_id=query.user_id,
                latency_ms=_elapsed_ms(start),
            )
            raise
        finally:
            reset_correlation_id(correlation_token)

    @staticmethod
    def _context_chunks(passages: list[RetrievedPassage]) -> list[dict]:
        return [
            ContextChunk(
                citation_number=number,
                passage_id=passage.id,
                document_id=passage.document_id,
                page_number=passage.page_number,
                relevance_score=passage.similarity_score,
            ).model_dump()
            for number, passage in enumerate(passages, start=1)
        ]
