"""
Shared test fixtures and configuration for entire test suite.

Provides: Deterministic embeddings, scripted chat model, in-memory Qdrant,
sample passages
Dependencies: pytest, langchain_core, qdrant_client
System role: Test infrastructure and fixture management
"""

import hashlib
import logging
from collections.abc import AsyncIterator, Callable, Iterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, AIMessageChunk, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatGenerationChunk, ChatResult
from pydantic import Field
from qdrant_client import AsyncQdrantClient

from docqa.boundary.vdb.qdrant_store import QdrantPassageStore
from docqa.models.passage import RetrievedPassage
from docqa.observability.logger import CorrelationIdFilter

TEST_DIMENSION = 8


class DeterministicEmbeddings(Embeddings):
    """Hash-based embeddings: identical text always maps to the identical vector."""

    def __init__(self, dimension: int = TEST_DIMENSION) -> None:
        self.dimension = dimension
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []

    def vector_for(self, text: str) -> list[float]:
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        return [(digest[i % len(digest)] - 127.5) / 127.5 for i in range(self.dimension)]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        self.document_calls.append(list(texts))
        return [self.vector_for(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self.vector_for(text)

    async def aembed_documents(self, texts: list[str]) -> list[list[float]]:
        return self.embed_documents(texts)

    async def aembed_query(self, text: str) -> list[float]:
        return self.embed_query(text)


class ScriptedChatModel(BaseChatModel):
    """
    Chat model replaying a fixed list of fragments.

    Usage metadata is attached to the last streamed chunk, the way
    providers report it. fail_at raises before emitting that fragment.
    """

    fragments: list[str] = Field(default_factory=list)
    usage: dict[str, int] | None = None
    fail_at: int | None = None
    prompts: list[str] = Field(default_factory=list)

    @property
    def _llm_type(self) -> str:
        return "scripted"

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> ChatResult:
        self.prompts.append(str(messages[-1].content))
        if self.fail_at is not None:
            raise RuntimeError("provider unavailable")
        message = AIMessage(content="".join(self.fragments), usage_metadata=self.usage)
        return ChatResult(generations=[ChatGeneration(message=message)])

    async def _astream(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: Any = None,
        **kwargs: Any,
    ) -> AsyncIterator[ChatGenerationChunk]:
        self.prompts.append(str(messages[-1].content))
        last = len(self.fragments) - 1
        for index, fragment in enumerate(self.fragments):
            if self.fail_at is not None and index == self.fail_at:
                raise RuntimeError("provider unavailable")
            yield ChatGenerationChunk(
                message=AIMessageChunk(
                    content=fragment,
                    usage_metadata=self.usage if index == last else None,
                )
            )


class ClosableChatModel(ScriptedChatModel):
    """Scripted model whose public stream records when it is closed."""

    stream_closed: bool = False

    async def astream(
        self,
        input: Any,
        config: Any = None,
        **kwargs: Any,
    ) -> AsyncIterator[AIMessageChunk]:
        try:
            for fragment in self.fragments:
                yield AIMessageChunk(content=fragment)
        finally:
            self.stream_closed = True


def make_usage(input_tokens: int, output_tokens: int) -> dict[str, int]:
    """Usage metadata in LangChain's shape."""
    return {
        "input_tokens": input_tokens,
        "output_tokens": output_tokens,
        "total_tokens": input_tokens + output_tokens,
    }


def make_passage(
    label: str,
    content: str | None = None,
    score: float = 0.9,
    page_number: int | None = 1,
) -> RetrievedPassage:
    """Retrieved passage whose fields are derived from a short label."""
    return RetrievedPassage(
        id=f"passage-{label}",
        content=content if content is not None else f"Content of passage {label}.",
        document_id=f"doc-{label}",
        page_number=page_number,
        chunk_index=0,
        similarity_score=score,
    )


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Drop the handler installed by configure_logging and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if any(isinstance(f, CorrelationIdFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def fake_embeddings() -> DeterministicEmbeddings:
    """Deterministic embeddings client with call recording."""
    return DeterministicEmbeddings()


@pytest.fixture
def scripted_model() -> ScriptedChatModel:
    """Chat model answering with two citations and usage metadata."""
    return ScriptedChatModel(
        fragments=["Revenue grew ", "[2] ", "while costs fell ", "[1]", "."],
        usage=make_usage(120, 30),
    )


@pytest.fixture
def closable_model() -> ClosableChatModel:
    """Chat model that records whether its stream was closed."""
    return ClosableChatModel(fragments=["first ", "second ", "third"])


@pytest.fixture
def model_factory(scripted_model: ScriptedChatModel) -> MagicMock:
    """Chat model factory that always returns the scripted model."""
    return MagicMock(return_value=scripted_model)


@pytest.fixture
def sample_passages() -> list[RetrievedPassage]:
    """Three passages A, B, C in descending similarity."""
    return [
        make_passage("A", score=0.95),
        make_passage("B", score=0.85),
        make_passage("C", score=0.75),
    ]


@pytest.fixture
def mock_store() -> MagicMock:
    """Passage store with async methods."""
    store = MagicMock(spec=QdrantPassageStore)
    store.search = AsyncMock(return_value=[])
    store.ensure_collection = AsyncMock(return_value=True)
    store.upsert_passages = AsyncMock(return_value=0)
    store.delete_by_document = AsyncMock()
    return store


@pytest.fixture
async def qdrant_client() -> AsyncIterator[AsyncQdrantClient]:
    """
    In-memory Qdrant client (local mode).

    Yields:
        AsyncQdrantClient: Fresh client with no collections
    """
    client = AsyncQdrantClient(location=":memory:")
    yield client
    await client.close()


@pytest.fixture
async def passage_store(qdrant_client: AsyncQdrantClient) -> QdrantPassageStore:
    """Passage store over a ready in-memory collection."""
    store = QdrantPassageStore(
        client=qdrant_client,
        collection_name="test-passages",
        embedding_dimension=TEST_DIMENSION,
    )
    await store.ensure_collection()
    return store


@pytest.fixture
def passage_factory() -> Callable[..., RetrievedPassage]:
    """Build retrieved passages from a short label."""
    return make_passage


@pytest.fixture
def chat_model_builder() -> Callable[..., ScriptedChatModel]:
    """
    Build scripted chat models.

    Returns:
        Callable: (fragments, input_tokens=0, output_tokens=0, fail_at=None) -> model
    """

    def build(
        fragments: list[str],
        input_tokens: int = 0,
        output_tokens: int = 0,
        fail_at: int | None = None,
    ) -> ScriptedChatModel:
        usage = make_usage(input_tokens, output_tokens) if input_tokens or output_tokens else None
        return ScriptedChatModel(fragments=fragments, usage=usage, fail_at=fail_at)

    return build
