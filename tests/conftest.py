"""
Shared test fixtures and configuration for entire test suite.

Provides: deterministic embedding stubs, fake chat model, sample chunks and stores,
environment isolation for settings
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

import hashlib
import threading
import time

import pytest
from langchain_core.embeddings import Embeddings
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from manual_assistant.boundary.embeddings import EmbeddingClient
from manual_assistant.core.retrieval import VectorStore
from manual_assistant.models.chunk import Chunk

STUB_MODEL = "stub-embedding-model"

KEYWORDS = ("pressure", "valve", "checked", "months", "battery", "charge", "filter", "replace")

VALVE_CHUNK_TEXT = "The pressure valve must be checked every 6 months."
VALVE_QUESTION = "How often should the pressure valve be checked?"


class KeywordEmbeddings(Embeddings):
    """Bag-of-keywords vectors: one dimension per keyword, zero for unrelated text."""

    def __init__(self) -> None:
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []
        self._lock = threading.Lock()

    @staticmethod
    def vector(text: str) -> list[float]:
        words = [word.strip(".,?!:;").lower() for word in text.split()]
        return [float(words.count(keyword)) for keyword in KEYWORDS]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        with self._lock:
            self.document_calls.append(list(texts))
        return [self.vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        with self._lock:
            self.query_calls.append(text)
        return self.vector(text)


class HashEmbeddings(Embeddings):
    """Distinct vector per text; batches finish out of submission order."""

    def __init__(self, dimension: int = 8) -> None:
        self.dimension = dimension
        self.batches: list[list[str]] = []
        self._lock = threading.Lock()

    def vector(self, text: str) -> list[float]:
        digest = hashlib.sha256(text.encode()).digest()
        return [float(byte) + 1.0 for byte in digest[: self.dimension]]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        with self._lock:
            self.batches.append(list(texts))
        # Later batches tend to finish first
        time.sleep(0.001 * (hashlib.sha256(texts[0].encode()).digest()[0] % 5))
        return [self.vector(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        return self.vector(text)


class FailingEmbeddings(Embeddings):
    """Fails on any batch or query containing the marker text."""

    def __init__(self, marker: str = "FAIL") -> None:
        self.marker = marker

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        if any(self.marker in text for text in texts):
            raise RuntimeError("quota exceeded")
        return [[1.0, 0.0] for _ in texts]

    def embed_query(self, text: str) -> list[float]:
        if self.marker in text:
            raise RuntimeError("connection reset")
        return [1.0, 0.0]


@pytest.fixture
def keyword_embeddings() -> KeywordEmbeddings:
    """Provide keyword embeddings stub."""
    return KeywordEmbeddings()


@pytest.fixture
def keyword_client(keyword_embeddings: KeywordEmbeddings) -> EmbeddingClient:
    """Provide embedding client over keyword embeddings."""
    return EmbeddingClient(embeddings=keyword_embeddings, model=STUB_MODEL)


@pytest.fixture
def valve_chunk() -> Chunk:
    """Provide the operator manual valve chunk."""
    return Chunk(text=VALVE_CHUNK_TEXT, source_label="OPERATOR", source="operator_manual.pdf")


@pytest.fixture
def manual_chunks(valve_chunk: Chunk) -> list[Chunk]:
    """Provide chunks from both manuals."""
    return [
        Chunk(text="Charge the battery fully before first use.", source_label="USER", source="user_manual.pdf"),
        Chunk(text="Replace the filter when the light turns red.", source_label="USER", source="user_manual.pdf"),
        valve_chunk,
    ]


@pytest.fixture
def manual_store(manual_chunks: list[Chunk]) -> VectorStore:
    """Provide vector store of manual chunks embedded with keyword vectors."""
    return VectorStore(
        chunks=manual_chunks,
        embeddings=[KeywordEmbeddings.vector(chunk.content) for chunk in manual_chunks],
        embedding_model=STUB_MODEL,
    )


@pytest.fixture
def fake_chat_model() -> FakeListChatModel:
    """Provide chat model that answers from the valve chunk."""
    return FakeListChatModel(responses=["  The pressure valve must be checked every 6 months.  "])


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """
    Isolate settings from the developer environment.

    Runs in an empty directory so no .env file is read, clears related
    variables and sets the required ones.
    """
    monkeypatch.chdir(tmp_path)
    for name in (
        "GOOGLE_API_KEY",
        "LLM_GOOGLE_API_KEY",
        "LOG_LEVEL",
        "DEBUG",
        "ENVIRONMENT",
        "RETRIEVAL_SIMILARITY_THRESHOLD",
        "RETRIEVAL_CHUNK_SIZE",
        "RETRIEVAL_CHUNK_OVERLAP",
        "RETRIEVAL_TOP_K",
        "MANUALS_USER_MANUAL_PATH",
        "MANUALS_OPERATOR_MANUAL_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    monkeypatch.setenv("RETRIEVAL_SIMILARITY_THRESHOLD", "0.6")
    return monkeypatch
