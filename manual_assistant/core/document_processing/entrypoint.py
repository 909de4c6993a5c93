"""
Vector store construction pipeline.

Coordinates parsing, chunking and embedding of every manual, then creates
the VectorStore in one step so a failure never leaves a partial store.

Dependencies: All task modules, manual_assistant.boundary.embeddings
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from collections.abc import Sequence

from manual_assistant.boundary.embeddings import EmbeddingClient
from manual_assistant.configs import RetrievalSettings
from manual_assistant.core.retrieval.vector_store import VectorStore
from manual_assistant.models.chunk import Chunk, DocumentSource

from .tasks import ChunkingTask, ParsingTask

logger = logging.getLogger(__name__)


class VectorStoreBuilder:
    """Orchestrate manual indexing: parse -> chunk -> embed -> store."""

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        chunking_task: ChunkingTask | None = None,
        parsing_task: ParsingTask | None = None,
    ) -> None:
        """
        Initialize builder with its tasks.

        Args:
            embedding_client: Client that embeds every chunk
            chunking_task: Chunker (defaults to 1000/200 labeled chunks)
            parsing_task: PDF text extractor
        """
        self._embedding_client = embedding_client
        self._chunking_task = chunking_task or ChunkingTask()
        self._parsing_task = parsing_task or ParsingTask()

    @classmethod
    def from_settings(
        cls,
        settings: RetrievalSettings,
        embedding_client: EmbeddingClient,
    ) -> "VectorStoreBuilder":
        """Create a builder whose chunker follows the retrieval settings."""
        return cls(
            embedding_client=embedding_client,
            chunking_task=ChunkingTask(
                chunk_size=settings.chunk_size,
                chunk_overlap=settings.chunk_overlap,
                label_chunks=settings.label_chunks,
            ),
        )

    def build(self, documents: Sequence[DocumentSource]) -> VectorStore:
        """
        Index documents into a new vector store.

        Documents are processed in the given order; the store's chunk order
        follows it exactly.

        Args:
            documents: Manuals to index

        Returns:
            VectorStore: Fully populated, index-aligned store

        Raises:
            DocumentReadError: A manual could not be read
            EmbeddingServiceError: Any embedding request failed
            VectorStoreError: Embeddings could not be aligned with chunks
        """
        start_time = time.perf_counter()

        chunks = self.chunk_documents(documents)
        embeddings = self._embedding_client.embed_many([chunk.content for chunk in chunks])
        store = VectorStore(chunks, embeddings, self._embedding_client.model)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:build - Loaded {len(store)} chunks into memory "
            f"in {elapsed_ms:.0f} ms (dimension={store.dimension})"
        )
        return store

    def chunk_documents(self, documents: Sequence[DocumentSource]) -> list[Chunk]:
        """
        Parse and chunk documents without embedding them.

        Args:
            documents: Manuals to read

        Returns:
            list[Chunk]: All chunks, document by document

        Raises:
            DocumentReadError: A manual could not be read
        """
        chunks: list[Chunk] = []
        for document in documents:
            text = self._parsing_task.extract_text(document.path)
            document_chunks = self._chunking_task.chunk(
                text,
                source=document.path,
                label=document.label,
            )
            logger.info(
                f"{__name__}:chunk_documents - {document.label} manual: "
                f"{len(document_chunks)} chunks from {document.path}"
            )
            chunks.extend(document_chunks)
        return chunks
