"""
Retrieval logic with a relevance gate.

Embeds the query, scores it against every stored chunk, and returns the
top-k chunks only when the best match clears the similarity threshold.

Dependencies: manual_assistant.core.retrieval, manual_assistant.boundary.embeddings
System role: RAG retrieval business logic
"""

import logging
import math

from manual_assistant.boundary.embeddings import EmbeddingClient
from manual_assistant.core.exceptions import VectorStoreError
from manual_assistant.core.retrieval.similarity import rank
from manual_assistant.core.retrieval.vector_store import VectorStore
from manual_assistant.models.retrieval import (
    CONTEXT_SEPARATOR,
    RetrievedChunk,
    RetrievedContext,
)

logger = logging.getLogger(__name__)


class Retriever:
    """Flat cosine-similarity search over a VectorStore."""

    def __init__(
        self,
        store: VectorStore,
        embedding_client: EmbeddingClient,
        similarity_threshold: float,
        top_k: int = 3,
        separator: str = CONTEXT_SEPARATOR,
    ) -> None:
        """
        Initialize retriever.

        Args:
            store: Populated vector store
            embedding_client: Client using the same model that built the store
            similarity_threshold: Minimum best score for a match
            top_k: Default number of chunks returned
            separator: Text placed between chunks in the joined context

        Raises:
            VectorStoreError: When the client model differs from the store's
            ValueError: When top_k is below 1
        """
        if embedding_client.model != store.embedding_model:
            raise VectorStoreError(
                "Query embedding model differs from the model that built the store",
                operation="search",
                details={"store_model": store.embedding_model, "query_model": embedding_client.model},
            )
        if top_k < 1:
            raise ValueError("top_k must be at least 1")

        self._store = store
        self._embedding_client = embedding_client
        self._similarity_threshold = similarity_threshold
        self._top_k = top_k
        self._separator = separator

    @property
    def store(self) -> VectorStore:
        return self._store

    def search(
        self,
        query: str,
        k: int | None = None,
        threshold: float | None = None,
    ) -> RetrievedContext | None:
        """
        Retrieve the most relevant chunks for a query.

        Args:
            query: User question
            k: Number of chunks to return (defaults to top_k)
            threshold: Relevance gate (defaults to similarity_threshold)

        Returns:
            RetrievedContext | None: Ranked chunks, or None when nothing is relevant

        Raises:
            ValueError: When k is below 1
            EmbeddingServiceError: When the query cannot be embedded
            VectorStoreError: When the query vector does not fit the store
        """
        k = self._top_k if k is None else k
        if k < 1:
            raise ValueError("k must be at least 1")
        threshold = self._similarity_threshold if threshold is None else threshold

        if len(self._store) == 0:
            logger.info(f"{__name__}:search - Store is empty, no match")
            return None

        query_embedding = self._embedding_client.embed_query(query)
        ranked = rank(self._store.scores(query_embedding))

        best = ranked[0]
        if best.score < threshold:
            logger.info(
                f"{__name__}:search - Best score {best.score:.3f} below threshold {threshold:.3f}"
            )
            return None

        matches = [
            RetrievedChunk(index=match.index, score=match.score, chunk=self._store.chunks[match.index])
            for match in ranked[:k]
            if math.isfinite(match.score)
        ]
        for match in matches:
            logger.debug(
                f"{__name__}:search - Matched chunk {match.index} "
                f"({match.score:.3f}) from {match.chunk.source_label or match.chunk.source}"
            )
        return RetrievedContext(matches=matches, separator=self._separator)
