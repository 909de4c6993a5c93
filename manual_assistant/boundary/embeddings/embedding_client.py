"""
Embedding client over any LangChain Embeddings provider.

Adds bounded-concurrency batch embedding with index-preserving result
collection, dimensionality checks and uniform error conversion.

Dependencies: langchain_core.embeddings, concurrent.futures
System role: Embedding generation adapter
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from langchain_core.embeddings import Embeddings

from manual_assistant.core.exceptions import EmbeddingServiceError

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Embedding generator bound to one model identity."""

    def __init__(
        self,
        embeddings: Embeddings,
        model: str,
        batch_size: int = 32,
        max_concurrency: int = 4,
    ) -> None:
        """
        Initialize embedding client.

        Args:
            embeddings: LangChain embeddings provider
            model: Model identifier, recorded on every store built with this client
            batch_size: Texts per provider request in embed_many
            max_concurrency: Maximum provider requests in flight in embed_many

        Raises:
            ValueError: When model is empty or limits are below 1
        """
        if not model:
            raise ValueError("model cannot be empty")
        if batch_size < 1 or max_concurrency < 1:
            raise ValueError("batch_size and max_concurrency must be at least 1")

        self._embeddings = embeddings
        self._model = model
        self._batch_size = batch_size
        self._max_concurrency = max_concurrency

    @property
    def model(self) -> str:
        return self._model

    def embed_query(self, text: str) -> list[float]:
        """
        Generate embedding for a query.

        Args:
            text: Query text

        Returns:
            list[float]: Query embedding vector

        Raises:
            EmbeddingServiceError: When the provider fails or returns no vector
        """
        try:
            vector = self._embeddings.embed_query(text)
        except Exception as e:
            raise EmbeddingServiceError(
                f"Failed to embed query: {e}",
                operation="embed_query",
                details={"model": self._model},
            ) from e

        if not vector:
            raise EmbeddingServiceError(
                "Embedding provider returned an empty vector",
                operation="embed_query",
                details={"model": self._model},
            )
        return list(vector)

    def embed_many(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embeddings for many texts, preserving input order.

        Texts are cut into batches; up to max_concurrency batches run at once
        and each result is written into the slots of its original positions.
        The first failure cancels pending batches and is re-raised.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per text, vectors[i] embeds texts[i]

        Raises:
            EmbeddingServiceError: When any batch fails or vectors are inconsistent
        """
        if not texts:
            return []

        batches = [
            (start, texts[start:start + self._batch_size])
            for start in range(0, len(texts), self._batch_size)
        ]
        slots: list[list[float] | None] = [None] * len(texts)
        workers = min(self._max_concurrency, len(batches))

        logger.info(
            f"{__name__}:embed_many - Embedding {len(texts)} texts in "
            f"{len(batches)} batches (workers={workers}, model={self._model})"
        )

        pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="embed")
        try:
            futures: dict[Future, int] = {
                pool.submit(self._embed_batch, batch, start): start
                for start, batch in batches
            }
            for future in as_completed(futures):
                start = futures[future]
                vectors = future.result()
                slots[start:start + len(vectors)] = vectors
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise
        pool.shutdown(wait=True)

        return self._check_dimensions(slots)

    def _embed_batch(self, batch: list[str], start: int) -> list[list[float]]:
        try:
            vectors = self._embeddings.embed_documents(batch)
        except Exception as e:
            raise EmbeddingServiceError(
                f"Failed to embed batch at offset {start}: {e}",
                operation="embed_many",
                details={"model": self._model, "batch_start": start, "batch_size": len(batch)},
            ) from e

        if len(vectors) != len(batch):
            raise EmbeddingServiceError(
                "Embedding provider returned the wrong number of vectors",
                operation="embed_many",
                details={"batch_start": start, "expected": len(batch), "received": len(vectors)},
            )
        return [list(vector) for vector in vectors]

    def _check_dimensions(self, vectors: list[list[float] | None]) -> list[list[float]]:
        dimensions = {len(vector) for vector in vectors if vector is not None}
        if None in vectors or len(dimensions) != 1 or 0 in dimensions:
            raise EmbeddingServiceError(
                "Embedding provider returned missing or inconsistent vectors",
                operation="embed_many",
                details={"dimensions": sorted(dimensions)},
            )
        return vectors  # type: ignore[return-value]
