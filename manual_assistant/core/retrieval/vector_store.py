"""
In-memory vector store.

Holds chunks and their embeddings as index-aligned parallel sequences.
Built once, read-only afterward.

Dependencies: numpy, manual_assistant.core.retrieval.similarity
System role: Flat vector storage for manual chunks
"""

from collections.abc import Sequence

import numpy as np

from manual_assistant.core.exceptions import VectorStoreError
from manual_assistant.core.retrieval.similarity import cosine_scores
from manual_assistant.models.chunk import Chunk


class VectorStore:
    """
    Parallel arrays of chunks and embeddings.

    chunks[i] is the text whose embedding is embeddings[i]. The embedding
    matrix is read-only and every row has the same dimensionality.
    """

    def __init__(
        self,
        chunks: Sequence[Chunk],
        embeddings: Sequence[Sequence[float]] | np.ndarray,
        embedding_model: str,
    ) -> None:
        """
        Create store and validate index alignment.

        Args:
            chunks: Chunks in indexing order
            embeddings: One vector per chunk, same order
            embedding_model: Model identifier that produced the vectors

        Raises:
            VectorStoreError: When lengths differ or vectors are ragged
        """
        if len(chunks) != len(embeddings):
            raise VectorStoreError(
                "Chunk and embedding counts differ",
                operation="build",
                details={"chunks": len(chunks), "embeddings": len(embeddings)},
            )

        if len(chunks) == 0:
            matrix = np.empty((0, 0), dtype=np.float64)
        else:
            try:
                matrix = np.array(embeddings, dtype=np.float64)
            except ValueError as e:
                raise VectorStoreError(
                    f"Embeddings are not a rectangular matrix: {e}",
                    operation="build",
                ) from e
            if matrix.ndim != 2 or matrix.shape[1] == 0:
                raise VectorStoreError(
                    "Embeddings must be non-empty vectors of equal dimensionality",
                    operation="build",
                    details={"shape": matrix.shape},
                )

        matrix.setflags(write=False)
        self._chunks = tuple(chunks)
        self._embeddings = matrix
        self._embedding_model = embedding_model

    def __len__(self) -> int:
        return len(self._chunks)

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        return self._chunks

    @property
    def embeddings(self) -> np.ndarray:
        return self._embeddings

    @property
    def embedding_model(self) -> str:
        return self._embedding_model

    @property
    def dimension(self) -> int | None:
        """Vector dimensionality, None for an empty store."""
        if len(self) == 0:
            return None
        return int(self._embeddings.shape[1])

    def scores(self, query_embedding: Sequence[float]) -> np.ndarray:
        """
        Cosine similarity of a query vector against every stored vector.

        Args:
            query_embedding: Vector from the same embedding model

        Returns:
            np.ndarray: One score per chunk, in store order

        Raises:
            VectorStoreError: When the query dimensionality does not match
        """
        if len(self) == 0:
            return np.empty(0, dtype=np.float64)
        if len(query_embedding) != self.dimension:
            raise VectorStoreError(
                "Query embedding dimensionality does not match the store",
                operation="search",
                details={"expected": self.dimension, "received": len(query_embedding)},
            )
        return cosine_scores(query_embedding, self._embeddings)
