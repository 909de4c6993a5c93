"""
Test suite for the embedding client.

System role: Verification of batching, ordering and error conversion
"""

import pytest
from unittest.mock import MagicMock

from manual_assistant.boundary.embeddings import EmbeddingClient
from manual_assistant.core.exceptions import EmbeddingServiceError
from conftest import STUB_MODEL, FailingEmbeddings, HashEmbeddings


class TestEmbeddingClientInit:
    """Test suite for EmbeddingClient construction."""

    def test_init_should_reject_empty_model(self) -> None:
        """Every client is bound to a model identity."""
        with pytest.raises(ValueError):
            EmbeddingClient(embeddings=HashEmbeddings(), model="")

    @pytest.mark.parametrize(("batch_size", "max_concurrency"), [(0, 1), (1, 0)])
    def test_init_should_reject_invalid_limits(self, batch_size: int, max_concurrency: int) -> None:
        """Batch size and concurrency must be positive."""
        with pytest.raises(ValueError):
            EmbeddingClient(
                embeddings=HashEmbeddings(),
                model=STUB_MODEL,
                batch_size=batch_size,
                max_concurrency=max_concurrency,
            )


class TestEmbedQuery:
    """Test suite for EmbeddingClient.embed_query."""

    def test_embed_query_should_return_provider_vector(self) -> None:
        """Query vectors pass through unchanged."""
        embeddings = HashEmbeddings()
        client = EmbeddingClient(embeddings=embeddings, model=STUB_MODEL)

        assert client.embed_query("valve") == embeddings.vector("valve")

    def test_embed_query_should_wrap_provider_failure(self) -> None:
        """Provider errors surface as EmbeddingServiceError."""
        client = EmbeddingClient(embeddings=FailingEmbeddings(), model=STUB_MODEL)

        with pytest.raises(EmbeddingServiceError) as exc_info:
            client.embed_query("FAIL")
        assert exc_info.value.details["operation"] == "embed_query"

    def test_embed_query_should_reject_empty_vector(self) -> None:
        """An empty vector is a provider failure."""
        embeddings = MagicMock()
        embeddings.embed_query.return_value = []
        client = EmbeddingClient(embeddings=embeddings, model=STUB_MODEL)

        with pytest.raises(EmbeddingServiceError):
            client.embed_query("valve")


class TestEmbedMany:
    """Test suite for EmbeddingClient.embed_many."""

    def test_embed_many_should_return_empty_list_without_calls(self) -> None:
        """No texts, no provider requests."""
        embeddings = HashEmbeddings()
        client = EmbeddingClient(embeddings=embeddings, model=STUB_MODEL)

        assert client.embed_many([]) == []
        assert embeddings.batches == []

    def test_embed_many_should_preserve_input_order(self) -> None:
        """vectors[i] embeds texts[i] although batches finish out of order."""
        # Arrange
        embeddings = HashEmbeddings()
        client = EmbeddingClient(embeddings=embeddings, model=STUB_MODEL, batch_size=3, max_concurrency=4)
        texts = [f"chunk {i}" for i in range(25)]

        # Act
        vectors = client.embed_many(texts)

        # Assert
        assert vectors == [embeddings.vector(text) for text in texts]

    def test_embed_many_should_split_into_batches(self) -> None:
        """Texts are sent in batches of at most batch_size."""
        # Arrange
        embeddings = HashEmbeddings()
        client = EmbeddingClient(embeddings=embeddings, model=STUB_MODEL, batch_size=4, max_concurrency=2)

        # Act
        client.embed_many([f"chunk {i}" for i in range(10)])

        # Assert
        assert sorted(len(batch) for batch in embeddings.batches) == [2, 4, 4]
        assert sorted(text for batch in embeddings.batches for text in batch) == sorted(
            f"chunk {i}" for i in range(10)
        )

    def test_embed_many_should_fail_when_any_batch_fails(self) -> None:
        """One failed batch fails the whole call."""
        client = EmbeddingClient(embeddings=FailingEmbeddings(), model=STUB_MODEL, batch_size=2)

        with pytest.raises(EmbeddingServiceError) as exc_info:
            client.embed_many(["a", "b", "c", "FAIL", "e"])
        assert exc_info.value.details["batch_start"] == 2

    def test_embed_many_should_reject_wrong_vector_count(self) -> None:
        """The provider must return one vector per text."""
        embeddings = MagicMock()
        embeddings.embed_documents.return_value = [[1.0, 0.0]]
        client = EmbeddingClient(embeddings=embeddings, model=STUB_MODEL)

        with pytest.raises(EmbeddingServiceError, match="wrong number"):
            client.embed_many(["a", "b"])

    def test_embed_many_should_reject_inconsistent_dimensions(self) -> None:
        """All vectors must share one dimensionality."""
        embeddings = MagicMock()
        embeddings.embed_documents.return_value = [[1.0, 0.0], [1.0]]
        client = EmbeddingClient(embeddings=embeddings, model=STUB_MODEL)

        with pytest.raises(EmbeddingServiceError, match="inconsistent"):
            client.embed_many(["a", "b"])
