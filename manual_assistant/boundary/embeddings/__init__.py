"""
Embedding boundary.

Exports: EmbeddingClient
"""

from manual_assistant.boundary.embeddings.embedding_client import EmbeddingClient

__all__ = ["EmbeddingClient"]
