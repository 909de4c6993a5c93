"""
Retrieval module providing vector storage, similarity and search.
"""

from .retriever import Retriever
from .similarity import cosine_scores, cosine_similarity, rank
from .vector_store import VectorStore

__all__ = ["Retriever", "VectorStore", "cosine_scores", "cosine_similarity", "rank"]
