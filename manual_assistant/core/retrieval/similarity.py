"""
Cosine similarity and deterministic ranking.

Zero-magnitude vectors have no defined direction; they score -inf so they
rank last and never pass a relevance gate.

Dependencies: numpy
System role: Vector math for flat nearest-neighbor search
"""

from collections.abc import Sequence

import numpy as np

from manual_assistant.models.retrieval import ScoredMatch

UNDEFINED_SIMILARITY = float("-inf")


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity of two vectors.

    Args:
        a: First vector
        b: Second vector of the same dimensionality

    Returns:
        float: dot(a, b) / (|a| * |b|) in [-1, 1], or -inf when undefined (zero or NaN)

    Raises:
        ValueError: When the vectors are not 1-D or differ in length
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    if va.ndim != 1 or va.shape != vb.shape:
        raise ValueError(f"Vectors must be 1-D and equal length, got {va.shape} and {vb.shape}")

    norm = np.linalg.norm(va) * np.linalg.norm(vb)
    if norm == 0:
        return UNDEFINED_SIMILARITY
    score = float(np.clip(np.dot(va, vb) / norm, -1.0, 1.0))
    if np.isnan(score):
        return UNDEFINED_SIMILARITY
    return score


def cosine_scores(query: Sequence[float], matrix: np.ndarray) -> np.ndarray:
    """
    Cosine similarity of a query against every row of a matrix.

    Args:
        query: Query vector of dimension d
        matrix: Array of shape (n, d)

    Returns:
        np.ndarray: n scores; rows or queries with zero magnitude score -inf

    Raises:
        ValueError: When the query dimension does not match the matrix
    """
    q = np.asarray(query, dtype=np.float64)
    if matrix.shape[0] == 0:
        return np.empty(0, dtype=np.float64)
    if q.ndim != 1 or matrix.ndim != 2 or q.shape[0] != matrix.shape[1]:
        raise ValueError(f"Query shape {q.shape} does not match matrix shape {matrix.shape}")

    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(q)
    dots = matrix @ q

    scores = np.full(matrix.shape[0], UNDEFINED_SIMILARITY, dtype=np.float64)
    valid = norms > 0
    scores[valid] = np.clip(dots[valid] / norms[valid], -1.0, 1.0)
    scores[np.isnan(scores)] = UNDEFINED_SIMILARITY
    return scores


def rank(scores: np.ndarray) -> list[ScoredMatch]:
    """
    Order scores descending, ties broken by ascending index.

    Args:
        scores: One score per stored vector

    Returns:
        list[ScoredMatch]: Every index, best first
    """
    order = np.argsort(-scores, kind="stable")
    return [ScoredMatch(index=int(i), score=float(scores[i])) for i in order]
