"""
Domain models.

Exports: Chunk, DocumentSource, ScoredMatch, RetrievedChunk, RetrievedContext, ChatTurn, TurnStatus
"""

from manual_assistant.models.chat import ChatTurn, TurnStatus
from manual_assistant.models.chunk import Chunk, DocumentSource
from manual_assistant.models.retrieval import (
    CONTEXT_SEPARATOR,
    RetrievedChunk,
    RetrievedContext,
    ScoredMatch,
)

__all__ = [
    "CONTEXT_SEPARATOR",
    "ChatTurn",
    "Chunk",
    "DocumentSource",
    "RetrievedChunk",
    "RetrievedContext",
    "ScoredMatch",
    "TurnStatus",
]
