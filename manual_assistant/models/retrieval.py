"""
Retrieval result models.

Scored matches and the ranked context handed to the answering agent.

Dependencies: pydantic, manual_assistant.models.chunk
System role: Retrieval data contracts
"""

from pydantic import BaseModel, Field

from manual_assistant.models.chunk import Chunk

CONTEXT_SEPARATOR = "\n\n"


class ScoredMatch(BaseModel):
    """Similarity of one stored vector to the query."""

    index: int = Field(ge=0, description="Position in the vector store")
    score: float = Field(description="Cosine similarity, -inf when undefined")


class RetrievedChunk(BaseModel):
    """A ranked chunk returned by the retriever."""

    index: int = Field(ge=0, description="Position in the vector store")
    score: float = Field(description="Cosine similarity to the query")
    chunk: Chunk


class RetrievedContext(BaseModel):
    """Top-k chunks that passed the relevance gate, most relevant first."""

    matches: list[RetrievedChunk] = Field(min_length=1)
    separator: str = Field(default=CONTEXT_SEPARATOR)

    @property
    def texts(self) -> list[str]:
        """Chunk contents in rank order."""
        return [match.chunk.content for match in self.matches]

    @property
    def context(self) -> str:
        """Chunk contents joined for the prompt."""
        return self.separator.join(self.texts)

    @property
    def best_score(self) -> float:
        """Score of the top-ranked chunk."""
        return self.matches[0].score
