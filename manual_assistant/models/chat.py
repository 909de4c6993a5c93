"""
Chat domain models.

Outcome of a single question processed by the chat service.

Dependencies: pydantic
System role: Chat turn contract between service and console
"""

from enum import Enum

from pydantic import BaseModel, Field

from manual_assistant.models.retrieval import RetrievedChunk


class TurnStatus(str, Enum):
    """How a chat turn ended."""

    ANSWERED = "answered"
    NO_MATCH = "no_match"
    FAILED = "failed"


class ChatTurn(BaseModel):
    """Result of one question."""

    status: TurnStatus
    question: str = Field(description="Verbatim user question")
    answer: str | None = Field(default=None, description="Model answer when answered")
    message: str | None = Field(default=None, description="User-facing text for non-answers")
    matches: list[RetrievedChunk] = Field(default_factory=list)

    @property
    def answered(self) -> bool:
        return self.status is TurnStatus.ANSWERED
