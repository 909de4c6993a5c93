"""
Chat service for single-turn manual Q&A.

Orchestrates one question: retrieval, relevance gate, answering. Per-turn
failures are converted into a failed ChatTurn so the session continues.

Dependencies: manual_assistant.core.retrieval, manual_assistant.core.agentic_system
System role: Chat service orchestration layer
"""

import logging

from manual_assistant.core.agentic_system.agent import AnsweringAgent
from manual_assistant.core.exceptions import (
    AnsweringServiceError,
    EmbeddingServiceError,
    VectorStoreError,
)
from manual_assistant.core.retrieval import Retriever
from manual_assistant.models.chat import ChatTurn, TurnStatus
from manual_assistant.observability import log_exception_with_context

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "Please ask a valid or related question based on the manuals."
RETRIEVAL_FAILED_MESSAGE = "Sorry, I could not search the manuals right now. Please try again."
ANSWER_FAILED_MESSAGE = "Sorry, I could not generate an answer right now. Please try again."


class ChatService:
    """
    Chat service for manual questions.

    Holds no conversation state: every question is answered independently
    from the read-only vector store.
    """

    def __init__(self, retriever: Retriever, answering_agent: AnsweringAgent) -> None:
        """
        Initialize chat service.

        Args:
            retriever: Retriever over the manual vector store
            answering_agent: Agent that answers from retrieved context
        """
        self.retriever = retriever
        self.answering_agent = answering_agent

    def ask(self, question: str) -> ChatTurn:
        """
        Process one question through retrieval and answering.

        Flow:
        1. Retrieve relevant chunks
        2. Return a no-match turn when nothing clears the threshold
        3. Answer from the joined context and the verbatim question

        Args:
            question: User's question

        Returns:
            ChatTurn: Answered, no-match or failed outcome
        """
        try:
            retrieved = self.retriever.search(question)
        except (EmbeddingServiceError, VectorStoreError) as e:
            log_exception_with_context(logger, f"{__name__}:ask - Retrieval failed", e)
            return ChatTurn(
                status=TurnStatus.FAILED,
                question=question,
                message=RETRIEVAL_FAILED_MESSAGE,
            )

        # Whitespace-only chunks can clear the gate when labels are disabled
        if retrieved is None or not retrieved.context.strip():
            return ChatTurn(
                status=TurnStatus.NO_MATCH,
                question=question,
                message=NO_MATCH_MESSAGE,
            )

        try:
            answer = self.answering_agent.answer(retrieved.context, question)
        except AnsweringServiceError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:ask - Answering failed",
                e,
                matched_chunks=len(retrieved.matches),
            )
            return ChatTurn(
                status=TurnStatus.FAILED,
                question=question,
                message=ANSWER_FAILED_MESSAGE,
                matches=retrieved.matches,
            )

        return ChatTurn(
            status=TurnStatus.ANSWERED,
            question=question,
            answer=answer,
            matches=retrieved.matches,
        )
