"""
Manual answering agent.

Issues a single completion call that answers a question strictly from the
retrieved manual excerpts.

Dependencies: langchain_core, manual_assistant.core.exceptions
System role: Answer generation over retrieved context
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate

from manual_assistant.core.agentic_system.agent.answer_prompt import ANSWER_PROMPT
from manual_assistant.core.exceptions import AnsweringServiceError

logger = logging.getLogger(__name__)


class AnsweringAgent:
    """
    Context-constrained question answering.

    The prompt forbids knowledge outside the context and fixes the refusal
    reply, so the agent never decides relevance itself.
    """

    def __init__(
        self,
        model: BaseChatModel,
        prompt: ChatPromptTemplate = ANSWER_PROMPT,
    ) -> None:
        """
        Initialize answering agent.

        Args:
            model: LangChain chat model (configured with a low temperature)
            prompt: Template with {context} and {question} variables
        """
        self._model = model
        self._prompt = prompt

    def answer(self, context: str, question: str) -> str:
        """
        Answer a question from manual excerpts.

        Args:
            context: Retrieved manual excerpts
            question: Verbatim user question

        Returns:
            str: Model answer, stripped

        Raises:
            ValueError: When context is empty
            AnsweringServiceError: When the model call fails
        """
        if not context.strip():
            raise ValueError("context cannot be empty")

        messages = self._prompt.invoke({
            "context": context,
            "question": question,
        }).to_messages()

        logger.info(
            f"{__name__}:answer - Invoking model, context_len={len(context)}, "
            f"question_len={len(question)}"
        )
        try:
            response = self._model.invoke(messages)
        except Exception as e:
            raise AnsweringServiceError(
                f"Completion request failed: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        return _message_text(response.content).strip()


def _message_text(content: str | list) -> str:
    # Some providers return a list of content blocks instead of a string
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)
