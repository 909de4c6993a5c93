from manual_assistant.core.agentic_system.agent.answer_prompt import (
    ANSWER_PROMPT,
    REFUSAL_MESSAGE,
)
from manual_assistant.core.agentic_system.agent.answering_agent import AnsweringAgent

__all__ = ["ANSWER_PROMPT", "AnsweringAgent", "REFUSAL_MESSAGE"]
