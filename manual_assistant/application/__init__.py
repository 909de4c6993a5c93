"""
Application services.

Exports: ChatService
"""

from manual_assistant.application.chat_service import ChatService, NO_MATCH_MESSAGE

__all__ = ["ChatService", "NO_MATCH_MESSAGE"]
