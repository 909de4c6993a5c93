"""
Console interface.

Exports: ChatLoop
"""

from manual_assistant.cli.chat_loop import ChatLoop

__all__ = ["ChatLoop"]
