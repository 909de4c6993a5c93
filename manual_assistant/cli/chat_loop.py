"""
Interactive console chat loop.

Reads one question per line, dispatches it to the chat service and prints
the outcome in color until the user types exit.

Dependencies: rich, manual_assistant.application
System role: Console driver for the manual assistant
"""

import logging
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from manual_assistant.application.chat_service import ChatService
from manual_assistant.models.chat import ChatTurn, TurnStatus

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
PROMPT = "\n[bold bright_blue]You:[/bold bright_blue] "
WELCOME = "\n Welcome to the Manual Assistant!"
INSTRUCTIONS = ' Ask questions related to the manuals. Type "exit" to quit.\n'
FAREWELL = "\n Consultant: Thank you! Have a productive day!\n"


class ChatLoop:
    """Read-eval-print loop over the chat service."""

    def __init__(
        self,
        chat_service: ChatService,
        console: Console | None = None,
        show_matches: bool = False,
        input_stream: TextIO | None = None,
    ) -> None:
        """
        Initialize chat loop.

        Args:
            chat_service: Service that answers each question
            console: Rich console for output (stdout by default)
            show_matches: Print matched chunks and their scores
            input_stream: Read lines from this stream instead of the terminal
        """
        self._chat_service = chat_service
        self._console = console or Console()
        self._show_matches = show_matches
        self._input_stream = input_stream

    def run(self) -> int:
        """
        Run the loop until exit or end of input.

        Returns:
            int: Process exit status (0)
        """
        self._console.print(WELCOME, style="bold green")
        self._console.print(INSTRUCTIONS, style="green")

        while True:
            try:
                line = self._read_line()
            except (EOFError, KeyboardInterrupt):
                self._console.print(FAREWELL, style="green")
                return 0

            question = line.strip()
            if not question:
                continue

            if question.lower() == EXIT_COMMAND:
                self._console.print(FAREWELL, style="green")
                return 0

            turn = self._chat_service.ask(question)
            self._render(turn)

    def _read_line(self) -> str:
        if self._input_stream is None:
            return self._console.input(PROMPT)

        line = self._console.input(PROMPT, stream=self._input_stream)
        if line == "":
            raise EOFError
        return line

    def _render(self, turn: ChatTurn) -> None:
        if self._show_matches:
            for match in turn.matches:
                self._console.print(
                    f"\n Matched Chunk ({match.score:.3f}):\n{escape(match.chunk.content)}\n",
                    style="dim",
                )

        if turn.status is TurnStatus.ANSWERED:
            self._console.print(
                f"\n[bright_cyan]Consultant:[/bright_cyan] [bright_white]{escape(turn.answer or '')}[/bright_white]"
            )
        elif turn.status is TurnStatus.NO_MATCH:
            self._console.print(f"\n Consultant: {escape(turn.message or '')}", style="yellow")
        else:
            self._console.print(f"\n Consultant: {escape(turn.message or '')}", style="red")
