"""
Manual Assistant entry point.

Validates configuration, indexes the manuals, then starts the chat loop.
Startup failures end the process with status 1 before any question is read.

Usage:
    python -m manual_assistant
    python -m manual_assistant --threshold 0.6 --show-matches

Dependencies: argparse, rich, all application layers
System role: Application initialization and wiring
"""

import argparse
import logging

from rich.console import Console
from rich.markup import escape

from manual_assistant.application import ChatService
from manual_assistant.boundary.providers import create_chat_model, create_embedding_client
from manual_assistant.cli import ChatLoop
from manual_assistant.configs import Settings, load_settings, require_credentials
from manual_assistant.core.agentic_system.agent import AnsweringAgent
from manual_assistant.core.document_processing import VectorStoreBuilder
from manual_assistant.core.exceptions import ConfigurationError, ManualAssistantException
from manual_assistant.core.retrieval import Retriever
from manual_assistant.observability import configure_logging, log_exception_with_context

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line overrides for the most commonly tuned settings."""
    parser = argparse.ArgumentParser(
        prog="manual-assistant",
        description="Ask questions about the user and operator manuals.",
    )
    parser.add_argument("--user-manual", help="Path to the user manual PDF")
    parser.add_argument("--operator-manual", help="Path to the operator manual PDF")
    parser.add_argument(
        "--threshold",
        type=float,
        help="Minimum cosine similarity of the best match (overrides RETRIEVAL_SIMILARITY_THRESHOLD)",
    )
    parser.add_argument("--top-k", type=int, help="Number of excerpts passed to the model")
    parser.add_argument(
        "--show-matches",
        action="store_true",
        help="Print the matched excerpts and their scores",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    retrieval = {
        key: value
        for key, value in {"similarity_threshold": args.threshold, "top_k": args.top_k}.items()
        if value is not None
    }
    documents = {
        key: value
        for key, value in {
            "user_manual_path": args.user_manual,
            "operator_manual_path": args.operator_manual,
        }.items()
        if value is not None
    }
    base = {"log_level": args.log_level} if args.log_level else {}
    return load_settings(retrieval=retrieval, documents=documents, **base)


def build_chat_service(settings: Settings, api_key: str, console: Console) -> ChatService:
    """
    Create providers, index the manuals and wire the chat service.

    Args:
        settings: Validated settings
        api_key: Provider API key
        console: Console used for the indexing status spinner

    Returns:
        ChatService: Ready to answer questions

    Raises:
        ConfigurationError: Providers could not be created
        DocumentReadError: A manual could not be read
        EmbeddingServiceError: Indexing failed
        VectorStoreError: Embeddings could not be aligned with chunks
    """
    try:
        embedding_client = create_embedding_client(settings, api_key)
        chat_model = create_chat_model(settings, api_key)
    except Exception as e:
        raise ConfigurationError(f"Could not create model providers: {e}", setting="llm") from e

    builder = VectorStoreBuilder.from_settings(settings.retrieval, embedding_client)
    with console.status("Indexing manuals..."):
        store = builder.build(settings.documents.sources)
    console.print(f"Loaded {len(store)} chunks into memory.")

    retriever = Retriever(
        store=store,
        embedding_client=embedding_client,
        similarity_threshold=settings.retrieval.similarity_threshold,
        top_k=settings.retrieval.top_k,
    )
    return ChatService(retriever=retriever, answering_agent=AnsweringAgent(chat_model))


def main(argv: list[str] | None = None) -> int:
    """
    Run the manual assistant.

    Args:
        argv: Command-line arguments (sys.argv[1:] when None)

    Returns:
        int: 0 on normal exit, 1 on startup failure
    """
    args = build_parser().parse_args(argv)
    console = Console()
    error_console = Console(stderr=True)

    try:
        settings = _settings_from_args(args)
        api_key = require_credentials(settings)
    except ConfigurationError as e:
        error_console.print(f"Configuration error: {escape(str(e))}", style="bold red")
        return 1

    configure_logging(settings.effective_log_level)
    logger.info(f"{__name__}:main - Starting (environment={settings.environment})")

    try:
        chat_service = build_chat_service(settings, api_key, console)
    except ManualAssistantException as e:
        log_exception_with_context(logger, f"{__name__}:main - Startup failed", e)
        error_console.print(f"Startup failed: {escape(e.message)}", style="bold red")
        return 1

    return ChatLoop(chat_service, console=console, show_matches=args.show_matches).run()
