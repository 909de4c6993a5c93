"""
Google Generative AI provider factory.

Creates the LangChain embedding and chat model instances from settings.

Dependencies: langchain_google_genai, manual_assistant.configs
System role: External model provider construction
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from manual_assistant.boundary.embeddings import EmbeddingClient
from manual_assistant.configs import Settings

logger = logging.getLogger(__name__)


def create_embedding_client(settings: Settings, api_key: str) -> EmbeddingClient:
    """
    Build the embedding client used for indexing and queries.

    Args:
        settings: Application settings
        api_key: Google API key

    Returns:
        EmbeddingClient: Client bound to the configured embedding model
    """
    embeddings = GoogleGenerativeAIEmbeddings(
        model=settings.llm.embedding_model,
        google_api_key=api_key,
    )
    logger.info(f"{__name__}:create_embedding_client - model={settings.llm.embedding_model}")
    return EmbeddingClient(
        embeddings=embeddings,
        model=settings.llm.embedding_model,
        batch_size=settings.retrieval.embedding_batch_size,
        max_concurrency=settings.retrieval.embedding_max_concurrency,
    )


def create_chat_model(settings: Settings, api_key: str) -> ChatGoogleGenerativeAI:
    """
    Build the chat model used to answer questions.

    Args:
        settings: Application settings
        api_key: Google API key

    Returns:
        ChatGoogleGenerativeAI: Low-temperature chat model
    """
    logger.info(
        f"{__name__}:create_chat_model - model={settings.llm.chat_model}, "
        f"temperature={settings.llm.temperature}"
    )
    return ChatGoogleGenerativeAI(
        model=settings.llm.chat_model,
        temperature=settings.llm.temperature,
        google_api_key=api_key,
    )
