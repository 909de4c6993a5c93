"""
Unified application settings.

Aggregates all configuration modules into a single Settings class and
converts validation failures into ConfigurationError.

Dependencies: All config modules, manual_assistant.core.exceptions
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError

from manual_assistant.configs.base import BaseSettings
from manual_assistant.configs.documents import DocumentSettings
from manual_assistant.configs.llm import LLMSettings
from manual_assistant.configs.retrieval import RetrievalSettings
from manual_assistant.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    documents: DocumentSettings = Field(default_factory=DocumentSettings)


def load_settings(
    retrieval: dict[str, Any] | None = None,
    documents: dict[str, Any] | None = None,
    **base: Any,
) -> Settings:
    """
    Build settings from the environment with explicit overrides.

    Overrides take precedence over environment variables and .env values.

    Args:
        retrieval: Overrides for RetrievalSettings fields
        documents: Overrides for DocumentSettings fields
        **base: Overrides for top-level fields (log_level, debug, ...)

    Returns:
        Settings: Validated application settings

    Raises:
        ConfigurationError: When any setting is missing or invalid
    """
    try:
        return Settings(
            retrieval=RetrievalSettings(**(retrieval or {})),
            llm=LLMSettings(),
            documents=DocumentSettings(**(documents or {})),
            **base,
        )
    except ValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first.get("loc", ())) or e.title
        raise ConfigurationError(
            f"Invalid configuration for {e.title}: {first.get('msg')}",
            setting=setting,
            details={"error_count": e.error_count()},
        ) from e


def require_credentials(settings: Settings) -> str:
    """
    Return the provider API key or fail before any startup work.

    Args:
        settings: Loaded application settings

    Returns:
        str: The API key

    Raises:
        ConfigurationError: When the key is missing or blank
    """
    key = settings.llm.google_api_key
    if key is None or not key.get_secret_value().strip():
        raise ConfigurationError(
            "GOOGLE_API_KEY is not set; add it to the environment or .env file",
            setting="GOOGLE_API_KEY",
        )
    return key.get_secret_value()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables loaded once at first call.

    Returns:
        Settings: Application settings instance

    Usage:
        from manual_assistant.configs import get_settings
        settings = get_settings()
    """
    return load_settings()
