"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from manual_assistant.configs.documents import DocumentSettings
from manual_assistant.configs.llm import LLMSettings
from manual_assistant.configs.retrieval import RetrievalSettings
from manual_assistant.configs.settings import (
    Settings,
    get_settings,
    load_settings,
    require_credentials,
)

__all__ = [
    "DocumentSettings",
    "LLMSettings",
    "RetrievalSettings",
    "Settings",
    "get_settings",
    "load_settings",
    "require_credentials",
]
