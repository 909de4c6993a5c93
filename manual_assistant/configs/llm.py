"""
Language model configuration settings.

Credential and model identifiers for the embedding and completion providers.

Dependencies: pydantic, pydantic_settings
System role: Model provider configuration
"""

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Google Gemini provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    google_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "LLM_GOOGLE_API_KEY"),
        description="Google Generative AI API key",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID used for both indexing and queries",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model ID used to answer questions",
    )
    temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Completion temperature (low values favor faithfulness)",
    )
