"""
Source document configuration settings.

Paths and labels of the manuals indexed at startup.

Dependencies: pydantic_settings, manual_assistant.models.chunk
System role: Document source configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from manual_assistant.models.chunk import DocumentSource


class DocumentSettings(BaseSettings):
    """Manual locations and their provenance labels."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MANUALS_",
        case_sensitive=False,
        extra="ignore",
    )

    user_manual_path: str = Field(default="user_manual.pdf", description="User manual PDF")
    user_manual_label: str = Field(default="USER", description="Label for user manual chunks")
    operator_manual_path: str = Field(
        default="operator_manual.pdf",
        description="Operator manual PDF",
    )
    operator_manual_label: str = Field(
        default="OPERATOR",
        description="Label for operator manual chunks",
    )

    @property
    def sources(self) -> list[DocumentSource]:
        """
        Manuals in indexing order.

        Returns:
            list[DocumentSource]: User manual first, then operator manual
        """
        return [
            DocumentSource(path=self.user_manual_path, label=self.user_manual_label),
            DocumentSource(path=self.operator_manual_path, label=self.operator_manual_label),
        ]
