"""
Chunk domain model.

Represents a labeled slice of extracted manual text.

Dependencies: pydantic
System role: Document chunk data structure
"""

from pydantic import BaseModel, ConfigDict, Field


class DocumentSource(BaseModel):
    """A manual to index and the label its chunks carry."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Path to the PDF file")
    label: str = Field(description="Provenance label, e.g. USER or OPERATOR")


class Chunk(BaseModel):
    """Immutable slice of a manual's text."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Raw chunk text, at most chunk_size characters")
    source_label: str | None = Field(default=None, description="Manual label prefix")
    start_index: int = Field(default=0, ge=0, description="Offset in the extracted text")
    source: str = Field(default="", description="Path of the source document")

    @property
    def content(self) -> str:
        """Text as embedded and shown to the model, label-prefixed when labeled."""
        if self.source_label:
            return f"{self.source_label}: {self.text}"
        return self.text
