"""
Retrieval configuration settings.

Chunking, embedding batch and relevance gate parameters for the
in-memory vector search.

Dependencies: pydantic, pydantic_settings
System role: Retrieval configuration for chunking and similarity search
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Chunking and similarity search configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=1000, gt=0, description="Maximum chunk size in characters")
    chunk_overlap: int = Field(
        default=200,
        gt=0,
        description="Overlap between consecutive chunks in characters",
    )
    label_chunks: bool = Field(
        default=True,
        description="Prefix each chunk with its manual label before embedding",
    )

    # No default: the value is corpus and embedding-model dependent
    similarity_threshold: float = Field(
        ...,
        ge=-1.0,
        le=1.0,
        description="Minimum cosine similarity of the best match (-1.0 to 1.0)",
    )
    top_k: int = Field(default=3, ge=1, description="Number of chunks passed to the model")

    embedding_batch_size: int = Field(
        default=32,
        ge=1,
        description="Texts per embedding request during indexing",
    )
    embedding_max_concurrency: int = Field(
        default=4,
        ge=1,
        description="Maximum embedding requests in flight during indexing",
    )

    @model_validator(mode="after")
    def _validate_overlap(self) -> "RetrievalSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self
