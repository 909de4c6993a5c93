"""
Fixed-size overlapping text chunking.

Splits extracted manual text into character windows that overlap by a
fixed amount. No whitespace or sentence awareness: boundaries may split words.

Dependencies: manual_assistant.models.chunk
System role: Second stage of manual indexing
"""

from manual_assistant.models.chunk import Chunk


def chunk_offsets(length: int, chunk_size: int, chunk_overlap: int) -> range:
    """
    Start offsets of every chunk for a text of the given length.

    Args:
        length: Text length in characters
        chunk_size: Maximum chunk size in characters
        chunk_overlap: Characters shared by consecutive chunks

    Returns:
        range: 0, step, 2*step, ... while below length

    Raises:
        ValueError: When the overlap is not strictly between 0 and chunk_size
    """
    if not 0 < chunk_overlap < chunk_size:
        raise ValueError(
            f"chunk_overlap must satisfy 0 < chunk_overlap < chunk_size, "
            f"got chunk_size={chunk_size}, chunk_overlap={chunk_overlap}"
        )
    return range(0, length, chunk_size - chunk_overlap)


def split_text(text: str, chunk_size: int, chunk_overlap: int) -> list[str]:
    """
    Split text into overlapping substrings.

    Args:
        text: Raw document text
        chunk_size: Maximum chunk size in characters
        chunk_overlap: Characters shared by consecutive chunks

    Returns:
        list[str]: Chunks in document order; empty for empty text
    """
    return [
        text[start:start + chunk_size]
        for start in chunk_offsets(len(text), chunk_size, chunk_overlap)
    ]


class ChunkingTask:
    """Split a manual's text into labeled chunks."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        label_chunks: bool = True,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            label_chunks: Attach the document label to each chunk

        Raises:
            ValueError: When the overlap is not strictly between 0 and chunk_size
        """
        chunk_offsets(0, chunk_size, chunk_overlap)
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._label_chunks = label_chunks

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._chunk_overlap

    def chunk(self, text: str, source: str = "", label: str | None = None) -> list[Chunk]:
        """
        Split document text into chunks.

        Args:
            text: Extracted document text
            source: Path of the document, kept for provenance
            label: Manual label (USER, OPERATOR, ...)

        Returns:
            list[Chunk]: Chunks in document order
        """
        source_label = label if self._label_chunks else None
        return [
            Chunk(
                text=text[start:start + self._chunk_size],
                source_label=source_label,
                start_index=start,
                source=source,
            )
            for start in chunk_offsets(len(text), self._chunk_size, self._chunk_overlap)
        ]
