"""
Manual indexing tasks.

Exports: ChunkingTask, ParsingTask, split_text
"""

from .chunking_task import ChunkingTask, chunk_offsets, split_text
from .parsing_task import ParsingTask

__all__ = ["ChunkingTask", "ParsingTask", "chunk_offsets", "split_text"]
