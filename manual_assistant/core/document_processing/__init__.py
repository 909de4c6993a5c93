"""
Manual indexing pipeline.

Exports: VectorStoreBuilder, ChunkingTask, ParsingTask
"""

from .entrypoint import VectorStoreBuilder
from .tasks import ChunkingTask, ParsingTask

__all__ = ["ChunkingTask", "ParsingTask", "VectorStoreBuilder"]
