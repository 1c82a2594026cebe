"""Core components."""

from .capabilities import (
    Chunkable,
    SliceableChunkable,
    chunk_bounds,
    first_index,
    is_chunkable,
    last_index,
    register_chunkable,
)
from .enums import Consecutive, RoundRobin, Split
from .exceptions import (
    ChunkIndexError,
    ChunkSplittersError,
    ConfigurationError,
    UnsupportedCollectionError,
)

__all__ = [
    "Split",
    "Consecutive",
    "RoundRobin",
    "ChunkSplittersError",
    "ConfigurationError",
    "ChunkIndexError",
    "UnsupportedCollectionError",
    "Chunkable",
    "SliceableChunkable",
    "is_chunkable",
    "first_index",
    "last_index",
    "register_chunkable",
    "chunk_bounds",
]
