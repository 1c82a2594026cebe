"""ChunkSplitters - split collections into index or element chunks for parallel work."""

from .api import chunks, getchunk, index_chunks
from .chunking import (
    ChunkPlanner,
    Chunks,
    ChunkSpec,
    ElementChunk,
    IndexChunks,
    ResolvedPlan,
    resolve,
    supports_views,
    view_of,
)
from .core import (
    ChunkIndexError,
    Chunkable,
    ChunkSplittersError,
    ConfigurationError,
    Consecutive,
    RoundRobin,
    SliceableChunkable,
    Split,
    UnsupportedCollectionError,
    first_index,
    is_chunkable,
    last_index,
    register_chunkable,
)

__version__ = "0.1.0"

__all__ = [
    # API
    "index_chunks",
    "chunks",
    "getchunk",
    "resolve",
    # Chunking
    "ChunkSpec",
    "ResolvedPlan",
    "ChunkPlanner",
    "IndexChunks",
    "ElementChunk",
    "Chunks",
    "view_of",
    "supports_views",
    # Split strategies
    "Split",
    "Consecutive",
    "RoundRobin",
    # Capabilities
    "Chunkable",
    "SliceableChunkable",
    "is_chunkable",
    "first_index",
    "last_index",
    "register_chunkable",
    # Exceptions
    "ChunkSplittersError",
    "ConfigurationError",
    "ChunkIndexError",
    "UnsupportedCollectionError",
]
