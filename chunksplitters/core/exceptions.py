"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class ChunkSplittersError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(ChunkSplittersError, ValueError):
    """Chunk specification is invalid or self-contradictory.

    Raised for mutually exclusive or missing ``n``/``size``, non-positive
    counts, unknown split strategies and unsupported combinations such as
    size-based round-robin chunking.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class ChunkIndexError(ChunkSplittersError, IndexError):
    """Chunk position is outside the resolved plan."""

    def __init__(self, message: str, index: int, nchunks: int) -> None:
        super().__init__(message)
        self.index = index
        self.nchunks = nchunks


class UnsupportedCollectionError(ChunkSplittersError, TypeError):
    """Collection lacks a capability required for chunking.

    ``capability`` is ``"index"`` when the collection cannot report its index
    bounds and ``"view"`` when it cannot be sliced into element views.
    """

    def __init__(
        self,
        message: str,
        collection_type: type | None = None,
        capability: str | None = None,
    ) -> None:
        super().__init__(message)
        self.collection_type = collection_type
        self.capability = capability
