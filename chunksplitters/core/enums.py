"""Core enumerations.

Key Types:
    - Split: Strategy used to distribute indices among chunks

Design Decisions:
    - String enum: Strategies compare equal to their names, so callers may
      pass either ``Split.ROUND_ROBIN`` or ``"round_robin"``
"""

from __future__ import annotations

from enum import Enum


class Split(str, Enum):
    """Distribution of indices among chunks.

    CONSECUTIVE fills every chunk with adjacent indices, chunk sizes differing
    by at most one. ROUND_ROBIN deals indices out cyclically: the first index
    goes to the first chunk, the second to the second chunk and so on, which
    spreads uneven per-item workloads across all chunks.
    """

    CONSECUTIVE = "consecutive"
    ROUND_ROBIN = "round_robin"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def is_strided(self) -> bool:
        """Whether chunks of this strategy are strided ranges."""
        return self is Split.ROUND_ROBIN

    @classmethod
    def from_str(cls, value: str) -> Split | None:
        """Get strategy from string value. Returns None if no match."""
        normalized = value.strip().lower().replace("-", "_")
        if normalized == "roundrobin":
            normalized = cls.ROUND_ROBIN.value
        try:
            return cls(normalized)
        except ValueError:
            return None


Consecutive = Split.CONSECUTIVE
RoundRobin = Split.ROUND_ROBIN
