"""Chunk planning logic for determining chunk boundaries.

This module provides the ChunkPlanner class that turns a chunk specification
and the length of an index domain into an immutable ResolvedPlan, plus the
``resolve`` convenience function.
"""

from __future__ import annotations

from ..config import DEFAULT_FIRST_INDEX, DEFAULT_SPLIT
from ..core.enums import Split
from ..core.exceptions import ConfigurationError
from .definitions import ChunkSpec, ResolvedPlan
from .telemetry import log_plan_resolved, log_spec_rejected


class ChunkPlanner:
    """Plans chunk layouts for index domains.

    The planner holds one validated ChunkSpec and can resolve it against any
    number of domains. Planning is pure: the same inputs always yield equal
    plans.
    """

    def __init__(self, spec: ChunkSpec) -> None:
        """Initialize chunk planner.

        Args:
            spec: Validated chunk specification
        """
        self._spec = spec

    @property
    def spec(self) -> ChunkSpec:
        return self._spec

    def plan(self, length: int, *, first_index: int = DEFAULT_FIRST_INDEX) -> ResolvedPlan:
        """Resolve the chunk request against a domain.

        Args:
            length: Number of indices in the domain
            first_index: First index of the domain

        Returns:
            Resolved plan

        Raises:
            ConfigurationError: If length is negative or not an integer
        """
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            error = ConfigurationError(
                f"length must be a non-negative integer, got {length!r}",
                field="length",
                value=length,
            )
            log_spec_rejected(error=error)
            raise error

        if self._spec.size is not None:
            plan = self._plan_size_based(length, first_index, self._spec.size)
        else:
            plan = self._plan_count_based(length, first_index, self._spec.n)

        log_plan_resolved(plan=plan, requested_n=self._spec.n)
        return plan

    def _plan_size_based(self, length: int, first_index: int, size: int) -> ResolvedPlan:
        """Fixed-size chunks, the last one possibly shorter.

        An empty domain still yields a single (empty) chunk.
        """
        nchunks = max(1, -(-length // size))
        return ResolvedPlan(
            first_index=first_index,
            length=length,
            nchunks=nchunks,
            split=Split.CONSECUTIVE,
            base_size=size,
            remainder=0,
            chunk_size=size,
        )

    def _plan_count_based(self, length: int, first_index: int, n: int) -> ResolvedPlan:
        """Near-equal chunks, lengths differing by at most one.

        minsize only ever lowers the chunk count: the result is the largest
        count not above n for which every chunk holds at least minsize
        indices, or 1.
        """
        nchunks = min(n, max(length, 1))
        if self._spec.minsize is not None:
            nchunks = min(nchunks, max(1, length // self._spec.minsize))

        base_size, remainder = divmod(length, nchunks)
        return ResolvedPlan(
            first_index=first_index,
            length=length,
            nchunks=nchunks,
            split=self._spec.split,
            base_size=base_size,
            remainder=remainder,
        )


def resolve(
    length: int,
    *,
    n: int | None = None,
    size: int | None = None,
    split: Split | str = DEFAULT_SPLIT,
    minsize: int | None = None,
    first_index: int = DEFAULT_FIRST_INDEX,
) -> ResolvedPlan:
    """Resolve a chunk layout for ``length`` indices.

    Args:
        length: Number of indices to split
        n: Number of chunks (mutually exclusive with size)
        size: Indices per chunk (mutually exclusive with n)
        split: Split strategy, Split member or its string value
        minsize: Minimum chunk length, only together with n
        first_index: First index of the domain

    Returns:
        Resolved plan

    Raises:
        ConfigurationError: On invalid or conflicting arguments

    Examples:
        >>> plan = resolve(7, n=3)
        >>> [plan.chunk_range(k) for k in range(plan.nchunks)]
        [range(0, 3), range(3, 5), range(5, 7)]
    """
    try:
        spec = ChunkSpec(n=n, size=size, split=split, minsize=minsize)
    except ConfigurationError as error:
        log_spec_rejected(error=error)
        raise
    return ChunkPlanner(spec).plan(length, first_index=first_index)
