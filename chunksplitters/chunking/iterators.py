"""Index chunk iterator.

``IndexChunks`` exposes a ResolvedPlan as a read-only sequence of ``range``
objects. It keeps no cursor: every lookup is computed from the plan, so the
sequence can be traversed any number of times, indexed at random and shared
between threads without locking.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import overload

from ..core.enums import Split
from .definitions import ResolvedPlan


class IndexChunks(Sequence[range]):
    """Sequence of index ranges, one per chunk.

    Example:
        >>> ic = IndexChunks(resolve(7, n=3, split=Split.ROUND_ROBIN))
        >>> list(ic)
        [range(0, 7, 3), range(1, 7, 3), range(2, 7, 3)]
    """

    __slots__ = ("_plan",)

    def __init__(self, plan: ResolvedPlan) -> None:
        self._plan = plan

    @property
    def plan(self) -> ResolvedPlan:
        return self._plan

    @property
    def split(self) -> Split:
        return self._plan.split

    def __len__(self) -> int:
        return self._plan.nchunks

    @overload
    def __getitem__(self, ichunk: int) -> range: ...

    @overload
    def __getitem__(self, ichunk: slice) -> Sequence[range]: ...

    def __getitem__(self, ichunk: int | slice) -> range | Sequence[range]:
        if isinstance(ichunk, slice):
            return [self._plan.chunk_range(k) for k in range(self._plan.nchunks)[ichunk]]
        if isinstance(ichunk, bool) or not isinstance(ichunk, int):
            raise TypeError(f"chunk index must be an integer, got {type(ichunk).__name__}")
        return self._plan.chunk_range(ichunk)

    def __iter__(self) -> Iterator[range]:
        plan = self._plan
        for k in range(plan.nchunks):
            yield plan.chunk_range(k)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexChunks):
            return NotImplemented
        return self._plan == other._plan

    def __hash__(self) -> int:
        return hash(self._plan)

    def __repr__(self) -> str:
        return (
            f"IndexChunks(length={self._plan.length}, nchunks={self._plan.nchunks}, "
            f"split={self._plan.split.value!r})"
        )
