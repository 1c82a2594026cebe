"""Collection-level chunking API.

These functions combine the capability contract with the planner: they read
the collection's index bounds, resolve a plan and wrap it in the requested
iterator.

Example:
    >>> from chunksplitters import chunks, index_chunks
    >>> x = [1.2, 3.4, 5.6, 7.8, 9.1, 10.11, 11.12]
    >>> list(index_chunks(x, n=3))
    [range(0, 3), range(3, 5), range(5, 7)]
    >>> [list(c) for c in chunks(x, n=3, split="round_robin")]
    [[1.2, 7.8, 11.12], [3.4, 9.1], [5.6, 10.11]]
"""

from __future__ import annotations

from typing import Any

from .chunking.iterators import IndexChunks
from .chunking.planners import resolve
from .chunking.views import Chunks
from .config import DEFAULT_SPLIT
from .core.capabilities import chunk_bounds
from .core.enums import Split


def index_chunks(
    collection: Any,
    *,
    n: int | None = None,
    size: int | None = None,
    split: Split | str = DEFAULT_SPLIT,
    minsize: int | None = None,
) -> IndexChunks:
    """Split the indices of ``collection`` into chunks.

    Args:
        collection: Chunkable collection (any Sequence, memoryview, Chunkable
            subclass or registered type)
        n: Number of chunks (mutually exclusive with size)
        size: Indices per chunk (mutually exclusive with n)
        split: Split.CONSECUTIVE (default) or Split.ROUND_ROBIN
        minsize: Minimum chunk length, lowers n when chunks would be smaller

    Returns:
        Sequence of index ranges in the collection's own index domain

    Raises:
        UnsupportedCollectionError: If the collection is not chunkable
        ConfigurationError: On invalid or conflicting arguments
    """
    first, length = chunk_bounds(collection)
    plan = resolve(length, n=n, size=size, split=split, minsize=minsize, first_index=first)
    return IndexChunks(plan)


def chunks(
    collection: Any,
    *,
    n: int | None = None,
    size: int | None = None,
    split: Split | str = DEFAULT_SPLIT,
    minsize: int | None = None,
) -> Chunks:
    """Split the elements of ``collection`` into chunks of read-only views.

    Takes the same arguments as ``index_chunks``. The collection must also
    support element views (see ``view_of``).

    Raises:
        UnsupportedCollectionError: If the collection is not chunkable or
            cannot produce views
        ConfigurationError: On invalid or conflicting arguments
    """
    return Chunks(
        collection,
        index_chunks(collection, n=n, size=size, split=split, minsize=minsize),
    )


def getchunk(
    collection: Any,
    ichunk: int,
    *,
    n: int | None = None,
    size: int | None = None,
    split: Split | str = DEFAULT_SPLIT,
    minsize: int | None = None,
) -> range:
    """Index range of chunk ``ichunk`` (zero-based) of ``collection``.

    Raises:
        ChunkIndexError: If ichunk is outside the resolved number of chunks
        UnsupportedCollectionError: If the collection is not chunkable
        ConfigurationError: On invalid or conflicting arguments

    Example:
        >>> getchunk(range(7), 1, n=3, split="round_robin")
        range(1, 7, 3)
    """
    return index_chunks(collection, n=n, size=size, split=split, minsize=minsize)[ichunk]
