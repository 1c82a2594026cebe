"""Capability contract for chunkable collections.

Architecture:
    A collection is chunkable when its type can report a first index, a last
    index and a length. Element chunking additionally requires the type to
    produce views for contiguous and strided index ranges (see
    ``chunking.views.view_of``).

    The contract is resolved per type, never by probing attributes:
    - Chunkable ABC: user types declare the capability by inheritance
    - singledispatch functions: built-in and third-party types are registered
      once, and lookups dispatch on the type

Design Decisions:
    - Built-in sequences are chunkable out of the box with first index 0
    - Index domain is preserved: a collection indexed from 1 (or any offset)
      yields chunks expressed in its own indices
    - Subclasses are registered under their exact type, so a Chunkable that
      is also a Sequence keeps its declared bounds and view
    - Inconsistent bounds are rejected up front, so the planner can trust
      ``last - first + 1 == len``

See Also:
    - register_chunkable: Opt-in for types that cannot subclass Chunkable
    - chunking.views.view_of: Element view capability
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from functools import singledispatch
from typing import Any

from .exceptions import UnsupportedCollectionError


class Chunkable(ABC):
    """Abstract base class for linearly indexable collections.

    Subclasses expose a contiguous index domain ``first_index()`` ..
    ``last_index()`` holding ``len(self)`` positions.

    Every subclass is registered under its exact type, so the declared bounds
    win over other bases such as ``collections.abc.Sequence``.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _register_bounds(cls, _declared_first_index, _declared_last_index)

    @abstractmethod
    def first_index(self) -> int:
        """First valid index."""
        raise NotImplementedError

    @abstractmethod
    def last_index(self) -> int:
        """Last valid index (inclusive)."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError


@singledispatch
def is_chunkable(collection: Any) -> bool:
    """Determine whether the type of ``collection`` supports index chunking."""
    return False


@is_chunkable.register
def _(collection: Sequence) -> bool:
    return True


@is_chunkable.register
def _(collection: memoryview) -> bool:
    return True


@is_chunkable.register
def _(collection: Chunkable) -> bool:
    return True


@singledispatch
def first_index(collection: Any) -> int:
    """First valid index of ``collection``.

    Raises:
        UnsupportedCollectionError: If the type is not chunkable
    """
    raise _not_chunkable(collection)


@first_index.register
def _(collection: Sequence) -> int:
    return 0


@first_index.register
def _(collection: memoryview) -> int:
    return 0


@first_index.register(Chunkable)
def _declared_first_index(collection: Chunkable) -> int:
    return collection.first_index()


@singledispatch
def last_index(collection: Any) -> int:
    """Last valid index of ``collection`` (inclusive).

    Raises:
        UnsupportedCollectionError: If the type is not chunkable
    """
    raise _not_chunkable(collection)


@last_index.register
def _(collection: Sequence) -> int:
    return len(collection) - 1


@last_index.register
def _(collection: memoryview) -> int:
    return len(collection) - 1


@last_index.register(Chunkable)
def _declared_last_index(collection: Chunkable) -> int:
    return collection.last_index()


def _declared_view(collection: SliceableChunkable, indices: range) -> Any:
    return collection.view(indices)


def register_chunkable(
    cls: type,
    *,
    first_index: Callable[[Any], int] | None = None,
    last_index: Callable[[Any], int] | None = None,
) -> None:
    """Register a type that cannot inherit from Chunkable.

    Args:
        cls: Collection type to register
        first_index: Function returning an instance's first index (default: 0)
        last_index: Function returning an instance's last index
            (default: ``first_index + len - 1``)

    Examples:
        >>> register_chunkable(Ring)
        >>> register_chunkable(Grid, first_index=lambda g: g.origin)
    """
    first_fn = first_index if first_index is not None else (lambda collection: 0)
    if last_index is not None:
        last_fn = last_index
    else:

        def last_fn(collection: Any) -> int:
            return first_fn(collection) + len(collection) - 1

    _register_bounds(cls, first_fn, last_fn)


def _register_bounds(
    cls: type,
    first_fn: Callable[[Any], int],
    last_fn: Callable[[Any], int],
) -> None:
    """Register ``cls`` under its exact type with the bound dispatchers."""
    is_chunkable.register(cls, lambda collection: True)
    first_index.register(cls, first_fn)
    last_index.register(cls, last_fn)


class SliceableChunkable(Chunkable):
    """Chunkable collection that can also produce element views.

    ``view`` receives ranges in the collection's own index domain, with step 1
    for consecutive chunks and step ``nchunks`` for round-robin chunks, and
    must return a read-only view without copying elements.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        from ..chunking.views import view_of

        view_of.register(cls, _declared_view)

    @abstractmethod
    def view(self, indices: range) -> Any:
        """Return a view of the elements at ``indices``."""
        raise NotImplementedError


def chunk_bounds(collection: Any) -> tuple[int, int]:
    """Validate the capability contract and return ``(first_index, length)``.

    Args:
        collection: Collection to inspect

    Returns:
        Tuple of the first index and the number of indexable positions

    Raises:
        UnsupportedCollectionError: If the type is not chunkable or reports
            bounds that disagree with its length
    """
    if not is_chunkable(collection):
        raise _not_chunkable(collection)

    first = first_index(collection)
    last = last_index(collection)
    length = len(collection)
    if length < 0 or last - first + 1 != length:
        raise UnsupportedCollectionError(
            f"{type(collection).__name__} reports inconsistent bounds: "
            f"first={first}, last={last}, length={length}",
            collection_type=type(collection),
            capability="index",
        )
    return first, length


def _not_chunkable(collection: Any) -> UnsupportedCollectionError:
    return UnsupportedCollectionError(
        f"{type(collection).__name__} is not chunkable: subclass Chunkable "
        "or call register_chunkable() for this type",
        collection_type=type(collection),
        capability="index",
    )
