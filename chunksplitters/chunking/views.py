"""Element chunk views.

Architecture:
    ``view_of`` maps an index range onto a read-only view of a collection.
    It is a singledispatch function, so the view capability is declared per
    type:
    - Sequences (list, tuple, str, range, ...): ElementChunk, a lazy view
    - memoryview: native strided memoryview slice (zero-copy)
    - SliceableChunkable subclasses: their own ``view`` method
    - anything else: UnsupportedCollectionError

    ``Chunks`` wraps an IndexChunks sequence and applies ``view_of`` to every
    range on access.

Design Decisions:
    - No copies: views hold a reference to the source collection and resolve
      elements on access, so they observe later writes to the source
    - Read-only: views expose no mutation methods
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import singledispatch
from typing import Any, overload

from ..core.capabilities import SliceableChunkable
from ..core.exceptions import UnsupportedCollectionError
from .iterators import IndexChunks


class ElementChunk(Sequence[Any]):
    """Read-only view of ``collection`` restricted to ``indices``.

    Positions inside the view are zero-based; ``indices`` are expressed in
    the collection's own index domain.
    """

    __slots__ = ("_collection", "_indices")

    def __init__(self, collection: Sequence[Any], indices: range) -> None:
        self._collection = collection
        self._indices = indices

    @property
    def collection(self) -> Sequence[Any]:
        return self._collection

    @property
    def indices(self) -> range:
        return self._indices

    def __len__(self) -> int:
        return len(self._indices)

    @overload
    def __getitem__(self, position: int) -> Any: ...

    @overload
    def __getitem__(self, position: slice) -> ElementChunk: ...

    def __getitem__(self, position: int | slice) -> Any:
        if isinstance(position, slice):
            return ElementChunk(self._collection, self._indices[position])
        return self._collection[self._indices[position]]

    def __iter__(self) -> Iterator[Any]:
        collection = self._collection
        for index in self._indices:
            yield collection[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ElementChunk({type(self._collection).__name__}, indices={self._indices!r})"


@singledispatch
def view_of(collection: Any, indices: range) -> Any:
    """Read-only view of the elements of ``collection`` at ``indices``.

    Register additional types with ``view_of.register(MyType, ElementChunk)``
    or a custom ``(collection, indices) -> view`` function.

    Raises:
        UnsupportedCollectionError: If the type cannot produce views
    """
    raise _views_unsupported(collection)


@view_of.register
def _(collection: Sequence, indices: range) -> ElementChunk:
    return ElementChunk(collection, indices)


@view_of.register
def _(collection: memoryview, indices: range) -> memoryview:
    if collection.ndim != 1:
        raise UnsupportedCollectionError(
            f"memoryview with ndim={collection.ndim} cannot be chunked into views",
            collection_type=memoryview,
            capability="view",
        )
    return collection.toreadonly()[indices.start : indices.stop : indices.step]


@view_of.register
def _(collection: SliceableChunkable, indices: range) -> Any:
    return collection.view(indices)


def supports_views(collection: Any) -> bool:
    """Whether the type of ``collection`` has a registered view capability."""
    return view_of.dispatch(type(collection)) is not view_of.dispatch(object)


class Chunks(Sequence[Any]):
    """Sequence of element views, one per chunk.

    ``chunks[k]`` is ``view_of(collection, index_chunks[k])``.
    """

    __slots__ = ("_collection", "_index_chunks")

    def __init__(self, collection: Any, index_chunks: IndexChunks) -> None:
        """Initialize element chunks.

        Args:
            collection: Source collection
            index_chunks: Index ranges over the collection

        Raises:
            UnsupportedCollectionError: If the collection cannot produce views
        """
        if not supports_views(collection):
            raise _views_unsupported(collection)
        self._collection = collection
        self._index_chunks = index_chunks

    @property
    def collection(self) -> Any:
        return self._collection

    @property
    def index_chunks(self) -> IndexChunks:
        return self._index_chunks

    def __len__(self) -> int:
        return len(self._index_chunks)

    def __getitem__(self, ichunk: int | slice) -> Any:
        if isinstance(ichunk, slice):
            return [view_of(self._collection, r) for r in self._index_chunks[ichunk]]
        return view_of(self._collection, self._index_chunks[ichunk])

    def __iter__(self) -> Iterator[Any]:
        collection = self._collection
        for indices in self._index_chunks:
            yield view_of(collection, indices)

    def __repr__(self) -> str:
        return f"Chunks({type(self._collection).__name__}, {self._index_chunks!r})"


def _views_unsupported(collection: Any) -> UnsupportedCollectionError:
    return UnsupportedCollectionError(
        f"{type(collection).__name__} does not support element views: subclass "
        "SliceableChunkable or register the type with view_of.register()",
        collection_type=type(collection),
        capability="view",
    )
