"""Shared fixtures for unit tests."""

from collections.abc import Sequence

import pytest

from chunksplitters import Chunkable, ElementChunk, SliceableChunkable


class OneBased(Chunkable):
    """Index-only collection indexed 1..length."""

    def __init__(self, length: int) -> None:
        self._length = length

    def first_index(self) -> int:
        return 1

    def last_index(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length


class OffsetVector(SliceableChunkable):
    """Sliceable collection whose indices start at ``offset``."""

    def __init__(self, data: list, offset: int) -> None:
        self.data = data
        self.offset = offset
        self.view_calls: list[range] = []

    def first_index(self) -> int:
        return self.offset

    def last_index(self) -> int:
        return self.offset + len(self.data) - 1

    def __len__(self) -> int:
        return len(self.data)

    def view(self, indices: range) -> ElementChunk:
        self.view_calls.append(indices)
        shifted = range(indices.start - self.offset, indices.stop - self.offset, indices.step)
        return ElementChunk(self.data, shifted)


@pytest.fixture
def one_based():
    """Factory for 1-based index-only collections."""
    return OneBased


@pytest.fixture
def offset_vector():
    """Factory for offset sliceable collections."""
    return OffsetVector


class OffsetSequence(Sequence, SliceableChunkable):
    """Read-only sequence whose indices start at ``offset``."""

    def __init__(self, data: list, offset: int) -> None:
        self.data = data
        self.offset = offset
        self.view_calls: list[range] = []

    def __getitem__(self, index: int):
        return self.data[index - self.offset]

    def __len__(self) -> int:
        return len(self.data)

    def first_index(self) -> int:
        return self.offset

    def last_index(self) -> int:
        return self.offset + len(self.data) - 1

    def view(self, indices: range) -> ElementChunk:
        self.view_calls.append(indices)
        return ElementChunk(self, indices)


@pytest.fixture
def offset_sequence():
    """Factory for offset collections that are also Sequences."""
    return OffsetSequence
