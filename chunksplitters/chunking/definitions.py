"""Chunk request and plan structures.

This module defines the caller-facing chunk specification (``ChunkSpec``)
and the immutable plan derived from it (``ResolvedPlan``). A plan fully
determines every chunk's bounds: each range is computed on demand by
closed-form arithmetic, nothing is materialized or cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
    model_validator,
)

from ..config import DEFAULT_SPLIT, LEGACY_SPLIT_ALIASES
from ..core.enums import Split
from ..core.exceptions import ChunkIndexError, ConfigurationError

_COUNT_FIELDS = ("n", "size", "minsize")


class ChunkSpec(BaseModel):
    """Requested chunking: either a chunk count or a chunk size.

    Attributes:
        n: Desired number of chunks (mutually exclusive with ``size``)
        size: Desired number of indices per chunk (mutually exclusive with ``n``)
        split: Distribution strategy
        minsize: Minimum chunk length, lowers the effective ``n`` when set

    Invalid input raises ConfigurationError, never pydantic's ValidationError.
    """

    n: StrictInt | None = Field(default=None, ge=1)
    size: StrictInt | None = Field(default=None, ge=1)
    split: Split = DEFAULT_SPLIT
    minsize: StrictInt | None = Field(default=None, ge=1)

    model_config = ConfigDict(frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _configuration_error(exc) from exc

    @field_validator("split", mode="before")
    @classmethod
    def validate_split(cls, v: Any) -> Split:
        """Accept Split members and their string values, reject retired names."""
        if isinstance(v, Split):
            return v
        if not isinstance(v, str):
            raise ValueError(f"split must be a Split or a string, got {type(v).__name__}")
        replacement = LEGACY_SPLIT_ALIASES.get(v.strip().lower())
        if replacement is not None:
            raise ValueError(
                f"split={v!r} is no longer supported, use split={replacement.value!r}"
            )
        split = Split.from_str(v)
        if split is None:
            choices = ", ".join(repr(s.value) for s in Split)
            raise ValueError(f"unknown split strategy {v!r}, expected one of {choices}")
        return split

    @model_validator(mode="after")
    def validate_combination(self) -> ChunkSpec:
        """Validate that the given arguments are usable together."""
        if self.n is None and self.size is None:
            raise ValueError("either n or size must be given")
        if self.n is not None and self.size is not None:
            raise ValueError("n and size are mutually exclusive")
        if self.minsize is not None and self.size is not None:
            raise ValueError("minsize can only be combined with n, not with size")
        if self.size is not None and self.split is not Split.CONSECUTIVE:
            raise ValueError(f"size-based chunking only supports split={Split.CONSECUTIVE.value!r}")
        return self


@dataclass(frozen=True)
class ResolvedPlan:
    """Resolved chunk layout over an index domain.

    Attributes:
        first_index: First index of the collection
        length: Number of indices being split
        nchunks: Effective number of chunks (at least 1)
        split: Distribution strategy
        base_size: Minimum chunk length (chunk length for size-based plans)
        remainder: Number of leading chunks holding one extra index
        chunk_size: Requested chunk size for size-based plans, else None
    """

    first_index: int
    length: int
    nchunks: int
    split: Split
    base_size: int
    remainder: int
    chunk_size: int | None = None

    @property
    def last_index(self) -> int:
        """Last index of the domain (inclusive)."""
        return self.first_index + self.length - 1

    @property
    def index_range(self) -> range:
        """Whole index domain as a range."""
        return range(self.first_index, self.first_index + self.length)

    def position(self, ichunk: int) -> int:
        """Normalize a chunk position, negative positions counting from the end.

        Raises:
            ChunkIndexError: If the position is outside ``[-nchunks, nchunks)``
        """
        k = ichunk + self.nchunks if ichunk < 0 else ichunk
        if not 0 <= k < self.nchunks:
            raise ChunkIndexError(
                f"chunk index {ichunk} out of range for {self.nchunks} chunk(s)",
                index=ichunk,
                nchunks=self.nchunks,
            )
        return k

    def chunk_range(self, ichunk: int) -> range:
        """Indices owned by chunk ``ichunk``.

        Args:
            ichunk: Zero-based chunk position (negative counts from the end)

        Returns:
            Contiguous range for consecutive plans, strided range for
            round-robin plans

        Raises:
            ChunkIndexError: If the position is out of range
        """
        k = self.position(ichunk)
        stop_domain = self.first_index + self.length

        if self.split is Split.ROUND_ROBIN:
            return range(self.first_index + k, stop_domain, self.nchunks)

        if self.chunk_size is not None:
            start = self.first_index + k * self.chunk_size
            return range(start, min(start + self.chunk_size, stop_domain))

        start = self.first_index + k * self.base_size + min(k, self.remainder)
        return range(start, start + self.chunk_length(k))

    def chunk_length(self, ichunk: int) -> int:
        """Number of indices owned by chunk ``ichunk``."""
        k = self.position(ichunk)
        if self.chunk_size is not None:
            return min(self.chunk_size, self.length - k * self.chunk_size)
        return self.base_size + (1 if k < self.remainder else 0)

    def chunk_lengths(self) -> list[int]:
        """Lengths of all chunks, in order."""
        return [self.chunk_length(k) for k in range(self.nchunks)]


def _configuration_error(exc: ValidationError) -> ConfigurationError:
    """Translate the first pydantic error into a ConfigurationError."""
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    value = error.get("input")

    if field in _COUNT_FIELDS and error.get("type") != "value_error":
        message = f"{field} must be a positive integer, got {value!r}"
    else:
        message = error.get("msg", str(exc))
        prefix = "Value error, "
        if message.startswith(prefix):
            message = message[len(prefix) :]
    if field is None:
        value = None
    return ConfigurationError(message, field=field, value=value)
