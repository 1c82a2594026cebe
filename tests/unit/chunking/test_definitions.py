"""Unit tests for chunk specification and plan structures."""

from __future__ import annotations

import pytest

from chunksplitters import ChunkIndexError, ChunkSpec, ConfigurationError, ResolvedPlan, Split


class TestChunkSpec:
    """ChunkSpec validation."""

    def test_defaults(self):
        """Test split defaults to consecutive and minsize to None."""
        spec = ChunkSpec(n=4)

        assert spec.n == 4
        assert spec.size is None
        assert spec.split is Split.CONSECUTIVE
        assert spec.minsize is None

    def test_split_from_string(self):
        """Test split strings are coerced to Split members."""
        assert ChunkSpec(n=2, split="round_robin").split is Split.ROUND_ROBIN
        assert ChunkSpec(n=2, split="RoundRobin").split is Split.ROUND_ROBIN

    def test_frozen(self):
        """Test specs cannot be modified after creation."""
        spec = ChunkSpec(size=3)

        with pytest.raises(Exception):
            spec.size = 4

    def test_errors_are_configuration_errors(self):
        """Test pydantic validation errors are translated."""
        with pytest.raises(ConfigurationError) as exc:
            ChunkSpec(n=0)

        assert exc.value.field == "n"
        assert exc.value.value == 0
        assert exc.value.__cause__ is not None

    def test_combination_error_has_no_field(self):
        """Test cross-field errors do not blame a single field."""
        with pytest.raises(ConfigurationError, match="mutually exclusive") as exc:
            ChunkSpec(n=2, size=2)

        assert exc.value.field is None

    def test_split_type_checked(self):
        """Test split must be a Split or a string."""
        with pytest.raises(ConfigurationError, match="split must be a Split or a string"):
            ChunkSpec(n=2, split=1)

    def test_equal_specs_compare_equal(self):
        """Test value semantics."""
        assert ChunkSpec(n=3, split="round_robin") == ChunkSpec(n=3, split=Split.ROUND_ROBIN)


class TestResolvedPlan:
    """ResolvedPlan closed-form arithmetic."""

    def make_plan(self, **overrides):
        fields = {
            "first_index": 1,
            "length": 10,
            "nchunks": 4,
            "split": Split.CONSECUTIVE,
            "base_size": 2,
            "remainder": 2,
        }
        fields.update(overrides)
        return ResolvedPlan(**fields)

    def test_domain_properties(self):
        """Test last_index and index_range."""
        plan = self.make_plan()

        assert plan.last_index == 10
        assert plan.index_range == range(1, 11)

    def test_consecutive_ranges(self):
        """Test the first `remainder` chunks are one longer."""
        plan = self.make_plan()

        assert [plan.chunk_range(k) for k in range(4)] == [
            range(1, 4),
            range(4, 7),
            range(7, 9),
            range(9, 11),
        ]
        assert plan.chunk_lengths() == [3, 3, 2, 2]

    def test_round_robin_ranges(self):
        """Test round-robin ranges start at first + k with step nchunks."""
        plan = self.make_plan(split=Split.ROUND_ROBIN)

        assert plan.chunk_range(0) == range(1, 11, 4)
        assert list(plan.chunk_range(3)) == [4, 8]
        assert plan.chunk_lengths() == [3, 3, 2, 2]

    def test_size_based_ranges(self):
        """Test size-based plans clip the last chunk."""
        plan = self.make_plan(nchunks=3, base_size=4, remainder=0, chunk_size=4)

        assert [plan.chunk_range(k) for k in range(3)] == [range(1, 5), range(5, 9), range(9, 11)]
        assert plan.chunk_lengths() == [4, 4, 2]

    def test_position_normalization(self):
        """Test negative positions and out-of-range errors."""
        plan = self.make_plan()

        assert plan.position(-1) == 3
        assert plan.chunk_range(-4) == plan.chunk_range(0)
        with pytest.raises(ChunkIndexError):
            plan.chunk_range(4)
        with pytest.raises(ChunkIndexError):
            plan.chunk_length(-5)
