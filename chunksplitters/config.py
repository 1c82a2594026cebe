"""Library-wide defaults.

This module centralizes the constants shared by the planner, the iterators
and the public API so that defaults are declared in exactly one place.
"""

from __future__ import annotations

from .core.enums import Split

# Strategy used when the caller does not pass ``split``
DEFAULT_SPLIT = Split.CONSECUTIVE

# First index of built-in Python sequences
DEFAULT_FIRST_INDEX = 0

# Retired strategy names from earlier releases, mapped to their replacements.
# They are rejected, the mapping only feeds the error message.
LEGACY_SPLIT_ALIASES: dict[str, Split] = {
    "batch": Split.CONSECUTIVE,
    ":batch": Split.CONSECUTIVE,
    "scatter": Split.ROUND_ROBIN,
    ":scatter": Split.ROUND_ROBIN,
}
