"""Structured logging for chunk planning.

Plans are resolved in hot paths (once per parallel region), so every record
is emitted at DEBUG level. The library never installs handlers.
"""

from __future__ import annotations

import logging

from ..core.exceptions import ConfigurationError
from .definitions import ResolvedPlan

logger = logging.getLogger(__name__)


def log_plan_resolved(*, plan: ResolvedPlan, requested_n: int | None = None) -> None:
    """Log a successfully resolved plan.

    Args:
        plan: The resolved plan
        requested_n: Chunk count asked for, when it differs from plan.nchunks
    """
    logger.debug(
        "plan_resolved",
        extra={
            "length": plan.length,
            "first_index": plan.first_index,
            "nchunks": plan.nchunks,
            "requested_n": requested_n,
            "split": plan.split.value,
            "base_size": plan.base_size,
            "remainder": plan.remainder,
            "chunk_size": plan.chunk_size,
        },
    )


def log_spec_rejected(*, error: ConfigurationError) -> None:
    """Log a chunk specification rejected during resolution."""
    logger.debug(
        "chunk_spec_rejected",
        extra={
            "field": error.field,
            "value": repr(error.value),
            "error_message": str(error),
        },
    )
