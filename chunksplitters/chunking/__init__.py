"""Chunk planning, index chunk iteration and element views.

Architecture:
    The chunking layer consists of:
    - definitions.py: ChunkSpec (request) and ResolvedPlan (closed-form layout)
    - planners.py: ChunkPlanner and resolve(), spec + length -> plan
    - iterators.py: IndexChunks, sequence of index ranges over a plan
    - views.py: view_of(), ElementChunk and Chunks for element views
    - telemetry.py: Structured debug logging
"""

from __future__ import annotations

from .definitions import ChunkSpec, ResolvedPlan
from .iterators import IndexChunks
from .planners import ChunkPlanner, resolve
from .views import Chunks, ElementChunk, supports_views, view_of

__all__ = [
    "ChunkSpec",
    "ResolvedPlan",
    "ChunkPlanner",
    "resolve",
    "IndexChunks",
    "ElementChunk",
    "Chunks",
    "view_of",
    "supports_views",
]
