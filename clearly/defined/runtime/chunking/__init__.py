"""Chunking layer for list-valued requests.

Architecture:
    The chunking layer consists of:
    - definitions.py: Chunk policy structure (ChunkPolicy)
    - planners.py: Lazy chunk planning (ChunkPlanner)
    - telemetry.py: Structured logging

Usage:
    Endpoints that accept a bounded list of items in their body use a
    ChunkPlanner to turn any number of items into one body per request.
"""

from __future__ import annotations

from .definitions import ChunkPolicy
from .planners import ChunkPlanner

__all__ = [
    "ChunkPolicy",
    "ChunkPlanner",
]
