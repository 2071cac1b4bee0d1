"""
Storage module for dev-drift.

This module persists the baseline snapshot that later snapshots are
compared against.
"""

from devdrift.storage.baseline import (
    DEFAULT_BASELINE_PATH,
    BaselineStore,
    MemoryBaselineStore,
)

__all__ = [
    "DEFAULT_BASELINE_PATH",
    "BaselineStore",
    "MemoryBaselineStore",
]
