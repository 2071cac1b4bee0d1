"""
Drift module for dev-drift.

This module compares a baseline snapshot against the current one and
renders the resulting report as display lines.
"""

from devdrift.drift.compare import (
    compare_snapshots,
    changed_script_names,
    diff_sets,
)
from devdrift.drift.report import NO_DRIFT_MESSAGE, render

__all__ = [
    "compare_snapshots",
    "changed_script_names",
    "diff_sets",
    "NO_DRIFT_MESSAGE",
    "render",
]
