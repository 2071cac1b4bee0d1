"""
dev-drift Engine

Core engine for snapshotting a project's environment, comparing it against
a recorded baseline, and rendering the resulting drift report.
"""

from devdrift.models import Snapshot, DriftReport, SetDiff, VersionChange

__all__ = ["Snapshot", "DriftReport", "SetDiff", "VersionChange"]
__version__ = "0.1.0"
