"""
Baseline workflow for dev-drift.

The three operations behind the CLI commands, written against a baseline
store and a snapshot collector so they can run without touching a real
project or baseline file.
"""

import logging
from typing import Protocol

from devdrift.drift import compare_snapshots
from devdrift.errors import AbsentBaselineError, BaselineExistsError
from devdrift.models import DriftReport, Snapshot

logger = logging.getLogger(__name__)


class Store(Protocol):
    def exists(self) -> bool: ...
    def prepare(self) -> None: ...
    def load(self) -> Snapshot | None: ...
    def save(self, snapshot: Snapshot) -> None: ...
    def clear(self) -> bool: ...


class Collector(Protocol):
    def collect(self) -> Snapshot: ...


def init_baseline(store: Store, collector: Collector) -> Snapshot:
    """
    Record the current project state as the baseline.

    Raises:
        BaselineExistsError: If a baseline is already stored
        ManifestParseError: If the project manifest is malformed
    """
    if store.exists():
        raise BaselineExistsError("dev-drift already initialized")

    store.prepare()
    snapshot = collector.collect()
    store.save(snapshot)
    logger.info("Baseline recorded")
    return snapshot


def check_drift(store: Store, collector: Collector) -> DriftReport:
    """
    Compare the current project state against the stored baseline.

    Raises:
        AbsentBaselineError: If no baseline is stored
        BaselineFormatError: If the stored baseline is corrupt
        ManifestParseError: If the project manifest is malformed
    """
    baseline = store.load()
    if baseline is None:
        raise AbsentBaselineError("dev-drift not initialized")

    report = compare_snapshots(baseline, collector.collect())
    logger.info(f"Drift check finished (drift={report.has_drift})")
    return report


def reset_baseline(store: Store) -> None:
    """
    Delete the stored baseline.

    Raises:
        AbsentBaselineError: If there is no baseline to delete
    """
    if not store.clear():
        raise AbsentBaselineError("No baseline to reset")
    logger.info("Baseline cleared")
