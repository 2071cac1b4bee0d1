"""
Tests for the init/check/reset workflow.

Uses the in-memory store and a stub collector so no project is touched.
"""

import pytest

from devdrift.errors import AbsentBaselineError, BaselineExistsError
from devdrift.models import DriftReport
from devdrift.storage import MemoryBaselineStore
from devdrift.workflow import check_drift, init_baseline, reset_baseline
from tests.fixtures import BASELINE, CURRENT


class StubCollector:
    """Collector returning a fixed sequence of snapshots."""

    def __init__(self, *snapshots):
        self._snapshots = list(snapshots)

    def collect(self):
        return self._snapshots.pop(0)


class TestInit:
    def test_records_baseline(self):
        """Test that init stores the collected snapshot."""
        store = MemoryBaselineStore()

        snapshot = init_baseline(store, StubCollector(BASELINE))

        assert snapshot == BASELINE
        assert store.load() == BASELINE

    def test_refuses_to_overwrite(self):
        """Test that a second init fails and keeps the first baseline."""
        store = MemoryBaselineStore()
        init_baseline(store, StubCollector(BASELINE))

        with pytest.raises(BaselineExistsError):
            init_baseline(store, StubCollector(CURRENT))

        assert store.load() == BASELINE


class TestCheck:
    def test_requires_baseline(self):
        """Test that check without a baseline fails."""
        with pytest.raises(AbsentBaselineError):
            check_drift(MemoryBaselineStore(), StubCollector(CURRENT))

    def test_no_drift(self):
        """Test that an unchanged project reports no drift."""
        store = MemoryBaselineStore()
        store.save(BASELINE)

        assert check_drift(store, StubCollector(BASELINE)) == DriftReport()

    def test_drift(self):
        """Test that changes are reported and the baseline is kept."""
        store = MemoryBaselineStore()
        store.save(BASELINE)

        report = check_drift(store, StubCollector(CURRENT))

        assert report.has_drift
        assert report.changed_scripts == ("build",)
        assert store.load() == BASELINE


class TestReset:
    def test_clears_baseline(self):
        """Test that reset removes the baseline so init works again."""
        store = MemoryBaselineStore()
        init_baseline(store, StubCollector(BASELINE))

        reset_baseline(store)

        assert store.load() is None
        init_baseline(store, StubCollector(CURRENT))
        assert store.load() == CURRENT

    def test_requires_baseline(self):
        """Test that reset without a baseline fails."""
        with pytest.raises(AbsentBaselineError):
            reset_baseline(MemoryBaselineStore())
