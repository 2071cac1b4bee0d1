"""
Tests for drift report rendering.
"""

from devdrift.drift import NO_DRIFT_MESSAGE, compare_snapshots, render
from devdrift.models import DriftReport, SetDiff, VersionChange
from tests.fixtures import BASELINE, CURRENT


class TestRender:
    """Tests for the line renderer."""

    def test_no_drift(self):
        """Test that an empty report renders a single confirmation line."""
        assert list(render(compare_snapshots(BASELINE, BASELINE))) == [
            NO_DRIFT_MESSAGE
        ]
        assert NO_DRIFT_MESSAGE == "No drift detected."

    def test_full_report(self):
        """Test rendering every category in order."""
        lines = list(render(compare_snapshots(BASELINE, CURRENT)))

        assert lines == [
            "Drift detected:",
            "",
            "Node version changed: v18.15.0 → v20.1.0",
            "Env variable added: REDIS_URL",
            "Folders were added: scripts",
            "Scripts changed: build",
        ]

    def test_added_then_removed(self):
        """Test that added lines precede removed lines, comma-joined."""
        report = DriftReport(
            env_diff=SetDiff(added=("A", "B"), removed=("C",)),
            folder_diff=SetDiff(added=("migrations", "scripts"), removed=("old",)),
        )

        assert list(render(report))[2:] == [
            "Env variable added: A, B",
            "Env variable removed: C",
            "Folders were added: migrations, scripts",
            "Folders were removed: old",
        ]

    def test_empty_side_skipped(self):
        """Test that an empty added/removed side renders nothing."""
        report = DriftReport(folder_diff=SetDiff(added=(), removed=("old",)))

        assert list(render(report)) == [
            "Drift detected:",
            "",
            "Folders were removed: old",
        ]

    def test_runtime_only(self):
        """Test that the version line holds both ends of the change."""
        report = DriftReport(runtime_version_change=VersionChange("v18", "v20"))

        lines = list(render(report))

        assert len(lines) == 3
        assert "v18" in lines[2] and "v20" in lines[2]

    def test_each_call_regenerates(self):
        """Test that render can be called again for a fresh sequence."""
        report = DriftReport(changed_scripts=("build", "lint"))

        first = list(render(report))
        second = list(render(report))

        assert first == second
        assert first[-1] == "Scripts changed: build, lint"
