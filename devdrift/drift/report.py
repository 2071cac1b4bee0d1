"""
Drift report rendering.

Projects a DriftReport onto human-readable lines. No decisions are made
here beyond skipping categories that are absent, and nothing is printed.
"""

from typing import Iterator

from devdrift.models import DriftReport, SetDiff

NO_DRIFT_MESSAGE = "No drift detected."
DRIFT_HEADER = "Drift detected:"
DELIMITER = ", "


def _set_diff_lines(diff: SetDiff, added_label: str, removed_label: str) -> Iterator[str]:
    if diff.added:
        yield f"{added_label}: {DELIMITER.join(diff.added)}"
    if diff.removed:
        yield f"{removed_label}: {DELIMITER.join(diff.removed)}"


def render(report: DriftReport) -> Iterator[str]:
    """
    Yield the display lines for a drift report.

    Order: header and blank line, runtime version, env keys (added then
    removed), folders (added then removed), changed scripts. A report
    without drift yields only NO_DRIFT_MESSAGE.
    """
    if not report.has_drift:
        yield NO_DRIFT_MESSAGE
        return

    yield DRIFT_HEADER
    yield ""

    change = report.runtime_version_change
    if change is not None:
        yield f"Node version changed: {change.from_version} → {change.to_version}"

    if report.env_diff is not None:
        yield from _set_diff_lines(
            report.env_diff, "Env variable added", "Env variable removed"
        )

    if report.folder_diff is not None:
        yield from _set_diff_lines(
            report.folder_diff, "Folders were added", "Folders were removed"
        )

    if report.changed_scripts is not None:
        yield f"Scripts changed: {DELIMITER.join(report.changed_scripts)}"
