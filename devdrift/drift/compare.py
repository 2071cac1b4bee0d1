"""
Drift Comparison for dev-drift

This module implements the core comparison logic, turning a baseline
snapshot and a current snapshot into a structured DriftReport.

Categories:
    Runtime version: reported when the strings differ
    Env keys:        set difference (added and removed names)
    Folders:         set difference (added and removed names)
    Scripts:         value changes only

Script Asymmetry:
    Scripts are NOT compared with the set difference used for env keys and
    folders. Only a script present in both snapshots whose command changed
    is reported. A script that was added, or one that was removed, never
    shows up. The two routines are kept separate on purpose.

Not Compared:
    dependencies and devDependencies are carried in snapshots but are not
    part of the report.

Design Decisions:
    - Pure: no state, no I/O, same inputs always give the same report
    - Sorted set output, scripts in baseline declaration order
"""

from typing import Iterable, Mapping, Optional

from devdrift.models import DriftReport, SetDiff, Snapshot, VersionChange


def diff_sets(old: Iterable[str], new: Iterable[str]) -> Optional[SetDiff]:
    """
    Compute added/removed members, or None when both are empty.

    Args:
        old: Members in the baseline
        new: Members now

    Returns:
        SetDiff with sorted `added` (new - old) and `removed` (old - new),
        or None if the two collections hold the same members
    """
    diff = SetDiff.between(old, new)
    return None if diff.is_empty else diff


def changed_script_names(
    old: Mapping[str, str],
    new: Mapping[str, str],
) -> list[str]:
    """
    Names of scripts present in both mappings whose command differs.

    Iterates `old` so the result follows baseline declaration order.
    Scripts only in `old` (removed) or only in `new` (added) are skipped.

    Example:
        >>> changed_script_names(
        ...     {"build": "webpack", "lint": "eslint ."},
        ...     {"build": "webpack --mode production", "test": "jest"},
        ... )
        ['build']
    """
    changed = []
    for name, command in old.items():
        if name not in new:
            continue
        if new[name] != command:
            changed.append(name)
    return changed


def compare_snapshots(baseline: Snapshot, current: Snapshot) -> DriftReport:
    """
    Compare two snapshots and describe how the current one drifted.

    Args:
        baseline: The recorded reference snapshot
        current: The freshly collected snapshot

    Returns:
        DriftReport; every field is None when nothing drifted

    Raises:
        TypeError: If either snapshot is missing
    """
    if baseline is None or current is None:
        raise TypeError("compare_snapshots requires a baseline and a current snapshot")

    version_change = None
    if baseline.runtime_version != current.runtime_version:
        version_change = VersionChange(
            from_version=baseline.runtime_version,
            to_version=current.runtime_version,
        )

    changed_scripts = changed_script_names(baseline.scripts, current.scripts)

    return DriftReport(
        runtime_version_change=version_change,
        env_diff=diff_sets(baseline.env_keys, current.env_keys),
        folder_diff=diff_sets(baseline.folders, current.folders),
        changed_scripts=tuple(changed_scripts) if changed_scripts else None,
    )
