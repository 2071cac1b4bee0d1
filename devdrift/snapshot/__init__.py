"""
Snapshot module for dev-drift.

This module collects the current environmental state of a project:
runtime version, manifest scripts and dependencies, .env key names, and
top-level folders.
"""

from devdrift.snapshot.collector import (
    ENV_FILES,
    MANIFEST_FILE,
    UNKNOWN_RUNTIME_VERSION,
    SnapshotCollector,
    collect_env_keys,
    collect_folders,
    collect_snapshot,
    node_version,
    parse_env_keys,
    read_manifest,
)

__all__ = [
    "ENV_FILES",
    "MANIFEST_FILE",
    "UNKNOWN_RUNTIME_VERSION",
    "SnapshotCollector",
    "collect_env_keys",
    "collect_folders",
    "collect_snapshot",
    "node_version",
    "parse_env_keys",
    "read_manifest",
]
