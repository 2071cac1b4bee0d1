"""
Snapshot Collection for dev-drift

This module builds a Snapshot from the current state of a project directory.

Sources:
    Runtime version: `node --version`, stored verbatim
    Manifest: package.json (scripts, dependencies, devDependencies)
    Environment keys: .env, .env.local, .env.development, .env.production
    Folders: immediate child directories of the project root

Failure Policy:
    - Absent inputs (no manifest, no .env files) yield empty defaults
    - Malformed .env lines are skipped silently
    - A manifest that exists but cannot be parsed raises ManifestParseError

Privacy:
    Only the names of environment variables are kept. Values are dropped
    the moment a line is split and are never stored or logged.
"""

import json
import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Iterable, Optional

from devdrift.errors import ManifestParseError
from devdrift.models import Snapshot

logger = logging.getLogger(__name__)


MANIFEST_FILE = "package.json"
MANIFEST_SECTIONS = ("scripts", "dependencies", "devDependencies")
ENV_FILES = (".env", ".env.local", ".env.development", ".env.production")
UNKNOWN_RUNTIME_VERSION = "unknown"

RuntimeVersionAccessor = Callable[[], str]


def node_version() -> str:
    """
    Return the version string reported by `node --version`.

    Falls back to UNKNOWN_RUNTIME_VERSION when Node is not installed or
    the call fails, so collection never aborts on a missing runtime.
    """
    executable = shutil.which("node")
    if executable is None:
        logger.debug("node executable not found on PATH")
        return UNKNOWN_RUNTIME_VERSION

    try:
        completed = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            text=True,
            check=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"node --version failed: {e}")
        return UNKNOWN_RUNTIME_VERSION

    return completed.stdout.strip() or UNKNOWN_RUNTIME_VERSION


def read_manifest(root: Path) -> Optional[dict[str, dict[str, str]]]:
    """
    Read the scripts/dependencies/devDependencies sections of package.json.

    Args:
        root: Project root directory

    Returns:
        Mapping of section name to its contents (empty when missing), or
        None if there is no manifest at all

    Raises:
        ManifestParseError: If the manifest exists but cannot be read, is not
                            valid JSON, or a section is not a string-to-string
                            object
    """
    path = Path(root) / MANIFEST_FILE
    if not path.is_file():
        logger.debug(f"No manifest at {path}")
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ManifestParseError(path, "top level must be an object")

    sections = {}
    for name in MANIFEST_SECTIONS:
        section = data.get(name)
        if section is None:
            section = {}
        elif not isinstance(section, dict):
            raise ManifestParseError(path, f"'{name}' must be an object")
        for key, value in section.items():
            if not isinstance(value, str):
                raise ManifestParseError(
                    path, f"'{name}.{key}' must be a string"
                )
        sections[name] = section

    logger.debug(
        f"Read manifest {path}: {len(sections['scripts'])} scripts, "
        f"{len(sections['dependencies'])} dependencies, "
        f"{len(sections['devDependencies'])} devDependencies"
    )
    return sections


def parse_env_keys(text: str) -> set[str]:
    """
    Extract variable names from .env-style content.

    Rules per line:
        1. Trim; skip blank lines and lines starting with '#'
        2. Split on the first '='; skip lines without one
        3. Skip lines whose trimmed key is empty
        4. Keep the trimmed key, discard the value

    Example:
        >>> sorted(parse_env_keys("A=1\\n# note\\n\\n  B = 2 \\nBROKEN\\n"))
        ['A', 'B']
    """
    keys = set()
    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        key, sep, _ = stripped.partition("=")
        key = key.strip()
        if not sep or not key:
            continue

        keys.add(key)
    return keys


def collect_env_keys(root: Path, env_files: Iterable[str] = ENV_FILES) -> list[str]:
    """
    Collect env variable names across all candidate .env files.

    Args:
        root: Project root directory
        env_files: File names to look for, in order

    Returns:
        Sorted, deduplicated variable names
    """
    keys: set[str] = set()
    for name in env_files:
        path = Path(root) / name
        if not path.is_file():
            continue

        found = parse_env_keys(path.read_text(encoding="utf-8", errors="replace"))
        logger.debug(f"Read {len(found)} key(s) from {name}")
        keys |= found

    return sorted(keys)


def collect_folders(root: Path) -> list[str]:
    """
    List the directories directly under the project root.

    Symlinks are not followed, so a link to a directory is not a folder.

    Returns:
        Directory names, sorted
    """
    with os.scandir(root) as entries:
        folders = [
            entry.name for entry in entries if entry.is_dir(follow_symlinks=False)
        ]
    return sorted(folders)


def collect_snapshot(
    root: Optional[Path] = None,
    runtime_version: Optional[RuntimeVersionAccessor] = None,
) -> Snapshot:
    """
    Build a Snapshot of the project at `root`.

    Args:
        root: Project root (default: current working directory)
        runtime_version: Zero-argument callable returning the runtime
                         version (default: node_version)

    Returns:
        A fully populated Snapshot

    Raises:
        ManifestParseError: If package.json exists but is malformed
    """
    root = Path.cwd() if root is None else Path(root)
    accessor = runtime_version or node_version

    manifest = read_manifest(root) or {}
    snapshot = Snapshot(
        runtime_version=accessor(),
        scripts=manifest.get("scripts", {}),
        dependencies=manifest.get("dependencies", {}),
        dev_dependencies=manifest.get("devDependencies", {}),
        env_keys=collect_env_keys(root),
        folders=collect_folders(root),
    )

    logger.debug(
        f"Collected snapshot of {root}: runtime {snapshot.runtime_version}, "
        f"{len(snapshot.env_keys)} env key(s), {len(snapshot.folders)} folder(s)"
    )
    return snapshot


class SnapshotCollector:
    """
    Collects snapshots of one project root.

    Usage:
        collector = SnapshotCollector(Path("./my-app"))
        snapshot = collector.collect()
    """

    def __init__(
        self,
        root: Optional[Path] = None,
        runtime_version: Optional[RuntimeVersionAccessor] = None,
    ) -> None:
        """
        Initialize the collector.

        Args:
            root: Project root (default: current working directory)
            runtime_version: Runtime version accessor (default: node_version)
        """
        self.root = Path.cwd() if root is None else Path(root)
        self._runtime_version = runtime_version or node_version

    def collect(self) -> Snapshot:
        """Return a fresh Snapshot of the project."""
        return collect_snapshot(self.root, self._runtime_version)
