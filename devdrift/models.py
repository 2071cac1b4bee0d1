"""
Core Data Models for dev-drift

This module defines the canonical data structures used throughout the system:
- Snapshot: Environmental state of a project at one instant
- VersionChange: A runtime version that differs between two snapshots
- SetDiff: Added/removed members of a set-valued field
- DriftReport: Structured result of comparing two snapshots

These models are designed to be:
- Immutable (frozen dataclasses over frozensets and read-only mappings)
- Serializable for the baseline file
- Clear in their semantic meaning
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from devdrift.errors import BaselineFormatError


def _frozen_mapping(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


@dataclass(frozen=True)
class Snapshot:
    """
    Point-in-time record of a project's environment.

    Attributes:
        runtime_version: Opaque runtime version tag, e.g. "v20.1.0"
        scripts: Script name -> command, in manifest declaration order
        dependencies: Package name -> version specifier (not diffed)
        dev_dependencies: Same shape as dependencies (not diffed)
        env_keys: Environment variable names found in .env files, never values
        folders: Names of the immediate child directories of the project root

    Invariants:
        - Never mutated after construction
        - env_keys and folders carry no ordering; serialization sorts them
    """

    runtime_version: str
    scripts: Mapping[str, str] = field(default_factory=dict)
    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)
    env_keys: frozenset[str] = frozenset()
    folders: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        """Normalize containers into immutable ones."""
        object.__setattr__(self, "scripts", _frozen_mapping(self.scripts))
        object.__setattr__(self, "dependencies", _frozen_mapping(self.dependencies))
        object.__setattr__(
            self, "dev_dependencies", _frozen_mapping(self.dev_dependencies)
        )
        object.__setattr__(self, "env_keys", frozenset(self.env_keys))
        object.__setattr__(self, "folders", frozenset(self.folders))

    def __hash__(self) -> int:
        return hash(
            (
                self.runtime_version,
                frozenset(self.scripts.items()),
                frozenset(self.dependencies.items()),
                frozenset(self.dev_dependencies.items()),
                self.env_keys,
                self.folders,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted JSON-shaped form of this snapshot."""
        return {
            "nodeVersion": self.runtime_version,
            "scripts": dict(self.scripts),
            "dependencies": dict(self.dependencies),
            "devDependencies": dict(self.dev_dependencies),
            "envKeys": sorted(self.env_keys),
            "folders": sorted(self.folders),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Snapshot":
        """
        Rebuild a snapshot from its persisted form.

        Raises:
            BaselineFormatError: If the document does not match the schema
        """
        if not isinstance(data, dict):
            raise BaselineFormatError("baseline must be a JSON object")

        runtime_version = data.get("nodeVersion")
        if not isinstance(runtime_version, str):
            raise BaselineFormatError("'nodeVersion' must be a string")

        return cls(
            runtime_version=runtime_version,
            scripts=_read_mapping(data, "scripts"),
            dependencies=_read_mapping(data, "dependencies"),
            dev_dependencies=_read_mapping(data, "devDependencies"),
            env_keys=_read_names(data, "envKeys"),
            folders=_read_names(data, "folders"),
        )


def _read_mapping(data: dict, key: str) -> dict[str, str]:
    value = data.get(key, {})
    if not isinstance(value, dict) or not all(
        isinstance(v, str) for v in value.values()
    ):
        raise BaselineFormatError(f"'{key}' must map strings to strings")
    return value


def _read_names(data: dict, key: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise BaselineFormatError(f"'{key}' must be a list of strings")
    return value


@dataclass(frozen=True)
class VersionChange:
    """A runtime version that moved between baseline and current."""

    from_version: str
    to_version: str


@dataclass(frozen=True)
class SetDiff:
    """
    Membership difference of a set-valued field.

    Attributes:
        added: Members present now but not in the baseline, sorted
        removed: Members present in the baseline but not now, sorted
    """

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()

    @classmethod
    def between(cls, old: Iterable[str], new: Iterable[str]) -> "SetDiff":
        """Compute the difference going from `old` to `new`."""
        old_set = set(old)
        new_set = set(new)
        return cls(
            added=tuple(sorted(new_set - old_set)),
            removed=tuple(sorted(old_set - new_set)),
        )

    @property
    def is_empty(self) -> bool:
        """True when nothing was added or removed."""
        return not self.added and not self.removed


@dataclass(frozen=True)
class DriftReport:
    """
    Differences between a baseline and a current snapshot.

    Each field is None when its category shows no difference.

    Attributes:
        runtime_version_change: Present iff the runtime versions differ
        env_diff: Present iff an env key was added or removed
        folder_diff: Present iff a top-level folder was added or removed
        changed_scripts: Names of scripts whose command changed, in
                         baseline declaration order
    """

    runtime_version_change: Optional[VersionChange] = None
    env_diff: Optional[SetDiff] = None
    folder_diff: Optional[SetDiff] = None
    changed_scripts: Optional[tuple[str, ...]] = None

    @property
    def has_drift(self) -> bool:
        """True if any category reports a difference."""
        return any(
            value is not None
            for value in (
                self.runtime_version_change,
                self.env_diff,
                self.folder_diff,
                self.changed_scripts,
            )
        )
