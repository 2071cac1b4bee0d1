"""
Error taxonomy for dev-drift.

Only structurally invalid input is an error. Absent optional inputs (no
manifest, no .env files, malformed .env lines) yield empty defaults instead.
"""

from pathlib import Path


class DevDriftError(Exception):
    """Base class for all dev-drift errors."""


class ManifestParseError(DevDriftError):
    """The project manifest exists but is not valid structured data."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse manifest {path}: {reason}")


class BaselineFormatError(DevDriftError):
    """A stored baseline does not match the snapshot schema."""


class AbsentBaselineError(DevDriftError):
    """No baseline has been recorded yet."""


class BaselineExistsError(DevDriftError):
    """A baseline is already recorded and would be overwritten."""
