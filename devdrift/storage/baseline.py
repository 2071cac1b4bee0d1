"""
Baseline Storage for dev-drift

This module persists the single baseline snapshot a project is compared
against.

Design Decisions:
    - One baseline per project, no history
    - JSON document, indented for readability and diffing in review
    - The file location is always passed in explicitly
    - An in-memory store with the same interface for tests and embedding

Schema:
    {
      "nodeVersion": string,
      "scripts": {string: string},
      "dependencies": {string: string},
      "devDependencies": {string: string},
      "envKeys": [string],
      "folders": [string]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from devdrift.errors import BaselineFormatError
from devdrift.models import Snapshot

logger = logging.getLogger(__name__)


# Default baseline location, relative to the project root
DEFAULT_BASELINE_PATH = ".dev-drift/baseline.json"


class BaselineStore:
    """
    JSON file store for a project's baseline snapshot.

    Usage:
        store = BaselineStore("./my-app/.dev-drift/baseline.json")
        store.save(snapshot)
        baseline = store.load()
    """

    def __init__(self, path: str | Path = DEFAULT_BASELINE_PATH) -> None:
        """
        Initialize the store.

        Args:
            path: Path to the baseline file. Parent directories are created
                  on the first save, not here.
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the baseline file."""
        return self._path

    def exists(self) -> bool:
        """Check whether a baseline has been saved."""
        return self._path.is_file()

    def load(self) -> Optional[Snapshot]:
        """
        Load the baseline snapshot.

        Returns:
            The stored Snapshot, or None if no baseline file exists

        Raises:
            BaselineFormatError: If the file is not valid JSON or does not
                                 match the schema
        """
        if not self.exists():
            return None

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise BaselineFormatError(f"{self._path}: {e}") from e

        try:
            snapshot = Snapshot.from_dict(data)
        except BaselineFormatError as e:
            raise BaselineFormatError(f"{self._path}: {e}") from e

        logger.debug(f"Loaded baseline from {self._path}")
        return snapshot

    def prepare(self) -> None:
        """
        Create the directory that will hold the baseline.

        Called before the first snapshot is collected so that, when the
        directory lives inside the project, it is part of the baseline.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def save(self, snapshot: Snapshot) -> None:
        """
        Write the baseline snapshot, replacing any existing one.

        Args:
            snapshot: The Snapshot to persist
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(snapshot.to_dict(), indent=2) + "\n",
            encoding="utf-8",
        )
        logger.debug(f"Saved baseline to {self._path}")

    def clear(self) -> bool:
        """
        Delete the baseline file.

        Returns:
            True if a baseline was deleted, False if there was none
        """
        if not self.exists():
            return False

        self._path.unlink()
        logger.debug(f"Deleted baseline {self._path}")
        return True


class MemoryBaselineStore:
    """
    In-memory baseline store with the same interface as BaselineStore.

    Snapshots are kept in their serialized form so that a load goes
    through the same schema validation as a file would.
    """

    def __init__(self) -> None:
        self._document: Optional[dict[str, Any]] = None

    def exists(self) -> bool:
        return self._document is not None

    def load(self) -> Optional[Snapshot]:
        if self._document is None:
            return None
        return Snapshot.from_dict(self._document)

    def prepare(self) -> None:
        pass

    def save(self, snapshot: Snapshot) -> None:
        self._document = snapshot.to_dict()

    def clear(self) -> bool:
        existed = self._document is not None
        self._document = None
        return existed
