"""
ProgressStore - Persist a ProgressTracker as a JSON document.

The document is the pydantic JSON dump of the tracker, so loading a saved
file reproduces an equal tracker.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from pathtracker.schemas import ProgressTracker

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_FILE = Path("progress.json")


class ProgressFileError(Exception):
    """The progress file could not be read or does not hold a valid tracker."""


class ProgressFileNotFoundError(ProgressFileError, FileNotFoundError):
    pass


def tracker_to_json(tracker: ProgressTracker) -> str:
    return tracker.model_dump_json(indent=2)


def tracker_from_json(text: str) -> ProgressTracker:
    """Parse a tracker document. Raises pydantic ValidationError on bad input."""
    return ProgressTracker.model_validate_json(text)


class ProgressStore:
    """Load and save one tracker document on disk."""

    def __init__(self, path: Union[Path, str, None] = None):
        """
        Args:
            path: Location of the JSON document (default: ./progress.json)
        """
        self.path = Path(path) if path is not None else DEFAULT_PROGRESS_FILE

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ProgressTracker:
        """
        Read the tracker from disk.

        Raises:
            ProgressFileNotFoundError: If the file does not exist
            ProgressFileError: If the file is unreadable or invalid
        """
        if not self.exists():
            raise ProgressFileNotFoundError(f"Progress file not found: {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProgressFileError(f"Cannot read progress file {self.path}: {e}") from e
        try:
            tracker = tracker_from_json(text)
        except ValidationError as e:
            raise ProgressFileError(f"Invalid progress file {self.path}: {e}") from e
        logger.debug(f"Loaded tracker {tracker.learner_id} from {self.path}")
        return tracker

    def save(self, tracker: ProgressTracker):
        """Write the tracker, replacing the file atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(tracker_to_json(tracker))
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved tracker {tracker.learner_id} to {self.path}")

