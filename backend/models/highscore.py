"""High score persistence: a single integer in a plain-text file."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Loads and saves the best score ever reached.

    Storage is best effort: a missing or corrupt file reads as 0, and a
    failed write is logged and otherwise ignored.
    """

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath

    # -- persistence ----------------------------------------------------------

    def load(self) -> int:
        try:
            text = self.filepath.read_text()
        except FileNotFoundError:
            logger.debug("No high score file at %s", self.filepath)
            return 0
        except OSError as exc:
            logger.warning("Cannot read high score file %s: %s", self.filepath, exc)
            return 0
        except UnicodeDecodeError:
            logger.warning("Ignoring corrupt high score file %s", self.filepath)
            return 0

        try:
            value = int(text.split()[0]) if text.strip() else 0
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s", self.filepath)
            return 0
        if value < 0:
            logger.warning("Ignoring negative high score in %s", self.filepath)
            return 0
        return value

    def save(self, value: int) -> None:
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            self.filepath.write_text(f"{value}\n")
        except OSError as exc:
            logger.warning("Cannot save high score to %s: %s", self.filepath, exc)
