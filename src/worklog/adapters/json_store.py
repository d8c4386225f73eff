"""JSON file adapter for user data."""

import json
import logging
import os
import tempfile
from pathlib import Path

from worklog.core.state import LogState
from worklog.errors import StoreError

logger = logging.getLogger(__name__)


def read_state(path: Path) -> LogState:
    """
    Read a user data document.

    Raises OSError if the file cannot be read and ValueError if it is not
    a valid document.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    try:
        return LogState.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed user data in {path}: {e}") from e


def write_state(path: Path, state: LogState) -> None:
    """Write a user data document atomically. Raises OSError on failure."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(state.to_dict(), f, indent=2)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


class JsonUserStore:
    """
    JSON file user data storage.

    Implements UserStore protocol. The whole log and config live in one file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> LogState:
        """Load user data. Returns an empty state if none is stored."""
        if not self.path.exists():
            return LogState()
        try:
            return read_state(self.path)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load user data from {self.path}: {e}")
            return LogState()

    def save(self, state: LogState) -> None:
        """Persist user data."""
        try:
            write_state(self.path, state)
        except OSError as e:
            raise StoreError(f"Could not save user data to {self.path}: {e}") from e
