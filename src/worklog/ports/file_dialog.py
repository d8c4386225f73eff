"""File selection interface for import and export."""

from pathlib import Path
from typing import Protocol


class FileDialog(Protocol):
    """Interface for asking the user where to read or write a file."""

    def choose_open(self) -> Path | None:
        """Ask for a file to import. Returns None if cancelled."""
        ...

    def choose_save(self) -> Path | None:
        """Ask for a file to export to. Returns None if cancelled."""
        ...
