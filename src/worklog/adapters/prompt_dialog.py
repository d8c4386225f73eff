"""Terminal prompt adapter for import/export file selection."""

from pathlib import Path

import click


class PromptFileDialog:
    """
    Asks for a path on the terminal. An empty answer cancels.

    Implements FileDialog protocol.
    """

    def _ask(self, text: str) -> Path | None:
        answer = click.prompt(text, default="", show_default=False).strip()
        return Path(answer).expanduser() if answer else None

    def choose_open(self) -> Path | None:
        return self._ask("File to import")

    def choose_save(self) -> Path | None:
        return self._ask("Export to")
