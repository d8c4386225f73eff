"""Notification and clock interfaces."""

from typing import Protocol


class Notifier(Protocol):
    """Interface for surfacing messages and change signals to the user."""

    def notify(self, message: str) -> None:
        """Show a human-readable message. Fire and forget."""
        ...

    def on_log_changed(self) -> None:
        """Signal that the log or its configuration changed."""
        ...


class Ticker(Protocol):
    """Interface for the periodic clock shown while an entry is running."""

    def start(self, started_at: str) -> None:
        """Begin ticking from the given start boundary."""
        ...

    def cancel(self) -> None:
        """Stop ticking. Safe to call when not running."""
        ...

    def shutdown(self) -> None:
        """Release the clock's resources."""
        ...
