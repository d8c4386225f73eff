"""User data storage interface."""

from typing import Protocol

from worklog.core.state import LogState


class UserStore(Protocol):
    """Interface for loading and saving the log and its configuration."""

    def load(self) -> LogState:
        """Load user data. Returns an empty state if none is stored."""
        ...

    def save(self, state: LogState) -> None:
        """Persist user data."""
        ...
