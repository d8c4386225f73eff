"""Timestamp conversion interface."""

from datetime import datetime
from typing import Protocol


class TimeService(Protocol):
    """Interface for converting instants to canonical interval boundaries."""

    def to_canonical(self, instant: datetime) -> str:
        """Convert a wall-clock instant to a boundary value."""
        ...

    def parse_user_text(self, text: str) -> str:
        """Parse user-typed date/time text. Raises InvalidTimestamp."""
        ...

    def to_datetime(self, boundary: str) -> datetime:
        """Convert a boundary value back to a local datetime."""
        ...
