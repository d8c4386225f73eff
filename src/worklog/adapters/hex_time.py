"""Hex epoch time adapter - boundaries are hex-encoded Unix seconds."""

from datetime import datetime
from typing import Callable

from worklog.errors import InvalidTimestamp

_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y%m%dT%H%M%S",
)
_TIME_ONLY_FORMATS = ("%H:%M:%S", "%H:%M")


class HexTimeService:
    """
    Boundary codec using lowercase hex Unix seconds, e.g. "5a1b2c3d".

    Implements TimeService protocol. Naive datetimes are local time.
    """

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        self.now = now

    def to_canonical(self, instant: datetime) -> str:
        """Convert a wall-clock instant to a boundary value."""
        return format(int(instant.timestamp()), "x")

    def to_datetime(self, boundary: str) -> datetime:
        """Convert a boundary value back to a local datetime."""
        return datetime.fromtimestamp(int(boundary, 16))

    def parse_user_text(self, text: str) -> str:
        """
        Parse user-typed date/time text into a boundary value.

        Accepts "YYYY-MM-DD HH:MM[:SS]", ISO "YYYY-MM-DDTHH:MM[:SS]",
        compact "YYYYMMDDTHHMMSS", a bare "HH:MM[:SS]" for today, or "now".
        """
        cleaned = text.strip()
        if cleaned.lower() == "now":
            return self.to_canonical(self.now())

        for fmt in _FORMATS:
            try:
                return self.to_canonical(datetime.strptime(cleaned, fmt))
            except ValueError:
                continue

        for fmt in _TIME_ONLY_FORMATS:
            try:
                parsed = datetime.strptime(cleaned, fmt).time()
            except ValueError:
                continue
            today = self.now().date()
            return self.to_canonical(datetime.combine(today, parsed))

        raise InvalidTimestamp(text)
