"""Log entry domain model - no I/O dependencies."""

from dataclasses import dataclass

# Persisted marker for an entry that has not ended yet
OPEN_MARKER = "undefined"


class _Open:
    """Sentinel type for the end boundary of a running entry."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OPEN"


OPEN = _Open()


@dataclass
class LogEntry:
    """One recorded (or in-progress) activity interval."""

    start: str
    end: "str | _Open"
    sector: str | None
    project: str | None
    description: str | None

    @property
    def is_open(self) -> bool:
        return self.end is OPEN

    def label(self) -> str:
        """Sector, project and description joined for notifications."""
        return f"{self.sector} - {self.project} - {self.description}"

    def to_dict(self) -> dict:
        """Serialize to the persisted s/e/c/t/d shape."""
        return {
            "s": self.start,
            "e": OPEN_MARKER if self.is_open else self.end,
            "c": self.sector,
            "t": self.project,
            "d": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LogEntry":
        """Create LogEntry from its persisted shape."""
        end = data.get("e", OPEN_MARKER)
        return cls(
            start=data["s"],
            end=OPEN if end in (OPEN_MARKER, None) else end,
            sector=data.get("c"),
            project=data.get("t"),
            description=data.get("d"),
        )
