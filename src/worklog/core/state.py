"""In-memory user data: the log plus interface configuration."""

from dataclasses import dataclass, field
from enum import Enum

from .entry import LogEntry
from .fields import SettingKey


class Outcome(Enum):
    """Result of applying one command to the log state."""

    APPLIED = "applied"
    IGNORED = "ignored"  # invariant violation or nothing to do
    NOT_FOUND = "not_found"  # lookup failure, user was told
    REJECTED = "rejected"  # bad input, user was told


CALENDARS = {
    "aequirys": "aequirys",
    "monocal": "monocal",
    "gregorian": "gregorian",
    "greg": "gregorian",
}
TIME_FORMATS = ("24", "12", "decimal")
COLOUR_MODES = ("sector", "project", "none")


@dataclass
class UiConfig:
    """User interface preferences stored alongside the log."""

    background: str = "#f8f8f8"
    colour: str = "#202020"
    accent: str = "#eb4e32"
    font: str = "mono"
    view: int = 28
    calendar: str = "aequirys"
    time_format: str = "24"
    date_format: str = "monthday"
    week_start: int = 0
    colour_mode: str = "sector"
    sector_colours: dict[str, str] = field(default_factory=dict)
    project_colours: dict[str, str] = field(default_factory=dict)

    def invert(self) -> None:
        """Swap background and text colours in place."""
        self.background, self.colour = self.colour, self.background

    def apply(self, key: SettingKey, value: str) -> None:
        """
        Set one preference from user text.

        Raises ValueError when the value is not acceptable for the key.
        """
        match key:
            case SettingKey.BACKGROUND:
                self.background = value
            case SettingKey.COLOUR:
                self.colour = value
            case SettingKey.ACCENT:
                self.accent = value
            case SettingKey.FONT:
                self.font = value
            case SettingKey.VIEW:
                view = int(value)
                if view < 0:
                    raise ValueError(f"view must not be negative: {view}")
                self.view = view
            case SettingKey.CALENDAR:
                calendar = CALENDARS.get(value.lower())
                if calendar is None:
                    raise ValueError(f"unknown calendar: {value!r}")
                self.calendar = calendar
            case SettingKey.TIME_FORMAT:
                if value.lower() not in TIME_FORMATS:
                    raise ValueError(f"unknown time format: {value!r}")
                self.time_format = value.lower()
            case SettingKey.DATE_FORMAT:
                self.date_format = value
            case SettingKey.WEEK_START:
                week_start = int(value)
                if not 0 <= week_start <= 6:
                    raise ValueError(f"weekstart must be 0-6: {week_start}")
                self.week_start = week_start
            case SettingKey.SECTOR_COLOUR:
                name, colour = _split_name_colour(value)
                self.sector_colours[name] = colour
            case SettingKey.PROJECT_COLOUR:
                name, colour = _split_name_colour(value)
                self.project_colours[name] = colour
            case SettingKey.COLOUR_MODE:
                if value.lower() not in COLOUR_MODES:
                    raise ValueError(f"unknown colour mode: {value!r}")
                self.colour_mode = value.lower()

    def to_dict(self) -> dict:
        return {
            "bg": self.background,
            "colour": self.colour,
            "accent": self.accent,
            "font": self.font,
            "view": self.view,
            "calendar": self.calendar,
            "timeFormat": self.time_format,
            "dateFormat": self.date_format,
            "weekStart": self.week_start,
            "colourMode": self.colour_mode,
            "colourCode": dict(self.sector_colours),
            "projectColourCode": dict(self.project_colours),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UiConfig":
        defaults = cls()
        return cls(
            background=data.get("bg", defaults.background),
            colour=data.get("colour", defaults.colour),
            accent=data.get("accent", defaults.accent),
            font=data.get("font", defaults.font),
            view=int(data.get("view", defaults.view)),
            calendar=data.get("calendar", defaults.calendar),
            time_format=str(data.get("timeFormat", defaults.time_format)),
            date_format=data.get("dateFormat", defaults.date_format),
            week_start=int(data.get("weekStart", defaults.week_start)),
            colour_mode=data.get("colourMode", defaults.colour_mode),
            sector_colours=dict(data.get("colourCode", {})),
            project_colours=dict(data.get("projectColourCode", {})),
        )


def _split_name_colour(value: str) -> tuple[str, str]:
    """Split '<name> <colour>' on the last space."""
    name, _, colour = value.rpartition(" ")
    if not name or not colour:
        raise ValueError(f"expected '<name> <colour>', got {value!r}")
    return name, colour


@dataclass
class LogState:
    """The log and interface configuration of one user."""

    entries: list[LogEntry] = field(default_factory=list)
    config: UiConfig = field(default_factory=UiConfig)

    @property
    def last(self) -> LogEntry | None:
        return self.entries[-1] if self.entries else None

    @property
    def is_running(self) -> bool:
        """True when the most recent entry has not ended."""
        return self.last is not None and self.last.is_open

    def entry_at(self, index: int | None) -> LogEntry | None:
        """Entry at a 0-based index, or None when out of range."""
        if index is None or not 0 <= index < len(self.entries):
            return None
        return self.entries[index]

    def entries_by_sector(self, sector: str) -> list[LogEntry]:
        return [e for e in self.entries if e.sector == sector]

    def entries_by_project(self, project: str) -> list[LogEntry]:
        return [e for e in self.entries if e.project == project]

    def replace(self, other: "LogState") -> None:
        """Take over another state's contents, keeping this object's identity."""
        self.entries[:] = other.entries
        self.config = other.config

    def to_dict(self) -> dict:
        return {
            "log": [e.to_dict() for e in self.entries],
            "config": {"ui": self.config.to_dict()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LogState":
        config = data.get("config") or {}
        return cls(
            entries=[LogEntry.from_dict(e) for e in data.get("log", [])],
            config=UiConfig.from_dict(config.get("ui") or {}),
        )
