"""Configuration management for worklog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

WORKLOG_HOME = Path(os.environ.get("WORKLOG_HOME", Path.home() / ".worklog"))
CONFIG_FILE = WORKLOG_HOME / "config" / "worklog.conf"
DATA_DIR = WORKLOG_HOME / "data"
DATA_FILE = DATA_DIR / "user.json"
HISTORY_FILE = DATA_DIR / "history.txt"

NOTIFY_STYLES = ("plain", "quiet")


@dataclass
class Config:
    """Worklog configuration."""

    data_file: str = ""
    tick_seconds: int = 1
    notify_style: str = "plain"
    history_size: int = 100

    @property
    def data_path(self) -> Path:
        """Resolved location of the user data document."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_FILE


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default
    if parsed < 1:
        logger.warning(f"{key.upper()} must be positive, using {default}")
        return default
    return parsed


def load_config(path: Path | None = None) -> Config:
    """Load configuration from worklog.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_file":
                config.data_file = value
            case "tick_seconds":
                config.tick_seconds = _parse_int(key, value, config.tick_seconds)
            case "notify_style":
                if value.lower() in NOTIFY_STYLES:
                    config.notify_style = value.lower()
                else:
                    logger.warning(f"Unknown NOTIFY_STYLE {value!r}, using {config.notify_style}")
            case "history_size":
                config.history_size = _parse_int(key, value, config.history_size)
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config
