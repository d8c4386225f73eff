"""Adapters - I/O implementations of ports."""

from .hex_time import HexTimeService
from .json_store import JsonUserStore, read_state, write_state
from .console_notifier import ConsoleNotifier
from .scheduler_ticker import SchedulerTicker
from .prompt_dialog import PromptFileDialog

__all__ = [
    "HexTimeService",
    "JsonUserStore",
    "read_state",
    "write_state",
    "ConsoleNotifier",
    "SchedulerTicker",
    "PromptFileDialog",
]
