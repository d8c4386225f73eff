"""Functional core - command grammar and log bookkeeping, no I/O."""

from .entry import OPEN, LogEntry
from .commands import Command, OperationKind, parse_command, resolve_operation
from .fields import EditableField, RenameCategory, SettingKey
from .state import LogState, Outcome, UiConfig
from .machine import LogMachine
from .dispatch import Dispatcher

__all__ = [
    # Entries
    "OPEN",
    "LogEntry",
    # Commands
    "Command",
    "OperationKind",
    "parse_command",
    "resolve_operation",
    # Fields
    "EditableField",
    "RenameCategory",
    "SettingKey",
    # State
    "LogState",
    "Outcome",
    "UiConfig",
    "LogMachine",
    "Dispatcher",
]
