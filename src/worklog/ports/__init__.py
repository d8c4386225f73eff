"""Ports - interfaces/protocols for external dependencies."""

from .time_service import TimeService
from .notifier import Notifier, Ticker
from .user_store import UserStore
from .file_dialog import FileDialog

__all__ = [
    "TimeService",
    "Notifier",
    "Ticker",
    "UserStore",
    "FileDialog",
]
