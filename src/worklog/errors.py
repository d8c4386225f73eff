"""Exceptions raised by worklog."""


class WorklogError(Exception):
    """Base class for worklog errors."""

    pass


class InvalidTimestamp(WorklogError, ValueError):
    """Raised when user-typed date/time text cannot be parsed."""

    def __init__(self, text: str):
        super().__init__(f"Cannot parse date/time: {text!r}")
        self.text = text


class StoreError(WorklogError):
    """Raised when user data cannot be written."""

    pass
