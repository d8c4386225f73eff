"""Log state machine - the mutations that keep the log consistent."""

import logging
from datetime import datetime
from typing import Callable

from worklog.errors import InvalidTimestamp
from worklog.ports.notifier import Notifier, Ticker
from worklog.ports.time_service import TimeService

from .entry import OPEN, LogEntry
from .fields import EditableField, RenameCategory, SettingKey
from .state import LogState, Outcome

logger = logging.getLogger(__name__)


class LogMachine:
    """
    Applies start/stop/resume/add/edit/delete/rename/set/invert to a LogState.

    At most one entry may be open, and only the last one. Every APPLIED
    operation notifies the user and signals on_log_changed exactly once.
    """

    def __init__(
        self,
        state: LogState,
        time: TimeService,
        notifier: Notifier,
        ticker: Ticker,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.state = state
        self.time = time
        self.notifier = notifier
        self.ticker = ticker
        self.now = now

    def _applied(self, message: str) -> Outcome:
        self.notifier.notify(message)
        self.notifier.on_log_changed()
        return Outcome.APPLIED

    def _ignored(self, reason: str) -> Outcome:
        logger.debug(f"Ignored: {reason}")
        return Outcome.IGNORED

    def _rejected(self, message: str) -> Outcome:
        logger.debug(f"Rejected: {message}")
        self.notifier.notify(message)
        return Outcome.REJECTED

    def _stamp(self) -> str:
        return self.time.to_canonical(self.now())

    # ============== Timing ==============

    def start(self, sector: str | None, project: str | None, description: str | None) -> Outcome:
        """Open a new entry unless one is already running."""
        if self.state.is_running:
            return self._ignored("an entry is already running")

        entry = LogEntry(
            start=self._stamp(),
            end=OPEN,
            sector=sector,
            project=project,
            description=description,
        )
        self.state.entries.append(entry)
        return self._applied(f"Log started: {entry.label()}")

    def stop(self) -> Outcome:
        """Close the running entry."""
        last = self.state.last
        if last is None or not last.is_open:
            return self._ignored("nothing is running")

        last.end = self._stamp()
        self.ticker.cancel()
        return self._applied(f"Log ended: {last.label()}")

    def resume(self, index: int = -1) -> Outcome:
        """Start a new entry with the labels of an earlier one (default: last)."""
        try:
            entry = self.state.entries[index]
        except IndexError:
            return self._ignored(f"no entry at index {index}")
        if entry.is_open or self.state.is_running:
            return self._ignored("an entry is already running")

        self.state.entries.append(
            LogEntry(
                start=self._stamp(),
                end=OPEN,
                sector=entry.sector,
                project=entry.project,
                description=entry.description,
            )
        )
        return self._applied(f"Log resumed: {entry.label()}")

    def add(
        self,
        sector: str | None,
        project: str | None,
        description: str | None,
        start_text: str | None,
        end_text: str | None,
    ) -> Outcome:
        """Add a finished entry from user-typed start and end times.

        While an entry is running the new one goes just before it, so the
        open entry stays last.
        """
        try:
            start = self.time.parse_user_text(start_text or "")
            end = self.time.parse_user_text(end_text or "")
        except InvalidTimestamp as e:
            return self._rejected(f'Invalid date: "{e.text}"')

        entry = LogEntry(
            start=start,
            end=end,
            sector=sector,
            project=project,
            description=description,
        )
        if self.state.is_running:
            self.state.entries.insert(len(self.state.entries) - 1, entry)
        else:
            self.state.entries.append(entry)
        return self._applied(f"Log added: {entry.label()}")

    # ============== Editing ==============

    def edit(self, index: int | None, attr: str | None, value: str | None) -> Outcome:
        """Overwrite one field of the entry at a 0-based index."""
        entry = self.state.entry_at(index)
        if entry is None:
            return self._ignored(f"no entry at index {index}")
        target = EditableField.from_alias(attr)
        if target is None:
            return self._ignored(f"unknown field {attr!r}")

        if target.is_boundary:
            try:
                boundary = self.time.parse_user_text(value or "")
            except InvalidTimestamp as e:
                return self._rejected(f'Invalid date: "{e.text}"')
            if target is EditableField.START:
                entry.start = boundary
            else:
                entry.end = boundary
        elif target is EditableField.SECTOR:
            entry.sector = value
        elif target is EditableField.PROJECT:
            entry.project = value
        else:
            entry.description = value

        return self._applied(f'Entry {index + 1} updated: {target.value} set to "{value}"')

    def delete(self, index: int | None) -> Outcome:
        """Remove the entry at a 0-based index."""
        if self.state.entry_at(index) is None:
            return self._ignored(f"no entry at index {index}")

        del self.state.entries[index]
        return self._applied(f"Entry {index + 1} deleted")

    def rename(self, category: str | None, old_name: str | None, new_name: str | None) -> Outcome:
        """Rewrite a sector or project label on every entry that carries it."""
        target = RenameCategory.from_alias(category)
        if target is None:
            return self._ignored(f"unknown category {category!r}")
        if old_name is None:
            return self._ignored("no name to rename")

        if target is RenameCategory.SECTOR:
            matches = self.state.entries_by_sector(old_name)
        else:
            matches = self.state.entries_by_project(old_name)

        if not matches:
            self.notifier.notify(f'The {target.value} "{old_name}" does not exist in your logs.')
            return Outcome.NOT_FOUND

        for entry in matches:
            if target is RenameCategory.SECTOR:
                entry.sector = new_name
            else:
                entry.project = new_name

        return self._applied(f'The {target.value} "{old_name}" has been renamed to "{new_name}".')

    # ============== Interface ==============

    def set(self, attr: str | None, value: str | None) -> Outcome:
        """Change one interface preference."""
        key = SettingKey.from_alias(attr)
        if key is None:
            return self._ignored(f"unknown setting {attr!r}")

        try:
            self.state.config.apply(key, value or "")
        except ValueError:
            return self._rejected(f'Invalid value for {key.value}: "{value}"')

        return self._applied(f'{key.value} set to "{value}"')

    def invert(self) -> Outcome:
        """Swap the background and text colours."""
        self.state.config.invert()
        return self._applied("Interface colours inverted")
