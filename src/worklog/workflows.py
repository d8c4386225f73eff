"""Session layer between the CLI and the functional core.

A Session owns one user's LogState, runs input lines through the parser and
dispatcher, and handles import/export, history and the running clock.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from .adapters.console_notifier import ConsoleNotifier
from .adapters.hex_time import HexTimeService
from .adapters.json_store import JsonUserStore, read_state, write_state
from .adapters.prompt_dialog import PromptFileDialog
from .adapters.scheduler_ticker import SchedulerTicker
from .config import HISTORY_FILE, Config
from .core.commands import parse_command
from .core.dispatch import Dispatcher
from .core.machine import LogMachine
from .core.state import Outcome
from .ports.file_dialog import FileDialog
from .ports.notifier import Notifier, Ticker
from .ports.time_service import TimeService
from .ports.user_store import UserStore

logger = logging.getLogger(__name__)


def load_history(path: Path, limit: int) -> list[str]:
    """Most recent `limit` lines of a history file."""
    if not path.exists():
        return []
    lines = [line for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
    return lines[-limit:]


class Session:
    """One interactive worklog session."""

    def __init__(
        self,
        store: UserStore,
        time: TimeService,
        notifier: Notifier,
        ticker: Ticker,
        dialog: FileDialog,
        history_path: Path | None = None,
        history_size: int = 100,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.state = store.load()
        self.notifier = notifier
        self.ticker = ticker
        self.dialog = dialog
        self.history_path = history_path
        self.history_size = history_size
        self.history: list[str] = []
        self.machine = LogMachine(self.state, time, notifier, ticker, now=now)
        self.dispatcher = Dispatcher(
            self.machine,
            import_data=self.import_data,
            export_data=self.export_data,
        )

    def run_line(self, raw: str) -> Outcome | None:
        """Parse and apply one input line. Returns None if it was not a command."""
        if not raw.strip():
            return None
        self.record(raw)

        cmd = parse_command(raw)
        if cmd is None:
            logger.debug(f"Discarded input: {raw!r}")
            return None

        outcome = self.dispatcher.dispatch(cmd)
        logger.debug(f"{cmd.operation} {cmd.args} -> {outcome.value}")
        if outcome is Outcome.APPLIED:
            self._sync_clock()
        return outcome

    def _sync_clock(self) -> None:
        # delete or edit can remove or close the running entry
        if self.state.is_running:
            self.ticker.start(self.state.last.start)
        else:
            self.ticker.cancel()

    def resume_clock(self) -> None:
        """Start the clock if the stored log has a running entry."""
        if self.state.is_running:
            self.ticker.start(self.state.last.start)

    def record(self, raw: str) -> None:
        self.history.append(raw)
        del self.history[: -self.history_size]
        if self.history_path is not None:
            self.history_path.parent.mkdir(parents=True, exist_ok=True)
            with self.history_path.open("a", encoding="utf-8") as f:
                f.write(raw.replace("\n", " ") + "\n")

    def save(self) -> None:
        self.store.save(self.state)

    def close(self) -> None:
        self.ticker.shutdown()

    # ============== Import / Export ==============

    def import_data(self) -> Outcome:
        """Replace the log and config with the contents of a chosen file."""
        path = self.dialog.choose_open()
        if path is None:
            return Outcome.IGNORED

        try:
            imported = read_state(path)
        except (OSError, ValueError) as e:
            logger.warning(f"Import from {path} failed: {e}")
            self.notifier.notify("An error occurred while trying to load this file.")
            return Outcome.REJECTED

        self.state.replace(imported)
        self.notifier.notify("Your log data was successfully imported.")
        self.notifier.on_log_changed()
        return Outcome.APPLIED

    def export_data(self) -> Outcome:
        """Write the log and config to a chosen file."""
        path = self.dialog.choose_save()
        if path is None:
            return Outcome.IGNORED

        try:
            write_state(path, self.state)
        except OSError as e:
            self.notifier.notify(f"An error occurred creating the file: {e.strerror or e}")
            return Outcome.REJECTED

        self.notifier.notify("Your log data has been exported.")
        return Outcome.APPLIED


def build_session(config: Config, render: Callable[[str], None] | None = None) -> Session:
    """Wire the default adapters into a Session."""
    time = HexTimeService()
    notifier = ConsoleNotifier(style=config.notify_style)
    ticker = SchedulerTicker(
        time,
        render or (lambda elapsed: None),
        interval_seconds=config.tick_seconds,
    )
    session = Session(
        store=JsonUserStore(config.data_path),
        time=time,
        notifier=notifier,
        ticker=ticker,
        dialog=PromptFileDialog(),
        history_path=HISTORY_FILE,
        history_size=config.history_size,
    )
    notifier.subscribe(session.save)
    return session
