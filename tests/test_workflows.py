"""Tests for the session layer."""

import json
from unittest.mock import MagicMock

import pytest

from worklog.adapters.json_store import JsonUserStore, write_state
from worklog.config import Config
from worklog.core.entry import OPEN, LogEntry
from worklog.core.state import LogState, Outcome
from worklog.workflows import Session, build_session, load_history


@pytest.fixture
def store():
    store = MagicMock()
    store.load.return_value = LogState()
    return store


@pytest.fixture
def dialog():
    return MagicMock()


@pytest.fixture
def session(store, time_service, notifier, ticker, dialog, now, tmp_path):
    return Session(
        store=store,
        time=time_service,
        notifier=notifier,
        ticker=ticker,
        dialog=dialog,
        history_path=tmp_path / "history.txt",
        history_size=3,
        now=lambda: now,
    )


class TestRunLine:
    def test_start_starts_clock(self, session, ticker):
        assert session.run_line('start "work" "site" "build"') is Outcome.APPLIED
        ticker.start.assert_called_once_with(session.state.entries[0].start)

    def test_stop_cancels_clock(self, session, ticker):
        session.run_line('start "work" "site" "build"')
        session.run_line("stop")
        ticker.cancel.assert_called()
        assert ticker.start.call_count == 1

    def test_delete_running_cancels_clock(self, session, ticker):
        session.run_line('start "a" "b" "c"')

        assert session.run_line('delete "1"') is Outcome.APPLIED

        assert session.state.entries == []
        ticker.cancel.assert_called_once()

    def test_edit_end_of_running_cancels_clock(self, session, ticker):
        session.run_line('start "a" "b" "c"')

        assert session.run_line('edit "1" "end" "2025-01-15 10:00"') is Outcome.APPLIED

        assert not session.state.is_running
        ticker.cancel.assert_called_once()

    def test_edit_label_of_running_keeps_clock(self, session, ticker):
        session.run_line('start "a" "b" "c"')
        session.run_line('edit "1" "desc" "renamed"')
        ticker.cancel.assert_not_called()

    def test_not_a_command(self, session, notifier):
        assert session.run_line('xyz "a"') is None
        assert session.state.entries == []
        notifier.notify.assert_not_called()

    def test_blank_line_not_recorded(self, session):
        assert session.run_line("   ") is None
        assert session.history == []

    def test_ignored_does_not_restart_clock(self, session, ticker):
        session.run_line('start "a" "b" "c"')
        session.run_line('start "a" "b" "c"')
        assert ticker.start.call_count == 1

    def test_resume_clock_on_open_log(self, store, time_service, notifier, ticker, dialog):
        store.load.return_value = LogState(
            entries=[LogEntry(start="67870a00", end=OPEN, sector="a", project="b", description="c")]
        )
        session = Session(store, time_service, notifier, ticker, dialog)

        session.resume_clock()

        ticker.start.assert_called_once_with("67870a00")


class TestHistory:
    def test_keeps_most_recent(self, session):
        for line in ["stop", "invert", "resume", 'xyz "a"']:
            session.run_line(line)
        assert session.history == ["invert", "resume", 'xyz "a"']

    def test_appends_to_file(self, session, tmp_path):
        session.run_line("invert")
        session.run_line("invert")
        assert (tmp_path / "history.txt").read_text() == "invert\ninvert\n"

    def test_load_history_limit(self, tmp_path):
        path = tmp_path / "history.txt"
        path.write_text("a\nb\n\nc\n")
        assert load_history(path, 2) == ["b", "c"]

    def test_load_history_missing(self, tmp_path):
        assert load_history(tmp_path / "none.txt", 10) == []


class TestImport:
    def test_replaces_state(self, session, dialog, notifier, ticker, tmp_path):
        path = tmp_path / "backup.json"
        imported = LogState(entries=[LogEntry(start="1", end="2", sector="a", project="b", description="c")])
        imported.config.font = "serif"
        write_state(path, imported)
        dialog.choose_open.return_value = path
        state = session.state

        assert session.run_line("import") is Outcome.APPLIED

        assert session.state is state
        assert session.machine.state is state
        assert state == imported
        ticker.cancel.assert_called_once()
        notifier.notify.assert_called_once_with("Your log data was successfully imported.")
        notifier.on_log_changed.assert_called_once()

    def test_cancelled(self, session, dialog, notifier):
        dialog.choose_open.return_value = None
        assert session.run_line("import") is Outcome.IGNORED
        notifier.notify.assert_not_called()

    def test_bad_file(self, session, dialog, notifier, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json")
        dialog.choose_open.return_value = path
        session.run_line('start "a" "b" "c"')
        notifier.reset_mock()

        assert session.run_line("import") is Outcome.REJECTED

        assert len(session.state.entries) == 1
        notifier.notify.assert_called_once_with("An error occurred while trying to load this file.")
        notifier.on_log_changed.assert_not_called()


class TestExport:
    def test_writes_file(self, session, dialog, notifier, tmp_path):
        session.run_line('start "work" "site" "build"')
        path = tmp_path / "out" / "export.json"
        dialog.choose_save.return_value = path
        notifier.reset_mock()

        assert session.run_line("export") is Outcome.APPLIED

        data = json.loads(path.read_text())
        assert data["log"][0]["c"] == "work"
        assert data["log"][0]["e"] == "undefined"
        notifier.notify.assert_called_once_with("Your log data has been exported.")
        notifier.on_log_changed.assert_not_called()

    def test_cancelled(self, session, dialog):
        dialog.choose_save.return_value = None
        assert session.run_line("export") is Outcome.IGNORED

    def test_write_failure(self, session, dialog, notifier, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("")
        dialog.choose_save.return_value = blocker / "export.json"

        assert session.run_line("export") is Outcome.REJECTED
        message = notifier.notify.call_args.args[0]
        assert message.startswith("An error occurred creating the file:")


class TestBuildSession:
    def test_saves_on_change(self, tmp_path, monkeypatch):
        monkeypatch.setattr("worklog.workflows.HISTORY_FILE", tmp_path / "history.txt")
        data_file = tmp_path / "user.json"
        session = build_session(Config(data_file=str(data_file), notify_style="quiet"))
        try:
            session.run_line('add "work" "site" "retro" "2025-01-10 09:00" "2025-01-10 10:00"')
        finally:
            session.close()

        loaded = JsonUserStore(data_file).load()
        assert len(loaded.entries) == 1
        assert loaded.entries[0].description == "retro"

    def test_ignored_does_not_save(self, tmp_path, monkeypatch):
        monkeypatch.setattr("worklog.workflows.HISTORY_FILE", tmp_path / "history.txt")
        data_file = tmp_path / "user.json"
        session = build_session(Config(data_file=str(data_file), notify_style="quiet"))
        try:
            session.run_line("stop")
        finally:
            session.close()

        assert not data_file.exists()
