"""Tests for the terminal notifier and file prompt."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from worklog.adapters.console_notifier import ConsoleNotifier
from worklog.adapters.prompt_dialog import PromptFileDialog


class TestConsoleNotifier:
    def test_plain_echoes(self):
        echo = MagicMock()
        ConsoleNotifier(echo=echo).notify("Log started: a - b - c")
        echo.assert_called_once_with("Log started: a - b - c")

    def test_quiet_is_silent(self):
        echo = MagicMock()
        ConsoleNotifier(style="quiet", echo=echo).notify("hello")
        echo.assert_not_called()

    def test_listeners_run_in_order(self):
        calls = []
        notifier = ConsoleNotifier(echo=MagicMock())
        notifier.subscribe(lambda: calls.append("save"))
        notifier.subscribe(lambda: calls.append("refresh"))

        notifier.on_log_changed()

        assert calls == ["save", "refresh"]

    def test_no_listeners(self):
        ConsoleNotifier(echo=MagicMock()).on_log_changed()


class TestPromptFileDialog:
    @patch("worklog.adapters.prompt_dialog.click.prompt")
    def test_open_path(self, mock_prompt):
        mock_prompt.return_value = "  ~/backup.json "
        assert PromptFileDialog().choose_open() == Path.home() / "backup.json"

    @patch("worklog.adapters.prompt_dialog.click.prompt")
    def test_empty_answer_cancels(self, mock_prompt):
        mock_prompt.return_value = ""
        assert PromptFileDialog().choose_save() is None

    @patch("worklog.adapters.prompt_dialog.click.prompt")
    def test_save_path(self, mock_prompt):
        mock_prompt.return_value = "/tmp/out.json"
        assert PromptFileDialog().choose_save() == Path("/tmp/out.json")
