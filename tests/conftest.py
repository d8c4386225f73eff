"""Shared pytest fixtures for worklog tests."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from worklog.adapters.hex_time import HexTimeService
from worklog.core.dispatch import Dispatcher
from worklog.core.entry import OPEN, LogEntry
from worklog.core.machine import LogMachine
from worklog.core.state import LogState


@pytest.fixture
def now():
    return datetime(2025, 1, 15, 9, 30)


@pytest.fixture
def time_service(now):
    return HexTimeService(now=lambda: now)


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def ticker():
    return MagicMock()


@pytest.fixture
def state():
    return LogState()


@pytest.fixture
def machine(state, time_service, notifier, ticker, now):
    return LogMachine(state, time_service, notifier, ticker, now=lambda: now)


@pytest.fixture
def dispatcher(machine):
    return Dispatcher(machine)


@pytest.fixture
def make_entry(time_service):
    """Factory for closed entries at a given hour on 2025-01-14."""
    def _make(
        sector: str = "work",
        project: str = "site",
        description: str = "build",
        hour: int = 9,
        open_: bool = False,
    ) -> LogEntry:
        start = time_service.to_canonical(datetime(2025, 1, 14, hour, 0))
        end = OPEN if open_ else time_service.to_canonical(datetime(2025, 1, 14, hour, 45))
        return LogEntry(start=start, end=end, sector=sector, project=project, description=description)
    return _make
