"""Console notification adapter."""

import logging
from typing import Callable

import click

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """
    Prints notifications to the terminal.

    Implements Notifier protocol. Change listeners run in registration order.
    """

    def __init__(self, style: str = "plain", echo: Callable[[str], None] = click.echo):
        self.style = style
        self.echo = echo
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, listener: Callable[[], None]) -> None:
        """Register a callback for on_log_changed."""
        self._listeners.append(listener)

    def notify(self, message: str) -> None:
        logger.info(message)
        if self.style != "quiet":
            self.echo(message)

    def on_log_changed(self) -> None:
        for listener in self._listeners:
            listener()
