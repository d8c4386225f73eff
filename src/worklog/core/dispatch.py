"""Command dispatcher - binds parsed arguments to log operations."""

import logging
from typing import Callable

from .commands import Command, OperationKind
from .machine import LogMachine
from .state import Outcome

logger = logging.getLogger(__name__)

TransferHandler = Callable[[], Outcome]


def _arg(args: list[str], position: int) -> str | None:
    """Positional argument, or None when the user left it out."""
    return args[position] if position < len(args) else None


def _row_index(row: str | None) -> int | None:
    """Convert a 1-based row number to a 0-based index, None if not a number."""
    if row is None:
        return None
    try:
        return int(row.strip()) - 1
    except ValueError:
        return None


def _lower(value: str | None) -> str | None:
    return value.lower() if value is not None else None


class Dispatcher:
    """Routes a Command to the matching LogMachine operation."""

    def __init__(
        self,
        machine: LogMachine,
        import_data: TransferHandler | None = None,
        export_data: TransferHandler | None = None,
    ):
        self.machine = machine
        self.import_data = import_data
        self.export_data = export_data

    def dispatch(self, cmd: Command) -> Outcome:
        """Apply a parsed command. Returns what happened to the log."""
        args = cmd.args
        m = self.machine

        match cmd.kind:
            case OperationKind.START:
                return m.start(_arg(args, 0), _arg(args, 1), _arg(args, 2))
            case OperationKind.STOP:
                return m.stop()
            case OperationKind.RESUME:
                return m.resume()
            case OperationKind.ADD:
                return m.add(
                    _arg(args, 0),
                    _arg(args, 1),
                    _arg(args, 2),
                    _arg(args, 3),
                    _arg(args, 4),
                )
            case OperationKind.EDIT:
                return m.edit(_row_index(_arg(args, 0)), _lower(_arg(args, 1)), _arg(args, 2))
            case OperationKind.DELETE:
                return m.delete(_row_index(_arg(args, 0)))
            case OperationKind.SET:
                # set ignores all but the first two arguments
                return m.set(_lower(_arg(args, 0)), _arg(args, 1))
            case OperationKind.RENAME:
                return m.rename(_arg(args, 0), _arg(args, 1), _arg(args, 2))
            case OperationKind.INVERT:
                return m.invert()
            case OperationKind.IMPORT:
                return self.import_data() if self.import_data else Outcome.IGNORED
            case OperationKind.EXPORT:
                return self.export_data() if self.export_data else Outcome.IGNORED

        logger.debug(f"Unknown operation: {cmd.operation!r}")
        return Outcome.REJECTED
