"""Command grammar - tokenizer and operation registry, no I/O."""

from dataclasses import dataclass, field
from enum import Enum


class OperationKind(Enum):
    """Canonical operations understood by the interpreter."""

    START = "start"
    STOP = "stop"
    RESUME = "resume"
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"
    SET = "set"
    IMPORT = "import"
    EXPORT = "export"
    RENAME = "rename"
    INVERT = "invert"


OPERATION_ALIASES: dict[OperationKind, tuple[str, ...]] = {
    OperationKind.START: ("start", "begin"),
    OperationKind.STOP: ("stop", "end", "pause"),
    OperationKind.RESUME: ("resume", "continue"),
    OperationKind.ADD: ("add", "new"),
    OperationKind.EDIT: ("edit",),
    OperationKind.DELETE: ("delete",),
    OperationKind.SET: ("set",),
    OperationKind.IMPORT: ("import",),
    OperationKind.EXPORT: ("export",),
    OperationKind.RENAME: ("rename",),
    OperationKind.INVERT: ("invert",),
}

_ALIAS_LOOKUP: dict[str, OperationKind] = {
    alias: kind for kind, aliases in OPERATION_ALIASES.items() for alias in aliases
}


def resolve_operation(token: str) -> OperationKind | None:
    """Map an operation token (any alias, any case) to its canonical kind."""
    return _ALIAS_LOOKUP.get(token.lower())


@dataclass
class Command:
    """A parsed user instruction."""

    operation: str
    args: list[str] = field(default_factory=list)

    @property
    def kind(self) -> OperationKind | None:
        return resolve_operation(self.operation)

    def to_text(self) -> str:
        """Rebuild an input line that parses back to this command."""
        return " ".join([self.operation, *(f'"{arg}"' for arg in self.args)])


def quoted_args(text: str) -> list[str]:
    """
    Extract quote-wrapped arguments from text.

    Everything outside a pair of double quotes is discarded, and an
    unterminated trailing quote drops its partial argument.
    """
    args = []
    inside = False
    buffer = []
    for ch in text:
        if ch == '"':
            if inside:
                args.append("".join(buffer))
                buffer = []
            inside = not inside
        elif inside:
            buffer.append(ch)
    return args


def parse_command(raw: str) -> Command | None:
    """
    Parse a raw input line into a Command.

    Grammar:
        command   := operation { arg }
        operation := any alias in OPERATION_ALIASES
        arg       := '"' word { word } '"'

    Returns None when the first word is not a known operation.
    """
    operation = raw.split(" ", 1)[0].lower()
    if resolve_operation(operation) is None:
        return None
    return Command(operation=operation, args=quoted_args(raw))
