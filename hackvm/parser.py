"""Reading stack machine source lines and driving the assembly writer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .code import CodeWriter
from .utils import MAX_CONSTANT_VALUE, MAX_POINTER_INDEX, MAX_TEMP_INDEX, clear_line

# popping into the constant segment is not allowed
_POP_PATTERN = re.compile(
    r"pop (argument|local|this|that|static|pointer|temp) [0-9]"
)
_PUSH_PATTERN = re.compile(
    r"push (argument|local|this|that|static|constant|pointer|temp) [0-9]"
)
_ARITHMETIC_PATTERN = re.compile(r"(add|sub|eq|gt|lt|and|or|neg|not)")
_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")

_INDEX_LIMITS = {
    "pointer": MAX_POINTER_INDEX,
    "temp": MAX_TEMP_INDEX,
}
_PUSH_LIMITS = {**_INDEX_LIMITS, "constant": MAX_CONSTANT_VALUE}


class BadInstructionError(ValueError):
    """Raised for a source line that is not a valid command."""

    def __init__(self, line: str, line_number: int) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(f"Bad instruction at line {line_number + 1}: '{line}'")


@dataclass(frozen=True)
class Command:
    """One parsed command: push, pop, or an arithmetic operation."""

    operation: str
    segment: str | None = None
    index: int | None = None


def _leading_integer(text: str) -> int:
    match = _LEADING_INTEGER.match(text)
    return int(match.group()) if match else 0


def _memory_command(operation: str, line: str, limits: dict[str, int]) -> Command:
    parts = [part for part in line.split(" ") if part]
    if len(parts) != 3:
        raise ValueError(f"expected three words in {line!r}")
    segment, index_text = parts[1], parts[2]
    index = _leading_integer(index_text)
    limit = limits.get(segment)
    if limit is not None and index > limit:
        raise ValueError(f"index {index} out of range for segment {segment!r}")
    return Command(operation, segment, index)


def parse_command(line: str) -> Command | None:
    """Parse one source line; return None for blank or comment-only lines.

    Raises ValueError when the line is not a valid command.
    """
    text = clear_line(line)
    if not text:
        return None
    if _POP_PATTERN.search(text):
        return _memory_command("pop", text, _INDEX_LIMITS)
    if _PUSH_PATTERN.search(text):
        return _memory_command("push", text, _PUSH_LIMITS)
    if _ARITHMETIC_PATTERN.fullmatch(text):
        return Command(text)
    raise ValueError(f"unknown command {text!r}")


def scan(source: Iterable[str], writer: CodeWriter) -> None:
    """Translate every line of source through writer.

    The setup code is written first and the closing loop last. The first
    invalid line stops the translation with BadInstructionError.
    """
    writer.write_setup()
    for line_number, line in enumerate(source):
        try:
            command = parse_command(line)
        except ValueError as error:
            raise BadInstructionError(clear_line(line), line_number) from error
        if command is None:
            continue
        if command.operation == "push":
            writer.write_push(command.segment, command.index)
        elif command.operation == "pop":
            writer.write_pop(command.segment, command.index)
        else:
            writer.write_arithmetic(command.operation)
    writer.write_end()