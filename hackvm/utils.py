"""Line cleaning, file naming and file opening helpers for the translator."""

from __future__ import annotations

import os
from typing import TextIO

LINE_BUFF = 256
MAX_CONSTANT_VALUE = 32767
MAX_POINTER_INDEX = 1
MAX_TEMP_INDEX = 7


def _is_printable(char: str) -> bool:
    return " " <= char <= "~"


def strip(line: str) -> str:
    """Remove surrounding whitespace and cut the text at the first unprintable character."""
    stripped = line.strip()
    for position, char in enumerate(stripped):
        if not _is_printable(char):
            return stripped[:position]
    return stripped


def clear_line(line: str) -> str:
    """Drop a trailing comment (anything from the first '/') and surrounding whitespace."""
    code, _, _ = line.partition("/")
    return strip(code)


def get_file_name(file_path: str) -> str:
    """Return the base name of a path without anything from its first dot on."""
    base = file_path.rpartition("/")[2]
    return base.partition(".")[0]


def output_path(file_path: str) -> str:
    """Return the path of the assembly file written for a source path."""
    directory, sep, base = file_path.rpartition("/")
    stem = base.partition(".")[0]
    return f"{directory}{sep}{stem}.asm"


def open_source_file(file_path: str | os.PathLike[str]) -> TextIO:
    """Open a source file for reading; raises OSError when that fails."""
    return open(file_path, "r", encoding="utf-8")


def open_output_file(file_path: str | os.PathLike[str]) -> TextIO:
    """Open the assembly file belonging to a source path for writing."""
    return open(output_path(os.fspath(file_path)), "w", encoding="utf-8")