"""Command line entry point: translate one source file into assembly."""

from __future__ import annotations

import sys

from .code import CodeWriter
from .parser import BadInstructionError, scan
from .utils import get_file_name, open_output_file, open_source_file, output_path

_USAGE = "Usage: vm-translator <source-file>"


def translate_file(file_path: str) -> str:
    """Translate file_path into the matching .asm file and return its path.

    Raises OSError when a file cannot be opened and BadInstructionError for
    an invalid source line.
    """
    try:
        source = open_source_file(file_path)
    except OSError as error:
        raise OSError(f"Error opening source file: {error}") from error
    with source:
        try:
            output = open_output_file(file_path)
        except OSError as error:
            raise OSError(f"Error opening output file: {error}") from error
        with output:
            writer = CodeWriter(output, get_file_name(file_path))
            scan(source, writer)
    return output_path(file_path)


def main(argv: list[str] | None = None) -> int:
    """Run the translator on the single path given in argv."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(_USAGE, file=sys.stderr)
        return 1
    try:
        translate_file(args[0])
    except (OSError, BadInstructionError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())