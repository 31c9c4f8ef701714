# hackvm

`hackvm` translates programs for the Hack stack-based virtual machine
(`.vm` files) into Hack assembly (`.asm` files).

## Installation

```
pip install .
```

## Command line

```
vm-translator path/to/Program.vm
```

This writes `path/to/Program.asm` next to the source. The output name is the
source's base name up to its first dot, followed by `.asm`.

The command takes exactly one path. With any other number of arguments it
prints `Usage: vm-translator <source-file>` on standard error and exits with
status 1. It also exits with status 1, after a message on standard error,
when a file cannot be opened or when a line cannot be translated, for example:

```
Bad instruction at line 3: 'pop constant 1'
```

Translation stops at the first bad line; the `.asm` file keeps what was
written up to that point.

## Supported VM commands

- `push <segment> <index>`, where `<segment>` is one of `argument`, `local`,
  `this`, `that`, `static`, `constant`, `pointer` or `temp`
- `pop <segment> <index>`, with the same segments except `constant`
- arithmetic and logic: `add`, `sub`, `neg`, `eq`, `gt`, `lt`, `and`, `or`, `not`

Words are separated by single spaces and a `push` or `pop` line must have
exactly three words. The index must start with a digit. These limits apply:

- `pointer` indices are 0 or 1 (0 is `THIS`, 1 is `THAT`)
- `temp` indices run from 0 to 7 (RAM addresses 5 to 12)
- `constant` values are at most 32767

Blank lines are skipped. Everything from the first `/` on a line counts as a
comment and is ignored.

`static` variables become symbols named after the source file, so
`push static 3` in `Foo.vm` refers to `@Foo.3`.

The generated program first sets `SP` to 256 and contains shared routines for
`eq`, `gt` and `lt`; each comparison jumps into its routine and returns through
a numbered label such as `RET_ADDRESS_EQ0`. The program ends in an infinite
`(END)` loop.

## Library use

```python
import io

from hackvm.code import CodeWriter
from hackvm.parser import BadInstructionError, parse_command, scan

source = io.StringIO("push constant 7\npush constant 8\nadd\n")
output = io.StringIO()
writer = CodeWriter(output, "Main")

try:
    scan(source, writer)
except BadInstructionError as error:
    print(error.line_number, error.line)

print(output.getvalue())

print(parse_command("push local 2 // comment"))
# Command(operation='push', segment='local', index=2)
```

- `hackvm.parser.scan(source, writer)` writes the setup code, translates each
  line of any iterable of strings and writes the closing loop. It raises
  `BadInstructionError` (a `ValueError`, with `line` and zero-based
  `line_number` attributes) at the first invalid line.
- `hackvm.parser.parse_command(line)` returns a `Command`, or `None` for a
  blank or comment-only line, and raises `ValueError` for an invalid one.
- `hackvm.code.CodeWriter` has `write_push`, `write_pop`, `write_arithmetic`,
  `write_setup` and `write_end`; `hackvm.code.segment_to_label` maps a segment
  name to its assembly symbol (`argument` → `ARG`, `local` → `LCL`, others in
  upper case).
- `hackvm.cli.translate_file(path)` translates one `.vm` file on disk, writes
  the `.asm` file next to it and returns the output path.
- `hackvm.utils` holds the line cleaning and file naming helpers
  (`clear_line`, `strip`, `get_file_name`, `output_path`, `open_source_file`,
  `open_output_file`).

## What it does not do

- Only memory access and arithmetic commands are translated. Program flow and
  function commands (`label`, `goto`, `if-goto`, `function`, `call`,
  `return`) are reported as bad instructions.
- One file is translated at a time; there is no handling of directories of
  `.vm` files and no bootstrap code that calls `Sys.init`.

## Running the tests

```
pip install .[test]
pytest
```