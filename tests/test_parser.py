import io

import pytest

from hackvm.code import CodeWriter
from hackvm.parser import BadInstructionError, Command, parse_command, scan

POP_FAIL = "\n".join(
    [
        "pop constant 0",
        "pop",
        "pop static 10 1",
        "pop static -10",
        "pop pointer 2",
        "pop temp 8",
    ]
) + "\n"

POP_SUCCESS = [
    "pop argument 0",
    "pop local 0",
    "pop this 0",
    "pop that 0",
    "pop static 0",
    "pop pointer 0",
    "pop pointer 1",
    "pop temp 0",
    "pop temp 7",
    "pop argument 1",
    "pop local 1",
    "pop this 1",
    "pop that 1",
    "pop static 1",
    "pop temp 3",
]

PUSH_FAIL = "\n".join(
    [
        "push",
        "push static 10 1",
        "push static -10",
        "push constant 32768",
        "push pointer 2",
        "push temp 8",
    ]
) + "\n"

PUSH_SUCCESS = [
    "push argument 0",
    "push local 0",
    "push this 0",
    "push that 0",
    "push static 0",
    "push constant 0",
    "push pointer 0",
    "push temp 0",
    "push argument 1",
    "push local 1",
    "push this 1",
    "push that 1",
    "push static 1",
    "push constant 32767",
    "push pointer 1",
    "push temp 7",
]

ARITHMETIC_FAIL = "ad\nsb\ne\n"

ARITHMETIC_SUCCESS = ["add", "sub", "eq", "gt", "lt", "and", "or", "neg", "not"]


def _setup_text():
    out = io.StringIO()
    CodeWriter(out, "Foo").write_setup()
    return out.getvalue()


def _expected_output(commands):
    out = io.StringIO()
    writer = CodeWriter(out, "Foo")
    writer.write_setup()
    for command in commands:
        if command.operation == "push":
            writer.write_push(command.segment, command.index)
        elif command.operation == "pop":
            writer.write_pop(command.segment, command.index)
        else:
            writer.write_arithmetic(command.operation)
    writer.write_end()
    return out.getvalue()


@pytest.mark.parametrize("text", [POP_FAIL, PUSH_FAIL, ARITHMETIC_FAIL])
def test_scan_fails_on_each_bad_line_in_turn(text):
    source = io.StringIO(text)
    count = len(text.splitlines())
    for number in range(count):
        out = io.StringIO()
        with pytest.raises(BadInstructionError):
            scan(source, CodeWriter(out, "Foo"))
        # setup is written before the bad line is reached
        assert out.getvalue() == _setup_text()
    assert source.read() == ""


@pytest.mark.parametrize("lines", [POP_SUCCESS, PUSH_SUCCESS, ARITHMETIC_SUCCESS])
def test_scan_success(lines):
    out = io.StringIO()
    scan(io.StringIO("\n".join(lines) + "\n"), CodeWriter(out, "Foo"))
    commands = [parse_command(line) for line in lines]
    assert out.getvalue() == _expected_output(commands)
    assert out.getvalue().endswith("(END)\n@END\n0;JMP\n")


def test_scan_counts_of_success_files():
    assert len(POP_SUCCESS) == 15
    pops = [parse_command(line) for line in POP_SUCCESS]
    assert all(command.operation == "pop" for command in pops)
    pushes = [parse_command(line) for line in PUSH_SUCCESS]
    assert len(pushes) == 16
    assert all(command.operation == "push" for command in pushes)
    arithmetic = [parse_command(line) for line in ARITHMETIC_SUCCESS]
    assert [command.operation for command in arithmetic] == ARITHMETIC_SUCCESS


def test_scan_skips_blank_and_comment_lines():
    out = io.StringIO()
    scan(io.StringIO("\n// comment\n   \npush constant 7 // seven\n"), CodeWriter(out, "Foo"))
    assert out.getvalue() == _expected_output([Command("push", "constant", 7)])


def test_bad_instruction_error_reports_line_number():
    source = io.StringIO("push constant 1\n\npop constant 0 // no\n")
    with pytest.raises(BadInstructionError) as info:
        scan(source, CodeWriter(io.StringIO(), "Foo"))
    assert info.value.line == "pop constant 0"
    assert info.value.line_number == 2
    assert str(info.value) == "Bad instruction at line 3: 'pop constant 0'"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("push constant 7", Command("push", "constant", 7)),
        ("pop local 120", Command("pop", "local", 120)),
        ("  pop argument 2  ", Command("pop", "argument", 2)),
        ("push static 3 // comment", Command("push", "static", 3)),
        ("pop pointer 1", Command("pop", "pointer", 1)),
        ("push temp 7", Command("push", "temp", 7)),
        ("add", Command("add")),
        ("not", Command("not")),
    ],
)
def test_parse_command(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "// only a comment", "\n"])
def test_parse_command_empty(line):
    assert parse_command(line) is None


@pytest.mark.parametrize(
    "line",
    [
        "pop constant 0",
        "pop",
        "push",
        "pop static 10 1",
        "push static -10",
        "push constant 32768",
        "pop pointer 2",
        "push temp 8",
        "ad",
        "add 1",
        "e",
    ],
)
def test_parse_command_rejects(line):
    with pytest.raises(ValueError):
        parse_command(line)


def test_bad_instruction_error_is_value_error():
    error = BadInstructionError("ad", 0)
    assert isinstance(error, ValueError)
    assert str(error) == "Bad instruction at line 1: 'ad'"