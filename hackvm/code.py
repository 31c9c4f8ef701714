"""Generation of Hack assembly for stack machine commands."""

from __future__ import annotations

from typing import TextIO

_TEMP_BASE_ADDRESS = 5
# pointer 0 is THIS (RAM[3]), anything else THAT (RAM[4])
_THIS_ADDRESS = 3
_THAT_ADDRESS = 4

_SP_DECREMENT = "@SP\nAM=M-1\n"
_POP_TO_D = "D=M\n"
_STORE_AT_R15 = "@R15\nA=M\nM=D\n"
_PUSH_INCREMENT = "@SP\nA=M\nM=D\n@SP\nM=M+1\n"

_BINARY_OPERATIONS = {
    "add": "D=M+D\n",
    "sub": "D=M-D\n",
    "and": "D=M&D\n",
    "or": "D=M|D\n",
}
_UNARY_OPERATIONS = {
    "not": "D=!D\n",
    "neg": "D=-D\n",
}
_COMPARISONS = ("eq", "gt", "lt")


def _comparison_routine(label: str, skip_jump: str) -> str:
    return (
        f"(START_{label})\n"
        "@R15\n"
        "M=D\n"
        "@SP\n"
        "AM=M-1\n"
        "D=M\n"
        "A=A-1\n"
        "D=M-D\n"
        "M=0\n"
        f"@END_{label}\n"
        f"D;{skip_jump}\n"
        "@SP\n"
        "A=M-1\n"
        "M=-1\n"
        f"(END_{label})\n"
        "@R15\n"
        "A=M\n"
        "0;JMP\n"
    )


_SETUP = (
    "@256\n"
    "D=A\n"
    "@SP\n"
    "M=D\n"
    "@START_PROG\n"
    "0;JMP\n"
    + _comparison_routine("EQ", "JNE")
    + _comparison_routine("GT", "JLE")
    + _comparison_routine("LT", "JGE")
    + "(START_PROG)\n"
)

_END = "(END)\n@END\n0;JMP\n"


def segment_to_label(segment: str) -> str:
    """Return the assembly symbol that holds a segment's base address."""
    if segment == "argument":
        return "ARG"
    if segment == "local":
        return "LCL"
    return segment.upper()


class CodeWriter:
    """Writes assembly for push, pop and arithmetic commands to a text stream."""

    def __init__(self, output: TextIO, file_name: str) -> None:
        self.output = output
        self.file_name = file_name
        self._return_counters = {name: 0 for name in _COMPARISONS}

    def _write(self, text: str) -> None:
        self.output.write(text)

    def write_push(self, segment: str, index: int | str) -> None:
        """Write the code that pushes segment[index] onto the stack."""
        index = int(index)
        if segment == "constant":
            self._write(f"@{index}\nD=A\n")
        elif segment == "temp":
            self._write(f"@{_TEMP_BASE_ADDRESS + index}\nD=M\n")
        elif segment == "static":
            self._write(f"@{self.file_name}.{index}\nD=M\n")
        elif segment == "pointer":
            address = _THIS_ADDRESS if index == 0 else _THAT_ADDRESS
            self._write(f"@{address}\nD=M\n")
        else:
            label = segment_to_label(segment)
            self._write(f"@{label}\nD=M\n@{index}\nA=D+A\nD=M\n")
        self._write(_PUSH_INCREMENT)

    def write_pop(self, segment: str, index: int | str) -> None:
        """Write the code that pops the stack's top into segment[index]."""
        index = int(index)
        if segment == "temp":
            self._write(f"@{_TEMP_BASE_ADDRESS + index}\nD=A\n@R15\nM=D\n")
            self._write(_SP_DECREMENT + _POP_TO_D + _STORE_AT_R15)
        elif segment == "static":
            self._write(_SP_DECREMENT + _POP_TO_D)
            self._write(f"@{self.file_name}.{index}\nM=D\n")
        elif segment == "pointer":
            address = _THIS_ADDRESS if index == 0 else _THAT_ADDRESS
            self._write(_SP_DECREMENT + _POP_TO_D)
            self._write(f"@{address}\nM=D\n")
        else:
            label = segment_to_label(segment)
            self._write(f"@{label}\nD=M\n@{index}\nD=D+A\n@R15\nM=D\n")
            self._write(_SP_DECREMENT + _POP_TO_D + _STORE_AT_R15)

    def write_arithmetic(self, command: str) -> None:
        """Write the code for an arithmetic, logical or comparison command."""
        if command in _BINARY_OPERATIONS:
            self._write("@SP\nAM=M-1\nD=M\n@SP\nAM=M-1\n")
            self._write(_BINARY_OPERATIONS[command])
            self._write(_PUSH_INCREMENT)
        elif command in _UNARY_OPERATIONS:
            self._write("@SP\nAM=M-1\nD=M\n")
            self._write(_UNARY_OPERATIONS[command])
            self._write(_PUSH_INCREMENT)
        elif command in self._return_counters:
            label = command.upper()
            number = self._return_counters[command]
            self._write(
                f"@RET_ADDRESS_{label}{number}\n"
                "D=A\n"
                f"@START_{label}\n"
                "0;JMP\n"
                f"(RET_ADDRESS_{label}{number})\n"
            )
            self._return_counters[command] = number + 1
        else:
            raise ValueError(f"unknown arithmetic command: {command!r}")

    def write_setup(self) -> None:
        """Write the stack initialisation and the shared comparison routines."""
        self._write(_SETUP)

    def write_end(self) -> None:
        """Write the closing infinite loop."""
        self._write(_END)