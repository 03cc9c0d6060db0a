"""Line-by-line reader of Hack assembly source."""

from __future__ import annotations

import enum
from collections.abc import Sequence


class InstructionType(enum.IntEnum):
    """Kinds of Hack assembly instructions."""

    A_INSTRUCTION = 0
    C_INSTRUCTION = 1
    L_INSTRUCTION = 2


class UnsupportedInstructionError(ValueError):
    """Raised when the current line is not a recognised instruction."""

    def __init__(self, line: str = "") -> None:
        message = "instruction is not supported"
        if line:
            message = f"{message}: {line!r}"
        super().__init__(message)
        self.line = line


class Parser:
    """Walks the lines of one assembly file and splits instructions into fields."""

    def __init__(self, file_name: str, lines: Sequence[str]) -> None:
        self.file_name = file_name
        self._lines = list(lines)
        self._position = 0
        self._current = ""

    def has_more_lines(self) -> bool:
        """True while lines remain to be read."""
        return self._position < len(self._lines)

    def advance(self) -> None:
        """Move to the next line, dropping comments and surrounding whitespace."""
        if not self.has_more_lines():
            raise IndexError("no more lines to read")
        line = self._lines[self._position].strip()
        self._position += 1
        line, _, _ = line.partition("//")
        self._current = line.strip()

    def instruction_type(self) -> InstructionType:
        """Classify the current line, raising for anything unrecognised."""
        line = self._current.strip()
        if line.startswith("@"):
            return InstructionType.A_INSTRUCTION
        if line.startswith("(") and line.endswith(")"):
            return InstructionType.L_INSTRUCTION
        if ";" in line or "=" in line:
            return InstructionType.C_INSTRUCTION
        raise UnsupportedInstructionError(line)

    def symbol(self) -> str:
        """The symbol of an A-instruction or label."""
        line = self._current.strip()
        line = line.removeprefix("@")
        line = line.removeprefix("(")
        return line.removesuffix(")")

    def dest(self) -> str:
        """The dest field of the current C-instruction, or an empty string."""
        if "=" in self._current:
            return self._current.split("=", 1)[0].strip()
        return ""

    def comp(self) -> str:
        """The comp field of the current C-instruction."""
        line = self._current
        if "=" in line:
            line = line.split("=", 1)[1]
        return line.split(";", 1)[0].strip()

    def jump(self) -> str:
        """The jump field of the current C-instruction, or an empty string."""
        if ";" in self._current:
            return self._current.split(";", 1)[1].strip()
        return ""

    def reset(self) -> None:
        """Rewind to the first line."""
        self._current = ""
        self._position = 0