"""Binary encodings of the dest, comp and jump fields of Hack C-instructions."""

from __future__ import annotations

from collections.abc import Mapping
from itertools import combinations
from types import MappingProxyType

_NULLS = 0
_A_BIT = 1 << 6
_C_PREFIX = 0b111 << 13


def _dest_table() -> dict[str, int]:
    # Registers are listed in A, M, D order so combined names read "AM", "MD", "AMD".
    weights = {"A": 0b100, "M": 0b001, "D": 0b010}
    table: dict[str, int] = {}
    for size in range(1, len(weights) + 1):
        for regs in combinations(weights, size):
            table["".join(regs)] = sum(weights[r] for r in regs)
    return table


def _jump_table() -> dict[str, int]:
    names = ("JGT", "JEQ", "JGE", "JLT", "JNE", "JLE", "JMP")
    table = {name: value for value, name in enumerate(names, start=1)}
    # JGT shares the encoding of "no jump".
    table["JGT"] = _NULLS
    return table


# ALU control bits (zx nx zy ny f no) for computations over D and A.
_ALU_BITS = {
    "0": "101010",
    "1": "111111",
    "-1": "111010",
    "D": "001100",
    "A": "110000",
    "!D": "001101",
    "!A": "110001",
    "-D": "001111",
    "-A": "110011",
    "D+1": "011111",
    "A+1": "110111",
    "D-1": "001110",
    "A-1": "110010",
    "D+A": "000010",
    "D-A": "010011",
    "A-D": "000111",
    "D&A": "000000",
    "D|A": "010101",
}


def _comp_table() -> dict[str, int]:
    table = {expr: int(bits, 2) for expr, bits in _ALU_BITS.items()}
    # Every computation reading A has a twin reading M, selected by the a-bit.
    for expr, value in list(table.items()):
        if "A" in expr:
            table[expr.replace("A", "M")] = _A_BIT | value
    return table


JUMP: Mapping[str, int] = MappingProxyType(_jump_table())
DEST: Mapping[str, int] = MappingProxyType(_dest_table())
COMP: Mapping[str, int] = MappingProxyType(_comp_table())


class Code:
    """Translates C-instruction mnemonics into their bit fields."""

    def __init__(self) -> None:
        self.dest: Mapping[str, int] = DEST
        self.comp: Mapping[str, int] = COMP
        self.jump: Mapping[str, int] = JUMP

    def compute_c_instruction(self, dest: int, comp: int, jump: int) -> int:
        """Combine the three fields into a 16-bit C-instruction word."""
        return (_C_PREFIX | comp << 6 | dest << 3 | jump) & 0xFFFF

    def jump_byte(self, mnemonic: str) -> int:
        """Bits for a jump mnemonic; unknown or empty mnemonics give zero."""
        return self.jump.get(mnemonic, _NULLS)

    def dest_byte(self, mnemonic: str) -> int:
        """Bits for a dest mnemonic; unknown or empty mnemonics give zero."""
        return self.dest.get(mnemonic, _NULLS)

    def comp_byte(self, mnemonic: str) -> int:
        """Bits for a comp mnemonic; unknown mnemonics give zero."""
        return self.comp.get(mnemonic, 0)