"""Two-pass translation of Hack assembly into binary text."""

from __future__ import annotations

from collections.abc import Iterable

from hackasm.code import Code
from hackasm.loader import AsmFile
from hackasm.parser import InstructionType, Parser, UnsupportedInstructionError
from hackasm.symboltable import SymbolTable


def assemble(files: Iterable[AsmFile]) -> dict[str, bytes]:
    """Assemble each file, keyed by its name, into lines of 16 binary digits."""
    result: dict[str, bytes] = {}
    for asm_file in files:
        parser = Parser(asm_file.name, asm_file.data)
        table = SymbolTable()
        build_symbol_table(parser, table)
        parser.reset()
        result[parser.file_name] = translate_instructions(parser, table, Code())
    return result


def build_symbol_table(parser: Parser, table: SymbolTable) -> None:
    """First pass: bind every label to the address of the line that follows it.

    Every line that is not a label, including blank and unrecognised ones,
    advances the address.
    """
    line_address = 0
    while parser.has_more_lines():
        parser.advance()
        try:
            kind = parser.instruction_type()
        except UnsupportedInstructionError:
            kind = None
        if kind is InstructionType.L_INSTRUCTION:
            table.add_entry(parser.symbol(), line_address)
        else:
            line_address += 1


def translate_instructions(parser: Parser, table: SymbolTable, code: Code) -> bytes:
    """Second pass: encode A- and C-instructions; labels and other lines are skipped."""
    words: list[str] = []
    while parser.has_more_lines():
        parser.advance()
        try:
            kind = parser.instruction_type()
        except UnsupportedInstructionError:
            continue
        if kind is InstructionType.A_INSTRUCTION:
            words.append(format(table.get_address(parser.symbol()), "016b"))
        elif kind is InstructionType.C_INSTRUCTION:
            word = code.compute_c_instruction(
                code.dest_byte(parser.dest()),
                code.comp_byte(parser.comp()),
                code.jump_byte(parser.jump()),
            )
            words.append(format(word, "016b"))
    return "".join(f"{word}\n" for word in words).encode("ascii")