"""Symbol table mapping Hack labels and variables to addresses."""

from __future__ import annotations

_PREDEFINED = {
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": 16384,
    "KBD": 24576,
}

_FIRST_VARIABLE_ADDRESS = 16


class SymbolTable:
    """Holds predefined symbols, labels and allocated variables."""

    def __init__(self) -> None:
        self._symbols: dict[str, int] = dict(_PREDEFINED)
        self._next_ram_address = _FIRST_VARIABLE_ADDRESS
        for register in range(16):
            self.add_entry(f"R{register}", register)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._symbols

    def get_address(self, symbol: str) -> int:
        """Address of a symbol; unknown symbols map to address 0."""
        return self._symbols.get(symbol, 0)

    def add_var_entry(self, symbol: str) -> int:
        """Allocate the next free RAM address for a new variable and return its address."""
        if symbol not in self._symbols:
            self.add_entry(symbol, self._next_ram_address)
            self._next_ram_address += 1
        return self.get_address(symbol)

    def add_entry(self, symbol: str, address: int) -> None:
        """Bind a symbol to an address, replacing any earlier binding."""
        self._symbols[symbol] = address