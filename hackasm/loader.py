"""Loading of Hack assembly files from a file or a directory."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

ASM_EXTENSION = ".asm"


class UnsupportedExtensionError(ValueError):
    """Raised when a single file given to load does not have the .asm extension."""

    def __init__(self, path: str | os.PathLike[str] = "") -> None:
        message = "unsupported file extension"
        if path:
            message = f"{message}: {os.fspath(path)}"
        super().__init__(message)


@dataclass
class AsmFile:
    """One assembly file: its base name and its lines."""

    name: str
    data: list[str] = field(default_factory=list)


def _extension(name: str) -> str:
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def _read_lines(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read().split("\n")


def load_asm(path: str | os.PathLike[str]) -> list[AsmFile]:
    """Load one .asm file, or every .asm file directly inside a directory.

    Directory entries are read in name order; subdirectories are skipped.
    """
    target = Path(path)
    if target.is_dir():
        return _load_from_dir(target)
    if not target.exists():
        raise FileNotFoundError(f"no such file or directory: {os.fspath(path)}")
    if _extension(target.name) != ASM_EXTENSION:
        raise UnsupportedExtensionError(path)
    return [AsmFile(name=target.name, data=_read_lines(target))]


def _load_from_dir(directory: Path) -> list[AsmFile]:
    with os.scandir(directory) as entries:
        names = sorted(
            entry.name
            for entry in entries
            if not entry.is_dir(follow_symlinks=False)
            and _extension(entry.name) == ASM_EXTENSION
        )
    return [AsmFile(name=name, data=_read_lines(directory / name)) for name in names]