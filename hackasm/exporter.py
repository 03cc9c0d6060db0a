"""Writing assembled programs as .hack files."""

from __future__ import annotations

import os
from pathlib import Path


def to_hack_file_name(file_name: str) -> str:
    """Replace a single extension with .hack, or append .hack otherwise."""
    parts = file_name.split(".")
    if len(parts) == 2:
        return parts[0] + ".hack"
    return file_name + ".hack"


def export(
    file_name: str, destination: str | os.PathLike[str], content: bytes
) -> Path:
    """Write content under destination, creating it as needed; return the path."""
    target_dir = Path(destination)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / to_hack_file_name(file_name)
    path.write_bytes(content)
    return path