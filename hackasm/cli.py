"""Command line entry point for the Hack assembler."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from hackasm.controller import Controller


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hackasm",
        usage="hackasm -d <inputDir> [-o <outputDir>]",
    )
    parser.add_argument(
        "-d",
        dest="input_dir",
        default="",
        help="Input directory containing .asm files (required)",
    )
    parser.add_argument(
        "-o",
        dest="output_dir",
        default="gen",
        help="Output directory for .hack files",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Assemble the .asm files found under -d into .hack files under -o."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.input_dir:
        print("Error: -d <inputDir> is required", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1
    Controller(args.input_dir, args.output_dir).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())