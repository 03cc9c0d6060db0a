"""Assembler for the Hack machine language: .asm sources to .hack binary text."""

__version__ = "0.1.0"