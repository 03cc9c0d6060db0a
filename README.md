# hackasm

`hackasm` translates Hack assembly (`.asm`) files into `.hack` files: one
line of sixteen `0`/`1` characters, followed by a newline, for each A- or
C-instruction.

## Installation

```
pip install .
```

## Usage

```
hackasm -d programs -o gen
```

- `-d` names the input and is required. It may be a directory, in which case
  every `.asm` file directly inside it (not in subdirectories) is assembled,
  in name order, or a single file, which must end in `.asm`.
- `-o` names the output directory. It defaults to `gen` and is created,
  with any missing parents, if it does not exist.

A file `Name.asm` is written as `Name.hack`. A name with more than one dot,
such as `prog.v2.asm`, gets `.hack` appended instead (`prog.v2.asm.hack`).

While it runs, the tool prints its progress through the stages of the job,
each line starting with `FSM:`: starting, loading the files (with the number
found), assembling, writing the results (with the output directory), and a
final line saying whether everything succeeded or the run stopped because of
an error. A loading or writing error is printed in place of the success
message for that stage.

The command exits with status 1 only when `-d` is missing; otherwise it
exits with status 0, even if a stage failed.

The command can also be started as `python -m hackasm.cli`.

## What the assembler understands

- Lines are read one at a time; anything from `//` to the end of a line is
  dropped, along with surrounding whitespace.
- A line starting with `@` is an A-instruction. Its operand is looked up in
  the symbol table and its address is written as a 16-bit binary word.
- A line of the form `(NAME)` is a label. In a first pass each label is bound
  to a line address; every line that is not a label, including blank lines,
  comment-only lines and unrecognised lines, moves that address on by one.
- A line containing `=` or `;` is a C-instruction of the form
  `dest=comp;jump`, where `dest=` and `;jump` are optional. `dest` is any of
  `M`, `D`, `A`, `MD`, `AM`, `AD`, `AMD`; `comp` is any of the 28 standard
  Hack computations over `D`, `A` and `M`; `jump` is any of `JGT`, `JEQ`,
  `JGE`, `JLT`, `JNE`, `JLE`, `JMP`.
- Any other line is skipped and produces no output.

The predefined symbols are `SP`, `LCL`, `ARG`, `THIS`, `THAT`, `R0`–`R15`,
`SCREEN` (16384) and `KBD` (24576).

## What it does not do

- Numeric A-instruction operands such as `@21` are not converted: like any
  other operand they are looked up in the symbol table, and anything not
  found there, numbers included, encodes as address 0.
- Variables are not allocated during assembly. An `@name` that is neither a
  label nor a predefined symbol encodes as address 0.
  `SymbolTable.add_var_entry` can allocate variables from address 16 for
  callers that want it, but the assembler does not call it.
- Unknown `dest` or `jump` mnemonics encode as `000`, and unknown `comp`
  mnemonics as `0000000`; no error is reported. `JGT` also encodes as `000`,
  the same bits as "no jump".
- Unrecognised lines are skipped silently rather than reported.

## Using it from Python

```python
from hackasm.loader import load_asm
from hackasm.assembler import assemble
from hackasm.exporter import export

files = load_asm("programs")
for name, binary in assemble(files).items():
    export(name, "gen", binary)
```

- `hackasm.loader.load_asm(path)` returns a list of `AsmFile` objects (`name`
  and `data`, the file's lines). It raises `UnsupportedExtensionError` for a
  single file not ending in `.asm` and `FileNotFoundError` for a missing path.
- `hackasm.assembler.assemble(files)` returns a dict from file name to the
  assembled bytes. `build_symbol_table` and `translate_instructions` are its
  two passes.
- `hackasm.exporter.export(file_name, destination, content)` writes the bytes
  and returns the path written; `to_hack_file_name` gives the output name.
- `hackasm.parser.Parser` walks lines with `has_more_lines`, `advance`,
  `reset`, and splits the current one with `instruction_type` (raising
  `UnsupportedInstructionError` for unrecognised lines), `symbol`, `dest`,
  `comp` and `jump`.
- `hackasm.code.Code` gives the bits of mnemonics with `dest_byte`,
  `comp_byte`, `jump_byte`, and builds a word with `compute_c_instruction`.
- `hackasm.symboltable.SymbolTable` supports `in`, `get_address`,
  `add_entry` and `add_var_entry`.
- `hackasm.controller.Controller(input_dir, output_dir)` runs the whole job
  under the state machine in `hackasm.fsm`; `run()` returns the final `State`
  (`State.SUCCESS` or `State.ERROR`). The loading, assembling and exporting
  steps can be replaced through its `loader`, `assembler` and `exporter`
  keyword arguments, and `FSM(output=...)` sends the progress lines to any
  text stream.

## Running the tests

```
pip install ".[test]"
pytest
```