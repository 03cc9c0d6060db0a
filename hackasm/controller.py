"""Orchestration of loading, assembling and exporting."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from hackasm.assembler import assemble
from hackasm.exporter import export
from hackasm.fsm import FSM, Event, EventPayload, State
from hackasm.loader import AsmFile, load_asm

Loader = Callable[[str], Sequence[AsmFile]]
AssembleFn = Callable[[Sequence[AsmFile]], Mapping[str, bytes]]
ExportFn = Callable[[str, str, bytes], object]


class Controller:
    """Runs one assembly job through its stages under a state machine."""

    def __init__(
        self,
        input_dir: str | os.PathLike[str],
        output_dir: str | os.PathLike[str] = "gen",
        *,
        fsm: FSM | None = None,
        loader: Loader = load_asm,
        assembler: AssembleFn = assemble,
        exporter: ExportFn = export,
    ) -> None:
        self.fsm = fsm if fsm is not None else FSM()
        self.input_dir = os.fspath(input_dir)
        self.output_dir = os.fspath(output_dir)
        self.loader = loader
        self.assembler = assembler
        self.exporter = exporter

    def run(self) -> State:
        """Load, assemble and export; return the stage the run ended in."""
        self.fsm.send(EventPayload(Event.START))

        files: Sequence[AsmFile] = []
        result: Mapping[str, bytes] = {}

        def prepare() -> EventPayload:
            nonlocal files
            try:
                files = self.loader(self.input_dir)
            except (OSError, ValueError) as exc:
                return EventPayload(Event.FAIL, str(exc))
            return EventPayload(Event.SUCCESS, f"Found {len(files)} .asm files")

        def process() -> EventPayload:
            nonlocal result
            result = self.assembler(files)
            return EventPayload(Event.SUCCESS)

        def write() -> EventPayload:
            for name, binary in result.items():
                try:
                    self.exporter(name, self.output_dir, binary)
                except (OSError, ValueError) as exc:
                    return EventPayload(Event.FAIL, str(exc))
            return EventPayload(
                Event.SUCCESS, f"Output written to: {Path(self.output_dir)}"
            )

        actions = {
            State.PREPARING: prepare,
            State.PROCESSING: process,
            State.EXPORTING: write,
        }
        while not self.fsm.is_terminal():
            self.fsm.dispatch(actions)
        self.fsm.send(EventPayload(Event.FINISH))
        return self.fsm.state