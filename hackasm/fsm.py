"""State machine that drives an assembly run and reports its progress."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TextIO


class State(str, enum.Enum):
    """Stages of an assembly run."""

    IDLE = "idle"
    PREPARING = "preparing"
    PROCESSING = "processing"
    EXPORTING = "exporting"
    SUCCESS = "success"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class Event(str, enum.Enum):
    """Events that move the machine between stages."""

    START = "start"
    FAIL = "fail"
    SUCCESS = "success"
    FINISH = "finish"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EventPayload:
    """An event together with an optional message to report."""

    event: Event
    message: str = ""


# (state, event) -> (announcement, next state, whether the payload message is shown)
_TRANSITIONS: dict[tuple[State, Event], tuple[str, State, bool]] = {
    (State.IDLE, Event.START): ("Starting...", State.PREPARING, True),
    (State.PREPARING, Event.SUCCESS): ("Files loaded", State.PROCESSING, True),
    (State.PREPARING, Event.FAIL): ("Failed to load files", State.ERROR, True),
    (State.PROCESSING, Event.SUCCESS): ("Assembly completed", State.EXPORTING, True),
    (State.PROCESSING, Event.FAIL): ("Assembly failed", State.ERROR, True),
    (State.EXPORTING, Event.SUCCESS): ("Files exported", State.SUCCESS, True),
    (State.EXPORTING, Event.FAIL): ("Export failed", State.ERROR, True),
    (State.SUCCESS, Event.FINISH): ("Done — everything succeeded!", State.SUCCESS, True),
    (State.ERROR, Event.FINISH): ("Stopped due to an error", State.ERROR, False),
}

Action = Callable[[], EventPayload]


class FSM:
    """Tracks the stage of a run and announces each transition."""

    def __init__(self, output: TextIO | None = None) -> None:
        self._state = State.IDLE
        self._output = output

    @property
    def state(self) -> State:
        """The current stage."""
        return self._state

    def is_terminal(self) -> bool:
        """True once the run has succeeded or failed."""
        return self._state in (State.SUCCESS, State.ERROR)

    def dispatch(self, actions: Mapping[State, Action]) -> None:
        """Run the action registered for the current stage and feed back its event."""
        action = actions.get(self._state)
        if action is not None:
            self.send(action())

    def send(self, payload: EventPayload) -> None:
        """Apply an event; events that do not fit the current stage are ignored."""
        transition = _TRANSITIONS.get((self._state, payload.event))
        if transition is None:
            return
        announcement, next_state, show_message = transition
        self._say(announcement, payload.message if show_message else "")
        self._state = next_state

    def _say(self, base: str, extra: str) -> None:
        stream = self._output if self._output is not None else sys.stdout
        if extra:
            print(f"FSM: {base}. {extra}", file=stream)
        else:
            print(f"FSM: {base}", file=stream)