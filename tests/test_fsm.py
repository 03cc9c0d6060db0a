import io

from hackasm.fsm import FSM, Event, EventPayload, State


def _machine():
    out = io.StringIO()
    return FSM(output=out), out


def test_starts_idle_and_not_terminal():
    fsm, _ = _machine()
    assert fsm.state is State.IDLE
    assert fsm.is_terminal() is False


def test_happy_path_reaches_success():
    fsm, out = _machine()
    fsm.send(EventPayload(Event.START))
    assert fsm.state is State.PREPARING
    fsm.send(EventPayload(Event.SUCCESS, "Found 2 .asm files"))
    assert fsm.state is State.PROCESSING
    fsm.send(EventPayload(Event.SUCCESS))
    assert fsm.state is State.EXPORTING
    fsm.send(EventPayload(Event.SUCCESS, "Output written to: gen"))
    assert fsm.state is State.SUCCESS
    assert fsm.is_terminal() is True
    lines = out.getvalue().splitlines()
    assert lines == [
        "FSM: Starting...",
        "FSM: Files loaded. Found 2 .asm files",
        "FSM: Assembly completed",
        "FSM: Files exported. Output written to: gen",
    ]


def test_failure_while_preparing_goes_to_error():
    fsm, out = _machine()
    fsm.send(EventPayload(Event.START))
    fsm.send(EventPayload(Event.FAIL, "missing"))
    assert fsm.state is State.ERROR
    assert fsm.is_terminal() is True
    assert "FSM: Failed to load files. missing" in out.getvalue().splitlines()


def test_failure_while_exporting_goes_to_error():
    fsm, out = _machine()
    for event in (Event.START, Event.SUCCESS, Event.SUCCESS):
        fsm.send(EventPayload(event))
    fsm.send(EventPayload(Event.FAIL, "disk full"))
    assert fsm.state is State.ERROR
    assert out.getvalue().splitlines()[-1] == "FSM: Export failed. disk full"


def test_finish_after_error_ignores_message():
    fsm, out = _machine()
    fsm.send(EventPayload(Event.START))
    fsm.send(EventPayload(Event.FAIL))
    fsm.send(EventPayload(Event.FINISH, "ignored"))
    assert fsm.state is State.ERROR
    assert out.getvalue().splitlines()[-1] == "FSM: Stopped due to an error"


def test_finish_after_success_announces_done():
    fsm, out = _machine()
    for event in (Event.START, Event.SUCCESS, Event.SUCCESS, Event.SUCCESS):
        fsm.send(EventPayload(event))
    fsm.send(EventPayload(Event.FINISH))
    assert fsm.state is State.SUCCESS
    assert out.getvalue().splitlines()[-1] == "FSM: Done — everything succeeded!"


def test_unexpected_event_is_ignored():
    fsm, out = _machine()
    fsm.send(EventPayload(Event.SUCCESS, "too early"))
    fsm.send(EventPayload(Event.FINISH))
    assert fsm.state is State.IDLE
    assert out.getvalue() == ""


def test_dispatch_runs_action_for_current_state():
    fsm, _ = _machine()
    fsm.send(EventPayload(Event.START))
    calls = []

    def prepare():
        calls.append("prepare")
        return EventPayload(Event.SUCCESS)

    fsm.dispatch({State.PREPARING: prepare})
    assert calls == ["prepare"]
    assert fsm.state is State.PROCESSING


def test_dispatch_without_action_keeps_state():
    fsm, out = _machine()
    fsm.dispatch({State.PREPARING: lambda: EventPayload(Event.SUCCESS)})
    assert fsm.state is State.IDLE
    assert out.getvalue() == ""


def test_state_reports_its_name():
    fsm, _ = _machine()
    assert str(fsm.state) == "idle"
    fsm.send(EventPayload(Event.START))
    fsm.send(EventPayload(Event.SUCCESS))
    assert str(fsm.state) == "processing"