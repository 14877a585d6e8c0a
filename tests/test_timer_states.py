import pytest

from core.domain.models import TimerStatus


def _reach(engine, status: TimerStatus) -> None:
    if status is TimerStatus.RUNNING:
        engine.run()
    elif status is TimerStatus.PAUSED:
        engine.run()
        engine.pause()


NO_TRANSITION = [
    (TimerStatus.READY, "pause", "Cannot pause. Timer is not running."),
    (TimerStatus.READY, "resume", "Timer is not running"),
    (TimerStatus.READY, "stop", "Timer is not running"),
    (TimerStatus.RUNNING, "run", "Timer is already running"),
    (TimerStatus.RUNNING, "resume", "Timer is already running"),
    (TimerStatus.PAUSED, "run", "Timer is paused. Use resume to continue"),
    (TimerStatus.PAUSED, "pause", "Timer is already paused"),
]


@pytest.mark.parametrize("status, command, message", NO_TRANSITION)
def test_illegal_commands_only_print(make_engine, display, tickers, status, command, message):
    engine = make_engine(20)
    _reach(engine, status)
    ticking_before = engine.ticking
    tickers_before = len(tickers.created)
    display.reset()

    getattr(engine, command)()

    assert engine.status is status
    assert engine.time_left == 20
    assert engine.ticking is ticking_before
    assert len(tickers.created) == tickers_before
    assert display.events == [("write", message)]


def test_ready_run_starts_ticking(make_engine, display, tickers):
    engine = make_engine(10)

    engine.run()

    assert engine.status is TimerStatus.RUNNING
    assert engine.ticking
    assert tickers.current.interval == 1.0
    assert display.messages == ["Starting timer..."]


def test_running_stop_returns_to_ready(make_engine, display, tickers):
    engine = make_engine(10)
    engine.run()
    display.reset()

    engine.stop()

    assert engine.status is TimerStatus.READY
    assert not engine.ticking
    assert tickers.current.stopped
    assert display.messages == ["Stopping timer..."]


def test_running_pause_stops_ticking(make_engine, display, tickers):
    engine = make_engine(10)
    engine.run()
    display.reset()

    engine.pause()

    assert engine.status is TimerStatus.PAUSED
    assert not engine.ticking
    assert display.messages == ["Pausing timer..."]


def test_paused_resume_installs_fresh_tick_source(make_engine, display, tickers):
    engine = make_engine(10)
    engine.run()
    engine.pause()
    first = tickers.current
    display.reset()

    engine.resume()

    assert engine.status is TimerStatus.RUNNING
    assert engine.ticking
    assert tickers.current is not first
    assert display.messages == ["Resuming timer..."]


def test_paused_stop_returns_to_ready(make_engine, display):
    engine = make_engine(10)
    engine.run()
    engine.pause()
    display.reset()

    engine.stop()

    assert engine.status is TimerStatus.READY
    assert not engine.ticking
    assert display.messages == ["Stopping timer..."]


def test_stopped_timer_can_run_again(make_engine):
    engine = make_engine(10)
    engine.run()
    engine.stop()

    engine.run()

    assert engine.status is TimerStatus.RUNNING
    assert engine.ticking


def test_state_missing_a_command_cannot_be_built(display):
    from core.services.timer_states import TimerState

    class Incomplete(TimerState):
        status = TimerStatus.READY

        def run(self) -> None:
            pass

    with pytest.raises(TypeError):
        Incomplete(object(), display)
