"""Shared fixtures: a recording display and hand-driven tick sources."""

from __future__ import annotations

from typing import Callable

import pytest

from core.services.timer_engine import TimerEngine


class RecordingDisplay:
    """Display that keeps every clear/write call in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def clear(self) -> None:
        self.events.append(("clear", ""))

    def write(self, text: str) -> None:
        self.events.append(("write", text))

    def write_digits(self, block: str) -> None:
        self.events.append(("digits", block))

    @property
    def messages(self) -> list[str]:
        return [text for kind, text in self.events if kind == "write"]

    @property
    def renders(self) -> list[str]:
        return [text for kind, text in self.events if kind == "digits"]

    def reset(self) -> None:
        self.events.clear()


class ManualTicker:
    """Tick source that only fires when a test calls `fire()`."""

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self._callback = callback
        self.started = False
        self.stopped = False
        self.joined = False

    @property
    def is_active(self) -> bool:
        return self.started and not self.stopped

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def join(self, timeout: float | None = None) -> None:
        self.joined = True

    def fire(self, times: int = 1) -> None:
        # Fires even after stop() to simulate a tick already in flight.
        for _ in range(times):
            self._callback()


class ManualTickerFactory:
    def __init__(self) -> None:
        self.created: list[ManualTicker] = []

    def __call__(self, interval: float, callback: Callable[[], None]) -> ManualTicker:
        ticker = ManualTicker(interval, callback)
        self.created.append(ticker)
        return ticker

    @property
    def current(self) -> ManualTicker:
        return self.created[-1]


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def tickers() -> ManualTickerFactory:
    return ManualTickerFactory()


@pytest.fixture
def make_engine(display: RecordingDisplay, tickers: ManualTickerFactory):
    def _make(seconds: int) -> TimerEngine:
        return TimerEngine(seconds, display=display, ticker_factory=tickers)

    return _make
