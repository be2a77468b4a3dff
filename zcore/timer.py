"""Callback timers driven by explicit update calls."""

from __future__ import annotations

import time
from typing import Any, Callable, Iterator, List, Optional

__all__ = ["Timer", "TimerPool"]

Clock = Callable[[], float]
INFINITE = -1


class Timer:
    """Calls a callback every ``duration`` seconds, a set number of times.

    A count of -1 repeats forever. The timer only fires from ``update``.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock: Clock = clock if clock is not None else time.monotonic
        self.duration = 0.0
        self.initial_calls = 0
        self.remaining_calls = 0
        self.callback: Optional[Callable[[Any], Any]] = None
        self.user_data: Any = None
        self.enabled = False
        self.next_call_ts = 0.0

    def set(self, duration: float, count: int, callback: Callable[[Any], Any]) -> None:
        """Configure the period, number of calls and callback; leaves the timer stopped."""
        self.duration = duration
        self.remaining_calls = self.initial_calls = count
        self.callback = callback
        self.enabled = False

    def start(self, delay_start: float = 0.0) -> None:
        """Enable the timer; the first call is due after ``delay_start`` seconds."""
        if self.enabled:
            raise RuntimeError("timer is already running")
        self.enabled = True
        self.remaining_calls = self.initial_calls
        self.next_call_ts = self.clock() + delay_start

    def stop(self) -> None:
        """Disable a running timer."""
        if not self.enabled:
            raise RuntimeError("timer is not running")
        self.enabled = False

    def update(self) -> None:
        """Fire the callback if the timer is enabled and a call is due."""
        now = self.clock()
        if not self.enabled:
            return
        if self.remaining_calls <= 0 and self.initial_calls != INFINITE:
            return
        if self.next_call_ts > now:
            return
        if self.initial_calls != INFINITE:
            self.remaining_calls -= 1
        if self.remaining_calls == 0:
            self.enabled = False
        else:
            self.next_call_ts = now + self.duration
        if self.callback is not None:
            self.callback(self.user_data)


class TimerPool:
    """A collection of timers updated together."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock = clock
        self._timers: List[Timer] = []

    def add(self) -> Timer:
        """Create a new timer in the pool and return it."""
        timer = Timer(self.clock)
        self._timers.append(timer)
        return timer

    def update(self) -> None:
        """Update every timer in the pool."""
        for timer in self._timers:
            timer.update()

    def __len__(self) -> int:
        return len(self._timers)

    def __iter__(self) -> Iterator[Timer]:
        return iter(self._timers)