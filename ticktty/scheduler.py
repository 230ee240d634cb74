"""Countdown state machine, independent of rendering."""

import time
from enum import Enum, auto
from typing import Callable, Optional


class Status(Enum):
    """Countdown running status."""
    RUNNING = auto()
    PAUSED = auto()
    FINISHED = auto()


class Countdown:
    """Countdown against a wall-clock end time.

    Running time is always derived from the end time, so a late tick never
    makes the countdown drift. Pausing freezes the remaining time; resuming
    computes a new end time from it.
    """

    def __init__(
        self,
        duration_ms: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Start the countdown.

        Args:
            duration_ms: Length of the countdown in milliseconds.
            clock: Seconds source; monotonic time by default.
        """
        self.duration_ms = duration_ms
        self._clock = clock
        self._status = Status.RUNNING
        self._end_ms = self._now_ms() + duration_ms
        self._frozen_ms = duration_ms

    def _now_ms(self) -> float:
        return self._clock() * 1000

    @property
    def status(self) -> Status:
        """Current status."""
        return self._status

    @property
    def is_paused(self) -> bool:
        return self._status == Status.PAUSED

    @property
    def is_finished(self) -> bool:
        return self._status == Status.FINISHED

    def remaining_ms(self) -> float:
        """Milliseconds left, never negative."""
        if self._status == Status.RUNNING:
            return max(0.0, self._end_ms - self._now_ms())
        if self._status == Status.PAUSED:
            return self._frozen_ms
        return 0.0

    def pause(self) -> None:
        """Freeze the remaining time."""
        if self._status != Status.RUNNING:
            return
        self._frozen_ms = self.remaining_ms()
        self._status = Status.PAUSED

    def resume(self) -> None:
        """Continue from the frozen remaining time."""
        if self._status != Status.PAUSED:
            return
        self._end_ms = self._now_ms() + self._frozen_ms
        self._status = Status.RUNNING

    def toggle(self) -> None:
        """Toggle between running and paused."""
        if self._status == Status.RUNNING:
            self.pause()
        else:
            self.resume()

    def reset(self, duration_ms: Optional[float] = None) -> None:
        """Restart from the full duration, or from a new one."""
        if duration_ms is not None:
            self.duration_ms = duration_ms
        self._end_ms = self._now_ms() + self.duration_ms
        self._frozen_ms = self.duration_ms
        self._status = Status.RUNNING

    def tick(self) -> bool:
        """Check for completion.

        Returns:
            True on the tick where the countdown reaches zero, False otherwise.
        """
        if self._status != Status.RUNNING:
            return False

        if self._end_ms - self._now_ms() <= 0:
            self._status = Status.FINISHED
            return True

        return False
