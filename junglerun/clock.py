"""Game clock: elapsed time, pausing, slow motion and frame-rate capping."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

import pygame


class Clock:
    """Measures game time in milliseconds and keeps a running frame-rate average."""

    def __init__(
        self,
        frames_are_capped: bool = False,
        frame_cap: int = 60,
        avg_frames: int = 200,
        time_source: Callable[[], int] | None = None,
        sleep: Callable[[int], object] | None = None,
    ) -> None:
        if avg_frames <= 0:
            raise ValueError(f"avg_frames must be positive, got {avg_frames}")
        if frames_are_capped and frame_cap <= 0:
            raise ValueError(f"frame_cap must be positive, got {frame_cap}")
        self.frames_are_capped = bool(frames_are_capped)
        self.frame_cap = int(frame_cap)
        self.avg_frames = int(avg_frames)
        self._now = time_source if time_source is not None else pygame.time.get_ticks
        self._sleep = sleep if sleep is not None else pygame.time.delay

        self.started = False
        self.paused = False
        self.slomo = False
        self.frames = 0

        self._rates: deque[int] = deque()
        self._avg_rate = 0
        self._rate_sum = 0
        self._total = 0
        self._time_at_start = 0
        self._time_at_pause = 0
        self._curr = 0
        self._prev = 0
        self._last = 0

        self._shown_seconds: int | None = None
        self._last_frames = 0
        self._old_frames = 0
        self.start()

    @classmethod
    def from_gamedata(cls, gdata) -> Clock:
        """Build from ``framesAreCapped``, ``frameCap`` and ``avgFrame``."""
        return cls(
            gdata.get_bool("framesAreCapped"),
            gdata.get_int("frameCap"),
            gdata.get_int("avgFrame"),
        )

    @property
    def ticks(self) -> int:
        """Milliseconds of game time since start."""
        if self.paused:
            return self._time_at_pause
        if self.slomo:
            return 1
        return int(self._now()) - self._time_at_start

    @property
    def seconds(self) -> int:
        """Whole seconds of game time since start."""
        return self.ticks // 1000

    @property
    def total_ticks(self) -> int:
        """Sum of all elapsed ticks handed out so far."""
        return self._total

    @property
    def average_frame_rate(self) -> int:
        """Frames per second averaged over the last ``avg_frames`` frames."""
        return self._avg_rate

    def elapsed_ticks(self) -> int:
        """Milliseconds since the previous call, after any frame-rate delay."""
        if self.paused:
            return 0
        if self.slomo:
            return 1
        self._curr = self.ticks
        self._last = max(0, self._curr - self._prev)
        delay = self.cap_frame_rate()
        self._prev = self._curr + delay
        self._last += delay
        self._total += self._last
        return self._last

    def cap_frame_rate(self) -> int:
        """Wait out the rest of the frame period when capped; return the wait."""
        if not self.frames_are_capped:
            return 0
        delay = int(max(0.0, 1000.0 / self.frame_cap + 0.5 - self._last))
        self._sleep(delay)
        return delay

    def tick(self) -> Clock:
        """Count a frame and update the frame-rate average."""
        if not self.paused:
            self.frames += 1
        seconds = self.seconds
        rate = self.frames // seconds if seconds else 0
        if len(self._rates) < self.avg_frames:
            self._rates.appendleft(rate)
            if seconds:
                self._rate_sum += rate
        else:
            self._avg_rate = self._rate_sum // self.avg_frames
            self._rate_sum -= self._rates[0]
            self._rates.pop()
            self._rates.appendleft(rate)
            self._rate_sum += rate
        return self

    def toggle_slomo(self) -> None:
        """Switch slow motion on or off."""
        if self.started and not self.slomo:
            self._time_at_pause = int(self._now()) - self._time_at_start
            self.slomo = True
        elif self.started and self.slomo:
            self._time_at_start = int(self._now()) - self._time_at_pause
            self.slomo = False

    def start(self) -> None:
        """Restart game time and the frame count."""
        self.started = True
        self.paused = False
        self.frames = 0
        now = int(self._now())
        self._time_at_pause = now
        self._time_at_start = now

    def pause(self) -> None:
        """Freeze game time."""
        if self.started and not self.paused:
            self._time_at_pause = int(self._now()) - self._time_at_start
            self.paused = True

    def unpause(self) -> None:
        """Resume game time where it was frozen."""
        if self.started and self.paused:
            self._time_at_start = int(self._now()) - self._time_at_pause
            self.paused = False

    def display(self, io) -> None:
        """Show the seconds and the frames counted in the last whole second."""
        seconds = self.seconds
        if self._shown_seconds is None:
            self._shown_seconds = seconds
        if seconds > self._shown_seconds:
            self._shown_seconds = seconds
            self._last_frames = self.frames - self._old_frames
            self._old_frames = self.frames
        io.print_message_value_at("seconds: ", self._shown_seconds, 10, 30)
        io.print_message_value_at("frames in sec: ", self._last_frames, 10, 50)