"""Countdown timer with repeat, iteration and infinite modes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """Accumulates time and flags when its duration has been reached."""

    duration: float
    elapsed: float = 0.0
    iterations: int = 1
    repeat: bool = False
    infinite: bool = False
    just_completed: bool = False
    completed: bool = False

    def update(self, delta_time: float) -> None:
        """Advance the timer by `delta_time` seconds."""
        self.elapsed += delta_time

        if self.infinite:
            return
        self.just_completed = False
        if self.completed:
            return
        if self.elapsed < self.duration:
            return

        self.just_completed = True
        if self.repeat:
            self.elapsed -= self.duration
            return
        if self.iterations > 1:
            self.iterations -= 1
            self.elapsed -= self.duration
        else:
            self.completed = True

    def has_elapsed(self) -> bool:
        """Whether the accumulated time has reached the duration."""
        return self.elapsed >= self.duration