"""Start countdown followed by an on-screen race chronometer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from vehicledemo.timer import Timer

_log = logging.getLogger(__name__)

INITIAL_TEXT = "Time elapsed: 0.0s"


def chrono_text(elapsed: float) -> str:
    """Text shown by the chronometer for `elapsed` seconds."""
    return f"Time elapsed: {elapsed:.2f}s"


def _countdown() -> Timer:
    return Timer(1.0, iterations=3)


def _chrono() -> Timer:
    return Timer(1.0, infinite=True)


@dataclass
class RaceClock:
    """A three-step start countdown; once it ends, the chronometer runs.

    The chronometer begins counting on the tick after the countdown finishes.
    """

    countdown: Timer = field(default_factory=_countdown)
    chrono: Timer = field(default_factory=_chrono)
    started: bool = False
    _text: str = field(default=INITIAL_TEXT, repr=False)

    def tick(self, delta_time: float) -> None:
        """Advance the clock by `delta_time` seconds."""
        if self.started:
            self.chrono.update(delta_time)
            self._text = chrono_text(self.chrono.elapsed)
            return

        self.countdown.update(delta_time)
        if self.countdown.just_completed:
            _log.info("Circuit timer just completed after %s seconds", self.countdown.elapsed)
        if self.countdown.has_elapsed():
            _log.info("Circuit timer completed after %s seconds", self.countdown.elapsed)
            self.started = True

    def text(self) -> str:
        """The chronometer's current display text."""
        return self._text