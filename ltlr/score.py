"""Score keeping: a buffered score that ticks up over time, plus batteries held."""

from __future__ import annotations

import math

from .input import DEFAULT_DT

MAX_SCORE = 999999
MAX_SCORE_DIGITS = 6
MAX_BATTERIES = 3

_BUFFER_FRAMES = 2
_TRANSFER_FRACTION = 0.1


class ScoreKeeper:
    """Tracks the displayed score, points still waiting to be added, and batteries.

    Points handed to :meth:`increment` go into a buffer; every
    ``buffer_duration`` seconds a tenth of the buffer (rounded up) moves into
    the score, so the displayed number counts up rather than jumping.
    """

    def __init__(self, frame_dt: float = DEFAULT_DT) -> None:
        self.buffer_duration = frame_dt * _BUFFER_FRAMES
        self.score = 0
        self.buffer = 0
        self.buffer_timer = 0.0
        self.total_batteries = 0
        self.reset()

    @property
    def score_string(self) -> str:
        """The score as a zero-padded six-digit string."""
        return f"{self.score:0{MAX_SCORE_DIGITS}d}"

    def reset(self) -> None:
        """Clear the score, the pending points and the batteries."""
        self.score = 0
        self.buffer = 0
        self.buffer_timer = 0.0
        self.total_batteries = 0

    def increment(self, value: int) -> None:
        """Queue ``value`` points to be added to the score."""
        if value < 0:
            raise ValueError("score increments must not be negative")
        self.buffer = min(self.buffer + value, MAX_SCORE)

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds, moving pending points into the score when due."""
        if self.buffer == 0:
            return
        self.buffer_timer += dt
        if self.buffer_timer < self.buffer_duration:
            return
        take = math.ceil(self.buffer * _TRANSFER_FRACTION)
        self.score = min(self.score + take, MAX_SCORE)
        self.buffer = max(self.buffer - take, 0)
        self.buffer_timer = 0.0

    def collect_battery(self) -> None:
        """Pick up a battery; at most three are held."""
        self.total_batteries = min(self.total_batteries + 1, MAX_BATTERIES)

    def consume_battery(self) -> None:
        """Use up one battery, if any are held."""
        if self.total_batteries > 0:
            self.total_batteries -= 1