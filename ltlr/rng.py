"""A small seeded pseudo-random generator based on wyrand."""

from __future__ import annotations

from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_INCREMENT = 0x2D358DCCAA6C78A5
_XOR = 0x8BB84B93962EACC9
_NORM = 1.0 / (1 << 52)


def _mix(a: int, b: int) -> int:
    product = a * b
    return (product & _MASK64) ^ (product >> 64)


@dataclass
class Rng:
    """Deterministic generator; ``seed`` holds the evolving 64-bit state."""

    seed: int

    def __post_init__(self) -> None:
        self.seed &= _MASK64

    def next_u64(self) -> int:
        """Return a pseudo-random unsigned 64-bit integer."""
        self.seed = (self.seed + _INCREMENT) & _MASK64
        return _mix(self.seed, self.seed ^ _XOR)

    def next_f64(self) -> float:
        """Return a pseudo-random float in the range [0, 1)."""
        return (self.next_u64() >> 12) * _NORM

    def next_range(self, minimum: int, maximum: int) -> int:
        """Return a pseudo-random integer in the range [minimum, maximum)."""
        step = self.next_f64()
        return int(minimum + (maximum - minimum) * step)