"""Recording of per-frame input and the replay file format."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass

MAX_REPLAY_LENGTH = 1077952576

_SIGNATURE = b"ltlrr"
_HEADER = struct.Struct(">IBI")


class ReplayError(Exception):
    """Base class for errors raised while building a replay."""

    default_message = "Unknown error type."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidatedInputStreamError(ReplayError):
    default_message = (
        "The given InputStream cannot be a valid Replay as it has wrapped around on itself."
    )


class TooFewBytesError(ReplayError):
    default_message = "Too few bytes were given to possibly construct a Replay."


class SignatureMismatchError(ReplayError):
    default_message = "The first few bytes do no match the signature of a valid Replay file."


def _bits_size(total_bindings: int, frames: int) -> int:
    """Bytes needed for ``total_bindings * frames`` bits packed in 64-bit words."""
    words = (total_bindings * frames + 63) // 64
    return words * 8


def _get_bit(bits: bytes | bytearray, index: int) -> bool:
    return bool(bits[index >> 3] & (1 << (index & 7)))


class InputStream:
    """A ring buffer holding which bindings were held on each frame."""

    def __init__(self, total_bindings: int, capacity: int) -> None:
        if not 0 <= total_bindings <= 0xFF:
            raise ValueError("total_bindings must fit in an unsigned byte")
        if not 0 < capacity <= MAX_REPLAY_LENGTH:
            raise ValueError(f"capacity must be in 1..{MAX_REPLAY_LENGTH}")
        self.total_bindings = total_bindings
        self.capacity = capacity
        self.length = 0
        self.barriers = [0] * total_bindings
        self.bits = bytearray(_bits_size(total_bindings, capacity))

    def _wrap(self, frame: int, offset: int = 0) -> int:
        return (frame + offset) % self.capacity

    def _index(self, binding: int, wrapped: int) -> int:
        if not 0 <= binding < self.total_bindings:
            raise IndexError(f"binding {binding} out of range")
        return wrapped * self.total_bindings + binding

    def load_replay(self, replay: Replay) -> None:
        """Fill the stream with a replay's recorded input."""
        if replay.total_bindings > self.total_bindings or replay.length >= self.capacity:
            raise ValueError("replay does not fit in this input stream")
        self.bits[: len(replay.bits)] = replay.bits
        self.length = replay.length
        self.barriers = [0] * self.total_bindings

    def push(self, payload: Sequence[bool]) -> None:
        """Record the state of every binding for the next frame."""
        if len(payload) != self.total_bindings:
            raise ValueError(f"payload must hold {self.total_bindings} entries")
        wrapped = self._wrap(self.length)
        for binding, held in enumerate(payload):
            index = self._index(binding, wrapped)
            mask = 1 << (index & 7)
            if held:
                self.bits[index >> 3] |= mask
            else:
                self.bits[index >> 3] &= ~mask & 0xFF
        self.length += 1

    def pressing(self, binding: int, frame: int) -> bool:
        """Whether ``binding`` was held on ``frame``."""
        return _get_bit(self.bits, self._index(binding, self._wrap(frame)))

    def _changed(self, binding: int, buffer: int, frame: int, held_now: bool) -> bool:
        wrapped = self._wrap(frame)
        if self.pressing(binding, wrapped) != held_now:
            return False
        barrier = self.barriers[binding]
        for i in range(1, buffer + 1):
            if frame >= i and frame - i < barrier:
                return False
            if self.pressing(binding, self._wrap(wrapped, -i)) != held_now:
                return True
        return False

    def pressed(self, binding: int, buffer: int, frame: int) -> bool:
        """Whether ``binding`` went down within the last ``buffer`` frames and is still held."""
        return self._changed(binding, buffer, frame, True)

    def released(self, binding: int, buffer: int, frame: int) -> bool:
        """Whether ``binding`` went up within the last ``buffer`` frames and is still up."""
        return self._changed(binding, buffer, frame, False)

    def consume(self, binding: int, frame: int) -> None:
        """Mark press and release events before ``frame`` as handled."""
        if not 0 <= binding < self.total_bindings:
            raise IndexError(f"binding {binding} out of range")
        self.barriers[binding] = frame


@dataclass(frozen=True)
class Replay:
    """A seed together with a recorded, non-wrapped input stream."""

    seed: int
    total_bindings: int
    length: int
    bits: bytes

    @classmethod
    def from_input_stream(cls, seed: int, stream: InputStream) -> Replay:
        """Capture a stream's recorded frames; fails if the stream has wrapped."""
        if stream.length >= stream.capacity:
            raise InvalidatedInputStreamError()
        size = _bits_size(stream.total_bindings, stream.length)
        return cls(
            seed=seed & 0xFFFFFFFF,
            total_bindings=stream.total_bindings,
            length=stream.length,
            bits=bytes(stream.bits[:size]),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Replay:
        """Parse a replay from its serialised form."""
        if len(data) < len(_SIGNATURE):
            raise TooFewBytesError()
        if data[: len(_SIGNATURE)] != _SIGNATURE:
            raise SignatureMismatchError()
        head = len(_SIGNATURE)
        if len(data) < head + _HEADER.size:
            raise TooFewBytesError()
        seed, total_bindings, length = _HEADER.unpack_from(data, head)
        head += _HEADER.size
        size = _bits_size(total_bindings, length)
        bits = bytes(data[head : head + size])
        if len(bits) < size:
            raise TooFewBytesError()
        return cls(seed=seed, total_bindings=total_bindings, length=length, bits=bits)

    def to_bytes(self) -> bytes:
        """Serialise: signature, big-endian seed, binding count, big-endian length, bits."""
        return (
            _SIGNATURE
            + _HEADER.pack(self.seed & 0xFFFFFFFF, self.total_bindings, self.length & 0xFFFFFFFF)
            + self.bits
        )