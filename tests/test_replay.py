import pytest

from ltlr.replay import (
    MAX_REPLAY_LENGTH,
    InputStream,
    InvalidatedInputStreamError,
    Replay,
    ReplayError,
    SignatureMismatchError,
    TooFewBytesError,
)


def _stream(frames, total=4, capacity=64):
    stream = InputStream(total, capacity)
    for frame in frames:
        stream.push(frame)
    return stream


def _frames_from_pattern(pattern, total=4):
    return [[bool((row >> b) & 1) for b in range(total)] for row in pattern]


def test_push_and_pressing():
    frames = _frames_from_pattern([0b0001, 0b1010, 0b1111, 0b0000])
    stream = _stream(frames)
    assert stream.length == 4
    for f, row in enumerate(frames):
        assert [stream.pressing(b, f) for b in range(4)] == row


def test_pressed_detects_new_press():
    stream = _stream([[False], [True], [True]], total=1)
    assert stream.pressed(0, 1, 1) is True
    assert stream.pressed(0, 1, 2) is False
    assert stream.pressed(0, 8, 2) is True
    assert stream.pressed(0, 8, 0) is False


def test_consume_blocks_pressed():
    stream = _stream([[False], [True], [True]], total=1)
    stream.consume(0, 1)
    assert stream.pressed(0, 8, 2) is False


def test_released_detects_release():
    stream = _stream([[True], [False], [False]], total=1)
    assert stream.released(0, 1, 1) is True
    assert stream.released(0, 1, 2) is False
    assert stream.released(0, 2, 2) is True
    assert stream.released(0, 1, 0) is False
    stream.consume(0, 2)
    assert stream.released(0, 2, 2) is False


def test_stream_wraps_around():
    stream = _stream([[True], [False], [False]], total=1, capacity=2)
    assert stream.pressing(0, 2) is False
    assert stream.pressing(0, 0) is False
    assert stream.length == 3


def test_invalid_arguments():
    with pytest.raises(ValueError):
        InputStream(4, MAX_REPLAY_LENGTH + 1)
    stream = InputStream(2, 8)
    with pytest.raises(ValueError):
        stream.push([True])
    with pytest.raises(IndexError):
        stream.pressing(2, 0)


def test_replay_from_wrapped_stream_fails():
    stream = _stream([[True], [True]], total=1, capacity=2)
    with pytest.raises(InvalidatedInputStreamError) as info:
        Replay.from_input_stream(1, stream)
    assert "wrapped around" in str(info.value)


def test_to_bytes_layout():
    frames = _frames_from_pattern([0b0001, 0b0010, 0b0100])
    replay = Replay.from_input_stream(0x01020304, _stream(frames))
    data = replay.to_bytes()
    assert data[:5] == b"ltlrr"
    assert data[5:9] == (0x01020304).to_bytes(4, "big")
    assert data[9] == 4
    assert data[10:14] == (3).to_bytes(4, "big")
    assert len(data) == 22


def test_bytes_round_trip():
    frames = _frames_from_pattern([i % 16 for i in range(40)])
    replay = Replay.from_input_stream(777, _stream(frames))
    assert Replay.from_bytes(replay.to_bytes()) == replay


def test_load_replay_restores_input():
    frames = _frames_from_pattern([(i * 7) % 16 for i in range(30)])
    original = _stream(frames)
    original.consume(1, 5)
    replay = Replay.from_bytes(Replay.from_input_stream(5, original).to_bytes())
    restored = InputStream(4, 64)
    restored.load_replay(replay)
    assert restored.length == 30
    assert restored.barriers == [0, 0, 0, 0]
    for f in range(30):
        for b in range(4):
            assert restored.pressing(b, f) == original.pressing(b, f)


def test_load_replay_rejects_oversized():
    replay = Replay.from_input_stream(1, _stream(_frames_from_pattern([1] * 10)))
    with pytest.raises(ValueError):
        InputStream(4, 10).load_replay(replay)
    with pytest.raises(ValueError):
        InputStream(3, 64).load_replay(replay)


def test_from_bytes_too_few():
    with pytest.raises(TooFewBytesError) as info:
        Replay.from_bytes(b"ltl")
    assert str(info.value) == "Too few bytes were given to possibly construct a Replay."


def test_from_bytes_truncated_body():
    replay = Replay.from_input_stream(1, _stream(_frames_from_pattern([3] * 20)))
    data = replay.to_bytes()
    with pytest.raises(TooFewBytesError):
        Replay.from_bytes(data[:-1])
    with pytest.raises(TooFewBytesError):
        Replay.from_bytes(data[:8])


def test_from_bytes_signature_mismatch():
    with pytest.raises(SignatureMismatchError) as info:
        Replay.from_bytes(b"nopes" + bytes(9))
    assert isinstance(info.value, ReplayError)
    assert "signature" in str(info.value)