# ltlr

The platform-independent core of a small side-scrolling platformer: named
input bindings, frame-by-frame input recording with a replay file format, a
seeded random number generator, score keeping and a small entity manager.

Everything works on plain Python values, so the game logic can be tested and
driven from anything.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `ltlr.palette`

`Color` is a frozen RGBA dataclass. `p8_palette_get(index)` returns one of the
sixteen palette colours, wrapping the index around the palette; a negative
index raises `ValueError`.

### `ltlr.rng`

`Rng(seed)` is a deterministic 64-bit generator. `next_u64()` returns an
unsigned 64-bit integer, `next_f64()` a float in `[0, 1)` and
`next_range(minimum, maximum)` an integer in `[minimum, maximum)`. The same
seed always yields the same sequence.

### `ltlr.replay`

`InputStream(total_bindings, capacity)` is a ring buffer recording, for each
frame, which bindings were held:

- `push(payload)` records one frame; `payload` must hold one bool per binding.
- `pressing(binding, frame)` tells whether the binding was held on that frame.
- `pressed(binding, buffer, frame)` is true when the binding is held on
  `frame` and was up on one of the `buffer` frames before it;
  `released(binding, buffer, frame)` is the reverse.
- `consume(binding, frame)` hides press and release events before `frame`
  from later `pressed` and `released` queries.
- `load_replay(replay)` fills the stream from a `Replay`, raising
  `ValueError` if it does not fit.

`Replay` holds a seed and the recorded frames. `Replay.from_input_stream(seed,
stream)` captures a stream (raising `InvalidatedInputStreamError` if the
stream has wrapped around), `to_bytes()` serialises it and
`Replay.from_bytes(data)` reads it back, raising `TooFewBytesError` or
`SignatureMismatchError` on bad data. All three errors derive from
`ReplayError`.

The file format is the signature `ltlrr`, the seed as a big-endian 32-bit
integer, the binding count as one byte, the frame count as a big-endian 32-bit
integer, and then the bits, one per binding per frame, padded to whole 8-byte
words.

### `ltlr.input`

Bindings group physical inputs under a name: `KeyboardBinding`,
`GamepadBinding`, `MouseBinding` and `AxisBinding` (an analogue axis counts as
held once it passes a target value in the given `Ordering`). Each is created
with a name and a capacity; inputs added beyond the capacity are ignored.
Keyboard, gamepad and mouse bindings can keep a press or release visible for a
while with `set_buffer(duration)`.

An `InputProfile(capacity)` collects bindings of each kind. An
`InputHandler(device, gamepad=0, profile=None, dt=1/60)` answers
`pressed(name)`, `pressing(name)`, `released(name)` and `consume(name)`, and
advances buffers with `update()`. Keyboard bindings only apply to gamepad 0.

The live button state comes from `device`, any object that implements the
`InputDevice` protocol (`is_key_pressed`, `is_gamepad_available`,
`get_gamepad_axis_movement` and so on).

### `ltlr.controls`

The game's four bindings as `InputBinding` (`LEFT`, `RIGHT`, `JUMP`,
`STOMP`), `buffer_from_input_binding(binding)` (8 frames for jump, 1
otherwise), `create_default_input_profile(dt)` with the default keyboard,
gamepad and stick layout, `sample_payload(handler)` and
`record_input(handler, stream, frame)`, which updates the handler and pushes
one frame into the stream unless a loaded replay still covers `frame`.

### `ltlr.score`

`ScoreKeeper(frame_dt=1/60)` takes points through `increment(value)` into a
buffer; each `update(dt)` that reaches two frames' worth of time moves a tenth
of the buffer (rounded up) into `score`. The score and buffer are capped at
999999, and `score_string` gives the score as six zero-padded digits. It also
counts batteries with `collect_battery()` (at most three) and
`consume_battery()`. `reset()` clears everything.

### `ltlr.world`

`EntityManager` hands out entity indices with `allocate()`, reusing freed
indices first, and keeps a tag bit mask per entity (`has_dependencies`).
Changes are queued with `defer`, `defer_deallocate`, `defer_enable_tag`,
`defer_disable_tag` and `defer_set_tag`, and applied by `flush()`, most
recently queued first. `reset()` forgets all entities and queued commands.

The module also provides `Rectangle` (with `left`, `right`, `top`, `bottom`
and `collides`), `shuffled_range(rng, length)` and
`camera_bounds(position, bounds, viewport_width, viewport_height)`, which
centres a viewport on a position while keeping it inside the level bounds.

## Example

```python
from ltlr.replay import InputStream, Replay

stream = InputStream(total_bindings=4, capacity=600)
stream.push([False, False, True, False])
stream.push([False, False, True, False])

data = Replay.from_input_stream(seed=1234, stream=stream).to_bytes()
replay = Replay.from_bytes(data)
assert replay.seed == 1234
assert replay.length == 2
```

## What this package does not do

There is no window, rendering, sound or game loop, no level layouts and no
command to start a game. Nor is there a live input backend: supply your own
object implementing `InputDevice`. Replays are turned into and read from
bytes; reading and writing files is left to the caller.