"""The game's four input bindings, their default profile and input recording."""

from __future__ import annotations

from enum import IntEnum

from .input import (
    AxisBinding,
    GamepadAxis,
    GamepadBinding,
    GamepadButton,
    InputHandler,
    InputProfile,
    KeyboardBinding,
    KeyboardKey,
    Ordering,
)
from .replay import InputStream

TOTAL_INPUT_BINDINGS = 4
MAX_PLAYERS = 4

# Thirty minutes of input at sixty frames per second.
RECORDING_SIZE = 1 * 60 * 60 * 30

_AXIS_THRESHOLD = 0.25
_JUMP_BUFFER_FRAMES = 8


class InputBinding(IntEnum):
    """The recorded bindings; the value is the binding's slot in an input stream."""

    LEFT = 0
    RIGHT = 1
    JUMP = 2
    STOMP = 3

    @property
    def binding_name(self) -> str:
        """The name the binding carries in an input profile."""
        return self.name.lower()


def buffer_from_input_binding(binding: InputBinding) -> int:
    """How many frames a press or release of ``binding`` stays visible."""
    return _JUMP_BUFFER_FRAMES if binding is InputBinding.JUMP else 1


def _keyboard(name: str, *keys: KeyboardKey) -> KeyboardBinding:
    binding = KeyboardBinding(name, len(keys))
    for key in keys:
        binding.add_key(key)
    return binding


def _gamepad(name: str, *buttons: GamepadButton) -> GamepadBinding:
    binding = GamepadBinding(name, len(buttons))
    for button in buttons:
        binding.add_button(button)
    return binding


def _axis(name: str, ordering: Ordering, target: float) -> AxisBinding:
    binding = AxisBinding(name, 2, ordering, target)
    binding.add_axis(GamepadAxis.LEFT_X)
    binding.add_axis(GamepadAxis.RIGHT_X)
    return binding


def create_default_input_profile(dt: float) -> InputProfile:
    """Build the default keyboard, gamepad and stick profile.

    ``dt`` is the length of one frame; the jump binding is buffered for eight frames.
    """
    profile = InputProfile(4)

    profile.add_keyboard_binding(_keyboard("left", KeyboardKey.LEFT, KeyboardKey.A))
    profile.add_keyboard_binding(_keyboard("right", KeyboardKey.RIGHT, KeyboardKey.D))
    profile.add_keyboard_binding(_keyboard("stomp", KeyboardKey.X, KeyboardKey.J))
    jump_keys = _keyboard("jump", KeyboardKey.Z, KeyboardKey.SPACE)
    jump_keys.set_buffer(dt * _JUMP_BUFFER_FRAMES)
    profile.add_keyboard_binding(jump_keys)

    profile.add_gamepad_binding(_gamepad("left", GamepadButton.LEFT_FACE_LEFT))
    profile.add_gamepad_binding(_gamepad("right", GamepadButton.LEFT_FACE_RIGHT))
    profile.add_gamepad_binding(
        _gamepad("stomp", GamepadButton.RIGHT_FACE_LEFT, GamepadButton.RIGHT_FACE_RIGHT)
    )
    jump_buttons = _gamepad("jump", GamepadButton.RIGHT_FACE_DOWN, GamepadButton.RIGHT_FACE_UP)
    jump_buttons.set_buffer(dt * _JUMP_BUFFER_FRAMES)
    profile.add_gamepad_binding(jump_buttons)

    profile.add_axis_binding(_axis("left", Ordering.LESS, -_AXIS_THRESHOLD))
    profile.add_axis_binding(_axis("right", Ordering.GREATER, _AXIS_THRESHOLD))

    return profile


def sample_payload(handler: InputHandler) -> list[bool]:
    """Which bindings the handler reports as held, ordered by ``InputBinding``."""
    return [handler.pressing(binding.binding_name) for binding in InputBinding]


def record_input(handler: InputHandler, stream: InputStream, frame: int) -> bool:
    """Advance ``handler`` one frame and record its bindings into ``stream``.

    Nothing is recorded while a loaded replay still covers ``frame``; returns
    whether a frame was recorded.
    """
    handler.update()
    if stream.length > frame:
        return False
    stream.push(sample_payload(handler))
    return True