"""Named input bindings over keyboard, gamepad and mouse devices."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Protocol

DEFAULT_DT = 1.0 / 60.0


class KeyboardKey(IntEnum):
    SPACE = 32
    MINUS = 45
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    ESCAPE = 256
    ENTER = 257
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    F11 = 300


class GamepadButton(IntEnum):
    UNKNOWN = 0
    LEFT_FACE_UP = 1
    LEFT_FACE_RIGHT = 2
    LEFT_FACE_DOWN = 3
    LEFT_FACE_LEFT = 4
    RIGHT_FACE_UP = 5
    RIGHT_FACE_RIGHT = 6
    RIGHT_FACE_DOWN = 7
    RIGHT_FACE_LEFT = 8
    LEFT_TRIGGER_1 = 9
    LEFT_TRIGGER_2 = 10
    RIGHT_TRIGGER_1 = 11
    RIGHT_TRIGGER_2 = 12
    MIDDLE_LEFT = 13
    MIDDLE = 14
    MIDDLE_RIGHT = 15
    LEFT_THUMB = 16
    RIGHT_THUMB = 17


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    SIDE = 3
    EXTRA = 4
    FORWARD = 5
    BACK = 6


class GamepadAxis(IntEnum):
    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


class InputDevice(Protocol):
    """The queries a binding needs from the platform's input backend."""

    def is_key_pressed(self, key: KeyboardKey) -> bool: ...
    def is_key_released(self, key: KeyboardKey) -> bool: ...
    def is_key_down(self, key: KeyboardKey) -> bool: ...
    def is_key_up(self, key: KeyboardKey) -> bool: ...

    def is_gamepad_available(self, gamepad: int) -> bool: ...
    def is_gamepad_button_pressed(self, gamepad: int, button: GamepadButton) -> bool: ...
    def is_gamepad_button_released(self, gamepad: int, button: GamepadButton) -> bool: ...
    def is_gamepad_button_down(self, gamepad: int, button: GamepadButton) -> bool: ...
    def is_gamepad_button_up(self, gamepad: int, button: GamepadButton) -> bool: ...
    def get_gamepad_axis_movement(self, gamepad: int, axis: GamepadAxis) -> float: ...

    def is_mouse_button_pressed(self, button: MouseButton) -> bool: ...
    def is_mouse_button_released(self, button: MouseButton) -> bool: ...
    def is_mouse_button_down(self, button: MouseButton) -> bool: ...
    def is_mouse_button_up(self, button: MouseButton) -> bool: ...


def _append_bounded(items: list, capacity: int, item: object) -> None:
    if len(items) < capacity:
        items.append(item)


@dataclass
class _BufferedBinding:
    """Shared buffering behaviour: a press stays visible for ``buffer_duration``."""

    name: str
    capacity: int
    buffer_duration: float = field(default=0.0, init=False)
    buffer_timer: float = field(default=0.0, init=False)

    def _apply_buffer(self, duration: float) -> None:
        self.buffer_duration = duration
        self.buffer_timer = duration

    def _buffered(self) -> bool:
        return self.buffer_duration != 0 and self.buffer_timer < self.buffer_duration

    def _consume(self) -> None:
        self.buffer_timer = self.buffer_duration

    def _tick(self, dt: float, states: Iterable[tuple[bool, bool, bool]]) -> None:
        """Advance the buffer; ``states`` yields (pressed, released, up) per input."""
        self.buffer_timer += dt
        inactive = True
        for pressed, released, up in states:
            if pressed or released:
                self.buffer_timer = 0.0
            if not up:
                inactive = False
        if inactive:
            self._consume()


@dataclass
class KeyboardBinding(_BufferedBinding):
    keys: list[KeyboardKey] = field(default_factory=list, init=False)

    def set_buffer(self, duration: float) -> None:
        """Keep a press or release visible for ``duration`` seconds."""
        self._apply_buffer(duration)

    def add_key(self, key: KeyboardKey) -> None:
        """Add a key; ignored once the binding is at capacity."""
        _append_bounded(self.keys, self.capacity, key)

    def _update(self, device: InputDevice, dt: float) -> None:
        self._tick(
            dt,
            (
                (device.is_key_pressed(k), device.is_key_released(k), device.is_key_up(k))
                for k in self.keys
            ),
        )

    def _pressed(self, device: InputDevice) -> bool:
        return self._buffered() or any(device.is_key_pressed(k) for k in self.keys)

    def _pressing(self, device: InputDevice) -> bool:
        return any(device.is_key_down(k) for k in self.keys)

    def _released(self, device: InputDevice) -> bool:
        return self._buffered() or any(device.is_key_released(k) for k in self.keys)


@dataclass
class GamepadBinding(_BufferedBinding):
    buttons: list[GamepadButton] = field(default_factory=list, init=False)

    def set_buffer(self, duration: float) -> None:
        """Keep a press or release visible for ``duration`` seconds."""
        self._apply_buffer(duration)

    def add_button(self, button: GamepadButton) -> None:
        """Add a button; ignored once the binding is at capacity."""
        _append_bounded(self.buttons, self.capacity, button)

    def _update(self, device: InputDevice, dt: float, gamepad: int) -> None:
        if not device.is_gamepad_available(gamepad):
            return
        self._tick(
            dt,
            (
                (
                    device.is_gamepad_button_pressed(gamepad, b),
                    device.is_gamepad_button_released(gamepad, b),
                    device.is_gamepad_button_up(gamepad, b),
                )
                for b in self.buttons
            ),
        )

    def _consume_on(self, device: InputDevice, gamepad: int) -> None:
        if device.is_gamepad_available(gamepad):
            self._consume()

    def _pressed(self, device: InputDevice, gamepad: int) -> bool:
        if not device.is_gamepad_available(gamepad):
            return False
        return self._buffered() or any(
            device.is_gamepad_button_pressed(gamepad, b) for b in self.buttons
        )

    def _pressing(self, device: InputDevice, gamepad: int) -> bool:
        if not device.is_gamepad_available(gamepad):
            return False
        return any(device.is_gamepad_button_down(gamepad, b) for b in self.buttons)

    def _released(self, device: InputDevice, gamepad: int) -> bool:
        if not device.is_gamepad_available(gamepad):
            return False
        return self._buffered() or any(
            device.is_gamepad_button_released(gamepad, b) for b in self.buttons
        )


@dataclass
class MouseBinding(_BufferedBinding):
    buttons: list[MouseButton] = field(default_factory=list, init=False)

    def set_buffer(self, duration: float) -> None:
        """Keep a press or release visible for ``duration`` seconds."""
        self._apply_buffer(duration)

    def add_button(self, button: MouseButton) -> None:
        """Add a button; ignored once the binding is at capacity."""
        _append_bounded(self.buttons, self.capacity, button)

    def _update(self, device: InputDevice, dt: float) -> None:
        self._tick(
            dt,
            (
                (
                    device.is_mouse_button_pressed(b),
                    device.is_mouse_button_released(b),
                    device.is_mouse_button_up(b),
                )
                for b in self.buttons
            ),
        )

    def _pressed(self, device: InputDevice) -> bool:
        return self._buffered() or any(device.is_mouse_button_pressed(b) for b in self.buttons)

    def _pressing(self, device: InputDevice) -> bool:
        return any(device.is_mouse_button_down(b) for b in self.buttons)

    def _released(self, device: InputDevice) -> bool:
        return self._buffered() or any(device.is_mouse_button_released(b) for b in self.buttons)


@dataclass
class AxisBinding:
    """Treats an analogue axis as held when it passes ``target`` in the given direction."""

    name: str
    capacity: int
    ordering: Ordering
    target: float
    axes: list[GamepadAxis] = field(default_factory=list, init=False)

    def add_axis(self, axis: GamepadAxis) -> None:
        """Add an axis; ignored once the binding is at capacity."""
        _append_bounded(self.axes, self.capacity, axis)

    def _pressing(self, device: InputDevice, gamepad: int) -> bool:
        if not device.is_gamepad_available(gamepad):
            return False
        for axis in self.axes:
            value = device.get_gamepad_axis_movement(gamepad, axis)
            if self.ordering is Ordering.LESS and value < self.target:
                return True
            if self.ordering is Ordering.GREATER and value > self.target:
                return True
        return False


@dataclass
class InputProfile:
    """A set of bindings; each kind holds at most ``capacity`` entries."""

    capacity: int
    keyboard_bindings: list[KeyboardBinding] = field(default_factory=list, init=False)
    gamepad_bindings: list[GamepadBinding] = field(default_factory=list, init=False)
    mouse_bindings: list[MouseBinding] = field(default_factory=list, init=False)
    axis_bindings: list[AxisBinding] = field(default_factory=list, init=False)

    def add_keyboard_binding(self, binding: KeyboardBinding) -> None:
        _append_bounded(self.keyboard_bindings, self.capacity, binding)

    def add_gamepad_binding(self, binding: GamepadBinding) -> None:
        _append_bounded(self.gamepad_bindings, self.capacity, binding)

    def add_mouse_binding(self, binding: MouseBinding) -> None:
        _append_bounded(self.mouse_bindings, self.capacity, binding)

    def add_axis_binding(self, binding: AxisBinding) -> None:
        _append_bounded(self.axis_bindings, self.capacity, binding)


class InputHandler:
    """Answers questions about named bindings for one player.

    The keyboard only drives the handler for gamepad 0.
    """

    def __init__(
        self,
        device: InputDevice,
        gamepad: int = 0,
        profile: InputProfile | None = None,
        dt: float = DEFAULT_DT,
    ) -> None:
        self.device = device
        self.gamepad = gamepad
        self.profile = profile
        self.dt = dt

    @property
    def enabled(self) -> bool:
        return self.profile is not None

    def _keyboard(self, name: str) -> list[KeyboardBinding]:
        if self.profile is None or self.gamepad != 0:
            return []
        return [b for b in self.profile.keyboard_bindings if b.name == name]

    def _gamepad(self, name: str) -> list[GamepadBinding]:
        if self.profile is None:
            return []
        return [b for b in self.profile.gamepad_bindings if b.name == name]

    def _mouse(self, name: str) -> list[MouseBinding]:
        if self.profile is None:
            return []
        return [b for b in self.profile.mouse_bindings if b.name == name]

    def _axis(self, name: str) -> list[AxisBinding]:
        if self.profile is None:
            return []
        return [b for b in self.profile.axis_bindings if b.name == name]

    def update(self) -> None:
        """Advance every binding's buffer by one frame."""
        if self.profile is None:
            return
        if self.gamepad == 0:
            for kb in self.profile.keyboard_bindings:
                kb._update(self.device, self.dt)
        for gb in self.profile.gamepad_bindings:
            gb._update(self.device, self.dt, self.gamepad)
        for mb in self.profile.mouse_bindings:
            mb._update(self.device, self.dt)

    def pressed(self, binding: str) -> bool:
        """Whether the binding was just pressed (or is within its buffer)."""
        d, g = self.device, self.gamepad
        return (
            any(b._pressed(d) for b in self._keyboard(binding))
            or any(b._pressed(d, g) for b in self._gamepad(binding))
            or any(b._pressed(d) for b in self._mouse(binding))
        )

    def pressing(self, binding: str) -> bool:
        """Whether any input of the binding is currently held."""
        d, g = self.device, self.gamepad
        return (
            any(b._pressing(d) for b in self._keyboard(binding))
            or any(b._pressing(d, g) for b in self._gamepad(binding))
            or any(b._pressing(d) for b in self._mouse(binding))
            or any(b._pressing(d, g) for b in self._axis(binding))
        )

    def released(self, binding: str) -> bool:
        """Whether the binding was just released (or is within its buffer)."""
        d, g = self.device, self.gamepad
        return (
            any(b._released(d) for b in self._keyboard(binding))
            or any(b._released(d, g) for b in self._gamepad(binding))
            or any(b._released(d) for b in self._mouse(binding))
        )

    def consume(self, binding: str) -> None:
        """Expire the buffer of the first matching binding of each kind."""
        keyboard = self._keyboard(binding)
        if keyboard:
            keyboard[0]._consume()
        gamepad = self._gamepad(binding)
        if gamepad:
            gamepad[0]._consume_on(self.device, self.gamepad)
        mouse = self._mouse(binding)
        if mouse:
            mouse[0]._consume()