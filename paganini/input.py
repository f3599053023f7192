"""Keyboard and mouse state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from paganini.log import warning
from paganini.system import System

KEY_COUNT = 256
BUTTON_COUNT = 8


class KeyAction(Enum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class KeyTable:
    """A fixed-size table of on/off states, indexed by code."""

    def __init__(self, size: int, label: str) -> None:
        self._states = [False] * size
        self._label = label

    def __getitem__(self, code: int) -> bool:
        if not 0 <= code < len(self._states):
            warning(f"{self._label} number {code} doesn't exist.")
            return False
        return self._states[code]

    def _set(self, code: int, value: bool) -> None:
        self._states[code] = value

    def _copy_from(self, other: KeyTable) -> None:
        self._states[:] = other._states


@dataclass
class Mouse:
    """Cursor position, its last movement, and scroll offsets."""

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    scroll_x: float = 0.0
    scroll_y: float = 0.0

    def pos(self) -> tuple[float, float]:
        return (self.x, self.y)

    def dpos(self) -> tuple[float, float]:
        return (self.dx, self.dy)

    def scroll(self) -> float:
        return self.scroll_y

    def scroll_xy(self) -> tuple[float, float]:
        return (self.scroll_x, self.scroll_y)


class Input(System):
    """Tracks key, button and mouse state from window events."""

    _instance: Input | None = None

    def __init__(self) -> None:
        super().__init__()
        self.mouse = Mouse()
        self.buttons = KeyTable(BUTTON_COUNT, "Mouse button")
        self.keys = KeyTable(KEY_COUNT, "Keycode")
        self.down_keys = KeyTable(KEY_COUNT, "Keycode")
        self.up_keys = KeyTable(KEY_COUNT, "Keycode")

    @classmethod
    def get(cls) -> Input:
        """Return the shared input instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def start(self) -> None:
        pass

    def update(self, dt: float) -> None:
        self.up_keys._copy_from(self.keys)
        self.mouse.scroll_x = 0.0
        self.mouse.scroll_y = 0.0

    def clean(self) -> None:
        pass

    def on_key(self, key: int, action: KeyAction) -> None:
        """Handle a key event; keys outside the table are ignored."""
        if not 0 <= key < KEY_COUNT:
            return
        if action is KeyAction.PRESS:
            self.down_keys._set(key, not self.keys[key])
            self.keys._set(key, True)
        elif action is KeyAction.RELEASE:
            self.up_keys._set(key, self.keys[key])
            self.keys._set(key, False)
            self.down_keys._set(key, False)

    def on_mouse_move(self, x: float, y: float) -> None:
        self.mouse.dx = x - self.mouse.x
        self.mouse.dy = y - self.mouse.y
        self.mouse.x = x
        self.mouse.y = y

    def on_scroll(self, dx: float, dy: float) -> None:
        self.mouse.scroll_x = dx
        self.mouse.scroll_y = dy