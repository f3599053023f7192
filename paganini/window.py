"""The application window and its event wiring."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from paganini.input import Input, KeyAction
from paganini.log import register_error
from paganini.resource import Resource

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_NAME = "Paganini"

WindowFactory = Callable[[int, int, str], Any]


def _create_pyglet_window(width: int, height: int, caption: str) -> Any:
    import pyglet

    return pyglet.window.Window(width, height, caption)


def _line() -> int:
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    return caller.f_lineno if caller is not None else 0


class Window(Resource):
    """A native window whose keyboard and mouse events feed an Input system."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        name: str = DEFAULT_NAME,
        factory: WindowFactory | None = None,
        events: Input | None = None,
    ) -> None:
        super().__init__(name)
        self.width = width
        self.height = height
        self.events = events if events is not None else Input.get()
        self._closing = False
        create = factory if factory is not None else _create_pyglet_window
        try:
            self.back = create(width, height, name)
        except Exception as exc:
            register_error(f"Could not initialize window: {exc}", __file__, _line())
            self.back = None
            return
        self.back.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_mouse_scroll=self._on_mouse_scroll,
            on_close=self._on_close,
        )

    def _on_key_press(self, symbol: int, modifiers: int) -> None:
        self.events.on_key(symbol, KeyAction.PRESS)

    def _on_key_release(self, symbol: int, modifiers: int) -> None:
        self.events.on_key(symbol, KeyAction.RELEASE)

    def _on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:
        self.events.on_mouse_move(x, y)

    def _on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int) -> None:
        self.events.on_mouse_move(x, y)

    def _on_mouse_scroll(self, x: float, y: float, scroll_x: float, scroll_y: float) -> None:
        self.events.on_scroll(scroll_x, scroll_y)

    def _on_close(self) -> None:
        self._closing = True

    def should_close(self) -> bool:
        """True once the user asked to close, or if no window could be made."""
        return self._closing or self.back is None

    def close(self) -> None:
        """Mark the window as closing and destroy the native window."""
        self._closing = True
        if self.back is not None:
            self.back.close()
            self.back = None