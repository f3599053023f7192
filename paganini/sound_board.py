"""The audio system."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from paganini.log import fatal, info, warning
from paganini.system import System


def _open_default_driver() -> Any:
    import pyglet.media

    return pyglet.media.get_audio_driver()


def _default_devices() -> list[str] | None:
    """Names of the output devices, or None when they cannot be enumerated."""
    try:
        from pyglet.media.devices import get_audio_device_manager
    except ImportError:
        return None
    manager = get_audio_device_manager()
    if manager is None:
        return None
    return [device.name for device in manager.get_output_devices()]


def _print_devices(names: list[str]) -> None:
    info("Audio Devices:")
    for name in names:
        print(name)


class SoundBoard(System):
    """Opens the audio output device at start."""

    def __init__(
        self,
        open_driver: Callable[[], Any] | None = None,
        enumerate_devices: Callable[[], list[str] | None] | None = None,
    ) -> None:
        super().__init__()
        self._open_driver = open_driver if open_driver is not None else _open_default_driver
        self._enumerate = enumerate_devices if enumerate_devices is not None else _default_devices
        self.driver: Any = None

    @staticmethod
    def list_devices() -> list[str]:
        """Print and return the names of the available output devices."""
        names = _default_devices() or []
        _print_devices(names)
        return names

    def start(self) -> None:
        self.driver = self._open_driver()
        if self.driver is None:
            fatal("Could not open audio device!")
        names = self._enumerate()
        if names is None:
            warning("Note: device enumeration not enabled.")
        else:
            _print_devices(names)

    def update(self, dt: float) -> None:
        pass

    def clean(self) -> None:
        self.driver = None