"""Entities: containers of components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from paganini.component import Component

C = TypeVar("C", bound=Component)


class Entity(ABC):
    """An object in the scene that owns a list of components."""

    def __init__(self) -> None:
        self.components: list[Component] = []
        self.name = ""

    @abstractmethod
    def start(self) -> None:
        """Set the entity up, typically by adding components."""

    def update(self, dt: float) -> None:
        """Update every component in order."""
        for component in self.components:
            component.update(dt)

    def stop(self) -> None:
        """Stop every component and drop them all."""
        for component in self.components:
            component.stop()
        self.components.clear()

    def get(self, kind: type[C]) -> C | None:
        """Return the first component of the given type, or None."""
        return next((c for c in self.components if isinstance(c, kind)), None)