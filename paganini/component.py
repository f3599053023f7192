"""Behaviour attached to an entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paganini.entity import Entity


class Component(ABC):
    """A piece of behaviour owned by an entity."""

    parent: Entity | None = None

    @abstractmethod
    def start(self) -> None:
        """Called when the component begins its life."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the component by dt seconds."""

    @abstractmethod
    def stop(self) -> None:
        """Called when the component is torn down."""