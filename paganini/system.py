"""Systems: engine services updated every frame."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paganini.entity import Entity
    from paganini.resource import Resource


class System(ABC):
    """An engine service owning named resources and viewing the app's entities."""

    def __init__(self) -> None:
        self.resources: dict[str, Resource] = {}
        # A view of the application's entities, set by the app.
        self.entities: set[Entity] | None = None

    @abstractmethod
    def start(self) -> None:
        """Prepare the system before the main loop."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the system by dt seconds."""

    @abstractmethod
    def clean(self) -> None:
        """Release what the system holds."""

    def add_resource(self, name: str, resource: Resource) -> None:
        """Register a resource; an existing one under that name is kept."""
        self.resources.setdefault(name, resource)

    def remove_resource(self, name: str) -> None:
        """Close and forget the resource registered under name, if any."""
        resource = self.resources.pop(name, None)
        if resource is not None:
            resource.close()