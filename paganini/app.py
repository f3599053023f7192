"""The application: owns systems and entities and runs the main loop."""

from __future__ import annotations

import time
from collections.abc import Iterable

from paganini.entity import Entity
from paganini.system import System


class App:
    """Runs every entity and system once per frame until closed."""

    _instance: App | None = None

    def __init__(self, systems: Iterable[System] | None = None) -> None:
        self._epoch = time.perf_counter()
        if systems is None:
            from paganini.renderer import Renderer

            systems = [Renderer(on_close=self.close)]
        self.systems: list[System] = list(systems)
        self.entities: set[Entity] = set()
        self.closing = False
        self.dt = 0.0

    @classmethod
    def get(cls) -> App:
        """Return the shared application, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _clock(self) -> float:
        return time.perf_counter() - self._epoch

    def init(self) -> None:
        """Give each system a view of the entities and start it."""
        for system in self.systems:
            system.entities = self.entities
            system.start()

    def run(self) -> None:
        """Loop until close() is called, then release every system."""
        dt = self._clock()
        while not self.closing:
            t0 = self._clock()
            for entity in list(self.entities):
                entity.update(dt)
            for system in self.systems:
                system.update(dt)
            dt = self._clock() - t0
            self.dt = dt
        self._clean()

    def close(self) -> None:
        """Ask the main loop to stop after the current frame."""
        self.closing = True

    def add(self, entity: Entity) -> None:
        """Add an entity and start it."""
        self.entities.add(entity)
        entity.start()

    def _clean(self) -> None:
        for system in self.systems:
            system.clean()
        self.systems.clear()