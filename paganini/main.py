"""Demo application drawing a single rectangle."""

from __future__ import annotations

from paganini.app import App
from paganini.entity import Entity
from paganini.renderable import Renderable
from paganini.vertex_buffer import VertexBuffer


class DebugRenderable(Renderable):
    """Draws a fixed white rectangle and tracks how long it has been running."""

    running: bool = False
    elapsed: float = 0.0

    def start(self) -> None:
        self.running = True
        self.elapsed = 0.0

    def update(self, dt: float) -> None:
        if self.running:
            self.elapsed += dt

    def stop(self) -> None:
        self.running = False

    def fill_buffer(self, buffer: VertexBuffer) -> None:
        buffer.put_rect((0.0, 0.0, 0.0), (10.0, 10.0))


class DebugRect(Entity):
    """An entity carrying a DebugRenderable."""

    def start(self) -> None:
        self.components.append(DebugRenderable())


def main(argv: list[str] | None = None) -> int:
    print("Hello, World!")
    app = App.get()
    app.init()
    app.add(DebugRect())
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())