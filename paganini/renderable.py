"""Components that draw themselves into a vertex buffer."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from paganini.component import Component

if TYPE_CHECKING:
    from paganini.vertex_buffer import VertexBuffer


class Renderable(Component):
    """A component the renderer asks for geometry every frame."""

    @abstractmethod
    def fill_buffer(self, buffer: VertexBuffer) -> None:
        """Append this frame's geometry to buffer."""