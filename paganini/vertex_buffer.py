"""CPU-side vertex and index storage for batched drawing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from paganini.resource import Resource

LAYOUT_COUNT = 4
POSITION_COUNT = 3
COLOR_COUNT = 4
UV_COUNT = 2
TEX_ID_COUNT = 1
LAYOUT_SIZE = 40

CAPACITY = 1000
WHITE = (1.0, 1.0, 1.0, 1.0)
RECT_INDICES = (3, 2, 0, 0, 2, 1)

VERTEX_DTYPE = np.dtype(
    [
        ("position", "<f4", (POSITION_COUNT,)),
        ("color", "<f4", (COLOR_COUNT,)),
        ("uv", "<f4", (UV_COUNT,)),
        ("tex_id", "<u4"),
    ]
)
assert VERTEX_DTYPE.itemsize == LAYOUT_SIZE


@dataclass(frozen=True)
class Vertex:
    """One vertex: position, RGBA colour, texture coordinates and texture id."""

    position: Sequence[float] = (0.0, 0.0, 0.0)
    color: Sequence[float] = (0.0, 0.0, 0.0, 0.0)
    uv: Sequence[float] = (0.0, 0.0)
    tex_id: int = 0


class VertexBuffer(Resource):
    """A fixed-capacity buffer of vertices and triangle indices."""

    def __init__(self, capacity: int = CAPACITY, name: str = "") -> None:
        super().__init__(name)
        self.vertices = np.zeros(capacity, dtype=VERTEX_DTYPE)
        self.indices = np.zeros(capacity, dtype=np.uint32)
        self.vert_count = 0
        self.index_count = 0
        self.dirty = False

    def _reserve(self, vertices: int, indices: int = 0) -> None:
        if self.vert_count + vertices > len(self.vertices):
            raise IndexError("vertex buffer is full")
        if self.index_count + indices > len(self.indices):
            raise IndexError("index buffer is full")

    def _store(self, vertex: Vertex) -> None:
        slot = self.vertices[self.vert_count]
        slot["position"] = vertex.position
        slot["color"] = vertex.color
        slot["uv"] = vertex.uv
        slot["tex_id"] = vertex.tex_id
        self.vert_count += 1

    def put(self, pos: Sequence[float], color: Sequence[float], uv: Sequence[float], tex_id: int) -> None:
        """Append a single vertex."""
        self._reserve(1)
        self._store(Vertex(pos, color, uv, tex_id))

    def put_n(self, vertices: Iterable[Vertex]) -> None:
        """Append every vertex from an iterable."""
        for vertex in vertices:
            self._reserve(1)
            self._store(vertex)

    def put_rect(
        self,
        pos: Sequence[float],
        wh: Sequence[float],
        color: Sequence[float] = WHITE,
    ) -> None:
        """Append an axis-aligned rectangle as four vertices and two triangles."""
        self._reserve(4, len(RECT_INDICES))
        x, y, z = pos
        w, h = wh
        corners = ((x + w, y, z), (x, y, z), (x, y + h, z), (x + w, y + h, z))
        for corner in corners:
            self._store(Vertex(corner, color, (0.0, 0.0), 0))
        end = self.index_count + len(RECT_INDICES)
        self.indices[self.index_count:end] = RECT_INDICES
        self.index_count = end

    def clear(self) -> None:
        """Forget every stored vertex and index."""
        self.vert_count = 0
        self.index_count = 0

    def vertex_bytes(self) -> bytes:
        """The stored vertices in their packed layout."""
        return self.vertices[: self.vert_count].tobytes()

    def index_bytes(self) -> bytes:
        """The stored indices as unsigned 32-bit integers."""
        return self.indices[: self.index_count].tobytes()