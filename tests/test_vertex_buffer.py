import numpy as np
import pytest

from paganini.vertex_buffer import (
    LAYOUT_SIZE,
    VERTEX_DTYPE,
    Vertex,
    VertexBuffer,
)


def test_layout_size_matches_dtype():
    buf = VertexBuffer()
    buf.put((0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 0.0), (0.0, 0.0), 0)
    assert len(buf.vertex_bytes()) == VERTEX_DTYPE.itemsize == LAYOUT_SIZE == 40


def test_put_stores_vertex():
    buf = VertexBuffer()
    buf.put((1.0, 2.0, 3.0), (0.5, 0.25, 1.0, 1.0), (0.5, 0.5), 7)
    assert buf.vert_count == 1
    stored = buf.vertices[0]
    assert stored["position"].tolist() == [1.0, 2.0, 3.0]
    assert stored["color"].tolist() == [0.5, 0.25, 1.0, 1.0]
    assert stored["uv"].tolist() == [0.5, 0.5]
    assert int(stored["tex_id"]) == 7
    assert len(buf.vertex_bytes()) == LAYOUT_SIZE


def test_vertex_bytes_round_trip():
    buf = VertexBuffer()
    buf.put_n([Vertex((1.0, 1.0, 1.0), (1.0, 0.0, 0.0, 1.0), (0.0, 1.0), 2)] * 3)
    decoded = np.frombuffer(buf.vertex_bytes(), dtype=VERTEX_DTYPE)
    assert len(decoded) == 3
    assert decoded["tex_id"].tolist() == [2, 2, 2]
    assert decoded["uv"][1].tolist() == [0.0, 1.0]


def test_put_rect_corners_and_indices():
    buf = VertexBuffer()
    buf.put_rect((0.0, 0.0, 0.0), (10.0, 10.0))
    assert buf.vert_count == 4
    assert buf.index_count == 6
    positions = [p.tolist() for p in buf.vertices["position"][:4]]
    assert positions == [
        [10.0, 0.0, 0.0],
        [0.0, 0.0, 0.0],
        [0.0, 10.0, 0.0],
        [10.0, 10.0, 0.0],
    ]
    assert np.frombuffer(buf.index_bytes(), dtype=np.uint32).tolist() == [3, 2, 0, 0, 2, 1]


def test_put_rect_default_color_is_white():
    buf = VertexBuffer()
    buf.put_rect((0.0, 0.0, 0.0), (1.0, 1.0))
    assert all(c.tolist() == [1.0, 1.0, 1.0, 1.0] for c in buf.vertices["color"][:4])


def test_put_rect_custom_color():
    buf = VertexBuffer()
    buf.put_rect((0.0, 0.0, 0.0), (1.0, 1.0), (0.0, 1.0, 0.0, 1.0))
    assert buf.vertices["color"][3].tolist() == [0.0, 1.0, 0.0, 1.0]


def test_clear_resets_counts():
    buf = VertexBuffer()
    buf.put_rect((0.0, 0.0, 0.0), (1.0, 1.0))
    buf.clear()
    assert buf.vert_count == 0
    assert buf.index_count == 0
    assert buf.vertex_bytes() == b""
    assert buf.index_bytes() == b""


def test_overflow_raises():
    buf = VertexBuffer(capacity=2)
    buf.put((0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 0.0), (0.0, 0.0), 0)
    buf.put((0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 0.0), (0.0, 0.0), 0)
    with pytest.raises(IndexError):
        buf.put((0.0, 0.0, 0.0), (0.0, 0.0, 0.0, 0.0), (0.0, 0.0), 0)


def test_rect_overflow_leaves_buffer_untouched():
    buf = VertexBuffer(capacity=3)
    with pytest.raises(IndexError):
        buf.put_rect((0.0, 0.0, 0.0), (1.0, 1.0))
    assert buf.vert_count == 0
    assert buf.index_count == 0