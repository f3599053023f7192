"""The rendering system: collects geometry from entities and draws it."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from paganini.log import warning
from paganini.renderable import Renderable
from paganini.system import System
from paganini.vertex_buffer import VertexBuffer
from paganini.window import Window

CLEAR_COLOR = (0.2, 0.3, 0.3, 1.0)

VERTEX_SHADER = """#version 330 core
in vec3 v_pos;
in vec4 v_color;
in vec2 v_uv;
in int v_tex_id;

out vec4 f_color;
out vec2 f_uv;
flat out int f_tex_id;

void main()
{
    f_color = v_color;
    f_uv = v_uv;
    f_tex_id = v_tex_id;
    gl_Position = vec4(v_pos, 1.0);
}
"""

FRAGMENT_SHADER = """#version 330 core
in vec4 f_color;
in vec2 f_uv;
flat in int f_tex_id;

out vec4 color;

void main()
{
    color = f_color;
}
"""


class Graphics(Protocol):
    """What the renderer needs from a graphics API."""

    def setup(self) -> None: ...

    def clear(self, color: tuple[float, float, float, float]) -> None: ...

    def draw(self, buffer: VertexBuffer) -> None: ...

    def viewport(self, width: int, height: int) -> None: ...


class _PygletGraphics:
    """OpenGL drawing through pyglet's shader programs."""

    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl
        self._program: Any = None

    def setup(self) -> None:
        from pyglet.graphics.shader import Shader, ShaderException, ShaderProgram

        try:
            self._program = ShaderProgram(
                Shader(VERTEX_SHADER, "vertex"),
                Shader(FRAGMENT_SHADER, "fragment"),
            )
        except ShaderException as exc:
            warning(f"failure to build shaders:\n{exc}")
            self._program = None

    def clear(self, color: tuple[float, float, float, float]) -> None:
        self._gl.glClearColor(*color)
        self._gl.glClear(self._gl.GL_COLOR_BUFFER_BIT)

    def draw(self, buffer: VertexBuffer) -> None:
        if self._program is None or buffer.index_count == 0:
            return
        used = buffer.vertices[: buffer.vert_count]
        data = {
            "v_pos": ("f", used["position"].ravel().tolist()),
            "v_color": ("f", used["color"].ravel().tolist()),
            "v_uv": ("f", used["uv"].ravel().tolist()),
            "v_tex_id": ("i", used["tex_id"].astype(int).tolist()),
        }
        active = self._program.attributes
        data = {key: value for key, value in data.items() if key in active}
        indices = buffer.indices[: buffer.index_count].astype(int).tolist()
        vertex_list = self._program.vertex_list_indexed(
            buffer.vert_count, self._gl.GL_TRIANGLES, indices, **data
        )
        self._program.use()
        try:
            vertex_list.draw(self._gl.GL_TRIANGLES)
        finally:
            self._program.stop()
            vertex_list.delete()

    def viewport(self, width: int, height: int) -> None:
        self._gl.glViewport(0, 0, width, height)


class Renderer(System):
    """Owns the window and vertex buffer and draws every renderable entity."""

    def __init__(
        self,
        window: Window | None = None,
        graphics: Graphics | None = None,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        super().__init__()
        self.add_resource("window", window if window is not None else Window())
        self.window: Window = self.resources["window"]
        self.graphics: Graphics = graphics if graphics is not None else _PygletGraphics()
        self._on_close = on_close
        if self.window.back is not None:
            self.window.back.push_handlers(on_resize=self._on_resize)
        self.add_resource("vb", VertexBuffer())
        self.buffer: VertexBuffer = self.resources["vb"]

    def _on_resize(self, width: int, height: int) -> None:
        self.graphics.viewport(width, height)

    def _request_close(self) -> None:
        if self._on_close is not None:
            self._on_close()
            return
        from paganini.app import App

        App.get().close()

    def start(self) -> None:
        self.graphics.setup()

    def update(self, dt: float) -> None:
        if self.window.should_close():
            self._request_close()
            return
        self.graphics.clear(CLEAR_COLOR)
        for entity in self.entities or ():
            renderable = entity.get(Renderable)
            if renderable is not None:
                renderable.fill_buffer(self.buffer)
        self.render()
        self.window.back.flip()
        self.window.back.dispatch_events()

    def render(self) -> None:
        """Draw the buffered geometry, then empty the buffer."""
        self.graphics.draw(self.buffer)
        self.buffer.clear()

    def clean(self) -> None:
        self.window.close()