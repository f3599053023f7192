# paganini

A small entity-component game engine built on pyglet and numpy.

An `App` holds a list of *systems* and a set of *entities*. Each entity owns
*components*. Components that are `Renderable` append geometry to a shared
`VertexBuffer` every frame, and the `Renderer` system draws that buffer with
one indexed draw call and then empties it.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## The demo

```
paganini
```

This prints `Hello, World!`, opens an 800×600 window titled "Paganini" and
draws one white rectangle from the `DebugRect` entity (`paganini.main`),
whose `DebugRenderable` component calls `VertexBuffer.put_rect((0, 0, 0),
(10, 10))` each frame. Vertex positions go to the screen unchanged, in clip
coordinates (-1 to 1), so that rectangle fills the upper-right quarter of the
window. Closing the window ends the program.

## Using the engine

```python
from paganini.app import App
from paganini.entity import Entity
from paganini.renderable import Renderable


class Square(Renderable):
    def start(self):
        pass

    def update(self, dt):
        pass

    def stop(self):
        pass

    def fill_buffer(self, buffer):
        buffer.put_rect((0.0, 0.0, 0.0), (0.5, 0.5), (1.0, 0.0, 0.0, 1.0))


class Player(Entity):
    def start(self):
        self.components.append(Square())


app = App.get()
app.init()
app.add(Player())
app.run()
```

### `paganini.app`

`App.get()` returns the shared application, created on first use with a
single `Renderer` whose close callback is the app's `close`. `App(systems)`
builds one with the systems you pass instead.

- `init()` gives every system a view of the app's entity set and starts it.
- `add(entity)` adds an entity and calls its `start`.
- `run()` loops until `close()` is called: each frame it updates every
  entity and then every system with the previous frame's duration (also kept
  in `App.dt`). When the loop ends it calls `clean()` on every system and
  empties the system list.

### Entities and components

`Component` (`paganini.component`) is abstract with `start`, `update(dt)`
and `stop`. `Entity` (`paganini.entity`) is abstract in `start`, where a
subclass usually fills `self.components`. `Entity.update(dt)` forwards to
every component in order, `Entity.stop()` stops them all and clears the
list, and `Entity.get(kind)` returns the first component that is an
instance of `kind`, or `None`.

`Renderable` (`paganini.renderable`) is a component with one more abstract
method, `fill_buffer(buffer)`. The renderer calls it on the first
`Renderable` of each entity every frame.

### Systems and resources

`System` (`paganini.system`) is abstract in `start`, `update(dt)` and
`clean`. It keeps named `Resource`s: `add_resource(name, resource)` keeps
any resource already registered under that name, and
`remove_resource(name)` removes the resource and calls its `close()`.
`Resource` (`paganini.resource`) has a `name` and a `close()` that does
nothing by default.

### Rendering

`VertexBuffer` (`paganini.vertex_buffer`) stores up to 1000 vertices and
1000 indices in numpy arrays; each vertex is packed into 40 bytes (position
3×float32, colour 4×float32, uv 2×float32, texture id uint32). `put`,
`put_n` (an iterable of `Vertex`) and `put_rect(pos, wh, color)` append to
it; `color` defaults to opaque white. Appending past capacity raises
`IndexError`. `clear()` empties it; `vertex_bytes()` and `index_bytes()`
return the packed contents.

`Renderer(window, graphics, on_close)` (`paganini.renderer`) owns a
`Window` (resource `"window"`) and a `VertexBuffer` (resource `"vb"`).
`start()` builds the shader program; each `update` clears the screen to a
dark teal, collects geometry, `render()`s it, flips the window and
dispatches its events. Once the window should close it calls `on_close`
(or `App.get().close()` if none was given). `clean()` closes the window.
Window resizes set the viewport. The `graphics` argument accepts any object
with `setup`, `clear`, `draw` and `viewport` methods; the default draws with
pyglet's OpenGL shader programs.

`Window` (`paganini.window`) creates an 800×600 pyglet window by default,
or uses a `factory(width, height, name)` you pass. If creation fails the
error is reported and `should_close()` is true from then on. Key, mouse
motion, drag and scroll events are forwarded to an `Input` system.

### Input

`Input.get()` (`paganini.input`) is the shared input state.

- `keys`, `down_keys` and `up_keys` are `KeyTable`s of 256 entries, and
  `buttons` one of 8. Indexing outside the table prints a warning and gives
  `False`.
- `on_key(key, action)` takes a `KeyAction` (`PRESS`, `RELEASE`,
  `REPEAT`). A press sets the key and marks it in `down_keys` only if it was
  not already held. A release clears the key and `down_keys` and records in
  `up_keys` whether it had been held. `REPEAT`, and keys outside 0–255, are
  ignored.
- `on_mouse_move(x, y)` updates the position and the last movement;
  `on_scroll(dx, dy)` sets the scroll offsets.
- `update(dt)` copies `keys` into `up_keys` and resets the scroll offsets.
- `mouse` offers `pos()`, `dpos()`, `scroll()` (vertical only) and
  `scroll_xy()`.

### Sound

`SoundBoard` (`paganini.sound_board`) is a system that, on `start`, opens
pyglet's audio driver (raising `EngineError` if there is none) and prints
the output device names, or a warning when they cannot be listed.
`SoundBoard.list_devices()` prints and returns those names. It is not among
the app's default systems.

### Files

`File(path, binary=True)` (`paganini.file`) opens an existing file for
reading and writing; with no path it opens the null device. It has
`seek(offset, whence)` with `SeekFrom.START`, `CURRENT` or `END`, `tell()`,
`read(size)`, `dump()` (the whole contents, position left unchanged), and
works as a context manager. `get_line()` returns the next
whitespace-separated word of a file opened with `binary=False`; for binary
files it warns and returns `""`.

`WavFile(path)` (`paganini.wav_file`) opens a file and reads its first four
bytes into `header`, raising `EngineError` if fewer than four can be read.

### Logging

`paganini.log` offers `info` and `warning`, which print coloured lines to
standard output, `register_error(message, file, line)`, which prints an
error line, and `fatal`, which raises `EngineError`.

## What it does not do

- `WavFile` reads only the first four bytes; it does not check that they
  spell `RIFF`, parse the rest of the header or decode samples.
- `SoundBoard` opens the audio driver and lists devices, but plays nothing.
- Vertices carry texture coordinates and a texture id, but there is no
  texture loading and the shader draws vertex colour only.
- There is no camera or projection: positions are drawn in clip
  coordinates.
- Mouse button state is never set; `buttons` always reads `False`.