# tinyengine

A small, educational 2D game engine core in pure Python, with no third-party
dependencies.

## What is in it

- **Math**
  - `tinyengine.constants`: tolerances, angle constants and helpers such as
    `is_zero`, `is_equal`, `clamp_scale`, `normalize_angle`, `degrees_to_rad`
    and `rad_to_degrees`.
  - `tinyengine.vector`: the immutable `Vector2` and `Vector3`, with `+`, `-`
    and `*` by a scalar.
  - `tinyengine.matrix`: `Matrix3x3`, an immutable 3x3 matrix with `@` for
    multiplication. `inverse()` raises `SingularMatrixError` when the
    determinant is near zero.
  - `tinyengine.transform`: `Transform`, which holds a position, a rotation in
    radians and a scale.
  - `tinyengine.camera`: `Camera2D`, which gives view and projection matrices
    and converts between screen and world coordinates.
- **Core**
  - `tinyengine.interfaces`: the abstract `GameObject`, `Renderer`,
    `InputManager` and `AudioManager`.
  - `tinyengine.engine`: `Engine` runs a `GameObject` through initialise,
    update and render each frame, then destroy.
  - `tinyengine.game_loop`: `GameLoop` measures delta time and paces frames
    against a target frame rate.
  - `tinyengine.application`: `Application`, a minimal game object that
    counts updates and frames.
  - `tinyengine.errors`: `EngineError`.
  - `tinyengine.timer`: `Timer` for elapsed seconds.
- **Rendering**
  - `tinyengine.primitive`: `Color`, `Rectangle`, `Circle` and `Line`. Each
    one produces flat vertex lists (x, y, z triples) and index lists.
  - `tinyengine.command_queue`: `CommandQueue` holds clear and rectangle
    commands and replays them on a renderer.
  - `tinyengine.renderer`: `BaseRenderer`, a headless renderer that records
    draw calls.
  - `tinyengine.backend`: `OpenGLBackend`, the abstract interface for shader,
    program and uniform calls.
  - `tinyengine.shader`: `Shader` and `ShaderError`.
  - `tinyengine.shader_loader`: read shader sources from files and build
    shaders from them.
  - `tinyengine.shader_manager`: `ShaderManager`, a registry of named shaders
    with one current shader.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Math

```python
import math

from tinyengine.vector import Vector2
from tinyengine.transform import Transform
from tinyengine.camera import Camera2D

t = Transform(position=Vector2(10, 5), rotation=math.pi / 2, scale=Vector2(2, 2))
t.transform_point(Vector2(1, 0))   # approximately Vector2(x=10, y=7)

camera = Camera2D()
camera.world_to_screen(Vector2(0, 0), 800, 600)   # Vector2(x=400.0, y=300.0)
camera.follow_target(Vector2(10, 5), follow_speed=5.0, delta_time=1.0)
```

## Primitives and draw commands

```python
from tinyengine.primitive import Color, Rectangle, Circle

rect = Rectangle(0.0, 0.0, 10.0, 20.0, Color.rgb(1.0, 0.0, 0.0))
rect.vertices()   # [0.0, 20.0, 0.0, 10.0, 20.0, 0.0, 10.0, 0.0, 0.0, 0.0, 0.0, 0.0]
rect.indices()    # [0, 1, 2, 2, 3, 0]

circle = Circle(0.0, 0.0, 10.0, Color.rgb(0.0, 1.0, 0.0), segments=4)
len(circle.vertices())   # 18: the centre, four rim points, and the first rim point again
```

```python
from tinyengine.command_queue import CommandQueue
from tinyengine.renderer import BaseRenderer

queue = CommandQueue()
queue.add_clear_command()
queue.add_rectangle_command(10, 20, 100, 50)

renderer = BaseRenderer(800, 600)
queue.execute(renderer)
renderer.frame   # (("rectangle", 10, 20, 100, 50),)
```

## Shaders

`Shader` and `ShaderManager` compile and link programs through an object that
implements `OpenGLBackend`. The backend is passed in:

```python
from tinyengine.shader_manager import ShaderManager

manager = ShaderManager(backend)   # backend: your OpenGLBackend implementation
manager.load_shader("basic", vertex_source, fragment_source)
manager.use_shader("basic")
manager.set_uniform_float("alpha", 0.5)
```

Compile and link failures raise `ShaderError`. The error message includes the
backend's log.

## Running a game object

```python
import threading

from tinyengine.engine import Engine
from tinyengine.application import Application

engine = Engine("Demo", 800, 600, application=Application())
threading.Timer(0.1, engine.stop).start()
engine.run()   # loops until stop() is called
```

`run()` raises `EngineError` when no application is set, or when the
application's `initialize()` raises.

## Command line

```
tinyengine [--title TITLE] [--width W] [--height H] [--delay SECONDS]
```

The command builds an engine with the default `Application`, waits `--delay`
seconds (2 by default), and logs the elapsed time. It does not run the game
loop.

## What it does not do

The package opens no windows and draws nothing to the screen. `OpenGLBackend`
is only an interface: the package ships no implementation that talks to a
graphics driver. `BaseRenderer` only records draw calls. Input and audio exist
only as the abstract `InputManager` and `AudioManager`.