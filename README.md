# puttsim

`puttsim` models one hole of mini golf as plain Python state. That state covers
the terrain, the ball, the aiming arrow, the pole, a chase camera, the 2D
sprites of the user interface and the flow from title to stage to result. You
advance it one frame at a time and read back positions and matrices. Only the
standard library is needed.

## Modules

- `puttsim.math3d`: an immutable `Vector3` and 4x4 matrices stored as tuples
  in row-vector convention. The matrix functions are `identity_matrix`,
  `multiply`, `scale_matrix`, `translation_matrix`, `rotation_yaw_pitch_roll`,
  `srt_matrix` (scale * rotation * translation) and `transform`.
- `puttsim.collision`: the shapes `Line`, `Plane`, `Segment`, `Polygon`
  (a triangle), `Sphere` and `AABB`, together with tests between them.
  - The `*_contact` functions return a contact point, or `None` when there is
    no hit: `line_polygon_contact`, `segment_polygon_contact`,
    `sphere_polygon_contact` and `sphere_sphere_contact`.
  - The boolean tests are `line_hits_plane`, `segment_hits_plane`,
    `sphere_hits_plane` and `aabb_overlap`.
  - The helpers are `closest_point_on_segment`, `point_in_triangle`,
    `closest_point_on_triangle`, `polygon_normal`, `move_sphere_along_segment`,
    `move_sphere_out` and `make_aabb`.
- `puttsim.input`: `InputState` keeps the current and the previous frame of
  keys and controller state (`ControllerState`).
  - It reports presses, triggers (just pressed) and releases, along with stick
    and trigger values scaled to -1..1 and 0..1.
  - It counts down a rumble duration that is set with `set_vibration`.
  - `Key` holds the virtual key codes and `Button` the controller bits.
- `puttsim.gameobject`: the abstract base classes `GameObject` and `Scene`.
  - A `GameObject` has a position, a rotation and a scale.
  - Its `draw()` returns the world matrix.
- `puttsim.ground`: `Ground`, a field of 30 x 30 tiles. It is scaled by 5 and
  its vertices are stored in world space.
  - `build_terrain(size_x, size_z, heightmap, height_scale)` raises the
    vertices using a grid of greyscale values.
  - A `Ground` given a `heightmap=` uses that grid. Without one the field is
    flat.
- `puttsim.golfball`: `GolfBall` and `BallState` (`PHYSICS`, `STOPPED`,
  `CUP_IN`).
  - Left and Right turn the ball.
  - W, A, S and D push it, and Shift raises the speed and the speed cap.
  - It falls under gravity and slides over the ground triangles, bouncing with
    a restitution of 0.55.
  - If it falls below y = -100 it respawns at (0, 50, 0).
  - Touching the pole switches it to `CUP_IN`.
- `puttsim.arrow`: `Arrow` and `ArrowState` (`HIDDEN`, `DIRECTION`, `POWER`).
  - In the direction state it spins.
  - In the power state it stretches from 1 to 4 and then wraps back.
  - `get_vector()` returns the shot vector.
- `puttsim.pole`: `Pole`, which moves up or down to sit on the terrain below
  or above the point where it is placed.
- `puttsim.camera`: `Camera` follows 10 units behind the first ball and 5
  units above it.
  - `view_matrix(mode)` and `projection_matrix(mode, width, height)` take mode
    0 for 3D and mode 1 for 2D. Any other mode raises `ValueError`.
  - `look_at_lh`, `perspective_fov_lh` and `orthographic_lh` build the
    left-handed matrices.
- `puttsim.sprite`: `Sprite`, a screen-space quad with a texture name.
  - `set_uv(nu, nv, sx, sy)` selects cell (nu, nv) of a sheet split into
    sx by sy cells.
  - `uv_rect()` returns that cell as `(u, v, width, height)`.
- `puttsim.scenes`: `SceneName`, `TitleScene`, `Stage1Scene` (par 4) and
  `ResultScene`.
- `puttsim.game`: `Game` owns the objects, the camera, the input state and the
  current scene.
  - `SCREEN_WIDTH` and `SCREEN_HEIGHT` give its default size, 1280 x 720.

## Driving a game

`Game` reads input through callables that you supply:

- `key_source` returns the key codes held this frame.
- `controller_source` returns a `ControllerState` or `None`.

If you supply neither, no keys are ever pressed.

```python
from puttsim.game import Game
from puttsim.input import Key
from puttsim.scenes import Stage1Scene

held = set()
game = Game(key_source=lambda: held)
game.start()                 # camera initialised, title scene opened

held.add(Key.RETURN)
game.update()                # the input state now sees Enter held
held.clear()
game.update()                # the title scene sees the Enter trigger
assert isinstance(game.scene, Stage1Scene)

matrices = game.draw()       # world matrices of the visible objects, in order
game.shutdown()
```

Each `update` runs these steps in order:

1. the scene,
2. the camera,
3. the input state (from the key and controller sources),
4. every object.

A scene therefore reacts to keys that were read on the previous frame.

On the stage the flow goes like this:

1. Once the ball's state is `BallState.STOPPED`, the stroke count goes up and
   the arrow starts choosing a direction.
2. Space fixes the direction and starts choosing power.
3. Space again strikes the ball with a quarter of the arrow's vector.
4. When the ball reaches `CUP_IN`, the game switches to the result scene.
   `ResultScene.set_score` then picks a row of the result sheet from the score,
   which is strokes minus par.
5. Enter returns to the title.

`GolfBall.update` never counts frames at rest. The ball switches to `STOPPED`
only after its `stop_count` attribute has risen above 10, or when its `state`
is set directly.

## Using the collision helpers on their own

```python
from puttsim.math3d import Vector3
from puttsim.collision import Polygon, Segment, Sphere, segment_polygon_contact, sphere_sphere_contact

floor = Polygon(Vector3(-1, 0, -1), Vector3(-1, 0, 1), Vector3(1, 0, -1))
drop = Segment(Vector3(-0.5, 1, -0.5), Vector3(-0.5, -1, -0.5))
print(segment_polygon_contact(drop, floor))   # a point on the floor at y = 0

print(sphere_sphere_contact(Sphere(Vector3(0, 0, 0), 0.5), Sphere(Vector3(0.8, 0, 0), 0.5)))
```

## What it does not do

- It opens no window and draws nothing. `draw()` methods return matrices, and
  sprites store texture names as strings.
- It does not load images or 3D models. Terrain heights come only from a grid
  of numbers that you pass in.
- It does not read a keyboard or a controller. It does not run a controller's
  motors either: the rumble values are only stored on `InputState.vibration`.
- It has no command-line program and no timed main loop. You call `update` and
  `draw` as often as you like.

## Tests

The tests use pytest, which is declared in the `test` extra:

```
pip install -e .[test]
pytest
```