# blobarena

Movement rules and drawing geometry for a top-down arena where blobs move
about a 1920 × 1040 field. Drawing goes to any canvas object you pass in.

## Modules

- `blobarena.circle`
  - `Circle(x, y, size, speed, color)` is the base body. Colours are
    `(r, g, b)` tuples.
  - `init()` resets every attribute. `update()` sets position, size and
    colour and keeps the speed.
  - `render(canvas, camera_x, camera_y)` subtracts the camera offset from
    the circle's own `x` and `y`. It then calls
    `canvas.ellipse(left, top, right, bottom, fill)`.
  - `clamp_to_arena(value, size, limit)` keeps a coordinate between `size`
    and `limit - size`.
- `blobarena.player`
  - `Player.move(mx, my, delta_time)` heads straight for `(mx, my)` at
    `speed * 100` units per second. It stays inside the arena.
  - `Player.update()` caps size at 250 and keeps speed at 0.1 or more.
- `blobarena.enemy`
  - `Enemy.move(delta_time, food, hero)` chases the hero when it is within
    five times the enemy's size. Otherwise it heads for the nearest item in
    `food`. With no food it wanders, re-rolling its heading every 2 seconds.
  - `Enemy.update()` caps size at 250 and keeps speed at 0.1 or more.
- `blobarena.trap`
  - `Trap.move(delta_time)` drifts at `speed * 50` and picks a new random
    heading every 10 seconds.
  - `Trap.update()` sets the values as given.
- `blobarena.jumbo`
  - `Jumbo.move(delta_time, hero_x, hero_y)` turns towards a hero closer
    than 200 units and otherwise wanders. When it reaches an arena edge it
    turns back inward, at most once every 2 seconds.
  - `Jumbo.update()` repositions it and picks a fresh random heading.
  - `triangle_points()` gives the three corners of its outline.
  - `render(canvas, camera_x, camera_y)` shifts it by the camera offset and
    calls `canvas.polygon(points, fill)`.
- `blobarena.camera`
  - `Camera.instance()` returns one shared camera. `Camera()` makes a
    separate one.
  - `set_mode(CameraMode.STATIC_VIEW)` sets `scale` to 1.
    `set_mode(CameraMode.FOLLOW_PLAYER)` sets `scale` to 2.
  - `handle_input(key)` takes the key code or character `'1'` (follow) or
    `'2'` (static). Other keys are ignored.
  - `calculate_offset(hero_x, hero_y)` returns `(offset_x, offset_y)`.
    - In static mode it returns `(0.0, 0.0)`.
    - In follow mode the offset moves 10% of the way per call towards the
      hero-centred offset, clamped to the map. With the default screen size
      equal to the map, that target is always the origin.

`Enemy`, `Trap` and `Jumbo` take an optional keyword `rng`
(a `random.Random`), so their random headings can be made repeatable.

## Example

```python
import random

from blobarena.camera import Camera, CameraMode
from blobarena.circle import Circle
from blobarena.enemy import Enemy
from blobarena.player import Player

hero = Player(960.0, 520.0, 20, 2.0, (0, 128, 255))
food = [Circle(100.0, 100.0, 5, 0, (0, 200, 0))]
foe = Enemy(400.0, 400.0, 25, 1.5, (200, 0, 0), rng=random.Random(1))

camera = Camera.instance()
camera.set_mode(CameraMode.FOLLOW_PLAYER)

dt = 1 / 60
hero.move(1200, 600, dt)
foe.move(dt, food, hero)
offset_x, offset_y = camera.calculate_offset(hero.x, hero.y)
```

## What it does not do

There is no window, game loop, score display or command to start a game. Eating, growing and collisions between blobs are also left to the caller. The package only moves bodies and describes how to draw them.

## Tests

```
pip install -e .[test]
pytest
```