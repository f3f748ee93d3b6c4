# quadkit

quadkit is 2D game logic with no rendering layer. Your code supplies input and time. Each update leaves plain Python state behind, and you draw that state with any graphics library you like. The package has no dependencies beyond the standard library.

## Modules

- **`quadkit.geometry`** holds the small math types.
  - `Vec2` and `Vec3` are immutable and support arithmetic, `length`, `normalize`, `dot` and `cross`.
  - `Rect` provides `overlaps` and `contains`.
  - `polar_to_cartesian` converts polar coordinates to a `Vec2`.
- **`quadkit.platformer`** gives pixel-exact platformer collision.
  - `World` holds static tile layers, moving actors and moving solids.
  - Tiles are `Tile.EMPTY`, `Tile.SOLID`, `Tile.JUMP_THROUGH` and `Tile.COLLIDER`.
  - Actors move with `move_h` and `move_v`, which return `False` when the actor is blocked.
  - Solids move with `solid_move`. A moving solid carries the actors riding on it and pushes the actors in its way. It marks them squished when they cannot move; check this with `squished`.
- **`quadkit.emitter_config`** holds the particle settings.
  - `EmitterConfig` is the main settings object.
  - The emission shapes are `PointEmission`, `RectEmission` and `SphereEmission`.
  - The particle meshes are `RectangleShape`, `CircleShape` and `CustomMeshShape`.
  - Size curves are `Curve` and `BatchedCurve`. Only linear interpolation is supported; `Interpolation.BEZIER` raises `ValueError`.
  - The remaining types are `Color`, `ColorCurve`, `BlendMode`, `AtlasConfig`, `ParticleMaterial` and `PostProcessing`.
- **`quadkit.emitter`** runs the particle simulation.
  - `Emitter` spawns particles, simulates them and retires them.
  - Each `Particle` carries its position, rotation, size, colour, life progress and atlas `uv` rectangle.
  - `EmittersCache` pools many short-lived emitters that share one config.
- **`quadkit.presets`** supplies ready-made configs: `explosion()`, `smoke()`, `fire()` and `fountain()`.
- **Game simulations:**
  - `quadkit.life`: Conway's Game of Life with `Life`, `CellState` and `next_state`.
  - `quadkit.snake`: `SnakeGame`.
  - `quadkit.arkanoid`: the brick breaker `Arkanoid`.
  - `quadkit.asteroids`: `AsteroidsGame`, with `Ship`, `Bullet`, `Asteroid` and `wrap_around`.
  - `quadkit.bouncers`: bouncing sprites, with `Bouncer` and `spawn_burst`.
- **Camera helpers:**
  - `quadkit.camera_control`: `CameraState`, with `short_angle_dist` and `angle_lerp`.
  - `quadkit.first_person`: `FirstPersonCamera` and `front_vector`.
  - `quadkit.letterbox`: `letterbox_scale`, `letterbox_viewport` and `virtual_mouse`.
- **`quadkit.inventory`**: `Inventory`, an equipment-slot model. It takes drag-and-drop commands `Fit`, `Unfit` and `Refit`.

Functions and classes that need randomness accept an optional `random.Random`. Pass one with a fixed seed to get results you can reproduce.

## Install

From a checkout:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: platformer physics

```python
from quadkit.geometry import Vec2
from quadkit.platformer import Tile, World

world = World()
# A 4x2 tile map with 8x8-pixel tiles; the bottom row is solid ground.
tiles = [Tile.EMPTY] * 4 + [Tile.SOLID] * 4
world.add_static_tiled_layer(tiles, 8.0, 8.0, 4, 1)

player = world.add_actor(Vec2(0.0, 0.0), 8, 8)
print(world.move_v(player, 20.0))  # False: the ground is directly below
print(world.actor_pos(player))     # Vec2(x=0.0, y=0.0)
print(world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0)))  # True
```

## Example: particles

```python
from quadkit.emitter import Emitter
from quadkit.geometry import Vec2
from quadkit.presets import fire

emitter = Emitter(fire())
for _ in range(60):
    emitter.step(Vec2(100.0, 100.0), 1 / 60)

for particle in emitter.particles:
    print(particle.position, particle.size, particle.color.to_tuple(), particle.uv)
```

## Example: Game of Life

```python
import random
from quadkit.life import Life

life = Life.random(64, 48, random.Random(1))
life.step()
```

## What it does not do

quadkit does not do the following:

- It does not open windows, draw anything or play sound.
- It does not read the keyboard, mouse or touch screen. Games take their input as plain arguments: booleans, key sets or mouse deltas.
- It does not load textures, fonts, tile maps or shaders. `EmitterConfig.texture` and `ParticleMaterial` are only carried along for a renderer to use.
- It has no command-line programs. It is a library you import.