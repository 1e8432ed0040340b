# physim

A small two-dimensional particle simulation. A stream of particles is launched
from the left edge of an 800×600 window, half-way down. Gravity pulls them
down, the window edges bounce them back with some friction, and the particles
collide with one another elastically. A uniform grid of 5-pixel cells limits
the collision search to neighbouring cells.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window.

## Running

```
physim
```

A window opens and one new particle is added every frame, at up to 60 frames
per second. The title bar shows how many particles are in play. Close the
window to stop.

To stop on its own after a fixed number of frames:

```
physim --frames 600
```

A negative `--frames` value is rejected.

## Using it as a library

The simulation also runs without a window, which makes it easy to script or
test:

```python
import random

from physim.particle_manager import ParticleManager

manager = ParticleManager(gravity=True, friction=True, rng=random.Random(0))
manager.generate_particles(10)
for _ in range(100):
    manager.update()
print([p.position for p in manager.particles])
```

If a `window` is passed, it must offer `set_title(title)` and
`draw_circle(center, radius, color)`. `ParticleManager.update` calls both once
per frame.

The modules are:

- `physim.constants`: frame rate, gravity per frame, window size and the
  friction factor.
- `physim.vector`: `Vec2`, an immutable 2-D vector, plus the `dot` and
  `magnitude` helpers.
- `physim.particle`: `Particle`. `update` applies acceleration and velocity
  and then bounces the particle off the window edges through
  `check_collision_with_window`. `check_collision_with_particle` resolves an
  elastic collision between two overlapping particles, and `manage_overlap`
  pushes them apart. `interact` calls the particle's optional `interaction`
  callback on the pair.
- `physim.particle_manager`: `ParticleManager`. `generate_particles` spawns
  particles at the left edge, moving right at 5 px/frame with a random
  downward speed of 1 to 5. `grid_search` sorts the particles into grid cells
  and advances each one. `update` runs the collision pass over neighbouring
  cells and then advances and draws each particle, so a particle advances
  twice per frame.
- `physim.wave`: `Dot` and `WaveManager`. `generate_grid` lays out a grid of
  dots across the window, and `update` draws each dot shifted by a sine
  wave. The wave number `K` and angular frequency `W` are both 0, so as
  shipped the dots are drawn where they are placed.
- `physim.field`: `Field`. It stores two functions of `(x, y)` through
  `define_functions` and evaluates one through `calculate`. `update` draws the
  line segments held in `lines` through the window's
  `draw_line(start, end, color, thickness)`.
- `physim.app`: the window loop. `run(max_frames)` returns the number of
  frames drawn, and `main()` is the entry point of the `physim` command.

## What it does not do

The `physim` command shows only the particle simulation. `WaveManager` and
`Field` are not reachable from the command. `Field.generate_grid` only
clears `lines` and does not build a visual of the field, so it draws nothing
unless you fill `lines` yourself. Particles do not carry a `charge` force, and
no `interaction` callback is supplied.

## Tests

```
pip install .[test]
pytest
```