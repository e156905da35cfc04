# pe2d

A small two-dimensional physics engine in plain Python. It depends only on
the standard library.

## What it contains

- `pe2d.vector`: `Vector2D` (arithmetic, `dot`, `cross`, `normalize`,
  `rotate`, `reflect`, `projection`, `to_polar` and more) and
  `PolarCoordinates`.
- `pe2d.matrix`: `Matrix3x3` for homogeneous 2D transforms, with
  `Matrix3x3.rotate`, `Matrix3x3.scale` and `Matrix3x3.translate`;
  multiplying a matrix by a `Vector2D` transforms it as a point.
- `pe2d.mathutils`: geometric predicates such as `is_point_in_polygon`,
  `is_segment_intersect`, `is_circle_polygon_intersect`, and scalar helpers
  `clamp`, `lerp`, `smoothstep`, `degrees_to_radians`, `radians_to_degrees`.
- `pe2d.geometry`: shapes `Triangle`, `Polygon`, `Rectangle`, `Circle` and
  `Capsule`, each with `area()`, `centroid()`, `set_position()` and, for the
  polygonal ones, `vertices()` and `rotate()`. A `Polygon` needs at least
  three vertices and raises `ValueError` otherwise.
- `pe2d.aabb`: `AABB` bounding boxes (`AABB.from_shape`, `intersects`,
  `contains_point`, `batch_intersections`, ...) and the `CollisionInfo`
  record.
- `pe2d.broadphase`: `QuadTree` and a uniform `Grid` for culling candidate
  pairs.
- `pe2d.narrowphase`: `CollisionDetector.check_collision` with
  separating-axis tests for circle, polygon and capsule pairs, plus helpers
  such as `find_contact_point`, `segment_intersection` and
  `vertex_detection`. Pairs without a dedicated test (circle against
  capsule, capsule against capsule) return `None`.
- `pe2d.resolution`: `apply_impulse` and `resolve_penetration`, with
  `combined_restitution` (the larger coefficient) and `combined_friction`
  (the geometric mean).
- `pe2d.motion`: the `Parameter` state record and the integrators
  `ExplicitEulerIntegration`, `SemiImplicitEulerIntegration`,
  `ImplicitEulerIntegration` (driven by `NewtonRaphsonIteration`),
  `RungeKuttaIntegration` and `VerletIntegration`.
- `pe2d.body` and `pe2d.rigidbody`: the abstract `Body` with its id
  registry, and `RigidBody`, which steps with fourth-order Runge–Kutta.
- `pe2d.constraint`: the `Constraint` base class with its own id registry.
- `pe2d.timer`: `Timer`, which measures time and sleeps to hold a frame
  rate; its clock and sleep functions can be passed in.
- `pe2d.world`: `World`, which steps registered bodies and constraints.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pe2d.vector import Vector2D
from pe2d.geometry import Circle
from pe2d.rigidbody import RigidBody
from pe2d.world import World

world = World()                      # gravity (0, 9.8), time step 0.02 s

ball_id = RigidBody.make()
ball = RigidBody.get(ball_id)
ball.set_shape(Circle(Vector2D(0.0, 0.0), 1.0))
world.add_object(ball_id)

for _ in range(10):
    world.update()

print(ball.position, ball.velocity)
```

Bodies and constraints live in registries keyed by integer ids, handed out
as the lowest free id starting from 1; `Body.remove_all()` and
`Constraint.clear_registry()` empty them. A `World` holds the ids it
simulates and silently ignores ids that are not registered.

Each `World.update()` applies gravity to every body at its centroid,
integrates every body, rebuilds a quadtree over the bodies' bounding boxes,
runs the narrow-phase test on each candidate pair, applies impulses and
positional correction, updates the constraints, and finally sleeps for
whatever remains of the time step. To step without waiting, give the world a
timer that does not sleep:

```python
from pe2d.timer import Timer
from pe2d.world import World

world = World(timer=Timer(sleep=lambda seconds: None))
```

Collision checks can also be used on their own:

```python
from pe2d.vector import Vector2D
from pe2d.geometry import Circle
from pe2d.narrowphase import CollisionDetector

info = CollisionDetector.check_collision(
    Circle(Vector2D(0, 0), 1.0), Circle(Vector2D(1.5, 0), 1.0)
)
if info is not None:
    print(info.normal, info.penetration, info.contact_point)
```

The y axis points downwards: an `AABB` is described by its top-left
(minimum) and bottom-right (maximum) corners, and the default gravity is
positive in y.

## What it does not do

- There is no drawing or window: the package only computes state, and
  displaying it is left to the caller.
- There is no command-line program.
- `Constraint` is only a base class: it stores its two body ids and
  arguments, accumulates elapsed time and counts how often it was applied,
  but it does not move any body. Concrete constraints are subclasses you
  write yourself.
- Nothing is saved to or loaded from disk.