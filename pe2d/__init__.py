"""A small two-dimensional physics engine: vectors, shapes, collision detection and response, integrators, bodies and a stepping world."""

__version__ = "0.1.0"

__all__ = [
    "aabb",
    "body",
    "broadphase",
    "constraint",
    "geometry",
    "mathutils",
    "matrix",
    "motion",
    "narrowphase",
    "resolution",
    "rigidbody",
    "timer",
    "vector",
    "world",
]