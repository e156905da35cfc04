"""Rigid bodies advanced with fourth-order Runge-Kutta integration."""

from __future__ import annotations

from .body import Body, ObjectType
from .matrix import Matrix3x3
from .motion import RungeKuttaIntegration
from .vector import Vector2D


class RigidBody(Body):
    """A body that keeps its shape; create one with RigidBody.make()."""

    def __init__(self) -> None:
        super().__init__()
        self.init()

    @classmethod
    def make(cls) -> int:
        """Create a rigid body and return its id."""
        return cls().id

    def init(self) -> None:
        self.object_type = ObjectType.RIGIDBODY
        self.active = True
        self.alive = True
        self.position = Vector2D(0.0, 0.0)
        self.set_rotation(Matrix3x3.rotate(0.0))
        self.set_scale(1.0, 1.0)
        self.mass = 1.0
        self.fixed = False
        self.enable_sleep = False
        self.fixed_rotation = False
        self.gravity_scale = 1.0
        self.linear_damping = 0.0
        self.angular_damping = 0.0
        self.restitution = 0.5
        self.friction = 0.5
        self.density = 1.0
        self.velocity = Vector2D()
        self.angular_velocity = Vector2D()
        self.force = Vector2D()
        self.torque = Vector2D(0.0, 0.0)
        self.sleep_time = 0.0
        self.sleep_threshold = 1e-4
        self.island_prev = 0
        self.island_next = 0

    def reset(self) -> None:
        self.init()

    def update(self, delta_time: float) -> None:
        """Integrate one step unless fixed, then drop the accumulated forces and impulses."""
        if not self.fixed:
            params = self.get_parameter()
            params.delta_time = delta_time
            result = RungeKuttaIntegration()(params)
            result.force = Vector2D(0.0, 0.0)
            result.impulse = Vector2D(0.0, 0.0)
            spin = result.angular_velocity.magnitude()
            angle = delta_time * (spin + spin) / 2.0
            self.set_rotation(self.rotation * Matrix3x3.rotate(angle))
            self.set_with_parameter(result)
        self.clear_force()
        self.clear_impulse()