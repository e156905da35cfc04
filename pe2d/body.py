"""Physical bodies and the registry that hands out their ids."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Optional, Union

from .aabb import AABB
from .geometry import Capsule, Circle, Rectangle, Shape, ShapeType
from .matrix import Matrix3x3
from .motion import Parameter
from .vector import Vector2D

_log = logging.getLogger(__name__)

_TINY_INERTIA = 1e-6
_TINY_MASS = 1e-6
_TINY_AREA = 1e-7


def _copy(v: Vector2D) -> Vector2D:
    return Vector2D(v.x, v.y)


class ObjectType(Enum):
    NONE = 0
    RIGIDBODY = 1
    ELASTICBODY = 2
    SOFTBODY = 3
    PARTICLE = 4
    FLUID = 5


class Body(ABC):
    """Base class of every simulated body.

    Each body registers itself on creation under the lowest free id,
    starting from 1, and starts out with a unit square as its shape.
    """

    _registry: ClassVar[list[Optional[Body]]] = [None]
    _next_id: ClassVar[int] = 1

    def __init__(self) -> None:
        self.object_type = ObjectType.NONE
        self.aabb: Optional[AABB] = None
        self._shape: Optional[Shape] = None
        self.island_prev = 0
        self.island_next = 0
        self.alive = True
        self.active = True
        self.mass = 1.0
        self.inv_mass = 1.0
        self.inertia = 1.0
        self.inv_inertia = 1.0
        self.restitution = 0.5
        self.friction = 0.5
        self.density = 1.0
        self.centroid = Vector2D(0.0, 0.0)
        self.velocity = Vector2D(0.0, 0.0)
        self.angular_velocity = Vector2D(0.0, 0.0)
        self.force = Vector2D(0.0, 0.0)
        self.torque = Vector2D(0.0, 0.0)
        self.linear_damping = 0.0
        self.angular_damping = 0.0
        self.gravity_scale = 1.0
        self.fixed = False
        self.enable_sleep = False
        self.sleep_time = 0.0
        self.sleep_threshold = 1e-4
        self.fixed_rotation = False
        self.position = Vector2D(0.0, 0.0)
        self.rotation = Matrix3x3.rotate(0.0)
        self.scale = Matrix3x3.scale(1.0)
        self.forces: list[tuple[Vector2D, Vector2D]] = []
        self.impulses: list[tuple[Vector2D, Vector2D]] = []

        self.id = Body._next_id
        registry = Body._registry
        if self.id == len(registry):
            registry.append(self)
        else:
            registry[self.id] = self
        Body._next_id = Body.next_id()

        self.set_shape(Rectangle(Vector2D(0.0, 1.0), Vector2D(1.0, 0.0)))

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the body by one time step."""

    @abstractmethod
    def init(self) -> None:
        """Put the body into its initial state."""

    @abstractmethod
    def reset(self) -> None:
        """Return the body to its initial state."""

    @property
    def shape(self) -> Shape:
        assert self._shape is not None
        return self._shape

    def set_position(self, position: Vector2D) -> None:
        """Move the body; a circular shape follows it."""
        self.position = _copy(position)
        if self._shape is not None and self._shape.shape_type is ShapeType.CIRCLE:
            self._shape.set_position(position)

    def set_rotation(self, rotation: Union[float, Matrix3x3]) -> None:
        """Set the rotation from an angle, or from a matrix that is also applied to the shape."""
        if isinstance(rotation, Matrix3x3):
            self.shape.rotate(rotation)
            self.rotation = rotation
        else:
            self.rotation = Matrix3x3.rotate(rotation)

    def set_scale(self, sx: Union[float, Matrix3x3], sy: Optional[float] = None) -> None:
        """Set the scale from a matrix, one factor for both axes, or one per axis."""
        if isinstance(sx, Matrix3x3):
            self.scale = sx
        else:
            self.scale = Matrix3x3.scale(sx, sx if sy is None else sy)

    def update_inv_mass(self) -> None:
        """Recompute the inverse mass; a (nearly) massless body gets zero."""
        self.inv_mass = 1.0 / self.mass if self.mass > _TINY_MASS else 0.0

    def set_shape(self, shape: Shape) -> None:
        """Replace the shape and recompute bounds, centroid, position and inertia."""
        self._shape = shape
        self.calculate_aabb()
        self.centroid = shape.centroid()
        self.position = _copy(self.centroid)
        self.calculate_inertia()

    def calculate_aabb(self) -> None:
        if self._shape is not None:
            self.aabb = AABB.from_shape(self._shape)
            self.aabb.obj_id = self.id

    def _set_tiny_inertia_inverse(self) -> None:
        if self.inertia < _TINY_INERTIA:
            self.inv_inertia = math.inf if self.inertia == 0 else 1.0 / self.inertia

    def calculate_inertia(self) -> None:
        """Moment of inertia of the current shape about the body's centroid."""
        shape = self.shape
        kind = shape.shape_type
        if kind is ShapeType.UNKNOWN:
            self.inertia = 1.0
            self.inv_inertia = 1.0
            return
        if isinstance(shape, Circle):
            self.inertia = 0.5 * self.mass * shape.radius**2
            self._set_tiny_inertia_inverse()
            return
        if isinstance(shape, Capsule):
            r, h = shape.radius, shape.height
            m1 = (math.pi * r * r / (math.pi * r * r + 2 * r * h)) * self.mass
            m2 = self.mass - m1
            self.inertia = 0.5 * m1 * r * r + (1.0 / 12.0) * m2 * (4 * r * r + h * h)
            self._set_tiny_inertia_inverse()
            return

        vertices = shape.vertices()
        following = [*vertices[1:], *vertices[:1]]
        inertia = 0.0
        for a, b in zip(vertices, following):
            cross = a.cross(b)
            v1 = a - self.centroid
            v2 = b - self.centroid
            term = (
                v1.x * v1.x + v1.x * v2.x + v2.x * v2.x
                + v1.y * v1.y + v1.y * v2.y + v2.y * v2.y
            )
            inertia += cross * term
        area = shape.area()
        if area < _TINY_AREA:
            _log.warning("The polygon area is zero, cannot compute inertia.")
            return
        inertia *= 1.0 / (12.0 * area)
        self.inertia = inertia
        self.inv_inertia = 1.0 / inertia

    def cal_torque(self) -> Vector2D:
        """Torque vector handed to the integrator: sin(45 degrees) along x."""
        return Vector2D(math.sin(math.radians(45.0)), 0.0)

    def get_parameter(self) -> Parameter:
        """Snapshot of the state for an integrator; also refreshes the torque."""
        acceleration = self.force / self.mass
        self.torque = self.cal_torque()
        return Parameter(
            position=_copy(self.position),
            velocity=_copy(self.velocity),
            acceleration=acceleration,
            force=sum((f for f, _ in self.forces), Vector2D()),
            impulse=sum((i for i, _ in self.impulses), Vector2D()),
            angular_velocity=_copy(self.angular_velocity),
            angular_acceleration=self.torque / self.inertia,
            mass=self.mass,
            inertia=self.inertia,
            friction=self.friction,
            damping=self.linear_damping,
            angular_damping=self.angular_damping,
            restitution=self.restitution,
            shape=self._shape,
        )

    def set_with_parameter(self, params: Parameter) -> None:
        """Take over velocity, position, inertia and torque from integrated parameters."""
        self.velocity = _copy(params.velocity)
        self.angular_velocity = _copy(params.angular_velocity)
        self.set_position(params.position)
        self.inertia = params.inertia
        self.torque = _copy(params.torque)

    def clear_force(self) -> None:
        self.forces.clear()

    def clear_impulse(self) -> None:
        self.impulses.clear()

    def apply_force(self, force: Vector2D, point: Vector2D) -> None:
        """Record a force acting at a point until the forces are cleared."""
        self.forces.append((_copy(force), _copy(point)))

    def apply_impulse(self, impulse: Vector2D, point: Vector2D) -> None:
        """Record an impulse acting at a point until the impulses are cleared."""
        self.impulses.append((_copy(impulse), _copy(point)))

    @classmethod
    def destroy_object(cls, object_id: int) -> None:
        """Remove a body from the registry; IndexError if the id is out of range."""
        Body.remove(object_id)

    @classmethod
    def remove_all(cls) -> None:
        """Forget every registered body; ids start again from 1."""
        Body._registry = [None]
        Body._next_id = 1

    @classmethod
    def remove(cls, object_id: int) -> None:
        registry = Body._registry
        if not 0 <= object_id < len(registry):
            raise IndexError(f"Object ID {object_id} out of range")
        registry[object_id] = None
        Body._next_id = Body.next_id()

    @classmethod
    def is_valid_id(cls, object_id: int) -> bool:
        registry = Body._registry
        return 0 <= object_id < len(registry) and registry[object_id] is not None

    @classmethod
    def next_id(cls) -> int:
        """Lowest free id at or above 1."""
        registry = Body._registry
        return next(
            (index for index in range(1, len(registry)) if registry[index] is None),
            max(1, len(registry)),
        )

    @classmethod
    def get(cls, object_id: int) -> Body:
        """The registered body with this id; KeyError if there is none."""
        if not Body.is_valid_id(object_id):
            raise KeyError(object_id)
        body = Body._registry[object_id]
        assert body is not None
        return body