"""The simulation world that steps bodies, collisions and constraints."""

from __future__ import annotations

from typing import Optional

from .aabb import CollisionInfo
from .body import Body
from .broadphase import QuadTree
from .constraint import Constraint
from .narrowphase import CollisionDetector
from .resolution import apply_impulse, resolve_penetration
from .timer import Timer
from .vector import Vector2D


class World:
    """Holds registered bodies and constraints by id and advances them in time."""

    def __init__(
        self,
        gravity: Optional[Vector2D] = None,
        time_step: float = 0.02,
        timer: Optional[Timer] = None,
    ) -> None:
        self.gravity = Vector2D(0.0, 9.80) if gravity is None else gravity
        self.time_step = time_step
        self.timer = Timer() if timer is None else timer
        self.object_ids: list[int] = []
        self.constraint_ids: list[int] = []

    def add_object(self, object_id: int) -> None:
        """Manage a registered body; unknown ids are ignored."""
        if Body.is_valid_id(object_id):
            self.object_ids.append(object_id)

    def remove_object(self, object_id: int) -> None:
        """Stop managing a registered body, every occurrence of it."""
        if Body.is_valid_id(object_id):
            self.object_ids = [i for i in self.object_ids if i != object_id]

    def add_constraint(self, constraint_id: int) -> None:
        """Manage a registered constraint; unknown ids are ignored."""
        if Constraint.is_valid_id(constraint_id):
            self.constraint_ids.append(constraint_id)

    def remove_constraint(self, constraint_id: int) -> None:
        """Stop managing a registered constraint, every occurrence of it."""
        if Constraint.is_valid_id(constraint_id):
            self.constraint_ids = [i for i in self.constraint_ids if i != constraint_id]

    def update(self) -> None:
        """Advance the world by one time step and hold the frame rate."""
        for object_id in self.object_ids:
            body = Body.get(object_id)
            body.apply_force(self.gravity * body.mass, body.centroid)
        for object_id in self.object_ids:
            Body.get(object_id).update(self.time_step)
        self._handle_collisions()
        for constraint_id in self.constraint_ids:
            Constraint.get(constraint_id).update(self.time_step)
        self.timer.cap_frame_rate_with_delta_time(self.time_step)

    def _handle_collisions(self) -> None:
        for object_id in self.object_ids:
            Body.get(object_id).calculate_aabb()

        tree = QuadTree(QuadTree.root_from_ids(self.object_ids), 5, 10)
        for object_id in self.object_ids:
            box = Body.get(object_id).aabb
            assert box is not None
            tree.insert(box)

        candidates: dict[int, list[int]] = {}
        for object_id in self.object_ids:
            box = Body.get(object_id).aabb
            assert box is not None
            candidates[object_id] = tree.retrieve(box)

        contacts: dict[int, list[tuple[int, CollisionInfo]]] = {}
        for object_id in sorted(candidates):
            shape = Body.get(object_id).shape
            for other_id in candidates[object_id]:
                info = CollisionDetector.check_collision(shape, Body.get(other_id).shape)
                if info is not None:
                    contacts.setdefault(object_id, []).append((other_id, info))

        for object_id in sorted(contacts):
            for other_id, info in contacts[object_id]:
                first = Body.get(object_id)
                second = Body.get(other_id)
                apply_impulse(first, second, info)
                resolve_penetration(first, second, info)