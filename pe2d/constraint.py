"""Base class for constraints between two bodies, with an id registry."""

from __future__ import annotations

from typing import Any, ClassVar, Optional


class Constraint:
    """A constraint linking two bodies given by their ids.

    Every constraint registers itself on creation and receives the lowest
    free id, starting from 1.
    """

    _registry: ClassVar[list[Optional[Constraint]]] = [None]
    _next_id: ClassVar[int] = 1

    def __init__(self, obj1: int, obj2: int) -> None:
        self.obj1 = obj1
        self.obj2 = obj2
        self.active = True
        self.args: Any = None
        self.elapsed = 0.0
        self.applied_count = 0
        self.id = Constraint._next_id
        registry = Constraint._registry
        if self.id == len(registry):
            registry.append(self)
        else:
            registry[self.id] = self
        Constraint._next_id = Constraint.next_id()

    def initialize(self, args: Any) -> None:
        """Store the arguments the constraint is set up with."""
        self.args = args

    def update(self, delta_time: float) -> None:
        """Advance an active constraint by a time step and enforce it."""
        if self.active:
            self.elapsed += delta_time
            self.apply()

    def apply(self) -> bool:
        """Enforce the constraint if active; return whether it was enforced."""
        if not self.active:
            return False
        self.applied_count += 1
        return True

    @classmethod
    def next_id(cls) -> int:
        """Lowest free id at or above 1."""
        registry = Constraint._registry
        return next(
            (index for index in range(1, len(registry)) if registry[index] is None),
            max(1, len(registry)),
        )

    @classmethod
    def remove_from_map(cls, constraint_id: int) -> None:
        """Drop the constraint with this id from the registry."""
        registry = Constraint._registry
        if not 0 <= constraint_id < len(registry):
            raise IndexError(f"constraint id {constraint_id} out of range")
        registry[constraint_id] = None
        Constraint._next_id = Constraint.next_id()

    @classmethod
    def is_valid_id(cls, constraint_id: int) -> bool:
        registry = Constraint._registry
        return 0 <= constraint_id < len(registry) and registry[constraint_id] is not None

    @classmethod
    def get(cls, constraint_id: int) -> Constraint:
        """The registered constraint with this id; KeyError if there is none."""
        if not Constraint.is_valid_id(constraint_id):
            raise KeyError(constraint_id)
        constraint = Constraint._registry[constraint_id]
        assert constraint is not None
        return constraint

    @classmethod
    def clear_registry(cls) -> None:
        """Forget every registered constraint."""
        Constraint._registry = [None]
        Constraint._next_id = 1