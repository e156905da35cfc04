"""Broad-phase spatial partitioning: a quadtree and a uniform grid."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .aabb import AABB
from .body import Body
from .vector import Vector2D


class QuadTreeNode:
    """One node of a quadtree covering a rectangular region.

    Children are numbered 0 (top right), 1 (top left), 2 (bottom left)
    and 3 (bottom right).
    """

    def __init__(self, bounds: AABB, level: int, max_level: int, max_objects: int) -> None:
        self.bounds = bounds
        self.level = level
        self.max_level = max_level
        self.max_objects = max_objects
        self._objects: list[AABB] = []
        self._nodes: Optional[list[QuadTreeNode]] = None

    def insert(self, aabb: AABB) -> None:
        """Store a box here or in the child that wholly contains it."""
        if self._nodes is not None:
            index = self._index(aabb)
            if index != -1:
                self._nodes[index].insert(aabb)
                return

        self._objects.append(aabb)

        if len(self._objects) > self.max_objects and self.level < self.max_level:
            if self._nodes is None:
                self._split()
            assert self._nodes is not None
            remaining: list[AABB] = []
            for stored in self._objects:
                index = self._index(stored)
                if index != -1:
                    self._nodes[index].insert(stored)
                else:
                    remaining.append(stored)
            self._objects = remaining

    def retrieve(self, aabb: AABB) -> list[int]:
        """Object ids of the boxes that may intersect the given box."""
        found: list[int] = []
        index = self._index(aabb)
        if index != -1 and self._nodes is not None:
            found.extend(self._nodes[index].retrieve(aabb))
        found.extend(stored.obj_id for stored in self._objects)
        return found

    def _split(self) -> None:
        sub_width = self.bounds.width() / 2
        sub_height = self.bounds.height() / 2
        x = self.bounds.top_left.x
        y = self.bounds.top_left.y
        level = self.level + 1

        def child(left: float, top: float) -> QuadTreeNode:
            box = AABB(Vector2D(left, top), Vector2D(left + sub_width, top + sub_height))
            return QuadTreeNode(box, level, self.max_level, self.max_objects)

        self._nodes = [
            child(x + sub_width, y),
            child(x, y),
            child(x, y + sub_height),
            child(x + sub_width, y + sub_height),
        ]

    def _index(self, aabb: AABB) -> int:
        """Child that wholly contains the box, or -1 if none does."""
        vertical_mid = self.bounds.top_left.x + self.bounds.width() / 2
        horizontal_mid = self.bounds.top_left.y + self.bounds.height() / 2

        top = aabb.top_left.y < horizontal_mid and aabb.bottom_right.y < horizontal_mid
        bottom = aabb.top_left.y > horizontal_mid

        if aabb.top_left.x < vertical_mid and aabb.bottom_right.x < vertical_mid:
            if top:
                return 1
            if bottom:
                return 2
        elif aabb.top_left.x > vertical_mid:
            if top:
                return 0
            if bottom:
                return 3
        return -1


class QuadTree:
    """A quadtree rooted at the given bounds."""

    def __init__(self, bounds: AABB, max_level: int = 5, max_objects: int = 10) -> None:
        self._root = QuadTreeNode(bounds, 0, max_level, max_objects)

    @staticmethod
    def root_from_ids(ids: Iterable[int]) -> AABB:
        """Root region for the registered bodies with these ids.

        The region always contains the origin; it stretches to the smallest
        bottom-right corner and the largest top-left corner of the bodies'
        boxes.
        """
        min_x = min_y = max_x = max_y = 0.0
        for object_id in ids:
            box = Body.get(object_id).aabb
            if box is None:
                raise ValueError(f"body {object_id} has no bounding box")
            min_x = min(min_x, box.bottom_right.x)
            min_y = min(min_y, box.bottom_right.y)
            max_x = max(max_x, box.top_left.x)
            max_y = max(max_y, box.top_left.y)
        return AABB(Vector2D(min_x, min_y), Vector2D(max_x, max_y), obj_id=0)

    def insert(self, aabb: AABB) -> None:
        self._root.insert(aabb)

    def retrieve(self, aabb: AABB) -> list[int]:
        """Object ids of the boxes that may intersect the given box."""
        return self._root.retrieve(aabb)


class Grid:
    """Uniform grid of square cells over a rectangular region."""

    def __init__(self, bounds: AABB, cell_size: int) -> None:
        if cell_size <= 0:
            raise ValueError("cell size must be positive")
        self.bounds = bounds
        self.cell_size = cell_size
        self._columns = int(bounds.width() / cell_size)
        rows = int(bounds.height() / cell_size)
        self._cells: list[list[AABB]] = [[] for _ in range(max(0, self._columns * rows))]

    def _cell_indices(self, aabb: AABB) -> Iterable[int]:
        origin = self.bounds.top_left
        start_x = int((aabb.top_left.x - origin.x) / self.cell_size)
        start_y = int((aabb.top_left.y - origin.y) / self.cell_size)
        end_x = int((aabb.bottom_right.x - origin.x) / self.cell_size)
        end_y = int((aabb.bottom_right.y - origin.y) / self.cell_size)
        for y in range(start_y, end_y + 1):
            for x in range(start_x, end_x + 1):
                index = y * self._columns + x
                if 0 <= index < len(self._cells):
                    yield index

    def insert(self, aabb: AABB) -> None:
        """Add the box to every cell it covers; boxes outside the grid are dropped."""
        for index in self._cell_indices(aabb):
            self._cells[index].append(aabb)

    def retrieve(self, aabb: AABB) -> list[AABB]:
        """Boxes stored in the cells the given box covers, repeated per cell."""
        return [stored for index in self._cell_indices(aabb) for stored in self._cells[index]]