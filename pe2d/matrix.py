"""3x3 matrices for 2D homogeneous transformations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional, Union

from .vector import Vector2D


class Matrix3x3:
    """A 3x3 matrix of floats; the default is the identity."""

    __slots__ = ("_data",)

    def __init__(
        self,
        a11: float = 1.0,
        a12: float = 0.0,
        a13: float = 0.0,
        a21: float = 0.0,
        a22: float = 1.0,
        a23: float = 0.0,
        a31: float = 0.0,
        a32: float = 0.0,
        a33: float = 1.0,
    ) -> None:
        self._data = [
            [float(a11), float(a12), float(a13)],
            [float(a21), float(a22), float(a23)],
            [float(a31), float(a32), float(a33)],
        ]

    @classmethod
    def from_rows(
        cls, row1: Sequence[float], row2: Sequence[float], row3: Sequence[float]
    ) -> Matrix3x3:
        values = [value for row in (row1, row2, row3) for value in row[:3]]
        if len(values) != 9:
            raise ValueError("each row needs three values")
        return cls(*values)

    @classmethod
    def diagonal(cls, value: float) -> Matrix3x3:
        """Matrix with the value on the diagonal and zeros elsewhere."""
        return cls(value, 0.0, 0.0, 0.0, value, 0.0, 0.0, 0.0, value)

    def _values(self) -> list[float]:
        return [value for row in self._data for value in row]

    def __add__(self, other: Matrix3x3) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(*(a + b for a, b in zip(self._values(), other._values())))

    def __sub__(self, other: Matrix3x3) -> Matrix3x3:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3(*(a - b for a, b in zip(self._values(), other._values())))

    def __mul__(
        self, other: Union[Matrix3x3, Vector2D, float]
    ) -> Union[Matrix3x3, Vector2D]:
        """Multiply by a matrix, a scalar, or a 2D point (with w = 1)."""
        if isinstance(other, Matrix3x3):
            columns = list(zip(*other._data))
            return Matrix3x3(
                *(sum(a * b for a, b in zip(row, col)) for row in self._data for col in columns)
            )
        if isinstance(other, Vector2D):
            (m00, m01, m02), (m10, m11, m12), _ = self._data
            return Vector2D(
                m00 * other.x + m01 * other.y + m02,
                m10 * other.x + m11 * other.y + m12,
            )
        if isinstance(other, (int, float)):
            return Matrix3x3(*(value * other for value in self._values()))
        return NotImplemented

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self._data[row][col]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self._data[row][col] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{value:g}" for value in row) for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix3x3({', '.join(repr(v) for v in self._values())})"

    def transpose(self) -> Matrix3x3:
        return Matrix3x3(*(value for col in zip(*self._data) for value in col))

    def determinant(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self._data
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    @staticmethod
    def scale(sx: float, sy: Optional[float] = None) -> Matrix3x3:
        """Scaling matrix; a single factor scales both axes."""
        if sy is None:
            sy = sx
        return Matrix3x3(sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def rotate(angle: float) -> Matrix3x3:
        """Counter-clockwise rotation by an angle in radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Matrix3x3(cos_a, -sin_a, 0.0, sin_a, cos_a, 0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def translate(tx: float, ty: float) -> Matrix3x3:
        return Matrix3x3(1.0, 0.0, tx, 0.0, 1.0, ty, 0.0, 0.0, 1.0)