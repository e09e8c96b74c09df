"""Three-component vector value type shared by every curve.

A ``Vector3`` is used both for points on a curve and for tangent vectors.
Instances are immutable: arithmetic always builds a new vector.
"""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING, Iterator

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

TWO_PI: float = 2.0 * math.pi
"""Parameter span of one full revolution."""


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if scalar == 0:
            raise ZeroDivisionError("cannot divide a Vector3 by zero")
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def __str__(self) -> str:
        return f"{{{self.x:.2f},{self.y:.2f},{self.z:.2f}}}"

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def isclose(self, other: Vector3, rel_tol: float = 1e-9, abs_tol: float = 1e-9) -> bool:
        """Component-wise ``math.isclose`` against *other*."""
        return all(
            math.isclose(mine, theirs, rel_tol=rel_tol, abs_tol=abs_tol)
            for mine, theirs in zip(self, other)
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


__all__ = ["Vector3", "TWO_PI"]
