"""Curve: the contract every parametric curve in mycadlib fulfils.

Mathematical Foundation:
    A parametric curve maps a scalar t to a point C(t) in 3D space.
    t is measured in radians; 2*pi corresponds to one full revolution.
    Every curve is defined relative to a reference position P, the origin
    of its local frame.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Dict

import numpy as np

from mycadlib.core.vector import TWO_PI, Vector3
from mycadlib.errors import InvalidCurveError

if TYPE_CHECKING:
    import numpy.typing as npt


class Curve(ABC):
    """Abstract base class for parametric 3D curves.

    Subclasses implement ``calculate`` and ``derivative``. Both must be pure
    functions of ``t`` and of the parameters given at construction; curves
    expose their parameters through read-only properties and never change
    after ``__init__``.

    Curves compare by identity. Two curves built from equal parameters are
    still two distinct curves.
    """

    kind: ClassVar[str] = "curve"
    """Name of the constructor path that produced the curve."""

    def __init__(self, position: Vector3) -> None:
        self._position = position

    @property
    def position(self) -> Vector3:
        """Reference position (origin of the curve's local frame)."""
        return self._position

    # --- Core interface (required) ---

    @abstractmethod
    def calculate(self, t: float) -> Vector3:
        """Return the point on the curve at parameter *t* (radians)."""
        ...

    @abstractmethod
    def derivative(self, t: float) -> Vector3:
        """Return the first derivative dC/dt at parameter *t* (radians)."""
        ...

    @abstractmethod
    def parameters(self) -> Dict[str, float]:
        """Shape parameters in constructor order, excluding the position."""
        ...

    # --- Sampling ---

    def sample(
        self,
        points_count: int,
        t_start: float = 0.0,
        t_end: float = TWO_PI,
    ) -> npt.NDArray[np.float64]:
        """Evaluate the curve on an evenly spaced parameter grid.

        Both ends of the range are included, so a closed curve sampled over
        ``[0, 2*pi]`` repeats its first point as its last.

        Args:
            points_count: Number of points, at least 2.
            t_start: First parameter value.
            t_end: Last parameter value.

        Returns:
            Array of shape ``(points_count, 3)``.

        Raises:
            ValueError: If *points_count* is less than 2.
        """
        ts = self._parameter_grid(points_count, t_start, t_end)
        return np.array([self.calculate(t).to_array() for t in ts])

    def sample_derivative(
        self,
        points_count: int,
        t_start: float = 0.0,
        t_end: float = TWO_PI,
    ) -> npt.NDArray[np.float64]:
        """Derivatives on the same grid as :meth:`sample`."""
        ts = self._parameter_grid(points_count, t_start, t_end)
        return np.array([self.derivative(t).to_array() for t in ts])

    @staticmethod
    def _parameter_grid(points_count: int, t_start: float, t_end: float) -> npt.NDArray[np.float64]:
        if points_count < 2:
            raise ValueError("points_count must be at least 2")
        return np.linspace(t_start, t_end, points_count)

    # --- Validation helpers ---

    @classmethod
    def _require_finite(cls, **values: float) -> None:
        for name, value in values.items():
            if not math.isfinite(value):
                raise InvalidCurveError(f"{name} must be finite, got {value!r}", curve_type=cls.kind)

    @classmethod
    def _require_positive(cls, **values: float) -> None:
        cls._require_finite(**values)
        for name, value in values.items():
            if value <= 0:
                raise InvalidCurveError(f"{name} must be positive, got {value!r}", curve_type=cls.kind)

    # --- Rendering ---

    def __str__(self) -> str:
        params = ", ".join(f"{name}={value:.2f}" for name, value in self.parameters().items())
        return f"{type(self).__name__}(position={self._position}, {params})"

    def __repr__(self) -> str:
        p = self._position
        params = ", ".join(f"{name}={value!r}" for name, value in self.parameters().items())
        return f"{type(self).__name__}(x={p.x!r}, y={p.y!r}, z={p.z!r}, {params})"


# ---------------------------------------------------------------------------
# Shared planar evaluation
# ---------------------------------------------------------------------------


def planar_point(position: Vector3, a: float, b: float, t: float) -> Vector3:
    """Point of the axis-aligned ellipse with semi-axes *a*, *b* around *position*.

    x(t) = px + a*cos(t), y(t) = py + b*sin(t), z(t) = pz
    """
    return Vector3(position.x + a * math.cos(t), position.y + b * math.sin(t), position.z)


def planar_derivative(a: float, b: float, t: float) -> Vector3:
    """Derivative of :func:`planar_point` with respect to *t*."""
    return Vector3(-a * math.sin(t), b * math.cos(t), 0.0)


__all__ = ["Curve", "planar_point", "planar_derivative"]
