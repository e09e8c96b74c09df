"""Planar curves: Ellipse and Circle.

Both lie in the plane through their reference position parallel to XY.

Parametric equations:
    x(t) = px + a*cos(t)
    y(t) = py + b*sin(t)
    z(t) = pz

A Circle is the a == b case, but it is a separate nominal type rather than
an Ellipse subclass: an Ellipse that happens to have equal radii is still an
Ellipse. Both evaluate through the shared functions in ``core.curve``.
"""

from __future__ import annotations

from typing import Dict

from mycadlib.core.curve import Curve, planar_derivative, planar_point
from mycadlib.core.vector import Vector3


class Ellipse(Curve):
    """Axis-aligned ellipse with semi-axes ``a`` (along X) and ``b`` (along Y)."""

    kind = "ellipse"

    def __init__(self, x: float, y: float, a: float, b: float, z: float = 0.0) -> None:
        """Initialize ellipse with its center and radii.

        Args:
            x: Center X coordinate.
            y: Center Y coordinate.
            a: Radius along the X axis.
            b: Radius along the Y axis.
            z: Height of the ellipse's plane.

        Raises:
            InvalidCurveError: If either radius is not a positive finite number.
        """
        self._require_positive(a=a, b=b)
        super().__init__(Vector3(x, y, z))
        self._a = a
        self._b = b

    @classmethod
    def at(cls, position: Vector3, a: float, b: float) -> Ellipse:
        """Construct an ellipse centered at *position*."""
        return cls(position.x, position.y, a, b, z=position.z)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    def calculate(self, t: float) -> Vector3:
        return planar_point(self._position, self._a, self._b, t)

    def derivative(self, t: float) -> Vector3:
        return planar_derivative(self._a, self._b, t)

    def parameters(self) -> Dict[str, float]:
        return {"a": self._a, "b": self._b}


class Circle(Curve):
    """Circle of radius ``r`` in the XY-parallel plane through its center.

    Only one radius is stored. ``a`` and ``b`` are views of it, which keeps
    the circle usable wherever ellipse radii are read (sorting, summing).
    """

    kind = "circle"

    def __init__(self, x: float, y: float, r: float, z: float = 0.0) -> None:
        """Initialize circle with its center and radius.

        Raises:
            InvalidCurveError: If *r* is not a positive finite number.
        """
        self._require_positive(r=r)
        super().__init__(Vector3(x, y, z))
        self._r = r

    @classmethod
    def at(cls, position: Vector3, r: float) -> Circle:
        """Construct a circle centered at *position*."""
        return cls(position.x, position.y, r, z=position.z)

    @property
    def radius(self) -> float:
        return self._r

    @property
    def a(self) -> float:
        return self._r

    @property
    def b(self) -> float:
        return self._r

    def calculate(self, t: float) -> Vector3:
        return planar_point(self._position, self._r, self._r, t)

    def derivative(self, t: float) -> Vector3:
        return planar_derivative(self._r, self._r, t)

    def parameters(self) -> Dict[str, float]:
        return {"r": self._r}


__all__ = ["Ellipse", "Circle"]
