"""Helix: planar rotation combined with a constant-rate axial rise.

Mathematical Foundation:
    Elliptical cross-section with radii a (X) and b (Y); a == b gives the
    ordinary circular helix.
    x(t) = px + a*cos(t)
    y(t) = py + b*sin(t)
    z(t) = pz + (angle_start + t) / (2*pi) * step
    One full turn (t -> t + 2*pi) raises z by exactly ``step`` and leaves
    x, y unchanged: C(t + 2*pi) = C(t) + (0, 0, step).
    The derivative's z component is the constant step / (2*pi).

A helix is not a closed curve, so it is not built on Ellipse even though
its projection onto XY is one.
"""

from __future__ import annotations

import math
from typing import Dict

from mycadlib.core.curve import Curve
from mycadlib.core.vector import TWO_PI, Vector3


class Helix(Curve):
    """Helix around the vertical axis through its reference position."""

    kind = "helix"

    def __init__(
        self,
        x: float,
        y: float,
        z: float,
        a: float,
        b: float,
        step: float,
        angle_start: float = 0.0,
    ) -> None:
        """Initialize helix with geometric parameters.

        Args:
            x: Axis X coordinate.
            y: Axis Y coordinate.
            z: Reference height.
            a: Cross-section radius along X.
            b: Cross-section radius along Y.
            step: Rise along Z per full turn. May be negative or zero.
            angle_start: Phase offset in radians, applied to the rise only.

        Raises:
            InvalidCurveError: If a radius is not positive, or any parameter
                is not finite.
        """
        self._require_positive(a=a, b=b)
        self._require_finite(step=step, angle_start=angle_start)
        super().__init__(Vector3(x, y, z))
        self._a = a
        self._b = b
        self._step = step
        self._angle_start = angle_start

    @classmethod
    def circular(cls, x: float, y: float, z: float, r: float, step: float) -> Helix:
        """Circular helix of radius *r* with no phase offset."""
        return cls(x, y, z, r, r, step, 0.0)

    @classmethod
    def at(
        cls,
        position: Vector3,
        a: float,
        b: float,
        step: float,
        angle_start: float = 0.0,
    ) -> Helix:
        """Construct a helix whose reference position is *position*."""
        return cls(position.x, position.y, position.z, a, b, step, angle_start)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def step(self) -> float:
        """Rise along Z per full turn."""
        return self._step

    @property
    def angle_start(self) -> float:
        return self._angle_start

    @property
    def rise_per_radian(self) -> float:
        """Constant dz/dt."""
        return self._step / TWO_PI

    def calculate(self, t: float) -> Vector3:
        p = self._position
        return Vector3(
            p.x + self._a * math.cos(t),
            p.y + self._b * math.sin(t),
            p.z + (self._angle_start + t) / TWO_PI * self._step,
        )

    def derivative(self, t: float) -> Vector3:
        return Vector3(
            -self._a * math.sin(t),
            self._b * math.cos(t),
            self.rise_per_radian,
        )

    def parameters(self) -> Dict[str, float]:
        return {
            "a": self._a,
            "b": self._b,
            "step": self._step,
            "angle_start": self._angle_start,
        }


__all__ = ["Helix"]
