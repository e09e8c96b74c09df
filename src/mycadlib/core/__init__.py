"""mycadlib core geometry primitives.

Exports the vector type and the three parametric curves.
"""

from mycadlib.core.curve import Curve
from mycadlib.core.ellipse import Circle, Ellipse
from mycadlib.core.helix import Helix
from mycadlib.core.vector import TWO_PI, Vector3

__all__ = [
    "Vector3",
    "TWO_PI",
    "Curve",
    "Ellipse",
    "Circle",
    "Helix",
]
