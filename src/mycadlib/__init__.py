"""mycadlib: parametric 3D curves and polymorphic curve collections.

Circles, ellipses and helices are evaluated at a parameter t (radians) to
give a point and its tangent. Collections of mixed curves can be filtered
by exact type into collections that share, not copy, their curves.

Quickstart:
    from mycadlib import Circle, CurveCollection, Ellipse

    curves = CurveCollection([Circle(0, 0, 2), Circle(1, 1, 5), Ellipse(0, 0, 3, 3)])
    circles = curves.filter_by_type(Circle).sort_by_radius()
    circles.sum_of_radius()  # 7.0
"""

from mycadlib._version import __version__
from mycadlib.collection import CurveCollection
from mycadlib.core import TWO_PI, Circle, Curve, Ellipse, Helix, Vector3
from mycadlib.errors import CollectionInvariantError, CurveError, InvalidCurveError
from mycadlib.factory import CurveFactory, CurveParameterSource, PopulateConfig

__all__ = [
    "__version__",
    # Geometry
    "Vector3",
    "TWO_PI",
    "Curve",
    "Ellipse",
    "Circle",
    "Helix",
    # Collections
    "CurveCollection",
    "CurveFactory",
    "CurveParameterSource",
    "PopulateConfig",
    # Errors
    "CurveError",
    "InvalidCurveError",
    "CollectionInvariantError",
]
