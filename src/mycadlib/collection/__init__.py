"""Curve containers: storage, exact-type filtering, sorting and reduction."""

from mycadlib.collection.curve_collection import CurveCollection

__all__ = ["CurveCollection"]
