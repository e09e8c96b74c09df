"""Heterogeneous curve containers and the operations derived from them.

A ``CurveCollection`` holds references to curve objects. Filtering and
sorting produce collections over the *same* objects: no curve is ever
copied, so a filtered collection aliases the collection it came from.
"""

from __future__ import annotations

import logging
from collections import Counter
from operator import attrgetter
from typing import Iterable, Iterator, List, Optional, Tuple, Type, overload

from mycadlib.core.curve import Curve
from mycadlib.core.vector import Vector3
from mycadlib.errors import CollectionInvariantError

logger = logging.getLogger(__name__)

_radius = attrgetter("a")


class CurveCollection:
    """Ordered, mutable sequence of curves of any type.

    Example::

        circles = curves.filter_by_type(Circle).sort_by_radius()
        total = circles.sum_of_radius()
    """

    def __init__(self, curves: Optional[Iterable[Curve]] = None) -> None:
        self._curves: List[Curve] = list(curves) if curves is not None else []

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self._curves)

    @overload
    def __getitem__(self, index: int) -> Curve: ...

    @overload
    def __getitem__(self, index: slice) -> CurveCollection: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return CurveCollection(self._curves[index])
        return self._curves[index]

    def __contains__(self, curve: object) -> bool:
        # Membership is by identity; curves never compare structurally
        return any(curve is mine for mine in self._curves)

    def __repr__(self) -> str:
        return f"CurveCollection({self._curves!r})"

    def append(self, curve: Curve) -> None:
        if not isinstance(curve, Curve):
            raise TypeError(f"{type(curve).__name__} is not a Curve")
        self._curves.append(curve)

    def extend(self, curves: Iterable[Curve]) -> None:
        for curve in curves:
            self.append(curve)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def filter_by_type(self, curve_type: Type[Curve], exact: bool = True) -> CurveCollection:
        """Collect the curves of a given runtime type.

        The result shares the curve objects of this collection.

        Args:
            curve_type: Curve class to select.
            exact: When ``True`` only instances whose type *is*
                ``curve_type`` match. When ``False`` subclasses match too.
        """
        if exact:
            selected = [curve for curve in self._curves if type(curve) is curve_type]
        else:
            selected = [curve for curve in self._curves if isinstance(curve, curve_type)]
        logger.debug(
            f"Filtered {len(selected)}/{len(self._curves)} curves by "
            f"{'exact ' if exact else ''}type {curve_type.__name__}"
        )
        return CurveCollection(selected)

    def filter_by_kind(self, kind: str) -> CurveCollection:
        """Collect the curves whose ``kind`` tag equals *kind*."""
        return CurveCollection(curve for curve in self._curves if curve.kind == kind)

    # ------------------------------------------------------------------
    # Sorting and reduction
    # ------------------------------------------------------------------

    def sort_by_radius(self, reverse: bool = False) -> CurveCollection:
        """Sort in place by the ``a`` radius, ascending unless *reverse*.

        Returns ``self`` so calls can be chained.

        Raises:
            TypeError: If a curve has no ``a`` radius.
        """
        try:
            self._curves.sort(key=_radius, reverse=reverse)
        except AttributeError as e:
            raise TypeError(f"Cannot sort by radius: {e}") from e
        if self._curves:
            logger.debug(
                f"Sorted {len(self._curves)} curves by radius: "
                f"first={self._curves[0].a}, last={self._curves[-1].a}"
            )
        return self

    def sorted_by_radius(self, reverse: bool = False) -> CurveCollection:
        """Return a new collection, sorted by radius, over the same curves."""
        return CurveCollection(self._curves).sort_by_radius(reverse=reverse)

    def sum_of_radius(self) -> float:
        """Sum of the ``a`` radius over the collection; 0.0 when empty.

        Raises:
            TypeError: If a curve has no ``a`` radius.
        """
        total = 0.0
        try:
            for curve in self._curves:
                total += _radius(curve)
        except AttributeError as e:
            raise TypeError(f"Cannot sum radii: {e}") from e
        return total

    # ------------------------------------------------------------------
    # Evaluation and inspection
    # ------------------------------------------------------------------

    def evaluate(self, t: float) -> List[Tuple[Curve, Vector3, Vector3]]:
        """Point and derivative of every curve at parameter *t*."""
        return [(curve, curve.calculate(t), curve.derivative(t)) for curve in self._curves]

    def variant_counts(self) -> Counter:
        """Number of curves per ``kind`` tag."""
        return Counter(curve.kind for curve in self._curves)

    # ------------------------------------------------------------------
    # Caller-level checks
    # ------------------------------------------------------------------

    def require_variants(self, *curve_types: Type[Curve]) -> None:
        """Check that every listed exact curve type is present.

        Raises:
            CollectionInvariantError: Naming the missing types.
        """
        present = {type(curve) for curve in self._curves}
        missing = [curve_type.__name__ for curve_type in curve_types if curve_type not in present]
        if missing:
            raise CollectionInvariantError(
                f"Collection is missing curve types: {', '.join(missing)}",
                curve_type=missing[0],
            )

    def verify_aliases(self, source: CurveCollection) -> None:
        """Check that this collection holds *source*'s own curve objects.

        Every element must be the same object as some element of *source*,
        down to the identity of its ``position``.

        Raises:
            CollectionInvariantError: If an element is a copy.
        """
        positions = {id(curve): curve.position for curve in source}
        for curve in self._curves:
            original_position = positions.get(id(curve))
            if original_position is None or original_position is not curve.position:
                raise CollectionInvariantError(
                    f"{curve!r} is not shared with the source collection",
                    curve_type=curve.kind,
                )


__all__ = ["CurveCollection"]
