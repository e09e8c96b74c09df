"""Curve factory and random population of curve collections.

``CurveFactory`` creates curves by type name, either from explicit
parameters or from a ``CurveParameterSource`` that draws random, valid
parameters. ``PopulateConfig`` bundles the ranges used for drawing.
"""

from __future__ import annotations

import dataclasses
import logging
import os
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type

from mycadlib.collection import CurveCollection
from mycadlib.core.curve import Curve
from mycadlib.core.ellipse import Circle, Ellipse
from mycadlib.core.helix import Helix
from mycadlib.core.vector import TWO_PI

logger = logging.getLogger(__name__)

CurveBuilder = Callable[["CurveParameterSource"], Curve]


# ---------------------------------------------------------------------------
# PopulateConfig
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PopulateConfig:
    """Immutable settings for random collection population.

    Attributes:
        min_count: Smallest number of curves drawn when no count is given.
        max_count: Largest number of curves drawn when no count is given.
        space_range: Range for coordinates and helix steps.
        radius_range: Range for radii. The lower bound is exclusive, so every
            radius drawn is strictly positive.
        cover_all_variants: Start each population with one curve of every
            registered type (when the count allows) before drawing at random.
        seed: Seed for the random generator. ``None`` seeds from the OS.
    """

    min_count: int = 10
    max_count: int = 20
    space_range: Tuple[float, float] = (-10.0, 10.0)
    radius_range: Tuple[float, float] = (0.0, 10.0)
    cover_all_variants: bool = True
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate config parameters at construction time."""
        if self.min_count < 0:
            raise ValueError("min_count must not be negative")
        if self.max_count < self.min_count:
            raise ValueError("max_count must be at least min_count")
        if self.space_range[0] > self.space_range[1]:
            raise ValueError("space_range must be ordered (low, high)")
        if self.radius_range[0] < 0:
            raise ValueError("radius_range must not start below zero")
        if self.radius_range[1] <= self.radius_range[0]:
            raise ValueError("radius_range must have a positive width")

    @classmethod
    def default(cls) -> PopulateConfig:
        """10 to 20 curves, coordinates in [-10, 10], radii in (0, 10]."""
        return cls()

    @classmethod
    def small(cls) -> PopulateConfig:
        """3 to 6 curves in a tighter space; handy for readable demo output."""
        return cls(min_count=3, max_count=6, space_range=(-5.0, 5.0), radius_range=(0.0, 5.0))

    @classmethod
    def large(cls) -> PopulateConfig:
        """100 to 200 curves with the default ranges."""
        return cls(min_count=100, max_count=200)

    @classmethod
    def from_env(cls, base: Optional[PopulateConfig] = None) -> PopulateConfig:
        """Apply environment overrides on top of *base* (default preset).

        Environment variables:
            MYCADLIB_SEED: Random seed.
            MYCADLIB_MIN_COUNT: Smallest population size.
            MYCADLIB_MAX_COUNT: Largest population size.

        Raises:
            ValueError: If a variable is not an integer or the result is invalid.
        """
        base = base or cls.default()
        overrides: Dict[str, Any] = {}
        for field_name, env_var in (
            ("seed", "MYCADLIB_SEED"),
            ("min_count", "MYCADLIB_MIN_COUNT"),
            ("max_count", "MYCADLIB_MAX_COUNT"),
        ):
            raw = os.getenv(env_var)
            if raw:
                try:
                    overrides[field_name] = int(raw)
                except ValueError:
                    raise ValueError(f"{env_var} must be an integer, got {raw!r}") from None
        return dataclasses.replace(base, **overrides)


# ---------------------------------------------------------------------------
# CurveParameterSource
# ---------------------------------------------------------------------------


class CurveParameterSource:
    """Random source of curve types and shape parameters.

    Owns its own ``random.Random`` so seeding it never disturbs the global
    generator.
    """

    def __init__(self, config: Optional[PopulateConfig] = None, rng: Optional[random.Random] = None) -> None:
        self._config = config or PopulateConfig.default()
        self._rng = rng if rng is not None else random.Random(self._config.seed)

    @property
    def config(self) -> PopulateConfig:
        return self._config

    def count(self) -> int:
        """Population size, uniform in ``[min_count, max_count]``."""
        return self._rng.randint(self._config.min_count, self._config.max_count)

    def choose(self, options: Sequence[str]) -> str:
        return self._rng.choice(options)

    def coordinate(self) -> float:
        low, high = self._config.space_range
        return self._rng.uniform(low, high)

    def radius(self) -> float:
        """Uniform in ``(low, high]``: always strictly positive."""
        low, high = self._config.radius_range
        return high - self._rng.random() * (high - low)

    def angle(self) -> float:
        """Uniform phase in ``[0, 2*pi)``."""
        return self._rng.random() * TWO_PI

    def shuffle(self, items: List[Any]) -> None:
        self._rng.shuffle(items)


def _random_ellipse(source: CurveParameterSource) -> Curve:
    return Ellipse(source.coordinate(), source.coordinate(), source.radius(), source.radius())


def _random_circle(source: CurveParameterSource) -> Curve:
    return Circle(source.coordinate(), source.coordinate(), source.radius())


def _random_helix(source: CurveParameterSource) -> Curve:
    return Helix(
        source.coordinate(),
        source.coordinate(),
        source.coordinate(),
        source.radius(),
        source.radius(),
        step=source.coordinate(),
        angle_start=source.angle(),
    )


# ---------------------------------------------------------------------------
# CurveFactory
# ---------------------------------------------------------------------------


class CurveFactory:
    """Factory for creating curves by type name and populating collections.

    Example::

        factory = CurveFactory(PopulateConfig(seed=42))
        curves = factory.populate()
        circles = curves.filter_by_type(Circle)
    """

    _default_types: Dict[str, Tuple[Type[Curve], CurveBuilder]] = {
        "ellipse": (Ellipse, _random_ellipse),
        "circle": (Circle, _random_circle),
        "helix": (Helix, _random_helix),
    }

    def __init__(
        self,
        config: Optional[PopulateConfig] = None,
        source: Optional[CurveParameterSource] = None,
    ) -> None:
        # An explicit source brings its own config
        self._source = source or CurveParameterSource(config)
        self._config = self._source.config
        self._curve_types: Dict[str, Tuple[Type[Curve], CurveBuilder]] = dict(self._default_types)

    @property
    def curve_types(self) -> List[str]:
        """Registered type names, in registration order."""
        return list(self._curve_types)

    # ------------------------------------------------------------------
    # Single-curve creation
    # ------------------------------------------------------------------

    def create_curve(self, curve_type: str, *args: Any, **kwargs: Any) -> Curve:
        """Create a curve of a registered type from explicit parameters.

        Args:
            curve_type: Registered type name (``"ellipse"``, ``"circle"``, ...).
            *args: Forwarded to the curve constructor.
            **kwargs: Forwarded to the curve constructor.

        Raises:
            ValueError: If *curve_type* is not registered.
            InvalidCurveError: If the parameters are rejected by the curve.
        """
        curve_class, _ = self._lookup(curve_type)
        return curve_class(*args, **kwargs)

    def create_random_curve(self, curve_type: Optional[str] = None) -> Curve:
        """Create a curve with random parameters.

        Args:
            curve_type: Registered type name. Chosen uniformly when ``None``.
        """
        if curve_type is None:
            curve_type = self._source.choose(self.curve_types)
        _, builder = self._lookup(curve_type)
        curve = builder(self._source)
        logger.debug(f"Created random {curve_type}: {curve}")
        return curve

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def populate(self, count: Optional[int] = None) -> CurveCollection:
        """Build a collection of randomly typed, randomly shaped curves.

        With ``cover_all_variants`` set and *count* at least the number of
        registered types, the collection holds at least one curve of every
        type; their positions in the collection are random.

        Args:
            count: Number of curves. Drawn from the config range when ``None``.

        Raises:
            ValueError: If *count* is negative.
        """
        if count is None:
            count = self._source.count()
        if count < 0:
            raise ValueError("count must not be negative")

        curves: List[Curve] = []
        if self._config.cover_all_variants and count >= len(self._curve_types):
            curves.extend(self.create_random_curve(name) for name in self._curve_types)
        while len(curves) < count:
            curves.append(self.create_random_curve())
        self._source.shuffle(curves)

        collection = CurveCollection(curves)
        logger.debug(f"Populated {len(collection)} curves: {dict(collection.variant_counts())}")
        return collection

    # ------------------------------------------------------------------
    # Type registration
    # ------------------------------------------------------------------

    def register_curve_type(self, name: str, curve_class: Type[Curve], builder: CurveBuilder) -> None:
        """Register a custom curve type on this factory.

        Args:
            name: Type name used by ``create_curve`` and random choice.
            curve_class: The curve class.
            builder: Callable drawing a random instance from a parameter source.

        Raises:
            TypeError: If *curve_class* does not extend :class:`Curve`.
        """
        if not (isinstance(curve_class, type) and issubclass(curve_class, Curve)):
            raise TypeError(f"{curve_class!r} must be a subclass of Curve")
        self._curve_types[name] = (curve_class, builder)
        logger.debug(f"Registered curve type: {name}")

    def _lookup(self, curve_type: str) -> Tuple[Type[Curve], CurveBuilder]:
        entry = self._curve_types.get(curve_type)
        if entry is None:
            available = ", ".join(sorted(self._curve_types))
            raise ValueError(f"Unknown curve type {curve_type!r}. Available: {available}")
        return entry


__all__ = [
    "PopulateConfig",
    "CurveParameterSource",
    "CurveFactory",
]
