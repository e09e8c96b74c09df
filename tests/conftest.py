"""Pytest configuration and shared fixtures for the mycadlib test suite."""

from __future__ import annotations

import math

import pytest

from mycadlib.collection import CurveCollection
from mycadlib.core import Circle, Ellipse, Helix
from mycadlib.factory import CurveFactory, PopulateConfig


# ---------------------------------------------------------------------------
# Single curves
# ---------------------------------------------------------------------------


@pytest.fixture
def unit_helix():
    """Helix(x=0, y=0, z=0, a=1, b=1, step=2, angle_start=0)."""
    return Helix(0, 0, 0, 1, 1, step=2, angle_start=0)


@pytest.fixture
def offset_ellipse():
    return Ellipse(1.5, -2.0, 4.0, 2.5, z=3.0)


@pytest.fixture
def phased_helix():
    """Off-origin elliptical helix with a phase offset and negative step."""
    return Helix(1.0, 2.0, 3.0, 5.0, 2.0, step=-1.5, angle_start=math.pi / 3)


@pytest.fixture
def all_variants(offset_ellipse, phased_helix):
    """One curve of every type, each off the origin."""
    return [offset_ellipse, Circle(-3.0, 4.0, 1.25, z=-2.0), phased_helix]


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


@pytest.fixture
def example_collection():
    """Two circles and an equal-radius ellipse: Circle r=2, Circle r=5, Ellipse a=b=3."""
    return CurveCollection([
        Circle(1, 1, 5),
        Ellipse(0, 0, 3, 3),
        Circle(0, 0, 2),
    ])


@pytest.fixture
def mixed_collection():
    return CurveCollection([
        Helix(0, 0, 0, 2, 2, step=1),
        Circle(0, 0, 4.5),
        Ellipse(1, 1, 2, 2),
        Circle(2, 2, 0.5),
        Helix(1, 1, 1, 1, 3, step=-2, angle_start=1.0),
        Circle(-1, -1, 3.0),
        Ellipse(0, 0, 7, 1),
    ])


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@pytest.fixture
def seeded_config():
    return PopulateConfig(seed=1234)


@pytest.fixture
def factory(seeded_config):
    return CurveFactory(seeded_config)
