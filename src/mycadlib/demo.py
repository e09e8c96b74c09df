"""Demonstration pipeline: populate, filter, evaluate, sort and reduce.

Runs the full curve-collection workflow once and renders the results as
text lines. ``main`` is the command-line entry point used by
``python -m mycadlib`` and the ``mycadlib-demo`` script.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from mycadlib.collection import CurveCollection
from mycadlib.core import TWO_PI, Circle, Ellipse, Helix, Vector3
from mycadlib.core.curve import Curve
from mycadlib.errors import CollectionInvariantError
from mycadlib.factory import CurveFactory, PopulateConfig
from mycadlib.logging_config import setup_logging

logger = logging.getLogger(__name__)

DEMO_T: float = math.pi / 4
"""Parameter at which every curve is evaluated."""

PERIODICITY_T: float = 10.0
"""Parameter used for the helix periodicity check."""

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

PRESETS = {
    "default": PopulateConfig.default,
    "small": PopulateConfig.small,
    "large": PopulateConfig.large,
}


def reference_helix() -> Helix:
    """Fixed helix used to show C(t + 2*pi) = C(t) + (0, 0, step)."""
    return Helix(1, 2, 3, 5, 5, step=2, angle_start=math.pi / 3)


def periodicity_check(helix: Helix, t: float) -> Tuple[Vector3, Vector3]:
    """Return ``(C(t) + (0, 0, step), C(t + 2*pi))``; the two should match."""
    lifted = helix.calculate(t) + Vector3(0.0, 0.0, helix.step)
    next_turn = helix.calculate(t + TWO_PI)
    return lifted, next_turn


def describe_curve(curve: Curve, t: float) -> str:
    return (
        f"{type(curve).__name__}: C(t)={curve.calculate(t)}, "
        f"dC(t)/dt={curve.derivative(t)}, where t={t:.2f}"
    )


@dataclass
class DemoReport:
    """Everything the demonstration computed."""

    curves: CurveCollection
    circles: CurveCollection
    t: float
    radii_sum: float
    periodicity: Tuple[Vector3, Vector3]

    def lines(self) -> List[str]:
        out = [describe_curve(curve, self.t) for curve in self.curves]
        if len(self.circles):
            out.append(f"first: {self.circles[0].a:.2f}, last: {self.circles[-1].a:.2f}")
        out.append(f"total sum of radii: {self.radii_sum:.2f}")
        lifted, next_turn = self.periodicity
        out.append(f"a: {lifted}, b: {next_turn}")
        return out


def run_demo(
    config: Optional[PopulateConfig] = None,
    count: Optional[int] = None,
    t: float = DEMO_T,
) -> DemoReport:
    """Run the pipeline once.

    Raises:
        CollectionInvariantError: If the population lacks a curve type or the
            filtered circles are not shared with it.
    """
    factory = CurveFactory(config)
    curves = factory.populate(count)
    curves.require_variants(Ellipse, Circle, Helix)

    circles = curves.filter_by_type(Circle)
    circles.verify_aliases(curves)
    circles.sort_by_radius()

    report = DemoReport(
        curves=curves,
        circles=circles,
        t=t,
        radii_sum=circles.sum_of_radius(),
        periodicity=periodicity_check(reference_helix(), PERIODICITY_T),
    )
    logger.info(
        f"Demo evaluated {len(curves)} curves, {len(circles)} circles, "
        f"radii sum {report.radii_sum:.2f}"
    )
    return report


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mycadlib-demo", description="Parametric curve collection demo")
    ap.add_argument("--seed", type=int, default=None, help="Random seed (overrides MYCADLIB_SEED)")
    ap.add_argument("--count", type=int, default=None, help="Number of curves (default: random in preset range)")
    ap.add_argument("--t", type=float, default=DEMO_T, help="Evaluation parameter in radians")
    ap.add_argument("--preset", choices=sorted(PRESETS), default="default")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level name",
    )
    ap.add_argument("--log-file", default=None, help="Also write logs to this file")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        config = PopulateConfig.from_env(PRESETS[args.preset]())
        if args.seed is not None:
            config = dataclasses.replace(config, seed=args.seed)
        report = run_demo(config, count=args.count, t=args.t)
    except (CollectionInvariantError, ValueError) as e:
        logger.error(f"Demo failed: {e}")
        return 1

    for line in report.lines():
        print(line)
    return 0


__all__ = [
    "DemoReport",
    "run_demo",
    "main",
    "describe_curve",
    "periodicity_check",
    "reference_helix",
]
