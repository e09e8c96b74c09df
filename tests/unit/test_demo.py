"""Tests for mycadlib.demo: the demonstration pipeline and CLI."""

from __future__ import annotations

import logging
import math

import pytest

from mycadlib.core import Circle, Helix, Vector3
from mycadlib.demo import (
    DEMO_T,
    describe_curve,
    main,
    periodicity_check,
    reference_helix,
    run_demo,
)
from mycadlib.errors import CollectionInvariantError
from mycadlib.factory import PopulateConfig
from mycadlib.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("MYCADLIB_SEED", "MYCADLIB_MIN_COUNT", "MYCADLIB_MAX_COUNT"):
        monkeypatch.delenv(var, raising=False)
    logger = logging.getLogger(LOGGER_NAME)
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestHelpers:
    def test_describe_curve(self):
        line = describe_curve(Circle(0, 0, 1), 0.0)
        assert line == "Circle: C(t)={1.00,0.00,0.00}, dC(t)/dt={-0.00,1.00,0.00}, where t=0.00"

    def test_reference_helix(self):
        h = reference_helix()
        assert h.position == Vector3(1, 2, 3)
        assert (h.a, h.b, h.step) == (5, 5, 2)
        assert math.isclose(h.angle_start, math.pi / 3)

    def test_periodicity_check_matches(self):
        lifted, next_turn = periodicity_check(reference_helix(), 10.0)
        assert lifted.isclose(next_turn)

    def test_periodicity_check_negative_step(self):
        lifted, next_turn = periodicity_check(Helix(0, 0, 0, 1, 2, step=-4.0), 1.0)
        assert lifted.isclose(next_turn)


class TestRunDemo:
    def test_report_contents(self):
        report = run_demo(PopulateConfig(seed=11))
        assert 10 <= len(report.curves) <= 20
        assert all(type(c) is Circle for c in report.circles)
        radii = [c.a for c in report.circles]
        assert radii == sorted(radii)
        assert math.isclose(report.radii_sum, sum(radii))
        assert report.t == DEMO_T

    def test_circles_alias_population(self):
        report = run_demo(PopulateConfig(seed=12))
        for circle in report.circles:
            assert any(circle is curve and circle.position is curve.position for curve in report.curves)

    def test_lines(self):
        report = run_demo(PopulateConfig(seed=13), count=5)
        lines = report.lines()
        assert len(lines) == 5 + 3
        assert lines[0].endswith("where t=0.79")
        assert lines[5].startswith("first: ")
        assert lines[6].startswith("total sum of radii: ")
        assert lines[7].startswith("a: {")

    def test_too_few_curves_fails_variant_check(self):
        with pytest.raises(CollectionInvariantError, match="missing curve types"):
            run_demo(PopulateConfig(seed=1), count=2)


class TestMain:
    def test_success_output(self, capsys):
        assert main(["--seed", "3", "--count", "6"]) == 0
        out = capsys.readouterr().out
        assert "first: " in out
        assert "total sum of radii: " in out
        assert out.count("where t=0.79") == 6

    def test_custom_t(self, capsys):
        assert main(["--seed", "3", "--count", "4", "--t", "0"]) == 0
        assert "where t=0.00" in capsys.readouterr().out

    def test_preset(self, capsys):
        assert main(["--seed", "3", "--preset", "small"]) == 0
        out = capsys.readouterr().out
        assert 3 <= out.count("where t=") <= 6

    def test_env_seed_reproducible(self, capsys, monkeypatch):
        monkeypatch.setenv("MYCADLIB_SEED", "21")
        main([])
        first = capsys.readouterr().out
        main([])
        assert capsys.readouterr().out == first

    def test_failure_exit_code(self, capsys):
        assert main(["--seed", "3", "--count", "1"]) == 1
        captured = capsys.readouterr()
        assert "Demo failed" in captured.err
        assert "Demo failed" not in captured.out

    def test_bad_env_exit_code(self, monkeypatch, capsys):
        monkeypatch.setenv("MYCADLIB_MIN_COUNT", "many")
        assert main([]) == 1

    def test_log_level_is_case_insensitive(self, capsys):
        assert main(["--seed", "3", "--count", "4", "--log-level", "debug"]) == 0
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
        assert "Demo evaluated 4 curves" in capsys.readouterr().err

    @pytest.mark.parametrize("level", ["DEBG", "BASIC_FORMAT"])
    def test_unknown_log_level_rejected(self, level, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", level])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err
