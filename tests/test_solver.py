# tests/test_solver.py

import logging
import math

import pytest

from chronos.core.errors import ConvergenceError
from chronos.core.types import Converged, NotConverged
from chronos.engines._solver import fixed_point, require_converged
from chronos.ephemeris.kepler import solve_kepler


def test_fixed_point_converges():
    out = fixed_point(math.cos, 1.0, tol=1e-12, max_iterations=200)
    assert isinstance(out, Converged)
    assert out.value == pytest.approx(0.7390851332151607, abs=1e-11)
    assert require_converged(out, "dottie") == out.value


def test_fixed_point_budget():
    out = fixed_point(lambda x: x + 1.0, 0.0, tol=1e-9, max_iterations=5)
    assert isinstance(out, NotConverged)
    assert out.iterations == 5
    assert out.value == 5.0
    with pytest.raises(ValueError):
        fixed_point(math.cos, 1.0, tol=1e-9, max_iterations=0)


def test_require_converged_raises(caplog):
    out = NotConverged(1.0, 3)
    with caplog.at_level(logging.WARNING, logger="chronos.engines._solver"):
        with pytest.raises(ConvergenceError) as ei:
            require_converged(out, "test loop")
    assert ei.value.outcome is out
    assert "test loop" in str(ei.value)
    assert caplog.records


@pytest.mark.parametrize("e", [0.0, 0.0167, 0.2056, 0.9])
def test_kepler_equation(e):
    for M in (0.1, 1.0, 3.0, 5.5):
        E, iters, ok = solve_kepler(M, e)
        assert ok
        assert E - e * math.sin(E) == pytest.approx(M, abs=1e-12)
        assert iters <= 30
