# tests/test_solar.py

import math

import pytest

from chronos.core.errors import ConvergenceError
from chronos.core.types import Equinox, Month, Solstice
from chronos.reference.solar import (
    equation_of_time,
    equinox,
    equinox_jde,
    season_outcome,
    solstice,
    solstice_jde,
    sun_apparent_position,
    sun_distance_to_earth,
    sun_true_position,
)

from conftest import deg

# 1992 October 13.0 TD
JDE_25B = 2448908.5


def test_sun_position_meeus_25b(erfa_theory):
    app = sun_apparent_position(JDE_25B, erfa_theory)
    # full-precision reductions agree to a few arcseconds
    assert deg(app.longitude) == pytest.approx(199.9054, abs=3e-3)
    assert abs(deg(app.latitude)) < 5e-4
    assert sun_distance_to_earth(JDE_25B, erfa_theory) == pytest.approx(0.99760775, abs=1e-5)


def test_true_and_apparent_differ_by_aberration_and_nutation(erfa_theory, meeus_moon):
    true = sun_true_position(JDE_25B, erfa_theory)
    app = sun_apparent_position(JDE_25B, erfa_theory, meeus_moon)
    diff_arcsec = deg(app.longitude - true.longitude) * 3600.0
    # +15.9" nutation, -20.5" aberration
    assert diff_arcsec == pytest.approx(15.908 - 20.539, abs=0.1)


def test_sun_position_mean_elements(kepler):
    app = sun_apparent_position(JDE_25B, kepler)
    assert deg(app.longitude) == pytest.approx(199.906, abs=0.02)


def test_june_solstice_meeus_27a(erfa_theory):
    assert solstice_jde(1962, Solstice.SUMMER, erfa_theory) == pytest.approx(2437837.39245, abs=5e-4)


def test_march_equinox_2000(erfa_theory):
    d = equinox(2000, Equinox.VERNAL, erfa_theory)
    assert (d.year, d.month) == (2000, Month.MARCH)
    # 2000 March 20, 07:35 UT
    assert d.day == pytest.approx(20.316, abs=1e-3)


def test_seasons_hit_target_longitude(erfa_theory, meeus_moon):
    for k, fn in ((0, equinox_jde), (1, solstice_jde), (2, equinox_jde), (3, solstice_jde)):
        jde = fn(2024, k, erfa_theory, meeus_moon)
        lam = sun_apparent_position(jde, erfa_theory, meeus_moon).longitude
        assert math.cos(lam - k * math.pi / 2.0) == pytest.approx(1.0, abs=1e-12)


def test_season_kind_mismatch(erfa_theory):
    d = equinox(2000, Solstice.SUMMER, erfa_theory)
    assert (d.day, d.month, d.year) == (-1.0, Month.UNKNOWN, 2000)
    d = solstice(2000, Equinox.AUTUMNAL, erfa_theory)
    assert (d.day, d.month, d.year) == (-1.0, Month.UNKNOWN, 2000)
    with pytest.raises(ValueError):
        equinox_jde(2000, 1, erfa_theory)
    with pytest.raises(ValueError):
        solstice_jde(2000, 2, erfa_theory)


def test_season_iteration_bound(erfa_theory):
    outcome = season_outcome(2000, 0, erfa_theory, max_iterations=1)
    assert not outcome.converged
    assert outcome.iterations == 1

    with pytest.raises(ConvergenceError) as ei:
        equinox_jde(2000, Equinox.VERNAL, erfa_theory, max_iterations=1)
    assert ei.value.outcome.iterations == 1


def test_equation_of_time_meeus_28a(erfa_theory):
    # +13m42.6s
    assert equation_of_time(JDE_25B, erfa_theory) == pytest.approx(0.22849, abs=1e-3)


def test_equation_of_time_negative_wraps(erfa_theory):
    # early November the Sun is ahead; mid February it is behind (E < 0)
    e = equation_of_time(2460355.5, erfa_theory)   # 2024 Feb 12
    assert 23.5 < e < 24.0
