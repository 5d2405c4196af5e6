# tests/test_lunar.py

import math

import pytest

from chronos.core.time import T_centuries
from chronos.reference.earth import ASTRONOMICAL_UNIT_KM
from chronos.reference.lunar import (
    LUNAR_LAT_TERMS,
    LUNAR_LON_DIST_TERMS,
    eccentricity_factor,
    lunar_arguments,
    moon_apparent_position,
    moon_bright_limb_position_angle,
    moon_distance_to_earth,
    moon_illuminated_fraction,
    moon_phase_angle,
    moon_true_position,
)

from conftest import deg

# 1992 April 12.0 TD
JDE_47A = 2448724.5


def test_tables():
    assert len(LUNAR_LON_DIST_TERMS) == 60
    assert len(LUNAR_LAT_TERMS) == 60


def test_arguments_meeus_47a():
    T = T_centuries(JDE_47A)
    a = lunar_arguments(T)
    assert a.Lp_deg % 360.0 == pytest.approx(134.290182, abs=1e-6)
    assert a.D_deg % 360.0 == pytest.approx(113.842304, abs=1e-6)
    assert a.M_deg % 360.0 == pytest.approx(97.643514, abs=1e-6)
    assert a.Mp_deg % 360.0 == pytest.approx(5.150833, abs=1e-6)
    assert a.F_deg % 360.0 == pytest.approx(219.889721, abs=1e-6)
    assert eccentricity_factor(T) == pytest.approx(1.000194, abs=1e-6)


def test_moon_position_meeus_47a(meeus_moon):
    p = moon_true_position(JDE_47A, meeus_moon)
    assert deg(p.longitude) == pytest.approx(133.162655, abs=1e-4)
    assert deg(p.latitude) == pytest.approx(-3.229126, abs=1e-4)
    dist_km = moon_distance_to_earth(JDE_47A, meeus_moon) * ASTRONOMICAL_UNIT_KM
    assert dist_km == pytest.approx(368409.7, abs=0.1)

    app = moon_apparent_position(JDE_47A, meeus_moon)
    assert deg(app.longitude) == pytest.approx(133.167265, abs=1e-4)


def test_delaunay_arguments_are_the_lunar_means(meeus_moon):
    T = T_centuries(JDE_47A)
    da = meeus_moon.delaunay_arguments(T)
    a = lunar_arguments(T)
    assert da.l == pytest.approx(math.radians(a.Mp_deg))
    assert da.l_prime == pytest.approx(math.radians(a.M_deg))
    assert da.F == pytest.approx(math.radians(a.F_deg))
    assert da.D == pytest.approx(math.radians(a.D_deg))


def test_illumination_meeus_48a(meeus_moon, erfa_theory):
    assert deg(moon_phase_angle(JDE_47A, meeus_moon, erfa_theory)) == pytest.approx(69.0756, abs=0.01)
    assert moon_illuminated_fraction(JDE_47A, meeus_moon, erfa_theory) == pytest.approx(0.6786, abs=1e-3)
    chi = moon_bright_limb_position_angle(JDE_47A, meeus_moon, erfa_theory)
    assert 0.0 <= chi < 2.0 * math.pi
    assert deg(chi) == pytest.approx(285.0, abs=0.5)


def test_full_and_new_moon(meeus_moon, kepler):
    # 2024 Jan 25 17:54 UT full moon; 2024 Jan 11 11:57 UT new moon
    assert moon_illuminated_fraction(2460335.246, meeus_moon, kepler) > 0.99
    assert moon_illuminated_fraction(2460320.998, meeus_moon, kepler) < 0.01
