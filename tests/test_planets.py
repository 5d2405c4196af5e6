# tests/test_planets.py

import math

import pytest

from chronos.core.errors import ConvergenceError
from chronos.core.time import T_centuries
from chronos.core.types import Body
from chronos.reference.coordinates import ecliptic_to_equatorial
from chronos.reference.earth import aberration, true_obliquity
from chronos.reference.nutation import nutation_in_longitude
from chronos.reference.planets import (
    EARTH_SENTINEL,
    LIGHT_TIME_DAYS_PER_AU,
    light_time,
    light_time_outcome,
    planet_apparent_magnitude,
    planet_apparent_position,
    planet_astrometric_geocentric,
    planet_distance_to_earth,
    planet_distance_to_sun,
    planet_illuminated_fraction,
    planet_phase_angle,
    planet_true_position,
    saturnicentric_earth_position,
    saturnicentric_sun_position,
    _ring_plane,
    _to_ring_plane,
)
from chronos.reference.solar import sun_true_position

from conftest import deg

PLANETS = [b for b in Body if b != Body.EARTH]

# 1992 December 20.0 TD
JDE_VENUS = 2448976.5
# 1992 December 16.0 UT
JDE_SATURN = 2448972.50068


@pytest.mark.parametrize("body", PLANETS)
def test_light_time_converges(kepler, body):
    for jde in (2415020.5, 2451545.0, 2488069.5):
        outcome = light_time_outcome(jde, body, kepler)
        assert outcome.converged
        assert outcome.iterations <= 20
        # Δ < 31 AU for every planet
        assert 0.0 < outcome.value < 0.0057755183 * 31.5


def test_light_time_bound(kepler):
    with pytest.raises(ConvergenceError) as ei:
        light_time(JDE_VENUS, Body.NEPTUNE, kepler, max_iterations=1)
    assert not ei.value.outcome.converged
    assert ei.value.outcome.iterations == 1


def test_earth_conventions(kepler):
    assert light_time(JDE_VENUS, Body.EARTH, kepler) == 0.0
    p = planet_apparent_position(JDE_VENUS, Body.EARTH, kepler)
    assert (p.longitude, p.latitude) == (0.0, 0.0)
    p = planet_true_position(JDE_VENUS, Body.EARTH, kepler)
    assert (p.longitude, p.latitude) == (0.0, 0.0)
    assert planet_distance_to_earth(JDE_VENUS, Body.EARTH, kepler) == 0.0
    assert planet_phase_angle(JDE_VENUS, Body.EARTH, kepler) == EARTH_SENTINEL
    assert planet_illuminated_fraction(JDE_VENUS, Body.EARTH, kepler) == EARTH_SENTINEL
    assert planet_apparent_magnitude(JDE_VENUS, Body.EARTH, kepler) == EARTH_SENTINEL


def test_venus_meeus_33a(erfa_theory):
    assert light_time(JDE_VENUS, Body.VENUS, erfa_theory) == pytest.approx(0.0052612, abs=2e-6)

    p = planet_apparent_position(JDE_VENUS, Body.VENUS, erfa_theory)
    assert deg(p.longitude) == pytest.approx(313.08102, abs=0.01)
    assert deg(p.latitude) == pytest.approx(-2.08474, abs=0.01)

    eq = ecliptic_to_equatorial(p, true_obliquity(JDE_VENUS))
    assert deg(eq.right_ascension) == pytest.approx(316.17273, abs=0.01)
    assert deg(eq.declination) == pytest.approx(-18.88801, abs=0.01)


def test_venus_phase_meeus_41(erfa_theory):
    assert planet_distance_to_sun(JDE_VENUS, Body.VENUS, erfa_theory) == pytest.approx(0.724604, abs=1e-4)
    # geometric distance at t; Meeus' 0.910947 AU is the distance to the retarded Venus
    assert planet_distance_to_earth(JDE_VENUS, Body.VENUS, erfa_theory) == pytest.approx(0.9108416, abs=1e-5)
    tau = light_time(JDE_VENUS, Body.VENUS, erfa_theory)
    assert tau / LIGHT_TIME_DAYS_PER_AU == pytest.approx(0.910947, abs=1e-4)
    assert deg(planet_phase_angle(JDE_VENUS, Body.VENUS, erfa_theory)) == pytest.approx(72.96, abs=0.05)
    assert planet_illuminated_fraction(JDE_VENUS, Body.VENUS, erfa_theory) == pytest.approx(0.647, abs=2e-3)
    assert planet_apparent_magnitude(JDE_VENUS, Body.VENUS, erfa_theory) == pytest.approx(-4.22, abs=0.02)


def test_saturn_ring_meeus_45a(erfa_theory):
    earth = saturnicentric_earth_position(JDE_SATURN, erfa_theory)
    sun = saturnicentric_sun_position(JDE_SATURN, erfa_theory)
    assert deg(earth.latitude) == pytest.approx(16.442, abs=0.02)
    assert deg(sun.latitude) == pytest.approx(14.679, abs=0.02)
    du = abs(deg(sun.longitude - earth.longitude)) % 360.0
    assert min(du, 360.0 - du) == pytest.approx(4.198, abs=0.02)


def test_saturn_ring_uses_astrometric_position(kepler):
    geo = planet_astrometric_geocentric(JDE_SATURN, Body.SATURN, kepler)
    app = planet_apparent_position(JDE_SATURN, Body.SATURN, kepler)
    d = aberration(JDE_SATURN, geo, sun_true_position(JDE_SATURN, kepler).longitude)
    shift = math.remainder(app.longitude - geo.longitude, 2.0 * math.pi)
    assert shift == pytest.approx(d.longitude + nutation_in_longitude(JDE_SATURN), abs=1e-12)
    assert app.latitude - geo.latitude == pytest.approx(d.latitude, abs=1e-12)

    i, node = _ring_plane(T_centuries(JDE_SATURN))
    expected = _to_ring_plane(geo.longitude, geo.latitude, i, node)
    earth = saturnicentric_earth_position(JDE_SATURN, kepler)
    assert earth.longitude == pytest.approx(expected.longitude, abs=1e-12)
    assert earth.latitude == pytest.approx(expected.latitude, abs=1e-12)


def test_saturn_magnitude(erfa_theory):
    m = planet_apparent_magnitude(JDE_SATURN, Body.SATURN, erfa_theory)
    assert m == pytest.approx(0.74, abs=0.1)


@pytest.mark.parametrize("body", PLANETS)
def test_ranges(kepler, body):
    p = planet_apparent_position(JDE_VENUS, body, kepler)
    assert 0.0 <= p.longitude < 2.0 * math.pi
    assert abs(p.latitude) < math.radians(10.0)
    k = planet_illuminated_fraction(JDE_VENUS, body, kepler)
    assert 0.0 <= k <= 1.0


def test_theories_agree(kepler, erfa_theory):
    for body in (Body.MARS, Body.JUPITER):
        a = planet_apparent_position(JDE_VENUS, body, kepler)
        b = planet_apparent_position(JDE_VENUS, body, erfa_theory)
        assert math.cos(a.longitude - b.longitude) == pytest.approx(1.0, abs=1e-4)
