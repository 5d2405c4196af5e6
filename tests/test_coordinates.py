# tests/test_coordinates.py

import math
import random

import pytest

from chronos.core.types import EclipticPoint, EquatorialPoint, GeographicPoint, HorizontalPoint
from chronos.reference.coordinates import (
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    equatorial_to_horizontal,
    horizontal_to_equatorial,
    rectangular_to_spherical,
    spherical_to_rectangular,
    wrap_pi,
    wrap_two_pi,
)

from conftest import deg, dms


def test_wrapping():
    assert wrap_two_pi(-0.5) == pytest.approx(2.0 * math.pi - 0.5)
    assert wrap_two_pi(7.0) == pytest.approx(7.0 - 2.0 * math.pi)
    assert wrap_pi(3.5) == pytest.approx(3.5 - 2.0 * math.pi)
    assert -math.pi <= wrap_pi(math.pi) < math.pi


def test_pollux_meeus_13a():
    eps = math.radians(23.4392911)
    pollux = EquatorialPoint(math.radians(116.328942), math.radians(28.026183))
    ecl = equatorial_to_ecliptic(pollux, eps)
    assert deg(ecl.longitude) == pytest.approx(113.215630, abs=1e-6)
    assert deg(ecl.latitude) == pytest.approx(6.684170, abs=1e-6)

    eq = ecliptic_to_equatorial(ecl, eps)
    assert deg(eq.right_ascension) == pytest.approx(116.328942, abs=1e-6)
    assert deg(eq.declination) == pytest.approx(28.026183, abs=1e-6)


def test_ecliptic_equatorial_roundtrip():
    random.seed(7)
    for _ in range(500):
        eps = random.uniform(0.0, math.pi / 2 - 1e-3)
        p = EclipticPoint(random.uniform(0.0, 2 * math.pi), random.uniform(-1.5, 1.5))
        back = equatorial_to_ecliptic(ecliptic_to_equatorial(p, eps), eps)
        assert math.cos(back.longitude - p.longitude) == pytest.approx(1.0, abs=1e-12)
        assert back.latitude == pytest.approx(p.latitude, abs=1e-9)


def test_venus_washington_meeus_13b():
    washington = GeographicPoint(dms(77, 3, 56), dms(38, 55, 17))
    venus = EquatorialPoint(math.radians(347.3193375), math.radians(-6.719892))
    # Meeus works from the apparent sidereal time and the local hour angle
    # H = 64.352133 deg; theta0 is rebuilt from H.
    theta0 = washington.longitude + venus.right_ascension + math.radians(64.352133)
    hz = equatorial_to_horizontal(venus, washington, theta0)
    assert deg(hz.azimuth) == pytest.approx(68.0337, abs=2e-4)
    assert deg(hz.elevation) == pytest.approx(15.1249, abs=2e-4)

    eq = horizontal_to_equatorial(hz, washington, theta0)
    assert deg(eq.right_ascension) == pytest.approx(347.3193375, abs=1e-6)
    assert deg(eq.declination) == pytest.approx(-6.719892, abs=1e-6)


def test_zenith_and_meridian():
    observer = GeographicPoint(0.0, math.radians(45.0))
    star = EquatorialPoint(0.0, math.radians(45.0))
    hz = equatorial_to_horizontal(star, observer, 0.0)
    assert deg(hz.elevation) == pytest.approx(90.0, abs=1e-6)

    north_pole = HorizontalPoint(math.pi, observer.latitude)
    eq = horizontal_to_equatorial(north_pole, observer, 0.0)
    assert deg(eq.declination) == pytest.approx(90.0, abs=1e-6)


def test_rectangular_spherical():
    x, y, z = spherical_to_rectangular(math.radians(120.0), math.radians(-10.0), 2.5)
    lon, lat, r = rectangular_to_spherical(x, y, z)
    assert deg(lon) == pytest.approx(120.0)
    assert deg(lat) == pytest.approx(-10.0)
    assert r == pytest.approx(2.5)
