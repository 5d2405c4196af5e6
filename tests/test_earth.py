# tests/test_earth.py

import math

import pytest

from chronos.core.types import Body, EclipticPoint, Frame, GeographicPoint
from chronos.reference.earth import (
    fk5_correction,
    geodesic_distance,
    obliquity_of_ecliptic,
    precession,
    true_obliquity,
)
from chronos.reference.nutation import (
    NUTATION_SERIES,
    iau1980_delaunay,
    nutation,
)
from chronos.reference.orbital import orbital_elements

from conftest import deg, dms

ARCSEC = math.radians(1.0 / 3600.0)


def test_nutation_meeus_22a():
    """1987 April 10, 0h TD."""
    jde = 2446895.5
    dpsi, deps = nutation(jde)
    assert dpsi / ARCSEC == pytest.approx(-3.788, abs=0.005)
    assert deps / ARCSEC == pytest.approx(9.443, abs=0.005)
    assert deg(obliquity_of_ecliptic(jde)) == pytest.approx(23.440946, abs=1e-6)
    assert deg(true_obliquity(jde)) == pytest.approx(23.443569, abs=2e-6)


def test_nutation_series_shape():
    assert NUTATION_SERIES.n_args == 5
    assert len(NUTATION_SERIES.terms) == 106


def test_delaunay_at_j2000():
    args = iau1980_delaunay(0.0)
    # Meeus 22: D, M, M', F at T = 0
    assert deg(args.D) % 360.0 == pytest.approx(297.85036, abs=1e-5)
    assert deg(args.l_prime) % 360.0 == pytest.approx(357.52772, abs=1e-5)
    assert deg(args.l) % 360.0 == pytest.approx(134.96298, abs=1e-5)
    assert deg(args.F) % 360.0 == pytest.approx(93.27191, abs=1e-5)


def test_precession_meeus_21c():
    """Venus-like point from J2000.0 back to -214 June 30.0."""
    p0 = EclipticPoint(math.radians(149.48194), math.radians(1.76549))
    p = precession(p0, 2451545.0, 1643074.5)
    assert deg(p.longitude) == pytest.approx(118.704, abs=0.002)
    assert deg(p.latitude) == pytest.approx(1.615, abs=0.002)


def test_precession_identity_and_inverse():
    p0 = EclipticPoint(math.radians(10.0), math.radians(-5.0))
    same = precession(p0, 2451545.0, 2451545.0)
    assert same.longitude == pytest.approx(p0.longitude, abs=1e-12)
    assert same.latitude == pytest.approx(p0.latitude, abs=1e-12)

    there = precession(p0, 2451545.0, 2469807.5)
    back = precession(there, 2469807.5, 2451545.0)
    assert back.longitude == pytest.approx(p0.longitude, abs=1e-9)
    assert back.latitude == pytest.approx(p0.latitude, abs=1e-9)


def test_fk5_correction_is_small():
    p0 = EclipticPoint(math.radians(200.0), 0.0)
    p = fk5_correction(p0, 2448908.5)
    assert abs(p.longitude - p0.longitude) / ARCSEC == pytest.approx(0.09033, abs=0.002)
    assert abs(p.latitude - p0.latitude) / ARCSEC < 0.06


def test_geodesic_distance_meeus_11c():
    paris = GeographicPoint(dms(-2, -20, -14), dms(48, 50, 11))
    washington = GeographicPoint(dms(77, 3, 56), dms(38, 55, 17))
    assert geodesic_distance(paris, washington) == pytest.approx(6181.63, abs=0.05)
    assert geodesic_distance(paris, paris) == 0.0


def test_mercury_elements_meeus_31a():
    jde = 2475460.5
    el = orbital_elements(jde, Body.MERCURY, Frame.OF_DATE)
    assert deg(el.mean_longitude) % 360.0 == pytest.approx(203.494701, abs=0.01)
    assert el.semi_major_axis == pytest.approx(0.387098310, abs=1e-8)
    assert el.eccentricity == pytest.approx(0.20564510, abs=1e-6)
    assert deg(el.inclination) == pytest.approx(7.006171, abs=0.01)
    assert deg(el.ascending_node_longitude) % 360.0 == pytest.approx(49.107650, abs=0.01)
    assert deg(el.perihelion_longitude) % 360.0 == pytest.approx(78.475382, abs=0.01)

    el = orbital_elements(jde, Body.MERCURY, Frame.J2000)
    # of-date value less about 65 years of general precession
    assert deg(el.mean_longitude) % 360.0 == pytest.approx(202.5795, abs=0.01)
    assert deg(el.inclination) == pytest.approx(7.001177, abs=0.01)
    assert deg(el.ascending_node_longitude) % 360.0 == pytest.approx(48.330917, abs=0.01)
    assert deg(el.perihelion_longitude) % 360.0 == pytest.approx(77.889056, abs=0.01)
