# tests/test_de422.py
#
# Requires the ephemeris extra: pip install -e ".[ephemeris]"

import math

import pytest

pytest.importorskip("jplephem")
pytest.importorskip("de422")

from chronos.core.types import Body
from chronos.ephemeris.de422 import DE422Theory
from chronos.reference.lunar import moon_true_position
from chronos.reference.planets import planet_apparent_position
from chronos.reference.solar import sun_apparent_position


@pytest.fixture(scope="module")
def de422():
    return DE422Theory.load()


def _close(a, b, deg):
    return math.cos(a - b) >= math.cos(math.radians(deg))


def test_sun_agrees_with_erfa(de422, erfa_theory):
    jde = 2448908.5
    a = sun_apparent_position(jde, de422)
    b = sun_apparent_position(jde, erfa_theory)
    assert _close(a.longitude, b.longitude, 1e-4)


def test_venus_meeus_33a(de422):
    p = planet_apparent_position(2448976.5, Body.VENUS, de422)
    assert math.degrees(p.longitude) == pytest.approx(313.08102, abs=5e-4)
    assert math.degrees(p.latitude) == pytest.approx(-2.08474, abs=5e-4)


def test_moon_agrees_with_meeus_series(de422, meeus_moon):
    jde = 2448724.5
    a = moon_true_position(jde, de422)
    b = moon_true_position(jde, meeus_moon)
    assert _close(a.longitude, b.longitude, 0.01)
    assert a.latitude == pytest.approx(b.latitude, abs=math.radians(0.01))
    assert de422.geocentric_position(0.0).distance == pytest.approx(385000.0, rel=0.06)


def test_info(de422):
    info = de422.info()
    assert info["name"] == "de422"
    assert info["emrat"] == pytest.approx(81.3, abs=0.01)
