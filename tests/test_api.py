# tests/test_api.py

import math

import pytest

import chronos
from chronos.api import set_registry
from chronos.bootstrap import build_registry
from chronos.core.types import Body, CalendarDate, GeographicPoint, Month


@pytest.fixture
def fresh_registry():
    set_registry(build_registry())
    yield
    set_registry(build_registry())


def test_default_theories(fresh_registry):
    names = chronos.list_theories()
    assert names["planetary"] == ["erfa", "kepler"]
    assert names["lunar"] == ["meeus"]
    assert chronos.theory_info("kepler")["name"] == "kepler"
    assert chronos.theory_info("meeus", kind="lunar")["name"] == "meeus"


def test_unknown_theory(fresh_registry):
    with pytest.raises(KeyError, match="Available"):
        chronos.theory_info("vsop87")
    with pytest.raises(ValueError):
        chronos.theory_info("kepler", kind="stellar")
    d = CalendarDate(1.0, Month.JANUARY, 2000)
    with pytest.raises(KeyError):
        chronos.planet_true_position(d, Body.MARS, theory="nope")


def test_register_theory(fresh_registry):
    from chronos.ephemeris.kepler import MeanElementTheory

    alt = MeanElementTheory(name="kepler2")
    chronos.register_theory("kepler2", alt)
    assert "kepler2" in chronos.list_theories()["planetary"]
    with pytest.raises(KeyError, match="already exists"):
        chronos.register_theory("kepler2", alt)
    chronos.register_theory("kepler2", alt, overwrite=True)


def test_environment_selects_theory(fresh_registry, monkeypatch):
    d = CalendarDate(13.0, Month.OCTOBER, 1992)
    monkeypatch.setenv("CHRONOS_PLANETARY_THEORY", "kepler")
    a = chronos.sun_true_position(d)
    b = chronos.sun_true_position(d, theory="kepler")
    assert a == b


def test_calendar_facade():
    d = CalendarDate(1.5, Month.JANUARY, 2000)
    assert chronos.to_julian_date(d) == 2451545.0
    assert chronos.to_julian_ephemeris_date(d) == pytest.approx(2451545.0 + 65.0 / 86400.0)
    assert chronos.is_valid(d)
    assert chronos.date_of_easter(2000).day == 23


def test_geodesic_facade():
    a = GeographicPoint(0.0, 0.0)
    b = GeographicPoint(math.radians(1.0), 0.0)
    # one degree along the equator
    assert chronos.geodesic_distance(a, b) == pytest.approx(111.32, abs=0.01)


def test_planet_facade_kepler(fresh_registry):
    d = CalendarDate(20.0, Month.DECEMBER, 1992)
    p = chronos.planet_apparent_position(d, Body.VENUS, theory="kepler")
    assert math.degrees(p.longitude) == pytest.approx(313.08, abs=0.1)
    assert chronos.light_time(d, Body.EARTH, theory="kepler") == 0.0
