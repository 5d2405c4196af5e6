"""
Public facade over the reference layer.

Dates are CalendarDate values in UT; every function that needs dynamical
time converts through ΔT. Theories are looked up by name in the module
registry (populated by api_init); `theory=None`/`lunar=None` select the
configured defaults (CHRONOS_PLANETARY_THEORY, CHRONOS_LUNAR_THEORY).
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from . import config
from .core import time as _time
from .core.theory import LunarTheory, PlanetaryTheory, TheoryRegistry
from .core.types import (
    Body,
    CalendarDate,
    EclipticPoint,
    EquatorialPoint,
    Frame,
    GeographicPoint,
    HorizontalPoint,
    OrbitalElements,
    Weekday,
)
from .reference import coordinates as _coords
from .reference import deltat as _deltat
from .reference import earth as _earth
from .reference import lunar as _lunar
from .reference import nutation as _nutation
from .reference import observer as _observer
from .reference import orbital as _orbital
from .reference import planets as _planets
from .reference import solar as _solar
from .reference import time_scales as _ts

logger = logging.getLogger(__name__)

_registry: Optional[TheoryRegistry] = None


def set_registry(reg: TheoryRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> TheoryRegistry:
    if _registry is None:
        raise RuntimeError("Theory registry not initialized")
    return _registry


def _planetary(name: Optional[str]) -> PlanetaryTheory:
    return _reg().planetary(name if name is not None else config.get_planetary_theory())


def _lunar_theory(name: Optional[str]) -> LunarTheory:
    return _reg().lunar(name if name is not None else config.get_lunar_theory())


def _jde(d: CalendarDate) -> float:
    return _ts.to_julian_ephemeris_date(d)


# ============================================================
# Theory registry
# ============================================================

def list_theories() -> Dict[str, List[str]]:
    return {"planetary": _reg().list_planetary(), "lunar": _reg().list_lunar()}


def theory_info(name: str, *, kind: str = "planetary") -> Dict[str, Any]:
    if kind == "planetary":
        return _reg().planetary(name).info()
    if kind == "lunar":
        return _reg().lunar(name).info()
    raise ValueError(f"kind must be 'planetary' or 'lunar', got {kind!r}")


def register_theory(name: str, theory: Any, *, kind: str = "planetary", overwrite: bool = False) -> None:
    if kind == "planetary":
        _reg().register_planetary(name, theory, overwrite=overwrite)
    elif kind == "lunar":
        _reg().register_lunar(name, theory, overwrite=overwrite)
    else:
        raise ValueError(f"kind must be 'planetary' or 'lunar', got {kind!r}")


def use_de422(*, overwrite: bool = False) -> None:
    """Load JPL DE422 and register it as both a planetary and a lunar theory named 'de422'."""
    from .ephemeris.de422 import DE422Theory

    theory = DE422Theory.load()
    register_theory("de422", theory, kind="planetary", overwrite=overwrite)
    register_theory("de422", theory, kind="lunar", overwrite=overwrite)
    logger.info("registered DE422 (EMRAT=%.6f)", theory.emrat)


# ============================================================
# Calendar and time scales
# ============================================================

def is_valid(d: CalendarDate) -> bool:
    return _time.is_valid(d)


def is_leap_year(year: int) -> bool:
    return _time.is_leap_year(year)


def days_in_month(month: int, year: int) -> int:
    return _time.days_in_month(month, year)


def to_julian_date(d: CalendarDate) -> float:
    return _time.to_julian_date(d)


def to_calendar_date(jd: float) -> CalendarDate:
    return _time.to_calendar_date(jd)


def to_julian_ephemeris_date(d: CalendarDate) -> float:
    return _ts.to_julian_ephemeris_date(d)


def day_of_week(d: CalendarDate) -> Weekday:
    return _time.day_of_week(d)


def day_of_year(d: CalendarDate) -> int:
    return _time.day_of_year(d)


def date_of_easter(year: int) -> CalendarDate:
    return _time.date_of_easter(year)


def delta_t(d: CalendarDate) -> float:
    return _deltat.delta_t(d)


def delta_t_uncertainty(d: CalendarDate) -> Optional[float]:
    return _deltat.delta_t_uncertainty(d)


def greenwich_mean_sidereal_time(d: CalendarDate) -> float:
    return _ts.greenwich_mean_sidereal_time(_time.to_julian_date(d))


def greenwich_apparent_sidereal_time(d: CalendarDate, *, lunar: Optional[str] = None) -> float:
    return _ts.greenwich_apparent_sidereal_time(_time.to_julian_date(d), _lunar_theory(lunar))


# ============================================================
# Earth orientation
# ============================================================

def nutation(d: CalendarDate, *, lunar: Optional[str] = None) -> Tuple[float, float]:
    return _nutation.nutation(_jde(d), _lunar_theory(lunar))


def nutation_in_longitude(d: CalendarDate, *, lunar: Optional[str] = None) -> float:
    return _nutation.nutation_in_longitude(_jde(d), _lunar_theory(lunar))


def nutation_in_obliquity(d: CalendarDate, *, lunar: Optional[str] = None) -> float:
    return _nutation.nutation_in_obliquity(_jde(d), _lunar_theory(lunar))


def obliquity_of_ecliptic(d: CalendarDate) -> float:
    return _earth.obliquity_of_ecliptic(_jde(d))


def true_obliquity(d: CalendarDate, *, lunar: Optional[str] = None) -> float:
    return _earth.true_obliquity(_jde(d), _lunar_theory(lunar))


def precession(point: EclipticPoint, from_jd: float, to_jd: float) -> EclipticPoint:
    return _earth.precession(point, from_jd, to_jd)


def aberration(d: CalendarDate, point: EclipticPoint, *, theory: Optional[str] = None) -> EclipticPoint:
    jde = _jde(d)
    sun = _solar.sun_true_position(jde, _planetary(theory))
    return _earth.aberration(jde, point, sun.longitude)


def orbital_elements(d: CalendarDate, body: Body, frame: Frame = Frame.OF_DATE) -> OrbitalElements:
    return _orbital.orbital_elements(_jde(d), body, frame)


def geodesic_distance(p1: GeographicPoint, p2: GeographicPoint) -> float:
    return _earth.geodesic_distance(p1, p2)


# ============================================================
# Coordinates
# ============================================================

def ecliptic_to_equatorial(point: EclipticPoint, eps: float) -> EquatorialPoint:
    return _coords.ecliptic_to_equatorial(point, eps)


def equatorial_to_ecliptic(point: EquatorialPoint, eps: float) -> EclipticPoint:
    return _coords.equatorial_to_ecliptic(point, eps)


def _gast_rad(d: CalendarDate, lunar: Optional[str]) -> float:
    return greenwich_apparent_sidereal_time(d, lunar=lunar) * math.pi / 12.0


def equatorial_to_horizontal(d: CalendarDate, observer: GeographicPoint, point: EquatorialPoint, *, lunar: Optional[str] = None) -> HorizontalPoint:
    return _coords.equatorial_to_horizontal(point, observer, _gast_rad(d, lunar))


def horizontal_to_equatorial(d: CalendarDate, observer: GeographicPoint, point: HorizontalPoint, *, lunar: Optional[str] = None) -> EquatorialPoint:
    return _coords.horizontal_to_equatorial(point, observer, _gast_rad(d, lunar))


# ============================================================
# Sun
# ============================================================

def sun_true_position(d: CalendarDate, *, theory: Optional[str] = None) -> EclipticPoint:
    return _solar.sun_true_position(_jde(d), _planetary(theory))


def sun_apparent_position(d: CalendarDate, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> EclipticPoint:
    return _solar.sun_apparent_position(_jde(d), _planetary(theory), _lunar_theory(lunar))


def sun_distance_to_earth(d: CalendarDate, *, theory: Optional[str] = None) -> float:
    return _solar.sun_distance_to_earth(_jde(d), _planetary(theory))


def equinox(year: int, which: int, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> CalendarDate:
    return _solar.equinox(year, which, _planetary(theory), _lunar_theory(lunar))


def solstice(year: int, which: int, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> CalendarDate:
    return _solar.solstice(year, which, _planetary(theory), _lunar_theory(lunar))


def equinox_jde(year: int, which: int, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> float:
    return _solar.equinox_jde(year, which, _planetary(theory), _lunar_theory(lunar))


def solstice_jde(year: int, which: int, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> float:
    return _solar.solstice_jde(year, which, _planetary(theory), _lunar_theory(lunar))


def equation_of_time(d: CalendarDate, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> float:
    return _solar.equation_of_time(_jde(d), _planetary(theory), _lunar_theory(lunar))


# ============================================================
# Planets
# ============================================================

def planet_true_position(d: CalendarDate, body: Body, *, theory: Optional[str] = None) -> EclipticPoint:
    return _planets.planet_true_position(_jde(d), body, _planetary(theory))


def planet_apparent_position(d: CalendarDate, body: Body, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> EclipticPoint:
    return _planets.planet_apparent_position(_jde(d), body, _planetary(theory), _lunar_theory(lunar))


def planet_distance_to_sun(d: CalendarDate, body: Body, *, theory: Optional[str] = None) -> float:
    return _planets.planet_distance_to_sun(_jde(d), body, _planetary(theory))


def planet_distance_to_earth(d: CalendarDate, body: Body, *, theory: Optional[str] = None) -> float:
    return _planets.planet_distance_to_earth(_jde(d), body, _planetary(theory))


def planet_phase_angle(d: CalendarDate, body: Body, *, theory: Optional[str] = None) -> float:
    return _planets.planet_phase_angle(_jde(d), body, _planetary(theory))


def planet_illuminated_fraction(d: CalendarDate, body: Body, *, theory: Optional[str] = None) -> float:
    return _planets.planet_illuminated_fraction(_jde(d), body, _planetary(theory))


def planet_apparent_magnitude(d: CalendarDate, body: Body, *, theory: Optional[str] = None) -> float:
    return _planets.planet_apparent_magnitude(_jde(d), body, _planetary(theory))


def light_time(d: CalendarDate, body: Body, *, theory: Optional[str] = None) -> float:
    return _planets.light_time(_jde(d), body, _planetary(theory))


# ============================================================
# Moon
# ============================================================

def moon_true_position(d: CalendarDate, *, lunar: Optional[str] = None) -> EclipticPoint:
    return _lunar.moon_true_position(_jde(d), _lunar_theory(lunar))


def moon_apparent_position(d: CalendarDate, *, lunar: Optional[str] = None) -> EclipticPoint:
    return _lunar.moon_apparent_position(_jde(d), _lunar_theory(lunar))


def moon_distance_to_earth(d: CalendarDate, *, lunar: Optional[str] = None) -> float:
    return _lunar.moon_distance_to_earth(_jde(d), _lunar_theory(lunar))


def moon_phase_angle(d: CalendarDate, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> float:
    return _lunar.moon_phase_angle(_jde(d), _lunar_theory(lunar), _planetary(theory))


def moon_illuminated_fraction(d: CalendarDate, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> float:
    return _lunar.moon_illuminated_fraction(_jde(d), _lunar_theory(lunar), _planetary(theory))


def moon_bright_limb_position_angle(d: CalendarDate, *, theory: Optional[str] = None, lunar: Optional[str] = None) -> float:
    return _lunar.moon_bright_limb_position_angle(_jde(d), _lunar_theory(lunar), _planetary(theory))


# ============================================================
# Observer
# ============================================================

def parallactic_angle(d: CalendarDate, observer: GeographicPoint, point: EquatorialPoint, *, lunar: Optional[str] = None) -> float:
    return _observer.parallactic_angle(_time.to_julian_date(d), observer, point, _lunar_theory(lunar))


def transit(d: CalendarDate, observer: GeographicPoint, point: EquatorialPoint, *, lunar: Optional[str] = None) -> float:
    return _observer.transit(_time.to_julian_date(d), observer, point, _lunar_theory(lunar))


def rising(
    d: CalendarDate,
    observer: GeographicPoint,
    point: EquatorialPoint,
    altitude: float = _observer.STANDARD_ALTITUDE_STAR,
    *,
    lunar: Optional[str] = None,
) -> float:
    return _observer.rising(_time.to_julian_date(d), observer, point, altitude, _lunar_theory(lunar))


def setting(
    d: CalendarDate,
    observer: GeographicPoint,
    point: EquatorialPoint,
    altitude: float = _observer.STANDARD_ALTITUDE_STAR,
    *,
    lunar: Optional[str] = None,
) -> float:
    return _observer.setting(_time.to_julian_date(d), observer, point, altitude, _lunar_theory(lunar))


def atmospheric_refraction(
    altitude_deg: float,
    temperature: float = _observer.STANDARD_TEMPERATURE,
    pressure: float = _observer.STANDARD_PRESSURE,
) -> float:
    return _observer.atmospheric_refraction(altitude_deg, temperature, pressure)


def equatorial_horizontal_parallax(distance_au: float) -> float:
    return _observer.equatorial_horizontal_parallax(distance_au)


def diurnal_parallax(
    d: CalendarDate,
    observer: GeographicPoint,
    height: float,
    point: EquatorialPoint,
    parallax: float,
    *,
    lunar: Optional[str] = None,
) -> EquatorialPoint:
    return _observer.diurnal_parallax(_time.to_julian_date(d), observer, height, point, parallax, _lunar_theory(lunar))
