"""
chronos.reference.observer

Corrections for an observer on the surface of the Earth (Meeus ch. 14, 15,
16, 40): parallactic angle, approximate transit/rising/setting times,
atmospheric refraction and diurnal parallax.

jd is in UT. Rising and setting use the position supplied for the whole day
(no interpolation), so they are good to a few minutes for the Sun and
planets and worse for the Moon.
"""

from __future__ import annotations
import math
from typing import Optional

from ..core.theory import LunarTheory
from ..core.types import EquatorialPoint, GeographicPoint
from .coordinates import local_hour_angle
from .earth import EARTH_EQUATORIAL_RADIUS_KM, EARTH_POLAR_RADIUS_KM
from .nutation import ARCSEC_TO_RAD
from .time_scales import greenwich_apparent_sidereal_time

SEA_LEVEL = 0.0
STANDARD_TEMPERATURE = 283.15   # K (10 °C)
STANDARD_PRESSURE = 101325.0    # Pa

# Geometric altitude of the centre of the body at apparent rising/setting, radians.
STANDARD_ALTITUDE_STAR = math.radians(-34.0 / 60.0)
STANDARD_ALTITUDE_SUN = math.radians(-50.0 / 60.0)
STANDARD_ALTITUDE_MOON = math.radians(0.125)

NEVER = -1.0

# Solar parallax at 1 AU, arcsec.
SOLAR_PARALLAX = 8.794


def _gast_rad(jd: float, lunar: Optional[LunarTheory]) -> float:
    return greenwich_apparent_sidereal_time(jd, lunar) * math.pi / 12.0


def parallactic_angle(jd: float, observer: GeographicPoint, point: EquatorialPoint, lunar: Optional[LunarTheory] = None) -> float:
    """q = atan2(sin H, tan φ cos δ - sin δ cos H), radians (Meeus 14.1)."""
    H = local_hour_angle(_gast_rad(jd, lunar), observer, point.right_ascension)
    return math.atan2(
        math.sin(H),
        math.tan(observer.latitude) * math.cos(point.declination) - math.sin(point.declination) * math.cos(H),
    )


def transit(jd: float, observer: GeographicPoint, point: EquatorialPoint, lunar: Optional[LunarTheory] = None) -> float:
    """UT hour [0, 24) of upper transit on the day containing jd: m = (α + L - θ0)/2π (Meeus 15.2)."""
    jd0 = math.floor(jd - 0.5) + 0.5
    m = (point.right_ascension + observer.longitude - _gast_rad(jd0, lunar)) / (2.0 * math.pi)
    return (m % 1.0) * 24.0


def _hour_angle_at_altitude(observer: GeographicPoint, point: EquatorialPoint, altitude: float) -> Optional[float]:
    phi, dec = observer.latitude, point.declination
    cos_h0 = (math.sin(altitude) - math.sin(phi) * math.sin(dec)) / (math.cos(phi) * math.cos(dec))
    if abs(cos_h0) > 1.0:
        return None
    return math.acos(cos_h0)


def rising(
    jd: float,
    observer: GeographicPoint,
    point: EquatorialPoint,
    altitude: float = STANDARD_ALTITUDE_STAR,
    lunar: Optional[LunarTheory] = None,
) -> float:
    """UT hour of rising, or -1 if the body stays above or below `altitude` all day."""
    h0 = _hour_angle_at_altitude(observer, point, altitude)
    if h0 is None:
        return NEVER
    m = transit(jd, observer, point, lunar) - 12.0 * h0 / math.pi
    return m + 24.0 if m < 0.0 else m


def setting(
    jd: float,
    observer: GeographicPoint,
    point: EquatorialPoint,
    altitude: float = STANDARD_ALTITUDE_STAR,
    lunar: Optional[LunarTheory] = None,
) -> float:
    """UT hour of setting, or -1 if the body stays above or below `altitude` all day."""
    h0 = _hour_angle_at_altitude(observer, point, altitude)
    if h0 is None:
        return NEVER
    m = transit(jd, observer, point, lunar) + 12.0 * h0 / math.pi
    return m - 24.0 if m >= 24.0 else m


def atmospheric_refraction(
    altitude_deg: float,
    temperature: float = STANDARD_TEMPERATURE,
    pressure: float = STANDARD_PRESSURE,
) -> float:
    """
    Refraction in arcminutes for a true altitude in degrees (Sæmundsson, Meeus 16.4),
    scaled by (P/101325)(283.15/T) with T in K and P in Pa.
    """
    h = altitude_deg
    r = 1.02 / math.tan(math.radians(h + 10.3 / (h + 5.11)))
    return r * (pressure / STANDARD_PRESSURE) * (STANDARD_TEMPERATURE / temperature)


def equatorial_horizontal_parallax(distance_au: float) -> float:
    """sin π = sin 8.794" / Δ, radians."""
    return math.asin(math.sin(SOLAR_PARALLAX * ARCSEC_TO_RAD) / distance_au)


def diurnal_parallax(
    jd: float,
    observer: GeographicPoint,
    height: float,
    point: EquatorialPoint,
    parallax: float,
    lunar: Optional[LunarTheory] = None,
) -> EquatorialPoint:
    """
    Topocentric place of a body (Meeus 40.2-40.3). height is metres above sea
    level and parallax the equatorial horizontal parallax in radians.
    """
    ratio = EARTH_POLAR_RADIUS_KM / EARTH_EQUATORIAL_RADIUS_KM
    h_rel = height / (EARTH_EQUATORIAL_RADIUS_KM * 1000.0)
    phi = observer.latitude

    u = math.atan(ratio * math.tan(phi))
    rho_sin = ratio * math.sin(u) + h_rel * math.sin(phi)
    rho_cos = math.cos(u) + h_rel * math.cos(phi)

    H = local_hour_angle(_gast_rad(jd, lunar), observer, point.right_ascension)
    sp = math.sin(parallax)
    dec = point.declination
    d_ra = math.atan2(-rho_cos * sp * math.sin(H), math.cos(dec) - rho_cos * sp * math.cos(H))
    dec_t = math.atan2(
        (math.sin(dec) - rho_sin * sp) * math.cos(d_ra),
        math.cos(dec) - rho_cos * sp * math.cos(H),
    )
    return EquatorialPoint(point.right_ascension + d_ra, dec_t)
