"""
chronos.reference.earth

Earth orientation and figure: mean/true obliquity, ecliptic precession
between two epochs, annual aberration, the VSOP→FK5 frame correction and the
geodesic distance on the reference ellipsoid.

All angles are radians; epochs are Julian (Ephemeris) Dates.
"""

from __future__ import annotations
import math
from typing import Optional

from ..core.theory import LunarTheory
from ..core.time import DAYS_IN_JULIAN_CENTURY, J2000, T_centuries
from ..core.types import Body, EclipticPoint, Frame, GeographicPoint
from .coordinates import wrap_two_pi
from .nutation import ARCSEC_TO_RAD, nutation_in_obliquity
from .orbital import orbital_elements

# IAU 1976 figure of the Earth.
EARTH_EQUATORIAL_RADIUS_KM = 6378.14
EARTH_POLAR_RADIUS_KM = 6356.755
EARTH_FLATTENING = 1.0 / 298.257
ASTRONOMICAL_UNIT_KM = 149597871.0

# Constant of aberration, arcseconds.
ABERRATION_CONSTANT = 20.49552


def obliquity_of_ecliptic(jde: float) -> float:
    """Mean obliquity ε0, IAU 1976 (Lieske et al. 1977)."""
    T = T_centuries(jde)
    eps = 84381.448 - 46.8150 * T - 0.00059 * T * T + 0.001813 * T * T * T
    return eps * ARCSEC_TO_RAD


def true_obliquity(jde: float, lunar: Optional[LunarTheory] = None) -> float:
    """ε = ε0 + Δε."""
    return obliquity_of_ecliptic(jde) + nutation_in_obliquity(jde, lunar)


def precession(point: EclipticPoint, jd0: float, jd: float) -> EclipticPoint:
    """
    Reduce ecliptic coordinates from the equinox of jd0 to the equinox of jd
    (Meeus 21.5-21.7). η, Π and p are polynomials in
      t0 = (jd0 - J2000)/36525 and t1 = (jd - jd0)/36525.
    """
    t0 = (jd0 - J2000) / DAYS_IN_JULIAN_CENTURY
    t1 = (jd - jd0) / DAYS_IN_JULIAN_CENTURY

    eta = (
        (47.0029 - 0.06603 * t0 + 0.000598 * t0 * t0) * t1
        + (-0.03302 + 0.000598 * t0) * t1 * t1
        + 0.000060 * t1 * t1 * t1
    )
    pi_ = (
        629554.9824 + 3289.4789 * t0 + 0.60622 * t0 * t0
        - (869.8089 + 0.50491 * t0) * t1
        + 0.03536 * t1 * t1
    )
    p = (
        (5029.0966 + 2.22226 * t0 - 0.000042 * t0 * t0) * t1
        + (1.11113 - 0.000042 * t0) * t1 * t1
        - 0.000006 * t1 * t1 * t1
    )
    eta *= ARCSEC_TO_RAD
    pi_ *= ARCSEC_TO_RAD
    p *= ARCSEC_TO_RAD

    lam, beta = point.longitude, point.latitude
    a = math.cos(eta) * math.cos(beta) * math.sin(pi_ - lam) - math.sin(eta) * math.sin(beta)
    b = math.cos(beta) * math.cos(pi_ - lam)
    c = math.cos(eta) * math.sin(beta) + math.sin(eta) * math.cos(beta) * math.sin(pi_ - lam)

    return EclipticPoint(
        longitude=wrap_two_pi(p + pi_ - math.atan2(a, b)),
        latitude=math.asin(max(-1.0, min(1.0, c))),
    )


def aberration(jde: float, point: EclipticPoint, sun_longitude: float) -> EclipticPoint:
    """
    Annual aberration (Δλ, Δβ) of a body at `point` (Meeus 23.2):

      Δλ = (-κ cos(☉ - λ) + e κ cos(ϖ - λ)) / cos β
      Δβ = -κ sin β (sin(☉ - λ) - e sin(ϖ - λ))

    ☉ is the Sun's true geometric longitude; e and ϖ are the eccentricity and
    longitude of perihelion of the Earth's orbit of date.
    """
    el = orbital_elements(jde, Body.EARTH, Frame.OF_DATE)
    e = el.eccentricity
    varpi = el.perihelion_longitude
    k = ABERRATION_CONSTANT * ARCSEC_TO_RAD

    lam, beta = point.longitude, point.latitude
    dlam = (-k * math.cos(sun_longitude - lam) + e * k * math.cos(varpi - lam)) / math.cos(beta)
    dbeta = -k * math.sin(beta) * (math.sin(sun_longitude - lam) - e * math.sin(varpi - lam))
    return EclipticPoint(dlam, dbeta)


def fk5_correction(point: EclipticPoint, jde: float) -> EclipticPoint:
    """
    Rotate a position on the VSOP dynamical ecliptic into FK5 (Meeus 32.3).
    Returns the corrected point, longitude not reduced.
    """
    T = T_centuries(jde)
    lp = point.longitude - math.radians(1.397 * T + 0.00031 * T * T)
    c, s = math.cos(lp), math.sin(lp)
    dlam = -0.09033 + 0.03916 * (c + s) * math.tan(point.latitude)
    dbeta = 0.03916 * (c - s)
    return EclipticPoint(
        point.longitude + dlam * ARCSEC_TO_RAD,
        point.latitude + dbeta * ARCSEC_TO_RAD,
    )


def geodesic_distance(p1: GeographicPoint, p2: GeographicPoint) -> float:
    """Distance in km between two points on the ellipsoid (Andoyer, Meeus ch. 11)."""
    f = (p1.latitude + p2.latitude) / 2.0
    g = (p1.latitude - p2.latitude) / 2.0
    lam = (p1.longitude - p2.longitude) / 2.0

    sg, cg = math.sin(g), math.cos(g)
    sf, cf = math.sin(f), math.cos(f)
    sl, cl = math.sin(lam), math.cos(lam)

    s = sg * sg * cl * cl + cf * cf * sl * sl
    c = cg * cg * cl * cl + sf * sf * sl * sl
    if s == 0.0:
        return 0.0
    omega = math.atan2(math.sqrt(s), math.sqrt(c))
    r = math.sqrt(s * c) / omega
    d = 2.0 * omega * EARTH_EQUATORIAL_RADIUS_KM
    h1 = (3.0 * r - 1.0) / (2.0 * c)
    h2 = (3.0 * r + 1.0) / (2.0 * s)
    fl = EARTH_FLATTENING
    return d * (1.0 + fl * h1 * sf * sf * cg * cg - fl * h2 * cf * cf * sg * sg)
