"""
chronos.reference.coordinates

Stateless frame algebra (Meeus ch. 13). Angles in radians. Observer
longitudes are positive west; azimuth is measured westward from the south;
theta0 is the Greenwich sidereal time in radians.
"""

from __future__ import annotations
import math

from ..core.types import EclipticPoint, EquatorialPoint, GeographicPoint, HorizontalPoint

TWO_PI = 2.0 * math.pi


def wrap_two_pi(x: float) -> float:
    x = math.fmod(x, TWO_PI)
    if x < 0.0:
        x += TWO_PI
    return x


def wrap_pi(x: float) -> float:
    """Reduce to [-π, π)."""
    return wrap_two_pi(x + math.pi) - math.pi


def _asin(x: float) -> float:
    return math.asin(max(-1.0, min(1.0, x)))


def ecliptic_to_equatorial(point: EclipticPoint, eps: float) -> EquatorialPoint:
    lam, beta = point.longitude, point.latitude
    ra = math.atan2(math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps), math.cos(lam))
    dec = _asin(math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam))
    return EquatorialPoint(wrap_two_pi(ra), dec)


def equatorial_to_ecliptic(point: EquatorialPoint, eps: float) -> EclipticPoint:
    ra, dec = point.right_ascension, point.declination
    lam = math.atan2(math.sin(ra) * math.cos(eps) + math.tan(dec) * math.sin(eps), math.cos(ra))
    beta = _asin(math.sin(dec) * math.cos(eps) - math.cos(dec) * math.sin(eps) * math.sin(ra))
    return EclipticPoint(wrap_two_pi(lam), beta)


def local_hour_angle(theta0: float, observer: GeographicPoint, ra: float) -> float:
    """H = θ0 - L - α."""
    return theta0 - observer.longitude - ra


def equatorial_to_horizontal(point: EquatorialPoint, observer: GeographicPoint, theta0: float) -> HorizontalPoint:
    h = local_hour_angle(theta0, observer, point.right_ascension)
    phi, dec = observer.latitude, point.declination
    az = math.atan2(math.sin(h), math.cos(h) * math.sin(phi) - math.tan(dec) * math.cos(phi))
    alt = _asin(math.sin(phi) * math.sin(dec) + math.cos(phi) * math.cos(dec) * math.cos(h))
    return HorizontalPoint(wrap_two_pi(az), alt)


def horizontal_to_equatorial(point: HorizontalPoint, observer: GeographicPoint, theta0: float) -> EquatorialPoint:
    az, alt, phi = point.azimuth, point.elevation, observer.latitude
    h = math.atan2(math.sin(az), math.cos(az) * math.sin(phi) + math.tan(alt) * math.cos(phi))
    dec = _asin(math.sin(phi) * math.sin(alt) - math.cos(phi) * math.cos(alt) * math.cos(az))
    return EquatorialPoint(wrap_two_pi(theta0 - observer.longitude - h), dec)


def spherical_to_rectangular(lon: float, lat: float, r: float):
    cb = math.cos(lat)
    return (r * cb * math.cos(lon), r * cb * math.sin(lon), r * math.sin(lat))


def rectangular_to_spherical(x: float, y: float, z: float):
    """(longitude in [0, 2π), latitude, radius)."""
    rho = math.hypot(x, y)
    return wrap_two_pi(math.atan2(y, x)), math.atan2(z, rho), math.sqrt(rho * rho + z * z)
