"""
chronos.reference.planets

Geocentric positions of the major planets (Meeus ch. 33) on top of any
PlanetaryTheory, plus distances, phase and visual magnitude (Meeus ch. 41).

The apparent position is reduced in a fixed order:
  1. light-time: τ = 0.0057755183 Δ(t - τ) days, Earth held at t
  2. FK5 correction (only for theories on the dynamical ecliptic)
  3. annual aberration
  4. nutation in longitude
  5. longitude reduced to [0, 2π)

Earth as target is a convention, not a computation: position (0, 0),
distance 0 and -1 for phase angle, illuminated fraction and magnitude.
"""

from __future__ import annotations
import logging
import math
from typing import Optional, Tuple

from ..core.theory import LunarTheory, PlanetaryTheory
from ..core.time import DAYS_IN_JULIAN_MILLENNIUM, J2000, T_centuries
from ..core.types import Body, EclipticPoint, Outcome, SphericalPosition
from ..engines._solver import fixed_point, iteration_bound, require_converged
from .coordinates import rectangular_to_spherical, spherical_to_rectangular, wrap_two_pi
from .earth import aberration, fk5_correction
from .nutation import nutation_in_longitude
from .solar import sun_distance_to_earth, sun_true_position

logger = logging.getLogger(__name__)

# Light travel time for 1 AU, days.
LIGHT_TIME_DAYS_PER_AU = 0.0057755183
LIGHT_TIME_TOLERANCE_DAYS = 1e-7

EARTH_SENTINEL = -1.0


def _millennia(jde: float) -> float:
    return (jde - J2000) / DAYS_IN_JULIAN_MILLENNIUM


def _geocentric(body_pos: SphericalPosition, earth_pos: SphericalPosition) -> Tuple[float, float, float]:
    bx, by, bz = spherical_to_rectangular(body_pos.longitude, body_pos.latitude, body_pos.distance)
    ex, ey, ez = spherical_to_rectangular(earth_pos.longitude, earth_pos.latitude, earth_pos.distance)
    return rectangular_to_spherical(bx - ex, by - ey, bz - ez)


def planet_true_position(jde: float, body: Body, theory: PlanetaryTheory) -> EclipticPoint:
    """Geometric geocentric position (no light-time), FK5 where the theory needs it."""
    if body == Body.EARTH:
        return EclipticPoint(0.0, 0.0)
    t = _millennia(jde)
    lon, lat, _r = _geocentric(theory.heliocentric_position(t, body), theory.heliocentric_position(t, Body.EARTH))
    p = EclipticPoint(lon, lat)
    if theory.needs_fk5_correction:
        p = fk5_correction(p, jde)
    return EclipticPoint(wrap_two_pi(p.longitude), p.latitude)


def light_time_outcome(
    jde: float,
    body: Body,
    theory: PlanetaryTheory,
    *,
    max_iterations: Optional[int] = None,
) -> Outcome[float]:
    """Light-time τ (days) for a planet seen from the Earth at jde."""
    t = _millennia(jde)
    earth = theory.heliocentric_position(t, Body.EARTH)

    def step(tau: float) -> float:
        pos = theory.heliocentric_position(t - tau / DAYS_IN_JULIAN_MILLENNIUM, body)
        return LIGHT_TIME_DAYS_PER_AU * _geocentric(pos, earth)[2]

    return fixed_point(
        step,
        0.0,
        tol=LIGHT_TIME_TOLERANCE_DAYS,
        max_iterations=iteration_bound(max_iterations),
        label=f"light-time {body.name}",
    )


def light_time(jde: float, body: Body, theory: PlanetaryTheory, *, max_iterations: Optional[int] = None) -> float:
    if body == Body.EARTH:
        return 0.0
    return require_converged(
        light_time_outcome(jde, body, theory, max_iterations=max_iterations),
        f"light-time iteration for {body.name}",
    )


def planet_astrometric_heliocentric(
    jde: float,
    body: Body,
    theory: PlanetaryTheory,
    *,
    max_iterations: Optional[int] = None,
) -> SphericalPosition:
    """Heliocentric position of the body at the time the observed light left it."""
    tau = light_time(jde, body, theory, max_iterations=max_iterations)
    return theory.heliocentric_position(_millennia(jde) - tau / DAYS_IN_JULIAN_MILLENNIUM, body)


def planet_astrometric_geocentric(
    jde: float,
    body: Body,
    theory: PlanetaryTheory,
    *,
    max_iterations: Optional[int] = None,
) -> EclipticPoint:
    """Light-time corrected geometric geocentric position: no aberration, no nutation."""
    earth = theory.heliocentric_position(_millennia(jde), Body.EARTH)
    retarded = planet_astrometric_heliocentric(jde, body, theory, max_iterations=max_iterations)
    lon, lat, _delta = _geocentric(retarded, earth)
    p = EclipticPoint(lon, lat)
    if theory.needs_fk5_correction:
        p = fk5_correction(p, jde)
    return p


def planet_apparent_position(
    jde: float,
    body: Body,
    theory: PlanetaryTheory,
    lunar: Optional[LunarTheory] = None,
    *,
    max_iterations: Optional[int] = None,
) -> EclipticPoint:
    if body == Body.EARTH:
        return EclipticPoint(0.0, 0.0)

    p = planet_astrometric_geocentric(jde, body, theory, max_iterations=max_iterations)
    d = aberration(jde, p, sun_true_position(jde, theory).longitude)
    lon = p.longitude + d.longitude + nutation_in_longitude(jde, lunar)
    return EclipticPoint(wrap_two_pi(lon), p.latitude + d.latitude)


def planet_distance_to_sun(jde: float, body: Body, theory: PlanetaryTheory) -> float:
    """True heliocentric distance, AU."""
    return theory.heliocentric_position(_millennia(jde), body).distance


def planet_distance_to_earth(jde: float, body: Body, theory: PlanetaryTheory) -> float:
    """True geocentric distance, AU; 0 for the Earth."""
    if body == Body.EARTH:
        return 0.0
    t = _millennia(jde)
    return _geocentric(theory.heliocentric_position(t, body), theory.heliocentric_position(t, Body.EARTH))[2]


def planet_phase_angle(jde: float, body: Body, theory: PlanetaryTheory) -> float:
    """Sun-planet-Earth angle by the law of cosines, radians; -1 for the Earth."""
    if body == Body.EARTH:
        return EARTH_SENTINEL
    r = planet_distance_to_sun(jde, body, theory)
    delta = planet_distance_to_earth(jde, body, theory)
    R = sun_distance_to_earth(jde, theory)
    c = (r * r + delta * delta - R * R) / (2.0 * r * delta)
    return math.acos(max(-1.0, min(1.0, c)))


def planet_illuminated_fraction(jde: float, body: Body, theory: PlanetaryTheory) -> float:
    if body == Body.EARTH:
        return EARTH_SENTINEL
    return (1.0 + math.cos(planet_phase_angle(jde, body, theory))) / 2.0


# ============================================================
# Saturn's ring (Meeus ch. 45)
# ============================================================

def _ring_plane(T: float) -> Tuple[float, float]:
    """Inclination and ascending node of the ring plane, radians."""
    i = 28.075216 - 0.012998 * T + 0.000004 * T * T
    node = 169.508470 + 1.394681 * T + 0.000412 * T * T
    return math.radians(i), math.radians(node)


def _to_ring_plane(lam: float, beta: float, i: float, node: float) -> EclipticPoint:
    s = math.sin(lam - node)
    u = math.atan2(
        math.sin(i) * math.sin(beta) + math.cos(i) * math.cos(beta) * s,
        math.cos(beta) * math.cos(lam - node),
    )
    b = math.asin(max(-1.0, min(1.0, math.sin(i) * math.cos(beta) * s - math.cos(i) * math.sin(beta))))
    return EclipticPoint(wrap_two_pi(u), b)


def saturnicentric_earth_position(
    jde: float,
    theory: PlanetaryTheory,
    *,
    max_iterations: Optional[int] = None,
) -> EclipticPoint:
    """Saturnicentric longitude U1 and latitude B of the Earth, referred to the ring plane."""
    i, node = _ring_plane(T_centuries(jde))
    p = planet_astrometric_geocentric(jde, Body.SATURN, theory, max_iterations=max_iterations)
    return _to_ring_plane(p.longitude, p.latitude, i, node)


def saturnicentric_sun_position(
    jde: float,
    theory: PlanetaryTheory,
    *,
    max_iterations: Optional[int] = None,
) -> EclipticPoint:
    """Saturnicentric longitude U2 and latitude B' of the Sun, referred to the ring plane."""
    T = T_centuries(jde)
    i, node = _ring_plane(T)
    orbit_node = math.radians(113.6655 + 0.8771 * T)

    sat = planet_astrometric_heliocentric(jde, Body.SATURN, theory, max_iterations=max_iterations)
    lam = sat.longitude - math.radians(0.01759) / sat.distance
    beta = sat.latitude - math.radians(0.000764) * math.cos(sat.longitude - orbit_node) / sat.distance
    return _to_ring_plane(lam, beta, i, node)


def planet_apparent_magnitude(
    jde: float,
    body: Body,
    theory: PlanetaryTheory,
    *,
    max_iterations: Optional[int] = None,
) -> float:
    """
    Visual magnitude (Meeus 41, Astronomical Almanac formulae). i is the phase
    angle in degrees; Saturn adds the ring terms in ΔU (degrees, [0, 180]) and B.
    """
    if body == Body.EARTH:
        return EARTH_SENTINEL

    r = planet_distance_to_sun(jde, body, theory)
    delta = planet_distance_to_earth(jde, body, theory)
    i = math.degrees(planet_phase_angle(jde, body, theory))
    base = 5.0 * math.log10(r * delta)

    if body == Body.MERCURY:
        return -0.42 + base + 0.0380 * i - 0.000273 * i * i + 0.000002 * i * i * i
    if body == Body.VENUS:
        return -4.40 + base + 0.0009 * i + 0.000239 * i * i - 0.00000065 * i * i * i
    if body == Body.MARS:
        return -1.52 + base + 0.016 * i
    if body == Body.JUPITER:
        return -9.40 + base + 0.005 * i
    if body == Body.SATURN:
        earth = saturnicentric_earth_position(jde, theory, max_iterations=max_iterations)
        sun = saturnicentric_sun_position(jde, theory, max_iterations=max_iterations)
        du = abs(math.degrees(sun.longitude - earth.longitude)) % 360.0
        if du > 180.0:
            du = 360.0 - du
        b = abs(earth.latitude)
        return -8.88 + base + 0.044 * du - 2.60 * math.sin(b) + 1.25 * math.sin(b) ** 2
    if body == Body.URANUS:
        return -7.19 + base
    if body == Body.NEPTUNE:
        return -6.87 + base
    raise ValueError(f"unknown body: {body!r}")
