"""
chronos.reference.solar

Geocentric Sun, equinoxes/solstices and the equation of time (Meeus ch. 25,
27, 28). Positions are referred to the mean ecliptic and equinox of date;
apparent positions include aberration and nutation but no topocentric
corrections.
"""

from __future__ import annotations
import logging
import math
from typing import Optional

from ..core.theory import LunarTheory, PlanetaryTheory
from ..core.time import J2000, DAYS_IN_JULIAN_MILLENNIUM
from ..core.types import Body, CalendarDate, EclipticPoint, Frame, Month, Outcome
from ..engines._solver import fixed_point, iteration_bound, require_converged
from .coordinates import ecliptic_to_equatorial, wrap_two_pi
from .earth import ABERRATION_CONSTANT, fk5_correction, true_obliquity
from .nutation import ARCSEC_TO_RAD, nutation
from .orbital import orbital_elements
from .time_scales import jde_to_calendar_date, to_julian_ephemeris_date

logger = logging.getLogger(__name__)

SEASON_TOLERANCE_DAYS = 1e-7

_EQUINOXES = (0, 2)
_SOLSTICES = (1, 3)


def _millennia(jde: float) -> float:
    return (jde - J2000) / DAYS_IN_JULIAN_MILLENNIUM


def sun_true_position(jde: float, theory: PlanetaryTheory) -> EclipticPoint:
    """Geometric position: the Earth's heliocentric position reversed, FK5 where the theory needs it."""
    earth = theory.heliocentric_position(_millennia(jde), Body.EARTH)
    p = EclipticPoint(wrap_two_pi(earth.longitude + math.pi), -earth.latitude)
    if theory.needs_fk5_correction:
        p = fk5_correction(p, jde)
        p = EclipticPoint(wrap_two_pi(p.longitude), p.latitude)
    return p


def sun_distance_to_earth(jde: float, theory: PlanetaryTheory) -> float:
    """True (geometric) Earth-Sun distance, AU."""
    return theory.heliocentric_position(_millennia(jde), Body.EARTH).distance


def sun_apparent_position(jde: float, theory: PlanetaryTheory, lunar: Optional[LunarTheory] = None) -> EclipticPoint:
    """True position + Δψ - κ/R (Meeus 25.10)."""
    true = sun_true_position(jde, theory)
    R = sun_distance_to_earth(jde, theory)
    dpsi, _deps = nutation(jde, lunar)
    aberr = ABERRATION_CONSTANT * ARCSEC_TO_RAD / R
    return EclipticPoint(wrap_two_pi(true.longitude + dpsi - aberr), true.latitude)


# ============================================================
# Equinoxes and solstices
# ============================================================

def season_outcome(
    year: int,
    k: int,
    theory: PlanetaryTheory,
    lunar: Optional[LunarTheory] = None,
    *,
    max_iterations: Optional[int] = None,
) -> Outcome[float]:
    """
    JDE at which the Sun's apparent longitude reaches k·90°
    (k = 0 March equinox, 1 June solstice, 2 September equinox, 3 December solstice).

    Seeded on the 21st of month 3(k+1); each step adds 58·sin(k·90° - λ) days
    (Meeus 27, "higher accuracy").
    """
    target = k * math.pi / 2.0
    seed = to_julian_ephemeris_date(CalendarDate(21.0, Month((k + 1) * 3), year))

    def step(jde: float) -> float:
        lam = sun_apparent_position(jde, theory, lunar).longitude
        return jde + 58.0 * math.sin(target - lam)

    return fixed_point(
        step,
        seed,
        tol=SEASON_TOLERANCE_DAYS,
        max_iterations=iteration_bound(max_iterations),
        label=f"season {year}/{k}",
    )


def _season_jde(year, k, theory, lunar, max_iterations) -> float:
    return require_converged(
        season_outcome(year, k, theory, lunar, max_iterations=max_iterations),
        f"season search for {year}, k={k}",
    )


def equinox_jde(year: int, which: int, theory: PlanetaryTheory, lunar: Optional[LunarTheory] = None, *, max_iterations: Optional[int] = None) -> float:
    """JDE (TT) of an equinox; which is Equinox.VERNAL or Equinox.AUTUMNAL."""
    if int(which) not in _EQUINOXES:
        raise ValueError(f"not an equinox: {which!r}")
    return _season_jde(year, int(which), theory, lunar, max_iterations)


def solstice_jde(year: int, which: int, theory: PlanetaryTheory, lunar: Optional[LunarTheory] = None, *, max_iterations: Optional[int] = None) -> float:
    """JDE (TT) of a solstice; which is Solstice.SUMMER or Solstice.WINTER."""
    if int(which) not in _SOLSTICES:
        raise ValueError(f"not a solstice: {which!r}")
    return _season_jde(year, int(which), theory, lunar, max_iterations)


def _invalid(year: int) -> CalendarDate:
    return CalendarDate(-1.0, Month.UNKNOWN, year)


def equinox(year: int, which: int, theory: PlanetaryTheory, lunar: Optional[LunarTheory] = None, *, max_iterations: Optional[int] = None) -> CalendarDate:
    """
    UT calendar date of an equinox. A value that is not an Equinox yields the
    invalid-date marker CalendarDate(-1, Month.UNKNOWN, year).
    """
    if int(which) not in _EQUINOXES:
        return _invalid(year)
    return jde_to_calendar_date(_season_jde(year, int(which), theory, lunar, max_iterations))


def solstice(year: int, which: int, theory: PlanetaryTheory, lunar: Optional[LunarTheory] = None, *, max_iterations: Optional[int] = None) -> CalendarDate:
    """UT calendar date of a solstice, or the invalid-date marker."""
    if int(which) not in _SOLSTICES:
        return _invalid(year)
    return jde_to_calendar_date(_season_jde(year, int(which), theory, lunar, max_iterations))


# ============================================================
# Equation of time
# ============================================================

def equation_of_time(jde: float, theory: PlanetaryTheory, lunar: Optional[LunarTheory] = None) -> float:
    """
    E = L0 - α + Δψ cos ε in hours, reduced to [0, 24).

    L0 is the Sun's mean longitude (the Earth's mean longitude of date + π),
    α the apparent right ascension and ε the true obliquity. Values just below
    24h correspond to a small negative equation of time.
    """
    L0 = orbital_elements(jde, Body.EARTH, Frame.OF_DATE).mean_longitude + math.pi
    dpsi, _deps = nutation(jde, lunar)
    eps = true_obliquity(jde, lunar)
    ra = ecliptic_to_equatorial(sun_apparent_position(jde, theory, lunar), eps).right_ascension
    e = wrap_two_pi(L0 - ra + dpsi * math.cos(eps))
    return e * 12.0 / math.pi
