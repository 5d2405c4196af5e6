from __future__ import annotations
import math
from typing import Optional

from ..core.theory import LunarTheory
from ..core.time import J2000, T_centuries, to_calendar_date, to_julian_date
from ..core.types import CalendarDate
from .deltat import delta_t
from .nutation import nutation
from .earth import obliquity_of_ecliptic

SECONDS_PER_DAY = 86400.0


def to_julian_ephemeris_date(d: CalendarDate) -> float:
    """JDE = JD + ΔT/86400, d given in UT."""
    return to_julian_date(d) + delta_t(d) / SECONDS_PER_DAY


def jde_to_calendar_date(jde: float) -> CalendarDate:
    """
    Calendar date (UT) of a Julian Ephemeris Date. ΔT is looked up at the
    TT calendar date, which differs from the UT one by ΔT at most.
    """
    return to_calendar_date(jde - delta_t(to_calendar_date(jde)) / SECONDS_PER_DAY)


def greenwich_mean_sidereal_time(jd: float) -> float:
    """Mean sidereal time at Greenwich in hours [0, 24), jd in UT (Meeus 12.4)."""
    T = T_centuries(jd)
    theta = (
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * T * T
        - T * T * T / 38710000.0
    )
    theta %= 360.0
    return theta / 15.0


def greenwich_apparent_sidereal_time(jd: float, lunar: Optional[LunarTheory] = None) -> float:
    """Mean sidereal time plus the equation of the equinoxes Δψ cos ε, hours [0, 24)."""
    dpsi, deps = nutation(jd, lunar)
    eps = obliquity_of_ecliptic(jd) + deps
    theta = greenwich_mean_sidereal_time(jd) + math.degrees(dpsi * math.cos(eps)) / 15.0
    return theta % 24.0
