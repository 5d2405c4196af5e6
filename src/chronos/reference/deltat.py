"""
chronos.reference.deltat

ΔT = TT − UT in seconds.

Two tabulated eras of (year, ΔT, uncertainty):
  - pre-telescopic, −1000 .. 1700 in 100-year steps,
  - telescopic,      1700 .. 2020 in 10-year steps,
interpolated linearly on the decimal year. Outside −1000..2020 the
Morrison–Stephenson parabola ΔT = −20 + 32·u², u = (year − 1820)/100,
is used.
"""

from __future__ import annotations
from typing import Optional

from ..core.time import year_decimal
from ..core.types import CalendarDate
from ..engines._deltat import EraTableDeltaT, QuadraticDeltaT, TableDeltaT

PRE_TELESCOPE_ERA = TableDeltaT((
    (-1000, 25400.0, 640.0),
    (-900, 23700.0, 590.0),
    (-800, 22000.0, 550.0),
    (-700, 20400.0, 500.0),
    (-600, 18800.0, 460.0),
    (-500, 17190.0, 430.0),
    (-400, 15530.0, 390.0),
    (-300, 14080.0, 360.0),
    (-200, 12790.0, 330.0),
    (-100, 11640.0, 290.0),
    (0, 10580.0, 260.0),
    (100, 9600.0, 240.0),
    (200, 8640.0, 210.0),
    (300, 7680.0, 180.0),
    (400, 6700.0, 160.0),
    (500, 5710.0, 140.0),
    (600, 4740.0, 120.0),
    (700, 3810.0, 100.0),
    (800, 2960.0, 80.0),
    (900, 2200.0, 70.0),
    (1000, 1570.0, 55.0),
    (1100, 1090.0, 40.0),
    (1200, 740.0, 30.0),
    (1300, 490.0, 20.0),
    (1400, 320.0, 20.0),
    (1500, 200.0, 20.0),
    (1600, 120.0, 20.0),
    (1700, 9.0, 5.0),
))

TELESCOPE_ERA = TableDeltaT((
    (1700, 9.0, 5.0),
    (1710, 10.0, 3.0),
    (1720, 11.0, 3.0),
    (1730, 11.0, 3.0),
    (1740, 12.0, 2.0),
    (1750, 13.0, 2.0),
    (1760, 15.0, 2.0),
    (1770, 16.0, 2.0),
    (1780, 17.0, 1.0),
    (1790, 17.0, 1.0),
    (1800, 14.0, 1.0),
    (1810, 13.0, 1.0),
    (1820, 12.0, 1.0),
    (1830, 8.0, 1.0),
    (1840, 6.0, 0.0),
    (1850, 7.0, 0.0),
    (1860, 8.0, 0.0),
    (1870, 2.0, 0.0),
    (1880, -5.0, 0.0),
    (1890, -6.0, 0.0),
    (1900, -3.0, 0.0),
    (1910, 10.0, 0.0),
    (1920, 21.0, 0.0),
    (1930, 24.0, 0.0),
    (1940, 24.0, 0.0),
    (1950, 29.0, 0.0),
    (1960, 33.0, 0.0),
    (1970, 40.0, 0.0),
    (1980, 51.0, 0.0),
    (1990, 57.0, 0.0),
    (2000, 65.0, 0.0),
    (2010, 66.0, 0.0),
    (2020, 71.0, 4.0),
))

# Long-term parabola, Morrison & Stephenson (2004).
LONG_TERM = QuadraticDeltaT(a=-20.0, b=0.0, c=32.0, y0=1820.0)

DELTA_T_MODEL = EraTableDeltaT(early=PRE_TELESCOPE_ERA, late=TELESCOPE_ERA, outside=LONG_TERM)


def delta_t(d: CalendarDate) -> float:
    """ΔT in seconds for a calendar date (UT)."""
    return DELTA_T_MODEL.delta_t_at(d.year, year_decimal(d))


def delta_t_uncertainty(d: CalendarDate) -> Optional[float]:
    """Tabulated 1σ uncertainty of ΔT in seconds, None outside the tables."""
    return DELTA_T_MODEL.uncertainty_at(d.year, year_decimal(d))
