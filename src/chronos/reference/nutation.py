"""
chronos.reference.nutation

1980 IAU theory of nutation (Seidelmann 1982), 106 terms.

    Δψ = Σ (a + b T) sin φ,    Δε = Σ (c + d T) cos φ,
    φ  = i1 l + i2 l' + i3 F + i4 D + i5 Ω

T in Julian centuries from J2000; coefficients in units of 0.0001".
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

from ..core.theory import LunarTheory
from ..core.time import T_centuries
from ..core.types import DelaunayArguments
from ..engines._series import HarmonicSeries, HarmonicTerm, eval_harmonic

ARCSEC_TO_RAD = math.pi / 648000.0
# Table unit (0.0001") to radians.
_UNIT_TO_RAD = ARCSEC_TO_RAD * 1e-4
# One revolution in arcseconds.
_REV = 1296000.0

# (multipliers of l, l', F, D, Ω), period (days), a, b, c, d
_TERMS = (
    ((0, 0, 0, 0, 1), -6798.4, -171996.0, -174.2, 92025.0, 8.9),
    ((0, 0, 2, -2, 2), 182.6, -13187.0, -1.6, 5736.0, -3.1),
    ((0, 0, 2, 0, 2), 13.7, -2274.0, -0.2, 977.0, -0.5),
    ((0, 0, 0, 0, 2), -3399.2, 2062.0, 0.2, -895.0, 0.5),
    ((0, -1, 0, 0, 0), -365.3, -1426.0, 3.4, 54.0, -0.1),
    ((1, 0, 0, 0, 0), 27.6, 712.0, 0.1, -7.0, 0.0),
    ((0, 1, 2, -2, 2), 121.7, -517.0, 1.2, 224.0, -0.6),
    ((0, 0, 2, 0, 1), 13.6, -386.0, -0.4, 200.0, 0.0),
    ((1, 0, 2, 0, 2), 9.1, -301.0, 0.0, 129.0, -0.1),
    ((0, -1, 2, -2, 2), 365.2, 217.0, -0.5, -95.0, 0.3),
    ((-1, 0, 0, 2, 0), 31.8, 158.0, 0.0, -1.0, 0.0),
    ((0, 0, 2, -2, 1), 177.8, 129.0, 0.1, -70.0, 0.0),
    ((-1, 0, 2, 0, 2), 27.1, 123.0, 0.0, -53.0, 0.0),
    ((1, 0, 0, 0, 1), 27.7, 63.0, 0.1, -33.0, 0.0),
    ((0, 0, 0, 2, 0), 14.8, 63.0, 0.0, -2.0, 0.0),
    ((-1, 0, 2, 2, 2), 9.6, -59.0, 0.0, 26.0, 0.0),
    ((-1, 0, 0, 0, 1), -27.4, -58.0, -0.1, 32.0, 0.0),
    ((1, 0, 2, 0, 1), 9.1, -51.0, 0.0, 27.0, 0.0),
    ((-2, 0, 0, 2, 0), -205.9, -48.0, 0.0, 1.0, 0.0),
    ((-2, 0, 2, 0, 1), 1305.5, 46.0, 0.0, -24.0, 0.0),
    ((0, 0, 2, 2, 2), 7.1, -38.0, 0.0, 16.0, 0.0),
    ((2, 0, 2, 0, 2), 6.9, -31.0, 0.0, 13.0, 0.0),
    ((2, 0, 0, 0, 0), 13.8, 29.0, 0.0, -1.0, 0.0),
    ((1, 0, 2, -2, 2), 23.9, 29.0, 0.0, -12.0, 0.0),
    ((0, 0, 2, 0, 0), 13.6, 26.0, 0.0, -1.0, 0.0),
    ((0, 0, 2, -2, 0), 173.3, -22.0, 0.0, 0.0, 0.0),
    ((-1, 0, 2, 0, 1), 27.0, 21.0, 0.0, -10.0, 0.0),
    ((0, 2, 0, 0, 0), 182.6, 17.0, -0.1, 0.0, 0.0),
    ((0, 2, 2, -2, 2), 91.3, -16.0, 0.1, 7.0, 0.0),
    ((-1, 0, 0, 2, 1), 32.0, 16.0, 0.0, -8.0, 0.0),
    ((0, 1, 0, 0, 1), 386.0, -15.0, 0.0, 9.0, 0.0),
    ((1, 0, 0, -2, 1), -31.7, -13.0, 0.0, 7.0, 0.0),
    ((0, -1, 0, 0, 1), -346.6, -12.0, 0.0, 6.0, 0.0),
    ((2, 0, -2, 0, 0), -1095.2, 11.0, 0.0, 0.0, 0.0),
    ((-1, 0, 2, 2, 1), 9.5, -10.0, 0.0, 5.0, 0.0),
    ((1, 0, 2, 2, 2), 5.6, -8.0, 0.0, 3.0, 0.0),
    ((0, -1, 2, 0, 2), 14.2, -7.0, 0.0, 3.0, 0.0),
    ((0, 0, 2, 2, 1), 7.1, -7.0, 0.0, 3.0, 0.0),
    ((1, 1, 0, -2, 0), -34.8, -7.0, 0.0, 0.0, 0.0),
    ((0, 1, 2, 0, 2), 13.2, 7.0, 0.0, -3.0, 0.0),
    ((-2, 0, 0, 2, 1), -199.8, -6.0, 0.0, 3.0, 0.0),
    ((0, 0, 0, 2, 1), 14.8, -6.0, 0.0, 3.0, 0.0),
    ((2, 0, 2, -2, 2), 12.8, 6.0, 0.0, -3.0, 0.0),
    ((1, 0, 0, 2, 0), 9.6, 6.0, 0.0, 0.0, 0.0),
    ((1, 0, 2, -2, 1), 23.9, 6.0, 0.0, -3.0, 0.0),
    ((0, 0, 0, -2, 1), -14.7, -5.0, 0.0, 3.0, 0.0),
    ((0, -1, 2, -2, 1), 346.6, -5.0, 0.0, 3.0, 0.0),
    ((2, 0, 2, 0, 1), 6.9, -5.0, 0.0, 3.0, 0.0),
    ((1, -1, 0, 0, 0), 29.8, 5.0, 0.0, 0.0, 0.0),
    ((1, 0, 0, -1, 0), 411.8, -4.0, 0.0, 0.0, 0.0),
    ((0, 0, 0, 1, 0), 29.5, -4.0, 0.0, 0.0, 0.0),
    ((0, 1, 0, -2, 0), -15.4, -4.0, 0.0, 0.0, 0.0),
    ((1, 0, -2, 0, 0), -26.9, 4.0, 0.0, 0.0, 0.0),
    ((2, 0, 0, -2, 1), 212.3, 4.0, 0.0, -2.0, 0.0),
    ((0, 1, 2, -2, 1), 119.6, 4.0, 0.0, -2.0, 0.0),
    ((1, 1, 0, 0, 0), 25.6, -3.0, 0.0, 0.0, 0.0),
    ((1, -1, 0, -1, 0), -3232.9, -3.0, 0.0, 0.0, 0.0),
    ((-1, -1, 2, 2, 2), 9.8, -3.0, 0.0, 1.0, 0.0),
    ((0, -1, 2, 2, 2), 7.2, -3.0, 0.0, 1.0, 0.0),
    ((1, -1, 2, 0, 2), 9.4, -3.0, 0.0, 1.0, 0.0),
    ((3, 0, 2, 0, 2), 5.5, -3.0, 0.0, 1.0, 0.0),
    ((-2, 0, 2, 0, 2), 1615.7, -3.0, 0.0, 1.0, 0.0),
    ((1, 0, 2, 0, 0), 9.1, 3.0, 0.0, 0.0, 0.0),
    ((-1, 0, 2, 4, 2), 5.8, -2.0, 0.0, 1.0, 0.0),
    ((1, 0, 0, 0, 2), 27.8, -2.0, 0.0, 1.0, 0.0),
    ((-1, 0, 2, -2, 1), -32.6, -2.0, 0.0, 1.0, 0.0),
    ((0, -2, 2, -2, 1), 6786.3, -2.0, 0.0, 1.0, 0.0),
    ((-2, 0, 0, 0, 1), -13.7, -2.0, 0.0, 1.0, 0.0),
    ((2, 0, 0, 0, 1), 13.8, 2.0, 0.0, -1.0, 0.0),
    ((3, 0, 0, 0, 0), 9.2, 2.0, 0.0, 0.0, 0.0),
    ((1, 1, 2, 0, 2), 8.9, 2.0, 0.0, -1.0, 0.0),
    ((0, 0, 2, 1, 2), 9.3, 2.0, 0.0, -1.0, 0.0),
    ((1, 0, 0, 2, 1), 9.6, -1.0, 0.0, 0.0, 0.0),
    ((1, 0, 2, 2, 1), 5.6, -1.0, 0.0, 1.0, 0.0),
    ((1, 1, 0, -2, 1), -34.7, -1.0, 0.0, 0.0, 0.0),
    ((0, 1, 0, 2, 0), 14.2, -1.0, 0.0, 0.0, 0.0),
    ((0, 1, 2, -2, 0), 117.5, -1.0, 0.0, 0.0, 0.0),
    ((0, 1, -2, 2, 0), -329.8, -1.0, 0.0, 0.0, 0.0),
    ((1, 0, -2, 2, 0), 23.8, -1.0, 0.0, 0.0, 0.0),
    ((1, 0, -2, -2, 0), -9.5, -1.0, 0.0, 0.0, 0.0),
    ((1, 0, 2, -2, 0), 32.8, -1.0, 0.0, 0.0, 0.0),
    ((1, 0, 0, -4, 0), -10.1, -1.0, 0.0, 0.0, 0.0),
    ((2, 0, 0, -4, 0), -15.9, -1.0, 0.0, 0.0, 0.0),
    ((0, 0, 2, 4, 2), 4.8, -1.0, 0.0, 0.0, 0.0),
    ((0, 0, 2, -1, 2), 25.4, -1.0, 0.0, 0.0, 0.0),
    ((-2, 0, 2, 4, 2), 7.3, -1.0, 0.0, 1.0, 0.0),
    ((2, 0, 2, 2, 2), 4.7, -1.0, 0.0, 0.0, 0.0),
    ((0, -1, 2, 0, 1), 14.2, -1.0, 0.0, 0.0, 0.0),
    ((0, 0, -2, 0, 1), -13.6, -1.0, 0.0, 0.0, 0.0),
    ((0, 0, 4, -2, 2), 12.7, 1.0, 0.0, 0.0, 0.0),
    ((0, 1, 0, 0, 2), 409.2, 1.0, 0.0, 0.0, 0.0),
    ((1, 1, 2, -2, 2), 22.5, 1.0, 0.0, -1.0, 0.0),
    ((3, 0, 2, -2, 2), 8.7, 1.0, 0.0, 0.0, 0.0),
    ((-2, 0, 2, 2, 2), 14.6, 1.0, 0.0, -1.0, 0.0),
    ((-1, 0, 0, 0, 2), -27.3, 1.0, 0.0, -1.0, 0.0),
    ((0, 0, -2, 2, 1), -169.0, 1.0, 0.0, 0.0, 0.0),
    ((0, 1, 2, 0, 1), 13.1, 1.0, 0.0, 0.0, 0.0),
    ((-1, 0, 4, 0, 2), 9.1, 1.0, 0.0, 0.0, 0.0),
    ((2, 1, 0, -2, 0), 131.7, 1.0, 0.0, 0.0, 0.0),
    ((2, 0, 0, 2, 0), 7.1, 1.0, 0.0, 0.0, 0.0),
    ((2, 0, 2, -2, 1), 12.8, 1.0, 0.0, -1.0, 0.0),
    ((2, 0, -2, 0, 1), -943.2, 1.0, 0.0, 0.0, 0.0),
    ((1, -1, 0, -2, 0), -29.3, 1.0, 0.0, 0.0, 0.0),
    ((-1, 0, 0, 1, 1), -388.3, 1.0, 0.0, 0.0, 0.0),
    ((-1, -1, 0, 2, 1), 35.0, 1.0, 0.0, 0.0, 0.0),
    ((0, 1, 0, 1, 0), 27.3, 1.0, 0.0, 0.0, 0.0),
)

NUTATION_SERIES = HarmonicSeries(
    terms=tuple(HarmonicTerm(mult, a, b, c, d) for mult, _period, a, b, c, d in _TERMS),
    n_args=5,
)


def iau1980_delaunay(T: float) -> DelaunayArguments:
    """Delaunay arguments of the 1980 IAU theory, radians (not reduced)."""
    T2 = T * T
    T3 = T2 * T
    l = 485866.733 + (1325.0 * _REV + 715922.633) * T + 31.310 * T2 + 0.064 * T3
    lp = 1287099.804 + (99.0 * _REV + 1292581.224) * T - 0.577 * T2 - 0.012 * T3
    F = 335778.877 + (1342.0 * _REV + 295263.137) * T - 13.257 * T2 + 0.011 * T3
    D = 1072261.307 + (1236.0 * _REV + 1105601.328) * T - 6.891 * T2 + 0.019 * T3
    return DelaunayArguments(
        l=l * ARCSEC_TO_RAD,
        l_prime=lp * ARCSEC_TO_RAD,
        F=F * ARCSEC_TO_RAD,
        D=D * ARCSEC_TO_RAD,
    )


def lunar_node_longitude(T: float) -> float:
    """Mean longitude of the lunar ascending node referred to the mean equinox of date, radians."""
    omega = 450160.28 - 6962890.539 * T + 7.455 * T * T + 0.008 * T * T * T
    return omega * ARCSEC_TO_RAD


def fundamental_arguments(T: float, lunar: Optional[LunarTheory] = None) -> Tuple[float, ...]:
    da = lunar.delaunay_arguments(T) if lunar is not None else iau1980_delaunay(T)
    return (da.l, da.l_prime, da.F, da.D, lunar_node_longitude(T))


def nutation(jde: float, lunar: Optional[LunarTheory] = None) -> Tuple[float, float]:
    """(Δψ, Δε) in radians at a Julian Ephemeris Date."""
    T = T_centuries(jde)
    dpsi, deps = eval_harmonic(NUTATION_SERIES, fundamental_arguments(T, lunar), T)
    return dpsi * _UNIT_TO_RAD, deps * _UNIT_TO_RAD


def nutation_in_longitude(jde: float, lunar: Optional[LunarTheory] = None) -> float:
    return nutation(jde, lunar)[0]


def nutation_in_obliquity(jde: float, lunar: Optional[LunarTheory] = None) -> float:
    return nutation(jde, lunar)[1]
