"""
chronos.reference.lunar

Geocentric Moon.

MeeusLunarTheory is the truncated ELP-2000/82 series of Meeus ch. 47
(60 terms in longitude and distance, 60 in latitude), accurate to about 10"
in longitude and 4" in latitude. The moon_* functions combine any
LunarTheory with the solar position for phase and bright-limb geometry.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.theory import LunarTheory, PlanetaryTheory
from ..core.time import T_centuries
from ..core.types import DelaunayArguments, EclipticPoint, SphericalPosition
from .coordinates import ecliptic_to_equatorial, wrap_two_pi
from .earth import ASTRONOMICAL_UNIT_KM, true_obliquity
from .nutation import nutation_in_longitude
from .solar import sun_apparent_position, sun_distance_to_earth


# (D, M, M', F, Σl in 1e-6 deg, Σr in 1e-3 km), Meeus table 47.A
LUNAR_LON_DIST_TERMS: Tuple[Tuple[int, int, int, int, int, int], ...] = (
    (0, 0, 1, 0, 6288774, -20905355),
    (2, 0, -1, 0, 1274027, -3699111),
    (2, 0, 0, 0, 658314, -2955968),
    (0, 0, 2, 0, 213618, -569925),
    (0, 1, 0, 0, -185116, 48888),
    (0, 0, 0, 2, -114332, -3149),
    (2, 0, -2, 0, 58793, 246158),
    (2, -1, -1, 0, 57066, -152138),
    (2, 0, 1, 0, 53322, -170733),
    (2, -1, 0, 0, 45758, -204586),
    (0, 1, -1, 0, -40923, -129620),
    (1, 0, 0, 0, -34720, 108743),
    (0, 1, 1, 0, -30383, 104755),
    (2, 0, 0, -2, 15327, 10321),
    (0, 0, 1, 2, -12528, 0),
    (0, 0, 1, -2, 10980, 79661),
    (4, 0, -1, 0, 10675, -34782),
    (0, 0, 3, 0, 10034, -23210),
    (4, 0, -2, 0, 8548, -21636),
    (2, 1, -1, 0, -7888, 24208),
    (2, 1, 0, 0, -6766, 30824),
    (1, 0, -1, 0, -5163, -8379),
    (1, 1, 0, 0, 4987, -16675),
    (2, -1, 1, 0, 4036, -12831),
    (2, 0, 2, 0, 3994, -10445),
    (4, 0, 0, 0, 3861, -11650),
    (2, 0, -3, 0, 3665, 14403),
    (0, 1, -2, 0, -2689, -7003),
    (2, 0, -1, 2, -2602, 0),
    (2, -1, -2, 0, 2390, 10056),
    (1, 0, 1, 0, -2348, 6322),
    (2, -2, 0, 0, 2236, -9884),
    (0, 1, 2, 0, -2120, 5751),
    (0, 2, 0, 0, -2069, 0),
    (2, -2, -1, 0, 2048, -4950),
    (2, 0, 1, -2, -1773, 4130),
    (2, 0, 0, 2, -1595, 0),
    (4, -1, -1, 0, 1215, -3958),
    (0, 0, 2, 2, -1110, 0),
    (3, 0, -1, 0, -892, 3258),
    (2, 1, 1, 0, -810, 2616),
    (4, -1, -2, 0, 759, -1897),
    (0, 2, -1, 0, -713, -2117),
    (2, 2, -1, 0, -700, 2354),
    (2, 1, -2, 0, 691, 0),
    (2, -1, 0, -2, 596, 0),
    (4, 0, 1, 0, 549, -1423),
    (0, 0, 4, 0, 537, -1117),
    (4, -1, 0, 0, 520, -1571),
    (1, 0, -2, 0, -487, -1739),
    (2, 1, 0, -2, -399, 0),
    (0, 0, 2, -2, -381, -4421),
    (1, 1, 1, 0, 351, 0),
    (3, 0, -2, 0, -340, 0),
    (4, 0, -3, 0, 330, 0),
    (2, -1, 2, 0, 327, 0),
    (0, 2, 1, 0, -323, 1165),
    (1, 1, -1, 0, 299, 0),
    (2, 0, 3, 0, 294, 0),
    (2, 0, -1, -2, 0, 8752),
)

# (D, M, M', F, Σb in 1e-6 deg), Meeus table 47.B
LUNAR_LAT_TERMS: Tuple[Tuple[int, int, int, int, int], ...] = (
    (0, 0, 0, 1, 5128122),
    (0, 0, 1, 1, 280602),
    (0, 0, 1, -1, 277693),
    (2, 0, 0, -1, 173237),
    (2, 0, -1, 1, 55413),
    (2, 0, -1, -1, 46271),
    (2, 0, 0, 1, 32573),
    (0, 0, 2, 1, 17198),
    (2, 0, 1, -1, 9266),
    (0, 0, 2, -1, 8822),
    (2, -1, 0, -1, 8216),
    (2, 0, -2, -1, 4324),
    (2, 0, 1, 1, 4200),
    (2, 1, 0, -1, -3359),
    (2, -1, -1, 1, 2463),
    (2, -1, 0, 1, 2211),
    (2, -1, -1, -1, 2065),
    (0, 1, -1, -1, -1870),
    (4, 0, -1, -1, 1828),
    (0, 1, 0, 1, -1794),
    (0, 0, 0, 3, -1749),
    (0, 1, -1, 1, -1565),
    (1, 0, 0, 1, -1491),
    (0, 1, 1, 1, -1475),
    (0, 1, 1, -1, -1410),
    (0, 1, 0, -1, -1344),
    (1, 0, 0, -1, -1335),
    (0, 0, 3, 1, 1107),
    (4, 0, 0, -1, 1021),
    (4, 0, -1, 1, 833),
    (0, 0, 1, -3, 777),
    (4, 0, -2, 1, 671),
    (2, 0, 0, -3, 607),
    (2, 0, 2, -1, 596),
    (2, -1, 1, -1, 491),
    (2, 0, -2, 1, -451),
    (0, 0, 3, -1, 439),
    (2, 0, 2, 1, 422),
    (2, 0, -3, -1, 421),
    (2, 1, -1, 1, -366),
    (2, 1, 0, 1, -351),
    (4, 0, 0, 1, 331),
    (2, -1, 1, 1, 315),
    (2, -2, 0, -1, 302),
    (0, 0, 1, 3, -283),
    (2, 1, 1, -1, -229),
    (1, 1, 0, -1, 223),
    (1, 1, 0, 1, 223),
    (0, 1, -2, -1, -220),
    (2, 1, -1, -1, -220),
    (1, 0, 1, 1, -185),
    (2, -1, -2, -1, 181),
    (0, 1, 2, 1, -177),
    (4, 0, -2, -1, 176),
    (4, -1, -1, -1, 166),
    (1, 0, 1, -1, -164),
    (4, 0, 1, -1, 132),
    (1, 0, -1, -1, -119),
    (4, -1, 0, -1, 115),
    (2, -2, 0, 1, 107),
)

# Mean distance of the Moon, km.
MEAN_DISTANCE_KM = 385000.56


@dataclass(frozen=True)
class LunarArguments:
    """Mean arguments of the Moon (degrees, not reduced)."""
    Lp_deg: float
    D_deg: float
    M_deg: float
    Mp_deg: float
    F_deg: float


def lunar_arguments(T: float) -> LunarArguments:
    """
    Meeus 47.1-47.5:
      L' = 218.3164477 + 481267.88123421 T - 0.0015786 T^2 + T^3/538841 - T^4/65194000
      D  = 297.8501921 + 445267.1114034  T - 0.0018819 T^2 + T^3/545868  - T^4/113065000
      M  = 357.5291092 + 35999.0502909  T - 0.0001536 T^2 + T^3/24490000
      M' = 134.9633964 + 477198.8675055 T + 0.0087414 T^2 + T^3/69699   - T^4/14712000
      F  = 93.2720950  + 483202.0175233 T - 0.0036539 T^2 - T^3/3526000 + T^4/863310000
    """
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2
    return LunarArguments(
        Lp_deg=218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0,
        D_deg=297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0,
        M_deg=357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0,
        Mp_deg=134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0,
        F_deg=93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0,
    )


def eccentricity_factor(T: float) -> float:
    """E = 1 - 0.002516 T - 0.0000074 T^2 (decreasing eccentricity of the Earth's orbit)."""
    return 1.0 - 0.002516 * T - 0.0000074 * T * T


@dataclass(frozen=True)
class MeeusLunarTheory:
    name: str = "meeus"

    def delaunay_arguments(self, t: float) -> DelaunayArguments:
        a = lunar_arguments(t)
        return DelaunayArguments(
            l=math.radians(a.Mp_deg),
            l_prime=math.radians(a.M_deg),
            F=math.radians(a.F_deg),
            D=math.radians(a.D_deg),
        )

    def geocentric_position(self, t: float) -> SphericalPosition:
        a = lunar_arguments(t)
        E = eccentricity_factor(t)
        E_pow = (1.0, E, E * E)

        Lp = math.radians(a.Lp_deg)
        D = math.radians(a.D_deg)
        M = math.radians(a.M_deg)
        Mp = math.radians(a.Mp_deg)
        F = math.radians(a.F_deg)

        sum_l = 0.0
        sum_r = 0.0
        for d, m, mp, f, cl, cr in LUNAR_LON_DIST_TERMS:
            arg = d * D + m * M + mp * Mp + f * F
            e = E_pow[abs(m)]
            sum_l += e * cl * math.sin(arg)
            sum_r += e * cr * math.cos(arg)

        sum_b = 0.0
        for d, m, mp, f, cb in LUNAR_LAT_TERMS:
            arg = d * D + m * M + mp * Mp + f * F
            sum_b += E_pow[abs(m)] * cb * math.sin(arg)

        # additive terms: Venus (A1), Jupiter (A2), flattening of the Earth (L' - F)
        A1 = math.radians(119.75 + 131.849 * t)
        A2 = math.radians(53.09 + 479264.290 * t)
        A3 = math.radians(313.45 + 481266.484 * t)
        sum_l += 3958.0 * math.sin(A1) + 1962.0 * math.sin(Lp - F) + 318.0 * math.sin(A2)
        sum_b += (
            -2235.0 * math.sin(Lp)
            + 382.0 * math.sin(A3)
            + 175.0 * math.sin(A1 - F)
            + 175.0 * math.sin(A1 + F)
            + 127.0 * math.sin(Lp - Mp)
            - 115.0 * math.sin(Lp + Mp)
        )

        lon = wrap_two_pi(Lp + math.radians(sum_l * 1e-6))
        lat = math.radians(sum_b * 1e-6)
        return SphericalPosition(lon, lat, MEAN_DISTANCE_KM + sum_r / 1000.0)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": "truncated ELP-2000/82 (Meeus ch. 47)",
            "terms": {"longitude/distance": len(LUNAR_LON_DIST_TERMS), "latitude": len(LUNAR_LAT_TERMS)},
        }


# ============================================================
# Moon as seen from the Earth
# ============================================================

def moon_true_position(jde: float, lunar: LunarTheory) -> EclipticPoint:
    sp = lunar.geocentric_position(T_centuries(jde))
    return EclipticPoint(wrap_two_pi(sp.longitude), sp.latitude)


def moon_apparent_position(jde: float, lunar: LunarTheory) -> EclipticPoint:
    """True position plus nutation in longitude. Light-time is already in the lunar series."""
    p = moon_true_position(jde, lunar)
    return EclipticPoint(wrap_two_pi(p.longitude + nutation_in_longitude(jde, lunar)), p.latitude)


def moon_distance_to_earth(jde: float, lunar: LunarTheory) -> float:
    """Centre-to-centre distance in AU."""
    return lunar.geocentric_position(T_centuries(jde)).distance / ASTRONOMICAL_UNIT_KM


def moon_phase_angle(jde: float, lunar: LunarTheory, theory: PlanetaryTheory) -> float:
    """Selenocentric elongation of the Earth from the Sun (Meeus 48.2-48.3), radians."""
    moon = moon_apparent_position(jde, lunar)
    sun = sun_apparent_position(jde, theory, lunar)
    cos_psi = math.cos(moon.latitude) * math.cos(moon.longitude - sun.longitude)
    psi = math.acos(max(-1.0, min(1.0, cos_psi)))
    R = sun_distance_to_earth(jde, theory)
    delta = moon_distance_to_earth(jde, lunar)
    return math.atan2(R * math.sin(psi), delta - R * math.cos(psi))


def moon_illuminated_fraction(jde: float, lunar: LunarTheory, theory: PlanetaryTheory) -> float:
    return (1.0 + math.cos(moon_phase_angle(jde, lunar, theory))) / 2.0


def moon_bright_limb_position_angle(jde: float, lunar: LunarTheory, theory: PlanetaryTheory) -> float:
    """Position angle of the midpoint of the bright limb, from north through east, [0, 2π) (Meeus 48.5)."""
    eps = true_obliquity(jde, lunar)
    sun = ecliptic_to_equatorial(sun_apparent_position(jde, theory, lunar), eps)
    moon = ecliptic_to_equatorial(moon_apparent_position(jde, lunar), eps)
    d_ra = sun.right_ascension - moon.right_ascension
    chi = math.atan2(
        math.cos(sun.declination) * math.sin(d_ra),
        math.sin(sun.declination) * math.cos(moon.declination)
        - math.cos(sun.declination) * math.sin(moon.declination) * math.cos(d_ra),
    )
    return wrap_two_pi(chi)
