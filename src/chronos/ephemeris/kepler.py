"""
chronos.ephemeris.kepler

Two-body positions from the mean orbital elements of date (Meeus ch. 31,
33). Accuracy is of the order of an arcminute for the inner planets and
degrades for Jupiter..Neptune, whose mutual perturbations are ignored.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.types import Body, Frame, SphericalPosition
from ..reference.coordinates import rectangular_to_spherical, wrap_pi, wrap_two_pi
from ..reference.orbital import orbital_elements_at


def solve_kepler(M: float, e: float, *, max_iter: int = 30, tol: float = 1e-13) -> Tuple[float, int, bool]:
    """
    Newton iteration for E - e sin E = M, starting from E = M.
    Returns (E, iterations, converged).
    """
    E = M
    for k in range(max_iter):
        f = E - e * math.sin(E) - M
        fp = 1.0 - e * math.cos(E)
        dE = f / fp
        E -= dE
        if abs(dE) < tol:
            return E, k + 1, True
    return E, max_iter, False


def heliocentric_from_elements(L: float, a: float, e: float, i: float, node: float, varpi: float) -> Tuple[float, float, float]:
    """Ecliptic rectangular coordinates (AU) of a body on a fixed ellipse."""
    M = wrap_pi(L - varpi)
    E, _, _ = solve_kepler(M, e)
    nu = 2.0 * math.atan2(math.sqrt(1.0 + e) * math.sin(E / 2.0), math.sqrt(1.0 - e) * math.cos(E / 2.0))
    r = a * (1.0 - e * math.cos(E))
    u = nu + varpi - node

    cu, su = math.cos(u), math.sin(u)
    cn, sn = math.cos(node), math.sin(node)
    ci = math.cos(i)
    x = r * (cn * cu - sn * su * ci)
    y = r * (sn * cu + cn * su * ci)
    z = r * su * math.sin(i)
    return x, y, z


@dataclass(frozen=True)
class MeanElementTheory:
    """Planetary theory built on the VSOP82 mean elements referred to the equinox of date."""
    name: str = "kepler"
    needs_fk5_correction: bool = True

    def heliocentric_position(self, t: float, body: Body) -> SphericalPosition:
        el = orbital_elements_at(t, body, Frame.OF_DATE)
        x, y, z = heliocentric_from_elements(
            el.mean_longitude,
            el.semi_major_axis,
            el.eccentricity,
            el.inclination,
            el.ascending_node_longitude,
            el.perihelion_longitude,
        )
        lon, lat, r = rectangular_to_spherical(x, y, z)
        return SphericalPosition(wrap_two_pi(lon), lat, r)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": "mean elements + Kepler",
            "frame": "dynamical ecliptic of date",
            "needs_fk5_correction": self.needs_fk5_correction,
        }
