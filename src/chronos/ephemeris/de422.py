"""
chronos.ephemeris.de422

JPL DE422 as a planetary and lunar theory (jplephem + the de422 data
package). Requires optional deps:
  pip install "chronos-ephem[ephemeris]"

jplephem returns barycentric equatorial J2000 vectors in km; the Moon is
geocentric and the Earth is recovered from the Earth-Moon barycentre.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from ..core.time import DAYS_IN_JULIAN_CENTURY, DAYS_IN_JULIAN_MILLENNIUM, J2000
from ..core.types import Body, DelaunayArguments, EclipticPoint, SphericalPosition
from ..reference.coordinates import rectangular_to_spherical
from ..reference.earth import ASTRONOMICAL_UNIT_KM, precession
from ..reference.nutation import iau1980_delaunay
from . import require_ephemeris
from .erfa_theory import equatorial_to_ecliptic_j2000

# Earth/Moon mass ratio, used when the data package ships no constants.
EMRAT_DEFAULT = 81.30056907419062

_SEGMENTS = {
    Body.MERCURY: "mercury",
    Body.VENUS: "venus",
    Body.MARS: "mars",
    Body.JUPITER: "jupiter",
    Body.SATURN: "saturn",
    Body.URANUS: "uranus",
    Body.NEPTUNE: "neptune",
}


def _load_constants_dict(de422_mod) -> dict:
    # the de422 package keeps constants.npy next to __file__
    import pathlib
    import numpy as np
    p = pathlib.Path(de422_mod.__file__).resolve().parent / "constants.npy"
    if not p.exists():
        return {}
    return dict(np.load(str(p), allow_pickle=True).item())


def _get_emrat(constants: dict) -> float:
    for k in ("EMRAT", "emrat"):
        if k in constants:
            return float(constants[k])
    return EMRAT_DEFAULT


def _to_date(v, jde: float) -> SphericalPosition:
    lon, lat, r = rectangular_to_spherical(*equatorial_to_ecliptic_j2000(v))
    p = precession(EclipticPoint(lon, lat), J2000, jde)
    return SphericalPosition(p.longitude, p.latitude, r)


@dataclass
class DE422Theory:
    """
    Both a PlanetaryTheory and a LunarTheory. Register it under the same name
    in both tables of a TheoryRegistry to use it for the Moon as well.
    """
    eph: object
    emrat: float
    name: str = "de422"
    needs_fk5_correction: bool = False

    @classmethod
    def load(cls) -> "DE422Theory":
        require_ephemeris()
        import de422  # type: ignore
        from jplephem import Ephemeris  # type: ignore

        return cls(eph=Ephemeris(de422), emrat=_get_emrat(_load_constants_dict(de422)))

    def _vec(self, segment: str, jde: float):
        return self.eph.compute(segment, jde)[:3]

    def earth_barycentric(self, jde: float):
        # r_earth = r_emb - r_moon/(EMRAT+1)
        return self._vec("earthmoon", jde) - self._vec("moon", jde) / (self.emrat + 1.0)

    def heliocentric_position(self, t: float, body: Body) -> SphericalPosition:
        jde = J2000 + t * DAYS_IN_JULIAN_MILLENNIUM
        if body == Body.EARTH:
            r = self.earth_barycentric(jde)
        else:
            r = self._vec(_SEGMENTS[body], jde)
        v = (r - self._vec("sun", jde)) / ASTRONOMICAL_UNIT_KM
        return _to_date(v, jde)

    def delaunay_arguments(self, t: float) -> DelaunayArguments:
        return iau1980_delaunay(t)

    def geocentric_position(self, t: float) -> SphericalPosition:
        jde = J2000 + t * DAYS_IN_JULIAN_CENTURY
        return _to_date(self._vec("moon", jde), jde)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": "JPL DE422 via jplephem",
            "emrat": self.emrat,
            "frame": "ecliptic and equinox of date",
        }
