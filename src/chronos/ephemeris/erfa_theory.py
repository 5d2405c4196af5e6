"""
chronos.ephemeris.erfa_theory

Planetary theory backed by pyerfa:
  Earth          erfa.epv00 (heliocentric, BCRS-aligned)
  other planets  erfa.plan94 (Simon et al. 1994 mean elements + periodic terms)

Both return equatorial J2000 vectors in AU; they are rotated onto the
ecliptic of J2000 and then precessed to the equinox of date.

Valid ranges: epv00 1900-2100, plan94 1000-3000. Outside them pyerfa
issues ErfaWarning on every call; those are logged once per function and
the (degraded) vector is still returned.
"""

from __future__ import annotations
import logging
import math
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Dict, Set, Tuple

from ..core.time import DAYS_IN_JULIAN_MILLENNIUM, J2000
from ..core.types import Body, EclipticPoint, SphericalPosition
from ..reference.coordinates import rectangular_to_spherical
from ..reference.earth import precession
from ..reference.nutation import ARCSEC_TO_RAD
from . import require_erfa

logger = logging.getLogger(__name__)

VALID_YEARS: Dict[str, Tuple[int, int]] = {"epv00": (1900, 2100), "plan94": (1000, 3000)}

_reported: Set[str] = set()

# Mean obliquity at J2000 (IAU 1976), arcsec.
EPS_J2000_ARCSEC = 84381.448


def equatorial_to_ecliptic_j2000(v) -> Tuple[float, float, float]:
    eps = EPS_J2000_ARCSEC * ARCSEC_TO_RAD
    x, y, z = float(v[0]), float(v[1]), float(v[2])
    y2 = math.cos(eps) * y + math.sin(eps) * z
    z2 = -math.sin(eps) * y + math.cos(eps) * z
    return (x, y2, z2)


def _call_quietly(erfa, fname: str, func: Callable[..., Any], *args):
    """Call an erfa routine, turning out-of-range ErfaWarnings into one log line."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = func(*args)
    for w in caught:
        if issubclass(w.category, erfa.ErfaWarning):
            if fname not in _reported:
                _reported.add(fname)
                lo, hi = VALID_YEARS[fname]
                logger.warning("erfa.%s used outside %d-%d, accuracy degraded: %s", fname, lo, hi, w.message)
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)
    return result


@dataclass(frozen=True)
class ErfaPlanetaryTheory:
    name: str = "erfa"
    needs_fk5_correction: bool = False

    def heliocentric_vector(self, jde: float, body: Body):
        """Heliocentric equatorial J2000 position vector, AU."""
        erfa = require_erfa()
        if body == Body.EARTH:
            pvh, _pvb = _call_quietly(erfa, "epv00", erfa.epv00, J2000, jde - J2000)
            return pvh["p"]
        pv = _call_quietly(erfa, "plan94", erfa.plan94, J2000, jde - J2000, int(body))
        return pv["p"]

    def heliocentric_position(self, t: float, body: Body) -> SphericalPosition:
        jde = J2000 + t * DAYS_IN_JULIAN_MILLENNIUM
        x, y, z = equatorial_to_ecliptic_j2000(self.heliocentric_vector(jde, body))
        lon, lat, r = rectangular_to_spherical(x, y, z)
        p = precession(EclipticPoint(lon, lat), J2000, jde)
        return SphericalPosition(p.longitude, p.latitude, r)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": "erfa epv00/plan94",
            "frame": "ecliptic and equinox of date",
            "needs_fk5_correction": self.needs_fk5_correction,
        }
