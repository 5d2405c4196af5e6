from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol

from .types import Body, DelaunayArguments, SphericalPosition


class PlanetaryTheory(Protocol):
    """
    Heliocentric positions of the eight major planets.

    heliocentric_position(t, body) takes t in Julian millennia (TT) from J2000
    and returns ecliptic longitude/latitude of date (radians) and radius (AU).
    needs_fk5_correction is True when the longitudes are reckoned on the
    dynamical ecliptic (VSOP-style) and must be rotated into FK5.
    """
    name: str
    needs_fk5_correction: bool

    def heliocentric_position(self, t: float, body: Body) -> SphericalPosition: ...
    def info(self) -> Dict[str, Any]: ...


class LunarTheory(Protocol):
    """
    Geocentric Moon. t is in Julian centuries (TT) from J2000.
    geocentric_position returns ecliptic longitude/latitude of date (radians)
    and distance in km.
    """
    name: str

    def delaunay_arguments(self, t: float) -> DelaunayArguments: ...
    def geocentric_position(self, t: float) -> SphericalPosition: ...
    def info(self) -> Dict[str, Any]: ...


@dataclass
class TheoryRegistry:
    _planetary: Dict[str, PlanetaryTheory] = field(default_factory=dict)
    _lunar: Dict[str, LunarTheory] = field(default_factory=dict)

    def planetary(self, name: str) -> PlanetaryTheory:
        if name not in self._planetary:
            raise KeyError(f"Unknown planetary theory '{name}'. Available: {sorted(self._planetary)}")
        return self._planetary[name]

    def lunar(self, name: str) -> LunarTheory:
        if name not in self._lunar:
            raise KeyError(f"Unknown lunar theory '{name}'. Available: {sorted(self._lunar)}")
        return self._lunar[name]

    def list_planetary(self) -> List[str]:
        return sorted(self._planetary.keys())

    def list_lunar(self) -> List[str]:
        return sorted(self._lunar.keys())

    def register_planetary(self, name: str, theory: PlanetaryTheory, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._planetary):
            raise KeyError(f"Planetary theory '{name}' already exists. Use overwrite=True to replace.")
        self._planetary[name] = theory

    def register_lunar(self, name: str, theory: LunarTheory, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._lunar):
            raise KeyError(f"Lunar theory '{name}' already exists. Use overwrite=True to replace.")
        self._lunar[name] = theory
