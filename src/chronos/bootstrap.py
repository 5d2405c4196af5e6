from __future__ import annotations
from chronos.core.theory import TheoryRegistry
from chronos.ephemeris.erfa_theory import ErfaPlanetaryTheory
from chronos.ephemeris.kepler import MeanElementTheory
from chronos.reference.lunar import MeeusLunarTheory


def build_registry() -> TheoryRegistry:
    reg = TheoryRegistry()
    for theory in (MeanElementTheory(), ErfaPlanetaryTheory()):
        reg.register_planetary(theory.name, theory)
    reg.register_lunar("meeus", MeeusLunarTheory())
    return reg
