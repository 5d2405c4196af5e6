from __future__ import annotations

import math

import pytest

from chronos.ephemeris.kepler import MeanElementTheory
from chronos.reference.lunar import MeeusLunarTheory


def deg(x: float) -> float:
    return math.degrees(x)


def dms(d: float, m: float = 0.0, s: float = 0.0) -> float:
    """Sexagesimal degrees to radians (sign taken from the first non-zero field)."""
    sign = -1.0 if (d < 0 or (d == 0 and (m < 0 or (m == 0 and s < 0)))) else 1.0
    return sign * math.radians(abs(d) + abs(m) / 60.0 + abs(s) / 3600.0)


@pytest.fixture(scope="session")
def kepler():
    return MeanElementTheory()


@pytest.fixture(scope="session")
def erfa_theory():
    pytest.importorskip("erfa")
    from chronos.ephemeris.erfa_theory import ErfaPlanetaryTheory
    return ErfaPlanetaryTheory()


@pytest.fixture(scope="session")
def meeus_moon():
    return MeeusLunarTheory()
