from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..core.types import OrbitalElements


# ============================================================
# Polynomial-in-time, multi-channel (mean orbital elements)
# ============================================================

@dataclass(frozen=True)
class PolySeries:
    """p(t) = Σ c_i t^i, i = 0..n."""
    coeff: Tuple[float, ...]

    def eval(self, t: float) -> float:
        return eval_poly(self.coeff, t)


def eval_poly(coeff: Sequence[float], t: float) -> float:
    acc = 0.0
    for c in reversed(coeff):
        acc = acc * t + c
    return acc


@dataclass(frozen=True)
class ElementChannels:
    """Raw VSOP82 ecliptic variables at one instant."""
    a: float
    lam: float
    k: float
    h: float
    q: float
    p: float


@dataclass(frozen=True)
class ElementSeries:
    """
    Six polynomial channels, in the order a, λ, k, h, q, p, where
        k = e cos ϖ,  h = e sin ϖ,  q = sin(i/2) cos Ω,  p = sin(i/2) sin Ω.
    t is in Julian millennia from J2000.
    """
    a: PolySeries
    lam: PolySeries
    k: PolySeries
    h: PolySeries
    q: PolySeries
    p: PolySeries

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "ElementSeries":
        if len(rows) != 6:
            raise ValueError(f"expected 6 channels (a, λ, k, h, q, p), got {len(rows)}")
        return cls(*(PolySeries(tuple(float(c) for c in r)) for r in rows))

    @property
    def order(self) -> int:
        return max(len(s.coeff) for s in (self.a, self.lam, self.k, self.h, self.q, self.p))

    def channels(self, t: float) -> ElementChannels:
        return ElementChannels(
            a=self.a.eval(t),
            lam=self.lam.eval(t),
            k=self.k.eval(t),
            h=self.h.eval(t),
            q=self.q.eval(t),
            p=self.p.eval(t),
        )

    def elements(self, t: float) -> OrbitalElements:
        return orbital_elements_from_channels(self.channels(t))


def orbital_elements_from_channels(ch: ElementChannels) -> OrbitalElements:
    """
    Solve k, h, q, p for e, ϖ, i, Ω:
        ϖ = atan2(h, k),  e = k / cos ϖ,
        Ω = atan2(p, q),  i = 2 asin(q / cos Ω).
    λ and a are taken directly. λ is not reduced.
    """
    varpi = math.atan2(ch.h, ch.k)
    node = math.atan2(ch.p, ch.q)
    c_varpi = math.cos(varpi)
    c_node = math.cos(node)
    # cos(ϖ) or cos(Ω) vanish only when the other component carries the value.
    e = ch.k / c_varpi if abs(c_varpi) > 1e-12 else ch.h / math.sin(varpi)
    s = ch.q / c_node if abs(c_node) > 1e-12 else ch.p / math.sin(node)
    return OrbitalElements(
        mean_longitude=ch.lam,
        semi_major_axis=ch.a,
        eccentricity=e,
        inclination=2.0 * math.asin(s),
        ascending_node_longitude=node,
        perihelion_longitude=varpi,
    )


# ============================================================
# Harmonic series (nutation)
# ============================================================

@dataclass(frozen=True)
class HarmonicTerm:
    """
    One term: φ = Σ mult_j * arg_j;
        sin part (a + b t) sin φ,  cos part (c + d t) cos φ.
    """
    mult: Tuple[int, ...]
    sin_a: float
    sin_b: float
    cos_a: float
    cos_b: float


@dataclass(frozen=True)
class HarmonicSeries:
    terms: Tuple[HarmonicTerm, ...]
    n_args: int

    def __post_init__(self) -> None:
        for term in self.terms:
            if len(term.mult) != self.n_args:
                raise ValueError(f"term {term} does not have {self.n_args} multipliers")


def eval_lincomb(mult: Sequence[int], args: Sequence[float]) -> float:
    s = 0.0
    for k, a in zip(mult, args):
        if k:
            s += k * a
    return s


def eval_harmonic(series: HarmonicSeries, args: Sequence[float], t: float) -> Tuple[float, float]:
    """
    Returns (Σ (a + b t) sin φ, Σ (c + d t) cos φ) in the unit of the table
    coefficients. args must be in radians.
    """
    if len(args) != series.n_args:
        raise ValueError(f"expected {series.n_args} arguments, got {len(args)}")
    s_sum = 0.0
    c_sum = 0.0
    for term in series.terms:
        phi = eval_lincomb(term.mult, args)
        s_sum += (term.sin_a + term.sin_b * t) * math.sin(phi)
        c_sum += (term.cos_a + term.cos_b * t) * math.cos(phi)
    return s_sum, c_sum
