from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Tuple


class DeltaTModel(Protocol):
    """ΔT = TT - UT, in seconds, as a function of the decimal year."""
    def delta_t_seconds(self, year_decimal: float) -> float: ...
    def info(self) -> Dict[str, object]: ...


@dataclass(frozen=True)
class QuadraticDeltaT(DeltaTModel):
    """ΔT(year) = a + b*u + c*u^2, u=(year-y0)/100."""
    a: float
    b: float
    c: float
    y0: float = 2000.0

    def delta_t_seconds(self, year_decimal: float) -> float:
        u = (year_decimal - self.y0) / 100.0
        return self.a + self.b * u + self.c * u * u

    def info(self) -> Dict[str, object]:
        return {"type": "quadratic", "a": self.a, "b": self.b, "c": self.c, "y0": self.y0}


@dataclass(frozen=True)
class TableDeltaT(DeltaTModel):
    """
    Breakpoints (year, ΔT seconds, uncertainty seconds) with piecewise linear
    interpolation. Queries past either end reuse the outermost segment.
    """
    knots: Tuple[Tuple[int, float, float], ...]

    def __post_init__(self) -> None:
        if len(self.knots) < 2:
            raise ValueError("ΔT table needs at least two breakpoints")
        for i in range(1, len(self.knots)):
            if not (self.knots[i][0] > self.knots[i - 1][0]):
                raise ValueError("ΔT table years are not strictly increasing")

    @property
    def range(self) -> Tuple[int, int]:
        return (self.knots[0][0], self.knots[-1][0])

    def _segment(self, year_decimal: float) -> int:
        xs = self.knots
        lo, hi = 0, len(xs) - 1
        while lo + 1 < hi:
            mid = (lo + hi) // 2
            if xs[mid][0] <= year_decimal:
                lo = mid
            else:
                hi = mid
        return lo

    def _interp(self, year_decimal: float, col: int) -> float:
        i = self._segment(year_decimal)
        x0, x1 = self.knots[i][0], self.knots[i + 1][0]
        y0, y1 = self.knots[i][col], self.knots[i + 1][col]
        return y0 + (year_decimal - x0) * (y1 - y0) / (x1 - x0)

    def delta_t_seconds(self, year_decimal: float) -> float:
        return self._interp(year_decimal, 1)

    def uncertainty_seconds(self, year_decimal: float) -> float:
        return self._interp(year_decimal, 2)

    def info(self) -> Dict[str, object]:
        return {"type": "table_linear", "n": len(self.knots), "min": self.range[0], "max": self.range[1]}


@dataclass(frozen=True)
class EraTableDeltaT(DeltaTModel):
    """
    Two consecutive tables (e.g. pre-telescopic and telescopic) sharing the
    boundary year, with a quadratic law outside [first.start, second.end].

    The era is chosen from the integer year, the interpolation uses the
    decimal year; the outside law is evaluated at the integer year.
    """
    early: TableDeltaT
    late: TableDeltaT
    outside: QuadraticDeltaT

    def __post_init__(self) -> None:
        if self.early.range[1] != self.late.range[0]:
            raise ValueError("ΔT eras must share their boundary year")

    def covers(self, year: int) -> bool:
        return self.early.range[0] <= year <= self.late.range[1]

    def _table(self, year: int) -> TableDeltaT:
        return self.early if year < self.late.range[0] else self.late

    def delta_t_at(self, year: int, year_decimal: float) -> float:
        if not self.covers(year):
            return self.outside.delta_t_seconds(float(year))
        return self._table(year).delta_t_seconds(year_decimal)

    def uncertainty_at(self, year: int, year_decimal: float) -> Optional[float]:
        if not self.covers(year):
            return None
        return self._table(year).uncertainty_seconds(year_decimal)

    def delta_t_seconds(self, year_decimal: float) -> float:
        year = int(year_decimal // 1)
        return self.delta_t_at(year, year_decimal)

    def info(self) -> Dict[str, object]:
        return {
            "type": "era_table",
            "early": self.early.info(),
            "late": self.late.info(),
            "outside": self.outside.info(),
        }
