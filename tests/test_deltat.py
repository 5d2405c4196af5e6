# tests/test_deltat.py

import pytest

from chronos.core.types import CalendarDate, Month
from chronos.engines._deltat import EraTableDeltaT, QuadraticDeltaT, TableDeltaT
from chronos.reference.deltat import (
    DELTA_T_MODEL,
    LONG_TERM,
    PRE_TELESCOPE_ERA,
    TELESCOPE_ERA,
    delta_t,
    delta_t_uncertainty,
)


def _jan1(year: int) -> CalendarDate:
    return CalendarDate(1.0, Month.JANUARY, year)


def test_tabulated_values():
    assert delta_t(_jan1(2000)) == pytest.approx(65.0, abs=1e-12)
    # halfway between 57 s (1990) and 65 s (2000)
    assert delta_t(_jan1(1995)) == pytest.approx(61.0, abs=1e-9)


def test_interpolation_uses_decimal_year():
    mid_year = CalendarDate(2.0, Month.JULY, 1995)
    assert 61.0 < delta_t(mid_year) < 62.0


def test_era_boundary_is_continuous():
    before = delta_t(CalendarDate(31.0, Month.DECEMBER, 1699))
    after = delta_t(_jan1(1700))
    assert abs(after - before) < 1.0


def test_long_term_parabola_outside_tables():
    # -20 + 32 u^2, u = (year - 1820)/100
    assert delta_t(_jan1(2100)) == pytest.approx(230.88, abs=1e-9)
    assert delta_t(_jan1(-1500)) == pytest.approx(35251.68, abs=1e-6)
    # evaluated at the integer year
    assert delta_t(CalendarDate(1.0, Month.DECEMBER, 2100)) == delta_t(_jan1(2100))


def test_table_end_is_finite():
    # the last tabulated year still interpolates inside the table
    assert delta_t(CalendarDate(31.0, Month.DECEMBER, 2020)) == pytest.approx(71.0, abs=1.0)


def test_uncertainty():
    assert delta_t_uncertainty(_jan1(2100)) is None
    assert delta_t_uncertainty(_jan1(-1500)) is None
    assert delta_t_uncertainty(_jan1(-1000)) == pytest.approx(640.0)
    assert delta_t_uncertainty(_jan1(2000)) == pytest.approx(0.0)


def test_model_structure():
    assert PRE_TELESCOPE_ERA.range == (-1000, 1700)
    assert TELESCOPE_ERA.range == (1700, 2020)
    assert DELTA_T_MODEL.covers(2020)
    assert not DELTA_T_MODEL.covers(2021)
    assert LONG_TERM.delta_t_seconds(1820.0) == -20.0
    assert DELTA_T_MODEL.info()["type"] == "era_table"


def test_table_validation():
    with pytest.raises(ValueError):
        TableDeltaT(((2000, 1.0, 0.0),))
    with pytest.raises(ValueError):
        TableDeltaT(((2000, 1.0, 0.0), (1990, 2.0, 0.0)))
    with pytest.raises(ValueError):
        EraTableDeltaT(
            early=TableDeltaT(((0, 1.0, 0.0), (10, 2.0, 0.0))),
            late=TableDeltaT(((20, 1.0, 0.0), (30, 2.0, 0.0))),
            outside=QuadraticDeltaT(0.0, 0.0, 0.0),
        )
