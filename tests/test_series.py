# tests/test_series.py

import math

import pytest

from chronos.engines._series import (
    ElementChannels,
    ElementSeries,
    HarmonicSeries,
    HarmonicTerm,
    eval_harmonic,
    eval_lincomb,
    eval_poly,
    orbital_elements_from_channels,
)


def test_eval_poly_horner():
    assert eval_poly((1.0, 2.0, 3.0), 2.0) == 17.0
    assert eval_poly((), 5.0) == 0.0
    assert eval_poly((4.0,), 123.0) == 4.0


def test_elements_from_channels():
    e, varpi = 0.2, math.radians(77.0)
    i, node = math.radians(7.0), math.radians(48.0)
    ch = ElementChannels(
        a=0.387,
        lam=3.5,
        k=e * math.cos(varpi),
        h=e * math.sin(varpi),
        q=math.sin(i / 2) * math.cos(node),
        p=math.sin(i / 2) * math.sin(node),
    )
    el = orbital_elements_from_channels(ch)
    assert el.eccentricity == pytest.approx(e, abs=1e-12)
    assert el.perihelion_longitude == pytest.approx(varpi, abs=1e-12)
    assert el.inclination == pytest.approx(i, abs=1e-12)
    assert el.ascending_node_longitude == pytest.approx(node, abs=1e-12)
    assert el.mean_longitude == 3.5
    assert el.semi_major_axis == 0.387


def test_elements_with_node_on_axis():
    # cos Ω = 0: the inclination must come from p
    i = math.radians(2.0)
    ch = ElementChannels(a=1.0, lam=0.0, k=0.01, h=0.0, q=0.0, p=math.sin(i / 2))
    el = orbital_elements_from_channels(ch)
    assert el.ascending_node_longitude == pytest.approx(math.pi / 2)
    assert el.inclination == pytest.approx(i, abs=1e-12)


def test_element_series_rows():
    s = ElementSeries.from_rows([(1.0,), (0.0, 1.0), (0.1,), (0.0,), (0.0,), (0.0,)])
    assert s.order == 2
    assert s.channels(2.0).lam == 2.0
    with pytest.raises(ValueError):
        ElementSeries.from_rows([(1.0,)] * 5)


def test_harmonic_sum():
    series = HarmonicSeries(
        terms=(
            HarmonicTerm((1, 0), 2.0, 0.5, 3.0, 0.0),
            HarmonicTerm((0, 2), 1.0, 0.0, -1.0, 1.0),
        ),
        n_args=2,
    )
    args = (math.pi / 2, math.pi / 4)
    s, c = eval_harmonic(series, args, 2.0)
    # term 1: sin(π/2) = 1, cos = 0; term 2: φ = π/2
    assert s == pytest.approx(3.0 + 1.0)
    assert c == pytest.approx(0.0, abs=1e-12)


def test_harmonic_validation():
    with pytest.raises(ValueError):
        HarmonicSeries(terms=(HarmonicTerm((1, 0, 0), 1.0, 0.0, 0.0, 0.0),), n_args=2)
    series = HarmonicSeries(terms=(), n_args=5)
    with pytest.raises(ValueError):
        eval_harmonic(series, (0.0,), 0.0)


def test_lincomb():
    assert eval_lincomb((2, 0, -1), (1.0, 100.0, 3.0)) == -1.0
