# tests/test_config.py

import logging

from chronos import config


def test_defaults(monkeypatch):
    for var in ("CHRONOS_PLANETARY_THEORY", "CHRONOS_LUNAR_THEORY", "CHRONOS_MAX_ITERATIONS", "CHRONOS_LOG"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_planetary_theory() == "erfa"
    assert config.get_lunar_theory() == "meeus"
    assert config.get_max_iterations() == 20
    assert config.get_log_level() is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CHRONOS_PLANETARY_THEORY", "kepler")
    monkeypatch.setenv("CHRONOS_LUNAR_THEORY", " de422 ")
    monkeypatch.setenv("CHRONOS_MAX_ITERATIONS", "50")
    monkeypatch.setenv("CHRONOS_LOG", "debug")
    assert config.get_planetary_theory() == "kepler"
    assert config.get_lunar_theory() == "de422"
    assert config.get_max_iterations() == 50
    assert config.get_log_level() == "DEBUG"


def test_blank_theory_falls_back(monkeypatch):
    monkeypatch.setenv("CHRONOS_PLANETARY_THEORY", "  ")
    assert config.get_planetary_theory() == config.DEFAULT_PLANETARY_THEORY


def test_bad_iteration_bound_warns(monkeypatch, caplog):
    with caplog.at_level(logging.WARNING, logger="chronos.config"):
        monkeypatch.setenv("CHRONOS_MAX_ITERATIONS", "many")
        assert config.get_max_iterations() == config.DEFAULT_MAX_ITERATIONS
        monkeypatch.setenv("CHRONOS_MAX_ITERATIONS", "0")
        assert config.get_max_iterations() == config.DEFAULT_MAX_ITERATIONS
    assert len(caplog.records) == 2
    assert "CHRONOS_MAX_ITERATIONS" in caplog.records[0].getMessage()


def test_bound_feeds_solver(monkeypatch):
    from chronos.engines._solver import iteration_bound

    monkeypatch.setenv("CHRONOS_MAX_ITERATIONS", "7")
    assert iteration_bound() == 7
    assert iteration_bound(3) == 3
