"""Configuration: default theories and iteration bounds from the environment."""

from __future__ import annotations
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_PLANETARY_THEORY = 'erfa'
DEFAULT_LUNAR_THEORY = 'meeus'
DEFAULT_MAX_ITERATIONS = 20


def get_planetary_theory() -> str:
    """Return the default planetary theory name (CHRONOS_PLANETARY_THEORY or 'erfa')."""
    return os.environ.get('CHRONOS_PLANETARY_THEORY', DEFAULT_PLANETARY_THEORY).strip() or DEFAULT_PLANETARY_THEORY


def get_lunar_theory() -> str:
    """Return the default lunar theory name (CHRONOS_LUNAR_THEORY or 'meeus')."""
    return os.environ.get('CHRONOS_LUNAR_THEORY', DEFAULT_LUNAR_THEORY).strip() or DEFAULT_LUNAR_THEORY


def get_max_iterations() -> int:
    """Return the bound for light-time and equinox iterations.

    Reads CHRONOS_MAX_ITERATIONS; values that are not positive integers are
    ignored with a warning.
    """
    raw = os.environ.get('CHRONOS_MAX_ITERATIONS', '').strip()
    if not raw:
        return DEFAULT_MAX_ITERATIONS
    try:
        n = int(raw)
    except ValueError:
        logger.warning('CHRONOS_MAX_ITERATIONS=%r is not an integer; using %d', raw, DEFAULT_MAX_ITERATIONS)
        return DEFAULT_MAX_ITERATIONS
    if n <= 0:
        logger.warning('CHRONOS_MAX_ITERATIONS=%d must be positive; using %d', n, DEFAULT_MAX_ITERATIONS)
        return DEFAULT_MAX_ITERATIONS
    return n


def get_log_level() -> Optional[str]:
    """Return the CLI log level name from CHRONOS_LOG, or None when unset."""
    level = os.environ.get('CHRONOS_LOG', '').strip().upper()
    return level or None
