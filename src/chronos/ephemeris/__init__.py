"""Planetary/lunar theory providers.

The mean-element theory (`kepler`) is stdlib-only. The others are thin
wrappers around external libraries:
  erfa   pyerfa (installed with chronos-ephem)
  de422  pip install "chronos-ephem[ephemeris]"
"""

from ..core.errors import TheoryUnavailableError


def require_erfa():
    """Return the erfa module or raise a clear error."""
    try:
        import erfa
    except ImportError as e:
        raise TheoryUnavailableError('The erfa planetary theory requires: pip install pyerfa') from e
    return erfa


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import de422  # noqa: F401
    except ImportError as e:
        raise TheoryUnavailableError('Ephemeris support requires: pip install "chronos-ephem[ephemeris]"') from e
