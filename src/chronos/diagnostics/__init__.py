"""Diagnostics package.

Plotting helpers; they need the diagnostics extras:
  pip install "chronos-ephem[diagnostics]"
"""

__all__ = ["plot_deltat"]
