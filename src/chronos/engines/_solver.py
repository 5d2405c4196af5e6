from __future__ import annotations
import logging
from typing import Callable, Optional

from ..core.errors import ConvergenceError
from ..core.types import Converged, NotConverged, Outcome

logger = logging.getLogger(__name__)


def iteration_bound(max_iterations: Optional[int] = None) -> int:
    """Explicit bound, or the configured default (CHRONOS_MAX_ITERATIONS)."""
    if max_iterations is not None:
        return max_iterations
    from ..config import get_max_iterations
    return get_max_iterations()


def fixed_point(
    step: Callable[[float], float],
    x0: float,
    *,
    tol: float,
    max_iterations: int,
    label: str = "fixed point",
) -> Outcome[float]:
    """
    Iterate x_{n+1} = step(x_n) from x0 until |x_{n+1} - x_n| <= tol.

    At most max_iterations evaluations of step are made. The outcome carries
    the last iterate and the number of evaluations in either case.
    """
    if max_iterations <= 0:
        raise ValueError("max_iterations must be positive")
    x = x0
    delta = float("inf")
    for n in range(1, max_iterations + 1):
        x_new = step(x)
        delta = abs(x_new - x)
        if delta <= tol:
            logger.debug("%s converged after %d iterations", label, n)
            return Converged(x_new, n)
        x = x_new
    logger.debug("%s did not converge in %d iterations (last step %.3e)", label, max_iterations, delta)
    return NotConverged(x, max_iterations)


def require_converged(outcome: Outcome[float], label: str) -> float:
    """Unwrap a Converged outcome; log and raise ConvergenceError otherwise."""
    if outcome.converged:
        return outcome.value
    logger.warning("%s did not converge after %d iterations", label, outcome.iterations)
    raise ConvergenceError(f"{label} did not converge after {outcome.iterations} iterations", outcome)
