# Kepler's equation, bounded Newton-Raphson

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from kepler_orbit.core.constants import KEPLER_MAX_ITER, KEPLER_TOLERANCE_RAD
from kepler_orbit.core.frames import ieee_div

logger = logging.getLogger(__name__)


def wrap_to_2pi(angle_rad: float) -> float:
    """Wrap angle to [0, 2pi)."""
    two_pi = 2.0 * math.pi
    return angle_rad % two_pi


def kepler_residual(E_rad: float, M_rad: float, e: float) -> float:
    """f(E) = E - e sin(E) - M."""
    return E_rad - e * math.sin(E_rad) - M_rad


@dataclass(frozen=True)
class KeplerSolution:
    """
    Result of one solver run, with convergence diagnostics.

    eccentric_anomaly_rad: returned estimate of E
    iterations: Newton steps actually taken (1..max_iter)
    residual_rad: |E - e sin(E) - M| evaluated at the returned E
    converged: True if the tolerance was met before the budget ran out
    """
    eccentric_anomaly_rad: float
    iterations: int
    residual_rad: float
    converged: bool


def solve_kepler(
    M_rad: float,
    e: float,
    tol: float = KEPLER_TOLERANCE_RAD,
    max_iter: int = KEPLER_MAX_ITER,
) -> KeplerSolution:
    """
    Solve Kepler's equation
        M = E - e sin(E)
    for E, starting from E = M.

    Each step is clamped to [-e/2, e/2]. The convergence test uses the residual
    evaluated before the step, so the returned E is one step past the point
    where |f| dropped below tol. M is not wrapped.

    Never raises: if the budget is exhausted the last estimate is returned
    with converged=False.
    """
    E = M_rad
    half_e = e / 2.0

    for i in range(max_iter):
        f = kepler_residual(E, M_rad, e)
        fp = 1.0 - e * math.cos(E)

        step = min(max(ieee_div(f, fp), -half_e), half_e)
        E -= step

        if abs(f) < tol:
            return KeplerSolution(E, i + 1, abs(kepler_residual(E, M_rad, e)), True)

    residual = abs(kepler_residual(E, M_rad, e))
    logger.debug(
        "Kepler solver exhausted %d iterations (M=%.6f, e=%.6f, residual=%.3e)",
        max_iter, M_rad, e, residual,
    )
    return KeplerSolution(E, max_iter, residual, False)


def solve_keplers_equation(M_rad: float, e: float) -> float:
    """
    Eccentric anomaly (rad) for mean anomaly M_rad with the fixed
    10-iteration budget. Diagnostics are available from solve_kepler().
    """
    return solve_kepler(M_rad, e).eccentric_anomaly_rad
