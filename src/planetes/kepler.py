'''Kepler's equation and position in the orbital plane'''

import logging
import math
from typing import Optional, Tuple

from .config import config
from .errors import SolverDidNotConverge

logger = logging.getLogger(__name__)


def solve_kepler(eccentricity: float, mean_anomaly: float,
                 tolerance: Optional[float] = None,
                 max_iterations: Optional[int] = None) -> float:
    """
    Solve Kepler's equation E - e*sin(E) = M for the eccentric anomaly.

    Newton-Raphson iteration seeded with the second-order estimate
    E0 = M + e*sin(M)*(1 + e*cos(M)), stopped once successive estimates
    differ by less than the tolerance.

    Parameters
    ----------
    eccentricity : float
        Orbital eccentricity, 0 <= e < 1
    mean_anomaly : float
        Mean anomaly [deg]
    tolerance : float, optional
        Convergence threshold [deg]. Default: config.KEPLER_TOLERANCE_DEG
    max_iterations : int, optional
        Safety cap on iterations. Default: config.KEPLER_MAX_ITERATIONS

    Returns
    -------
    float
        Eccentric anomaly [rad]

    Raises
    ------
    ValueError
        If eccentricity is outside [0, 1) or an input is not finite
    SolverDidNotConverge
        If the iteration cap is exceeded
    """
    if not (math.isfinite(eccentricity) and math.isfinite(mean_anomaly)):
        raise ValueError(f"Kepler solver inputs must be finite, "
                         f"got e={eccentricity}, M={mean_anomaly}")
    if not 0 <= eccentricity < 1:
        raise ValueError(f"Eccentricity out of range [0, 1), got {eccentricity}")
    if tolerance is None:
        tolerance = config.KEPLER_TOLERANCE_DEG
    if max_iterations is None:
        max_iterations = config.KEPLER_MAX_ITERATIONS

    e = eccentricity
    M = math.radians(mean_anomaly)
    threshold = math.radians(tolerance)

    E = M + e * math.sin(M) * (1 + e * math.cos(M))
    for iteration in range(1, max_iterations + 1):
        E_next = E - (E - e * math.sin(E) - M) / (1 - e * math.cos(E))
        converged = abs(E_next - E) < threshold
        E = E_next
        if converged:
            logger.debug("Kepler solver converged in %d iterations (e=%.6f, M=%.4f deg)",
                         iteration, e, mean_anomaly)
            return E

    logger.warning("Kepler solver hit iteration cap %d (e=%.6f, M=%.4f deg)",
                   max_iterations, e, mean_anomaly)
    raise SolverDidNotConverge(eccentricity, mean_anomaly, max_iterations)


def true_anomaly_and_distance(eccentric_anomaly: float, semi_major_axis: float,
                              eccentricity: float) -> Tuple[float, float]:
    """
    True anomaly and radius from the eccentric anomaly.

    Goes through the orbital-plane coordinates x = a(cos E - e),
    y = a*sqrt(1 - e^2)*sin E rather than the half-angle formula.

    Parameters
    ----------
    eccentric_anomaly : float
        Eccentric anomaly [rad]
    semi_major_axis : float
        Semi-major axis [AU]
    eccentricity : float
        Eccentricity

    Returns
    -------
    true_anomaly : float
        True anomaly [rad], in (-pi, pi]
    distance : float
        Distance from the focus [AU]
    """
    a, e, E = semi_major_axis, eccentricity, eccentric_anomaly
    x = a * (math.cos(E) - e)
    y = a * math.sqrt(1 - e**2) * math.sin(E)
    return math.atan2(y, x), math.hypot(x, y)
