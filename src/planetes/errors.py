"""
Exception types raised by the Planetes package.
"""


class PlanetesError(Exception):
    """Base class for errors raised by Planetes."""


class ClockUnavailable(PlanetesError):
    """
    The clock source could not produce a valid instant.

    Raised when the clock raises an exception, returns something other than
    integer nanoseconds, or reports a time before the Unix epoch.
    """


class SolverDidNotConverge(PlanetesError, RuntimeError):
    """
    Kepler's equation did not converge within the safety iteration cap.

    Parameters
    ----------
    eccentricity : float
        Eccentricity passed to the solver
    mean_anomaly : float
        Mean anomaly passed to the solver [deg]
    iterations : int
        Number of Newton iterations performed before giving up
    """
    def __init__(self, eccentricity: float, mean_anomaly: float, iterations: int):
        self.eccentricity = eccentricity
        self.mean_anomaly = mean_anomaly
        self.iterations = iterations
        super().__init__(
            f"Kepler solver did not converge after {iterations} iterations "
            f"(e={eccentricity}, M={mean_anomaly} deg)"
        )
