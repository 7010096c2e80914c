"""
Global Configuration for Planetes Package
=========================================

This module provides package-wide configuration settings that users can modify
to control solver tolerances, validation behavior, and default output options.

Examples
--------
View current configuration:

>>> import planetes
>>> print(planetes.config)

Modify settings:

>>> planetes.config.KEPLER_TOLERANCE_DEG = 1e-6  # Tighter Kepler convergence
>>> planetes.config.OUTPUT_PRECISION = 9  # More digits on the command line

Reset to defaults:

>>> planetes.config.reset()

Temporarily modify settings:

>>> with planetes.temp_config(KEPLER_MAX_ITERATIONS=5):
...     # Smaller safety cap for this block only
...     planetes.position_of('mercury', 0.0)

Notes
-----
These settings affect package-wide behavior. Modifying them will impact
all subsequent operations until changed again or reset.
"""

from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PlanetesConfig:
    """
    Global configuration for Planetes package.

    Attributes
    ----------
    KEPLER_TOLERANCE_DEG : float
        Convergence threshold for the Kepler solver, in degrees.
        Iteration stops once successive eccentric anomalies differ by less.
        Default: 0.001
    KEPLER_MAX_ITERATIONS : int
        Safety cap on Newton iterations in the Kepler solver.
        Exceeding it raises SolverDidNotConverge.
        Default: 50
    EQUALITY_RTOL : float
        Relative tolerance for floating-point equality comparisons.
        Default: 1e-12
    EQUALITY_ATOL : float
        Absolute tolerance for floating-point equality comparisons.
        Default: 1e-14
    STRICT_VALIDATION : bool
        If True, validation failures raise exceptions.
        If False, validation failures issue warnings.
        Default: True
    OUTPUT_PRECISION : int
        Decimal places used by the command line presentation.
        Default: 6
    DEFAULT_SUN_COLOR : str
        Marker color for the Sun in position plots.
        Default: 'gold'
    DEFAULT_PLANET_COLOR : str
        Marker color for planets in position plots.
        Default: 'steelblue'
    DEFAULT_MARKER_SIZE : int
        Marker size for planets in position plots.
        Default: 5
    """

    # Kepler solver
    KEPLER_TOLERANCE_DEG: float = 1e-3
    KEPLER_MAX_ITERATIONS: int = 50

    # Numerical tolerance for equality comparisons
    EQUALITY_RTOL: float = 1e-12
    EQUALITY_ATOL: float = 1e-14

    # Validation behavior
    STRICT_VALIDATION: bool = True

    # Output defaults
    OUTPUT_PRECISION: int = 6

    # Plotting defaults
    DEFAULT_SUN_COLOR: str = 'gold'
    DEFAULT_PLANET_COLOR: str = 'steelblue'
    DEFAULT_MARKER_SIZE: int = 5

    def reset(self):
        """
        Reset all configuration values to package defaults.

        Examples
        --------
        >>> import planetes
        >>> planetes.config.KEPLER_MAX_ITERATIONS = 5  # Modify
        >>> planetes.config.reset()  # Back to defaults
        >>> planetes.config.KEPLER_MAX_ITERATIONS
        50
        """
        defaults = PlanetesConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))

    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["PlanetesConfig:"]
        lines.append("  Kepler Solver:")
        lines.append(f"    KEPLER_TOLERANCE_DEG = {self.KEPLER_TOLERANCE_DEG}")
        lines.append(f"    KEPLER_MAX_ITERATIONS = {self.KEPLER_MAX_ITERATIONS}")
        lines.append("  Numerical Tolerances:")
        lines.append(f"    EQUALITY_RTOL = {self.EQUALITY_RTOL}")
        lines.append(f"    EQUALITY_ATOL = {self.EQUALITY_ATOL}")
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        lines.append("  Output:")
        lines.append(f"    OUTPUT_PRECISION = {self.OUTPUT_PRECISION}")
        lines.append("  Plotting:")
        lines.append(f"    DEFAULT_SUN_COLOR = '{self.DEFAULT_SUN_COLOR}'")
        lines.append(f"    DEFAULT_PLANET_COLOR = '{self.DEFAULT_PLANET_COLOR}'")
        lines.append(f"    DEFAULT_MARKER_SIZE = {self.DEFAULT_MARKER_SIZE}")
        return "\n".join(lines)


# Global configuration instance
config = PlanetesConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.

    Configuration is automatically restored when the context exits,
    even if an exception occurs.

    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.

    Examples
    --------
    >>> import planetes
    >>> with planetes.temp_config(STRICT_VALIDATION=False):
    ...     # Out-of-range orbits warn instead of raising
    ...     orbit = planetes.Orbit(0, 0, 0, 1.0, 1.5, 0)
    >>> # Original config restored here
    >>> planetes.config.STRICT_VALIDATION
    True

    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise AttributeError(
                f"PlanetesConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)

    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)
