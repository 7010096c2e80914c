"""
Utility functions and classes for the Planetes package.
"""

import logging
from time import perf_counter
import warnings
from typing import Optional, Type
from .config import config

logger = logging.getLogger(__name__)


class Timer:
    """
    Context manager for timing code execution.

    Timing is reported through the ``planetes.utils`` logger at DEBUG level,
    so it only shows up when logging is configured to include it.

    Examples
    --------
    >>> from planetes.utils import Timer
    >>> with Timer("All planets"):
    ...     table = planetes.positions(0.0)

    >>> with Timer() as t:
    ...     # ... code ...
    >>> print(f"Took {t.elapsed:.6f} seconds")
    """
    def __init__(self, name="Operation", verbose=True):
        """
        Parameters
        ----------
        name : str, optional
            Name to report when timing completes (default: "Operation")
        verbose : bool, optional
            Whether to log timing automatically (default: True)
        """
        self.name = name
        self.verbose = verbose
        self.elapsed: Optional[float] = None

    def __enter__(self):
        self.start = perf_counter()
        return self

    def __exit__(self, *args):
        self.end = perf_counter()
        self.elapsed = self.end - self.start
        if self.verbose:
            logger.debug("%s: %.6f s", self.name, self.elapsed)


def validation_error(message: str, error_class: Type[Exception] = ValueError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.

    This function provides consistent validation behavior across the package.
    When STRICT_VALIDATION is True (default), raises the specified exception.
    When False, issues a UserWarning instead.

    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: ValueError

    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True

    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=3)


def normalize_degrees(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    wrapped = angle % 360.0
    # -1e-17 % 360.0 rounds to exactly 360.0
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped
