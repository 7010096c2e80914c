"""
Planetes: Heliocentric Positions of the Major Planets

A Python package for computing heliocentric ecliptic positions of Mercury
through Neptune from low-precision analytic Kepler orbits, with empirical
perturbation corrections for Jupiter, Saturn and Uranus.
"""

# Package metadata
__version__ = "0.1.0"
__author__ = "Shane Billingsley"

# Core classes
from .orbit import Orbit, Position
from .planets import Planet, AnalyticKeplerModel, OrbitModel, MODELS

# Public queries
from .ephemeris import (
    position_of, elements_of, positions,
    ephemeris_table, elements_table, plot_positions,
)

# Time conversion
from .astro_time import day_count, current_day_count, julian_date_to_day_count

# Errors
from .errors import PlanetesError, ClockUnavailable, SolverDidNotConverge

# Configuration
from .config import config, temp_config

# Define what gets imported with "from planetes import *"
__all__ = [
    # Classes
    "Orbit",
    "Position",
    "Planet",
    "AnalyticKeplerModel",
    "OrbitModel",
    "MODELS",
    # Queries
    "position_of",
    "elements_of",
    "positions",
    "ephemeris_table",
    "elements_table",
    "plot_positions",
    # Time
    "day_count",
    "current_day_count",
    "julian_date_to_day_count",
    # Errors
    "PlanetesError",
    "ClockUnavailable",
    "SolverDidNotConverge",
    # Configuration
    "config",
    "temp_config",
]
