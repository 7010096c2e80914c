'''Orbit and Position value types for heliocentric planetary positions'''

import math
import numpy as np
from dataclasses import dataclass
from typing import Iterator, Optional

from .config import config
from .utils import validation_error

# Gaussian gravitational constant [rad/day], so n = k / a^1.5 with a in AU
GAUSSIAN_GRAVITATIONAL_CONSTANT = 0.01720209895


@dataclass(frozen=True)
class Orbit:
    """
    Immutable osculating Keplerian elements of a planet at one day-count.

    A new Orbit is built for every query; nothing in the package holds on
    to one between queries.

    Attributes
    ----------
    ascending_node : float
        Longitude of the ascending node [deg]
    inclination : float
        Inclination to the ecliptic [deg]
    argument_of_periapsis : float
        Argument of perihelion [deg]
    semi_major_axis : float
        Semi-major axis [AU]
    eccentricity : float
        Eccentricity, 0 <= e < 1
    mean_anomaly : float
        Mean anomaly [deg], normalized to [0, 360)
    longitude_perturbation : float, optional
        Correction to ecliptic longitude [deg]; None when the planet
        has no perturbation model for longitude
    latitude_perturbation : float, optional
        Correction to ecliptic latitude [deg]; None when the planet
        has no perturbation model for latitude
    """
    ascending_node: float
    inclination: float
    argument_of_periapsis: float
    semi_major_axis: float
    eccentricity: float
    mean_anomaly: float
    longitude_perturbation: Optional[float] = None
    latitude_perturbation: Optional[float] = None

    def __post_init__(self):
        #Validate parameters
        values = (self.ascending_node, self.inclination, self.argument_of_periapsis,
                  self.semi_major_axis, self.eccentricity, self.mean_anomaly)
        if not all(math.isfinite(v) for v in values):
            validation_error(f"Orbit contains NaN or Inf: {values}")
        if not 0 <= self.eccentricity < 1:
            validation_error(
                f"Eccentricity out of range [0, 1), got {self.eccentricity}")
        if self.semi_major_axis <= 0:
            validation_error(
                f"Semi-major axis must be positive, got {self.semi_major_axis}")
        if not 0 <= self.mean_anomaly < 360:
            validation_error(
                f"Mean anomaly must be normalized to [0, 360), got {self.mean_anomaly}")

    @property
    def has_perturbation(self) -> bool:
        """True if either perturbation correction is present"""
        return (self.longitude_perturbation is not None
                or self.latitude_perturbation is not None)

    @property
    def perihelion(self) -> float:
        """Perihelion distance [AU]"""
        return self.semi_major_axis * (1 - self.eccentricity)

    @property
    def aphelion(self) -> float:
        """Aphelion distance [AU]"""
        return self.semi_major_axis * (1 + self.eccentricity)

    @property
    def orbital_period(self) -> float:
        """Sidereal period from Kepler's third law [days]"""
        return 2 * math.pi * self.semi_major_axis**1.5 / GAUSSIAN_GRAVITATIONAL_CONSTANT

    def __str__(self):
        #Human-readable representation
        lines = [f"Orbit:\n"
                 f"  N     = {self.ascending_node:12.4f}°\n"
                 f"  i     = {self.inclination:12.4f}°\n"
                 f"  ω     = {self.argument_of_periapsis:12.4f}°\n"
                 f"  a     = {self.semi_major_axis:12.6f} AU\n"
                 f"  e     = {self.eccentricity:12.6f}\n"
                 f"  M     = {self.mean_anomaly:12.4f}°"]
        if self.longitude_perturbation is not None:
            lines.append(f"  Δλ    = {self.longitude_perturbation:12.4f}°")
        if self.latitude_perturbation is not None:
            lines.append(f"  Δβ    = {self.latitude_perturbation:12.4f}°")
        return "\n".join(lines)


@dataclass(frozen=True, eq=False)
class Position:
    """
    Heliocentric ecliptic rectangular coordinates [AU].

    Unpacks like a 3-tuple: ``x, y, z = position``.
    """
    x: float
    y: float
    z: float

    _HASH_DECIMALS = 10     # Rounding for consistent hashing

    @property
    def distance(self) -> float:
        """Heliocentric distance [AU]"""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    @property
    def longitude(self) -> float:
        """Ecliptic longitude [deg], in [0, 360)"""
        return math.degrees(math.atan2(self.y, self.x)) % 360.0

    @property
    def latitude(self) -> float:
        """Ecliptic latitude [deg]"""
        return math.degrees(math.atan2(self.z, math.hypot(self.x, self.y)))

    def to_numpy(self) -> np.ndarray:
        """Position as a read-only array [x, y, z]"""
        arr = np.array([self.x, self.y, self.z], dtype=float)
        arr.flags.writeable = False
        return arr

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __len__(self):
        return 3

    def __getitem__(self, key):
        #Allow indexing like position[0]
        return (self.x, self.y, self.z)[key]

    def __eq__(self, other):
        #Check equality with tolerance
        if not isinstance(other, Position):
            return NotImplemented
        return bool(np.allclose(self.to_numpy(), other.to_numpy(),
                                rtol=config.EQUALITY_RTOL,
                                atol=config.EQUALITY_ATOL))

    def __hash__(self):
        #Hash with rounding to match equality
        return hash(tuple(round(v, self._HASH_DECIMALS) for v in self))

    def __str__(self):
        return f"({self.x!r}, {self.y!r}, {self.z!r})"
