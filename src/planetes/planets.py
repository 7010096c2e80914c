'''Planet identities and the orbit models that produce their positions'''

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol, Union

from .elements import (
    ElementCoefficients, elements as evaluate_elements, mean_anomaly,
    MERCURY_ELEMENTS, VENUS_ELEMENTS, EARTH_ELEMENTS, MARS_ELEMENTS,
    JUPITER_ELEMENTS, SATURN_ELEMENTS, URANUS_ELEMENTS, NEPTUNE_ELEMENTS,
)
from .frames import orbital_to_ecliptic
from .kepler import solve_kepler, true_anomaly_and_distance
from .orbit import Orbit, Position
from .perturbations import (
    PerturbationModel, apply_perturbation,
    JUPITER_PERTURBATIONS, SATURN_PERTURBATIONS, URANUS_PERTURBATIONS,
)

logger = logging.getLogger(__name__)


# define the fixed set of planets, in heliocentric order
class Planet(Enum):
    MERCURY = 'mercury'
    VENUS = 'venus'
    EARTH = 'earth'
    MARS = 'mars'
    JUPITER = 'jupiter'
    SATURN = 'saturn'
    URANUS = 'uranus'
    NEPTUNE = 'neptune'

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, planet: Union['Planet', str]) -> 'Planet':
        """Convert a case-insensitive name or Planet to a Planet"""
        if isinstance(planet, Planet):
            return planet
        elif isinstance(planet, str):
            try:
                return cls(planet.strip().lower())
            except ValueError:
                raise ValueError(f"Unknown planet '{planet}'. "
                                 f"Use: {[p.value for p in cls]}") from None
        else:
            raise TypeError(f"planet must be Planet or str, got {type(planet)}")


class OrbitModel(Protocol):
    """
    Capability shared by every planetary position model:
    given a day-count, produce elements and a position.
    """
    def elements(self, d: float) -> Orbit:
        ...

    def position(self, d: float) -> Position:
        ...


def _perturbing_anomalies(d: float) -> Dict[str, float]:
    # mean anomalies of the planets that appear in perturbation arguments
    return {
        'jupiter': mean_anomaly(JUPITER_ELEMENTS, d),
        'saturn': mean_anomaly(SATURN_ELEMENTS, d),
        'uranus': mean_anomaly(URANUS_ELEMENTS, d),
    }


@dataclass(frozen=True)
class AnalyticKeplerModel:
    """
    Low-precision analytic Kepler-orbit model of one planet.

    Elements are linear in the day-count; the position follows from
    Kepler's equation, a rotation into the ecliptic, and (for planets with
    a perturbation model) an empirical longitude/latitude correction.

    Attributes
    ----------
    coefficients : ElementCoefficients
        Linear element coefficients
    perturbations : PerturbationModel, optional
        Longitude/latitude correction tables, None if the planet has none
    """
    coefficients: ElementCoefficients
    perturbations: Optional[PerturbationModel] = None

    def elements(self, d: float) -> Orbit:
        """Orbit at day-count d, with perturbation corrections attached."""
        lon = lat = None
        if self.perturbations is not None:
            lon, lat = self.perturbations.corrections(_perturbing_anomalies(d))
        return evaluate_elements(self.coefficients, d, lon, lat)

    def position(self, d: float) -> Position:
        """Heliocentric ecliptic position [AU] at day-count d."""
        return position_from_orbit(self.elements(d))


def position_from_orbit(orbit: Orbit) -> Position:
    """
    Heliocentric ecliptic position [AU] of an Orbit.

    Solves Kepler's equation, resolves true anomaly and distance, rotates
    into the ecliptic frame and applies the orbit's perturbations, if any.
    """
    E = solve_kepler(orbit.eccentricity, orbit.mean_anomaly)
    nu, r = true_anomaly_and_distance(E, orbit.semi_major_axis, orbit.eccentricity)
    position = orbital_to_ecliptic(nu, r, orbit.ascending_node, orbit.inclination,
                                   orbit.argument_of_periapsis)
    return apply_perturbation(position, r, orbit.longitude_perturbation,
                              orbit.latitude_perturbation)


# per-planet dispatch; iteration order follows Planet
MODELS: Dict[Planet, OrbitModel] = {
    Planet.MERCURY: AnalyticKeplerModel(MERCURY_ELEMENTS),
    Planet.VENUS: AnalyticKeplerModel(VENUS_ELEMENTS),
    Planet.EARTH: AnalyticKeplerModel(EARTH_ELEMENTS),
    Planet.MARS: AnalyticKeplerModel(MARS_ELEMENTS),
    Planet.JUPITER: AnalyticKeplerModel(JUPITER_ELEMENTS, JUPITER_PERTURBATIONS),
    Planet.SATURN: AnalyticKeplerModel(SATURN_ELEMENTS, SATURN_PERTURBATIONS),
    Planet.URANUS: AnalyticKeplerModel(URANUS_ELEMENTS, URANUS_PERTURBATIONS),
    Planet.NEPTUNE: AnalyticKeplerModel(NEPTUNE_ELEMENTS),
}


def model_for(planet: Union[Planet, str]) -> OrbitModel:
    """Orbit model registered for a planet"""
    return MODELS[Planet.parse(planet)]
