"""
Perturbation Corrector
======================

Empirical periodic corrections to the ecliptic longitude and latitude of
Jupiter, Saturn and Uranus, caused mostly by the Jupiter-Saturn near 5:2
resonance. Each correction is a sum of terms ``amplitude * f(argument)``
where f is sine or cosine and the argument is an integer combination of the
mean anomalies of Jupiter (Mj), Saturn (Ms) and Uranus (Mu) plus a phase.

The tables are fitted values and must be reproduced exactly.
"""

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .frames import rectangular_to_spherical, spherical_to_rectangular
from .orbit import Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PerturbationTerm:
    """
    One periodic correction term.

    The term evaluates to
    ``amplitude * function(jupiter*Mj + saturn*Ms + uranus*Mu + phase)``
    with all angles in degrees.

    Attributes
    ----------
    amplitude : float
        Term amplitude [deg]
    function : str
        'sin' or 'cos'
    jupiter, saturn, uranus : int
        Multipliers of the respective mean anomalies
    phase : float
        Constant phase [deg]
    """
    amplitude: float
    function: str
    jupiter: int = 0
    saturn: int = 0
    uranus: int = 0
    phase: float = 0.0

    _FUNCTIONS = {'sin': math.sin, 'cos': math.cos}

    def __post_init__(self):
        if self.function not in self._FUNCTIONS:
            raise ValueError(f"Perturbation function must be 'sin' or 'cos', "
                             f"got '{self.function}'")

    def argument(self, anomalies: Mapping[str, float]) -> float:
        """Term argument [deg] for mean anomalies keyed 'jupiter', 'saturn', 'uranus'."""
        return (self.jupiter * anomalies.get('jupiter', 0.0)
                + self.saturn * anomalies.get('saturn', 0.0)
                + self.uranus * anomalies.get('uranus', 0.0)
                + self.phase)

    def __call__(self, anomalies: Mapping[str, float]) -> float:
        f = self._FUNCTIONS[self.function]
        return self.amplitude * f(math.radians(self.argument(anomalies)))


def evaluate(terms: Tuple[PerturbationTerm, ...], anomalies: Mapping[str, float]) -> float:
    """Sum of a table of terms [deg]."""
    return sum(term(anomalies) for term in terms)


@dataclass(frozen=True)
class PerturbationModel:
    """
    Longitude and latitude correction tables of one planet.

    Attributes
    ----------
    longitude : tuple of PerturbationTerm
        Terms of the ecliptic longitude correction (may be empty)
    latitude : tuple of PerturbationTerm
        Terms of the ecliptic latitude correction (may be empty)
    """
    longitude: Tuple[PerturbationTerm, ...] = ()
    latitude: Tuple[PerturbationTerm, ...] = ()

    def corrections(self, anomalies: Mapping[str, float]
                    ) -> Tuple[Optional[float], Optional[float]]:
        """
        Longitude and latitude corrections [deg].

        A correction whose table is empty is returned as None, not 0.
        """
        lon = evaluate(self.longitude, anomalies) if self.longitude else None
        lat = evaluate(self.latitude, anomalies) if self.latitude else None
        return lon, lat


# ========== CORRECTION TABLES ==========
JUPITER_PERTURBATIONS = PerturbationModel(
    longitude=(
        PerturbationTerm(-0.332, 'sin', jupiter=2, saturn=-5, phase=-67.6),
        PerturbationTerm(-0.056, 'sin', jupiter=2, saturn=-2, phase=21.0),
        PerturbationTerm(+0.042, 'sin', jupiter=3, saturn=-5, phase=21.0),
        PerturbationTerm(-0.036, 'sin', jupiter=1, saturn=-2),
        PerturbationTerm(+0.022, 'cos', jupiter=1, saturn=-1),
        PerturbationTerm(+0.023, 'sin', jupiter=2, saturn=-3, phase=52.0),
        PerturbationTerm(-0.016, 'sin', jupiter=1, saturn=-5, phase=-69.0),
    ),
)

SATURN_PERTURBATIONS = PerturbationModel(
    longitude=(
        PerturbationTerm(+0.812, 'sin', jupiter=2, saturn=-5, phase=-67.6),
        PerturbationTerm(-0.229, 'cos', jupiter=2, saturn=-4, phase=-2.0),
        PerturbationTerm(+0.119, 'sin', jupiter=1, saturn=-2, phase=-3.0),
        PerturbationTerm(+0.046, 'sin', jupiter=2, saturn=-6, phase=-69.0),
        PerturbationTerm(+0.014, 'sin', jupiter=1, saturn=-3, phase=32.0),
    ),
    latitude=(
        PerturbationTerm(-0.020, 'cos', jupiter=2, saturn=-4, phase=-2.0),
        PerturbationTerm(+0.018, 'sin', jupiter=2, saturn=-6, phase=-49.0),
    ),
)

URANUS_PERTURBATIONS = PerturbationModel(
    longitude=(
        PerturbationTerm(+0.040, 'sin', saturn=1, uranus=-2, phase=6.0),
        PerturbationTerm(+0.035, 'sin', saturn=1, uranus=-3, phase=33.0),
        PerturbationTerm(-0.015, 'sin', jupiter=1, uranus=-1, phase=20.0),
    ),
)


# ========== APPLICATION ==========
def apply_perturbation(position: Position, distance: float,
                       longitude_perturbation: Optional[float] = None,
                       latitude_perturbation: Optional[float] = None) -> Position:
    """
    Correct a position by perturbations of its ecliptic longitude and latitude.

    The corrected position is rebuilt from the corrected spherical angles and
    the known distance; the corrections are not added to x, y, z.

    Parameters
    ----------
    position : Position
        Uncorrected heliocentric ecliptic position [AU]
    distance : float
        Heliocentric distance [AU]
    longitude_perturbation, latitude_perturbation : float, optional
        Corrections [deg]; None means no correction

    Returns
    -------
    Position
        The input object itself if both corrections are None,
        otherwise a new corrected Position
    """
    if longitude_perturbation is None and latitude_perturbation is None:
        return position
    lon, lat = rectangular_to_spherical(position)
    lon += math.radians(longitude_perturbation or 0.0)
    lat += math.radians(latitude_perturbation or 0.0)
    logger.debug("Applying perturbation dlon=%s deg, dlat=%s deg",
                 longitude_perturbation, latitude_perturbation)
    return spherical_to_rectangular(lon, lat, distance)
