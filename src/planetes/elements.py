"""
Orbital Element Model
=====================

Osculating Keplerian elements of the major planets as linear functions of the
day-count d (days since 2000 Jan 0.0 UT, 1999-12-31T00:00:00Z), from the standard
low-precision analytic theory. Angles are in degrees, lengths in AU, rates
per day.

Earth's elements describe the Earth's own heliocentric orbit: node and
inclination are zero because that orbit defines the ecliptic, and the
argument of perihelion is the Sun's apparent 282.9404 deg offset by 180 deg.

Examples
--------
>>> from planetes.elements import JUPITER_ELEMENTS, elements
>>> orbit = elements(JUPITER_ELEMENTS, 0.0)
>>> orbit.mean_anomaly
19.895
"""

from dataclasses import dataclass
from typing import Optional

from .orbit import Orbit
from .utils import normalize_degrees


@dataclass(frozen=True)
class ElementCoefficients:
    """
    Immutable coefficients of one planet's linear element model.

    Each element is ``x0 + x1*d``; the mean anomaly is then wrapped
    into [0, 360).

    Attributes
    ----------
    N0, N1 : float
        Longitude of ascending node [deg], [deg/day]
    i0, i1 : float
        Inclination [deg], [deg/day]
    w0, w1 : float
        Argument of perihelion [deg], [deg/day]
    a0 : float
        Semi-major axis [AU]
    e0, e1 : float
        Eccentricity, [1/day]
    M0, M1 : float
        Mean anomaly [deg], [deg/day]
    a1 : float, optional
        Semi-major axis rate [AU/day]; nonzero only for Uranus and Neptune
    """
    N0: float
    N1: float
    i0: float
    i1: float
    w0: float
    w1: float
    a0: float
    e0: float
    e1: float
    M0: float
    M1: float
    a1: float = 0.0


# ========== COEFFICIENT TABLES ==========
MERCURY_ELEMENTS = ElementCoefficients(
    N0=48.3313, N1=3.24587e-5,
    i0=7.0047, i1=5.00e-8,
    w0=29.1241, w1=1.01444e-5,
    a0=0.387098,
    e0=0.205635, e1=5.59e-10,
    M0=168.6562, M1=4.0923344368,
)

VENUS_ELEMENTS = ElementCoefficients(
    N0=76.6799, N1=2.46590e-5,
    i0=3.3946, i1=2.75e-8,
    w0=54.8910, w1=1.38374e-5,
    a0=0.723330,
    e0=0.006773, e1=-1.302e-9,
    M0=48.0052, M1=1.6021302244,
)

EARTH_ELEMENTS = ElementCoefficients(
    N0=0.0, N1=0.0,
    i0=0.0, i1=0.0,
    w0=282.9404 - 180.0, w1=4.70935e-5,
    a0=1.000000,
    e0=0.016709, e1=-1.151e-9,
    M0=356.0470, M1=0.9856002585,
)

MARS_ELEMENTS = ElementCoefficients(
    N0=49.5574, N1=2.11081e-5,
    i0=1.8497, i1=-1.78e-8,
    w0=286.5016, w1=2.92961e-5,
    a0=1.523688,
    e0=0.093405, e1=2.516e-9,
    M0=18.6021, M1=0.5240207766,
)

JUPITER_ELEMENTS = ElementCoefficients(
    N0=100.4542, N1=2.76854e-5,
    i0=1.3030, i1=-1.557e-7,
    w0=273.8777, w1=1.64505e-5,
    a0=5.20256,
    e0=0.048498, e1=4.469e-9,
    M0=19.8950, M1=0.0830853001,
)

SATURN_ELEMENTS = ElementCoefficients(
    N0=113.6634, N1=2.38980e-5,
    i0=2.4886, i1=-1.081e-7,
    w0=339.3939, w1=2.97661e-5,
    a0=9.55475,
    e0=0.055546, e1=-9.499e-9,
    M0=316.9670, M1=0.0334442282,
)

URANUS_ELEMENTS = ElementCoefficients(
    N0=74.0005, N1=1.3978e-5,
    i0=0.7733, i1=1.9e-8,
    w0=96.6612, w1=3.0565e-5,
    a0=19.18171, a1=-1.55e-8,
    e0=0.047318, e1=7.45e-9,
    M0=142.5905, M1=0.011725806,
)

NEPTUNE_ELEMENTS = ElementCoefficients(
    N0=131.7806, N1=3.0173e-5,
    i0=1.7700, i1=-2.55e-7,
    w0=272.8461, w1=-6.027e-6,
    a0=30.05826, a1=3.313e-8,
    e0=0.008606, e1=2.15e-9,
    M0=260.2471, M1=0.005995147,
)


# ========== EVALUATION ==========
def mean_anomaly(coefficients: ElementCoefficients, d: float) -> float:
    """Mean anomaly [deg] at day-count d, normalized to [0, 360)."""
    return normalize_degrees(coefficients.M0 + coefficients.M1 * d)


def elements(coefficients: ElementCoefficients, d: float,
             longitude_perturbation: Optional[float] = None,
             latitude_perturbation: Optional[float] = None) -> Orbit:
    """
    Evaluate a planet's element model at day-count d.

    Parameters
    ----------
    coefficients : ElementCoefficients
        The planet's linear element coefficients
    d : float
        Days since 1999-12-31T00:00:00Z
    longitude_perturbation, latitude_perturbation : float, optional
        Corrections [deg] to attach to the Orbit

    Returns
    -------
    Orbit
        Fresh Orbit for this day-count
    """
    c = coefficients
    return Orbit(
        ascending_node=c.N0 + c.N1 * d,
        inclination=c.i0 + c.i1 * d,
        argument_of_periapsis=c.w0 + c.w1 * d,
        semi_major_axis=c.a0 + c.a1 * d,
        eccentricity=c.e0 + c.e1 * d,
        mean_anomaly=mean_anomaly(c, d),
        longitude_perturbation=longitude_perturbation,
        latitude_perturbation=latitude_perturbation,
    )
