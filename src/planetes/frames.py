'''Rotation from the orbital plane into heliocentric ecliptic coordinates'''

import math
from typing import Tuple

from .orbit import Position


def orbital_to_ecliptic(true_anomaly: float, distance: float,
                        ascending_node: float, inclination: float,
                        argument_of_periapsis: float) -> Position:
    """
    Rotate an orbital-plane position into the heliocentric ecliptic frame.

    Parameters
    ----------
    true_anomaly : float
        True anomaly [rad]
    distance : float
        Heliocentric distance [AU]
    ascending_node : float
        Longitude of the ascending node [deg]
    inclination : float
        Inclination [deg]
    argument_of_periapsis : float
        Argument of perihelion [deg]

    Returns
    -------
    Position
        Rectangular ecliptic coordinates in the units of distance
    """
    N = math.radians(ascending_node)
    i = math.radians(inclination)
    u = true_anomaly + math.radians(argument_of_periapsis)  # argument of latitude
    cos_N, sin_N = math.cos(N), math.sin(N)
    cos_u, sin_u = math.cos(u), math.sin(u)
    cos_i = math.cos(i)
    x = distance * (cos_N * cos_u - sin_N * sin_u * cos_i)
    y = distance * (sin_N * cos_u + cos_N * sin_u * cos_i)
    z = distance * sin_u * math.sin(i)
    return Position(x, y, z)


def spherical_to_rectangular(longitude: float, latitude: float,
                             distance: float) -> Position:
    """Ecliptic longitude/latitude [rad] and distance to rectangular coordinates."""
    cos_b = math.cos(latitude)
    return Position(distance * math.cos(longitude) * cos_b,
                    distance * math.sin(longitude) * cos_b,
                    distance * math.sin(latitude))


def rectangular_to_spherical(position: Position) -> Tuple[float, float]:
    """Ecliptic longitude and latitude [rad] of a rectangular position."""
    x, y, z = position
    return math.atan2(y, x), math.atan2(z, math.hypot(x, y))
