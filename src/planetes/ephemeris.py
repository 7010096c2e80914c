'''Public queries: planetary elements and heliocentric positions at an instant'''

import dataclasses
from typing import Dict, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from .astro_time import Instant, day_count
from .config import config
from .orbit import Orbit, Position
from .planets import Planet, model_for

PlanetLike = Union[Planet, str]


def position_of(planet: PlanetLike, instant: Instant) -> Position:
    """
    Heliocentric ecliptic position of a planet.

    Parameters
    ----------
    planet : Planet or str
        Planet identity or case-insensitive name ('jupiter')
    instant : datetime, numpy.datetime64 or float
        Time of the query; plain numbers are day-counts since
        1999-12-31T00:00:00Z (2000 Jan 0.0 UT)

    Returns
    -------
    Position
        Rectangular ecliptic coordinates [AU]

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> import planetes
    >>> x, y, z = planetes.position_of('earth', datetime(2024, 3, 20, tzinfo=timezone.utc))
    """
    return model_for(planet).position(day_count(instant))


def elements_of(planet: PlanetLike, instant: Instant) -> Orbit:
    """
    Osculating Keplerian elements of a planet.

    Parameters are as for position_of(). For Jupiter, Saturn and Uranus the
    returned Orbit carries the perturbation corrections used by position_of().
    """
    return model_for(planet).elements(day_count(instant))


def positions(instant: Instant) -> Dict[Planet, Position]:
    """Positions of all eight planets, in order Mercury to Neptune."""
    d = day_count(instant)
    return {planet: model_for(planet).position(d) for planet in Planet}


def ephemeris_table(instant: Instant) -> pd.DataFrame:
    """
    Positions of all planets as a DataFrame.

    Returns
    -------
    pd.DataFrame
        Indexed by planet name, with columns
        ['x', 'y', 'z', 'distance', 'longitude', 'latitude'];
        lengths in AU, angles in degrees
    """
    rows = {
        planet.display_name: {
            'x': pos.x, 'y': pos.y, 'z': pos.z,
            'distance': pos.distance,
            'longitude': pos.longitude,
            'latitude': pos.latitude,
        }
        for planet, pos in positions(instant).items()
    }
    df = pd.DataFrame.from_dict(rows, orient='index')
    df.index.name = 'planet'
    return df


def elements_table(instant: Instant) -> pd.DataFrame:
    """
    Elements of all planets as a DataFrame, one row per planet.

    Columns follow the Orbit fields; perturbation columns hold NaN for
    planets without a perturbation model.
    """
    d = day_count(instant)
    rows = {
        planet.display_name: dataclasses.asdict(model_for(planet).elements(d))
        for planet in Planet
    }
    df = pd.DataFrame.from_dict(rows, orient='index').astype(float)
    df.index.name = 'planet'
    return df


def plot_positions(instant: Instant, show_sun: bool = True,
                   sun_color: Optional[str] = None, planet_color: Optional[str] = None,
                   marker_size: Optional[int] = None) -> go.Figure:
    """
    Create a 3D plot of the Sun and the planets at an instant.

    Parameters:
        instant: Time of the query (see position_of)
        show_sun: Whether to mark the Sun at the origin (default: True)
        sun_color: Sun marker color (default: config.DEFAULT_SUN_COLOR)
        planet_color: Planet marker color (default: config.DEFAULT_PLANET_COLOR)
        marker_size: Planet marker size (default: config.DEFAULT_MARKER_SIZE)

    Returns:
        Plotly Figure object
    """
    sun_color = sun_color or config.DEFAULT_SUN_COLOR
    planet_color = planet_color or config.DEFAULT_PLANET_COLOR
    marker_size = marker_size or config.DEFAULT_MARKER_SIZE

    table = ephemeris_table(instant)
    fig = go.Figure()

    if show_sun:
        fig.add_trace(go.Scatter3d(
            x=[0.0], y=[0.0], z=[0.0],
            mode='markers',
            marker=dict(color=sun_color, size=2 * marker_size),
            name='Sun'
        ))

    fig.add_trace(go.Scatter3d(
        x=table['x'],
        y=table['y'],
        z=table['z'],
        mode='markers+text',
        marker=dict(color=planet_color, size=marker_size),
        text=list(table.index),
        name='Planets',
        hovertemplate='%{text}<br>x: %{x:.6f}<br>y: %{y:.6f}<br>z: %{z:.6f}<extra></extra>'
    ))

    fig.update_layout(
        scene=dict(
            xaxis_title='X [AU]',
            yaxis_title='Y [AU]',
            zaxis_title='Z [AU]',
            aspectmode='data'
        ),
        title='Heliocentric Ecliptic Positions',
        showlegend=True
    )
    return fig
