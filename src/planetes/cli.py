"""
Command line presentation of planetary positions.

With no arguments, reads the system clock and prints the heliocentric ecliptic
position of each planet, one line per planet from Mercury to Neptune.
"""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional

from . import __version__
from .astro_time import current_day_count, parse_instant, day_count
from .config import config
from .ephemeris import elements_of, position_of
from .errors import PlanetesError
from .planets import Planet
from .utils import Timer

logger = logging.getLogger('planetes.cli')


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='planetes',
        description='Heliocentric ecliptic positions of the planets [AU]',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  planetes                              Positions now
  planetes --at 2024-03-20T03:06:00Z    Positions at a fixed instant
  planetes --day 0                      Positions at 1999-12-31T00:00:00Z
  planetes --elements --planet jupiter  Jupiter's orbital elements now
        """
    )
    when = parser.add_mutually_exclusive_group()
    when.add_argument('--at', type=parse_instant, default=None, metavar='ISO8601',
                      help='Evaluate at this UTC instant instead of now')
    when.add_argument('--day', type=float, default=None, metavar='D',
                      help='Evaluate at this day-count since 1999-12-31T00:00:00Z')
    parser.add_argument('--planet', action='append', type=Planet.parse, default=None,
                        metavar='NAME', help='Restrict output to a planet (repeatable)')
    parser.add_argument('--elements', action='store_true',
                        help='Print orbital elements instead of positions')
    parser.add_argument('--labels', action='store_true',
                        help='Prefix each line with the planet name')
    parser.add_argument('--precision', type=_non_negative_int, default=None,
                        help=f'Decimal places (default: {config.OUTPUT_PRECISION})')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging on stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def _format_position(position, precision: int) -> str:
    return "(" + ", ".join(f"{v:.{precision}f}" for v in position) + ")"


def _format_elements(orbit, precision: int) -> str:
    fields = [
        ('N', orbit.ascending_node),
        ('i', orbit.inclination),
        ('w', orbit.argument_of_periapsis),
        ('a', orbit.semi_major_axis),
        ('e', orbit.eccentricity),
        ('M', orbit.mean_anomaly),
    ]
    if orbit.longitude_perturbation is not None:
        fields.append(('dlon', orbit.longitude_perturbation))
    if orbit.latitude_perturbation is not None:
        fields.append(('dlat', orbit.latitude_perturbation))
    return " ".join(f"{name}={value:.{precision}f}" for name, value in fields)


def main(argv: Optional[List[str]] = None,
         clock: Callable[[], int] = time.time_ns) -> int:
    """
    Entry point of the ``planetes`` command.

    Returns
    -------
    int
        Process exit status: 0 on success, 1 if the clock or a computation
        fails. Argument errors exit with status 2 through argparse.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        stream=sys.stderr,
    )

    precision = config.OUTPUT_PRECISION if args.precision is None else args.precision
    planets = args.planet or list(Planet)

    try:
        if args.day is not None:
            d = day_count(args.day)
        elif args.at is not None:
            d = day_count(args.at)
        else:
            d = current_day_count(clock)
        logger.debug("Evaluating %d planet(s) at d=%.9f", len(planets), d)

        lines = []
        with Timer("Planetary positions"):
            for planet in planets:
                if args.elements:
                    text = _format_elements(elements_of(planet, d), precision)
                else:
                    text = _format_position(position_of(planet, d), precision)
                if args.labels:
                    text = f"{planet.display_name:<8} {text}"
                lines.append(text)
    except (PlanetesError, ValueError) as exc:
        logger.debug("Query failed", exc_info=True)
        print(f"planetes: error: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
