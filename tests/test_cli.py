"""
Tests for the ``planetes`` command line presentation.
"""

import re

import pytest

from planetes import Planet, elements_of, position_of
from planetes.astro_time import EPOCH_UNIX_NS
from planetes.cli import build_parser, main


LINE_PATTERN = re.compile(r"^\((-?\d+\.\d{6}), (-?\d+\.\d{6}), (-?\d+\.\d{6})\)$")


@pytest.fixture
def epoch_clock():
    """Clock source stopped at 1999-12-31T00:00:00Z."""
    return lambda: EPOCH_UNIX_NS


@pytest.fixture
def broken_clock():
    def clock():
        raise OSError("clock offline")
    return clock


def run(capsys, argv, **kwargs):
    status = main(argv, **kwargs)
    out, err = capsys.readouterr()
    return status, out.splitlines(), err


class TestPositionsOutput:
    """Default output: one position line per planet."""

    def test_eight_lines_at_fixed_day(self, capsys):
        status, lines, _ = run(capsys, ['--day', '0'])
        assert status == 0
        assert len(lines) == 8
        assert all(LINE_PATTERN.match(line) for line in lines)

    def test_line_values(self, capsys):
        _, lines, _ = run(capsys, ['--day', '0'])
        for planet, line in zip(Planet, lines):
            x, y, z = (float(v) for v in LINE_PATTERN.match(line).groups())
            expected = position_of(planet, 0.0)
            assert x == pytest.approx(expected.x, abs=1e-6)
            assert y == pytest.approx(expected.y, abs=1e-6)
            assert z == pytest.approx(expected.z, abs=1e-6)

    def test_clock_used_without_arguments(self, capsys, epoch_clock):
        """Without --at or --day the clock source supplies the instant."""
        _, from_clock, _ = run(capsys, [], clock=epoch_clock)
        _, from_day, _ = run(capsys, ['--day', '0'])
        assert from_clock == from_day

    def test_at_timestamp(self, capsys):
        _, from_at, _ = run(capsys, ['--at', '2000-01-01T12:00:00Z'])
        _, from_day, _ = run(capsys, ['--day', '1.5'])
        assert from_at == from_day

    def test_planet_filter(self, capsys):
        _, lines, _ = run(capsys, ['--day', '0', '--planet', 'mars', '--planet', 'Venus'])
        assert len(lines) == 2

    def test_labels(self, capsys):
        _, lines, _ = run(capsys, ['--day', '0', '--labels'])
        assert lines[0].startswith("Mercury ")
        assert lines[-1].startswith("Neptune ")

    def test_precision(self, capsys):
        _, lines, _ = run(capsys, ['--day', '0', '--precision', '2', '--planet', 'earth'])
        assert re.match(r"^\(-?\d+\.\d{2}, -?\d+\.\d{2}, -?\d+\.\d{2}\)$", lines[0])


class TestElementsOutput:
    """--elements prints the orbital elements."""

    def test_jupiter_has_longitude_correction(self, capsys):
        _, lines, _ = run(capsys, ['--day', '0', '--elements', '--planet', 'jupiter'])
        assert len(lines) == 1
        assert "dlon=" in lines[0]
        assert "dlat=" not in lines[0]
        assert "M=19.895000" in lines[0]

    def test_saturn_has_both_corrections(self, capsys):
        _, lines, _ = run(capsys, ['--day', '0', '--elements', '--planet', 'saturn'])
        assert "dlon=" in lines[0] and "dlat=" in lines[0]

    def test_earth_has_none(self, capsys):
        _, lines, _ = run(capsys, ['--day', '0', '--elements', '--planet', 'earth'])
        assert "dlon=" not in lines[0]
        orbit = elements_of('earth', 0.0)
        assert f"e={orbit.eccentricity:.6f}" in lines[0]


class TestErrors:
    """Failures produce an error message and a nonzero status."""

    def test_clock_failure(self, capsys, broken_clock):
        status, lines, err = run(capsys, [], clock=broken_clock)
        assert status == 1
        assert lines == []
        assert "planetes: error:" in err
        assert "clock offline" in err

    def test_clock_runtime_error(self, capsys):
        def clock():
            raise RuntimeError("no time source")

        status, lines, err = run(capsys, [], clock=clock)
        assert status == 1
        assert "planetes: error:" in err
        assert "no time source" in err

    def test_negative_precision(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['--day', '0', '--precision', '-1'])
        assert excinfo.value.code == 2
        assert "non-negative" in capsys.readouterr().err

    def test_unknown_planet(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['--planet', 'pluto'])
        assert excinfo.value.code == 2

    def test_at_and_day_exclusive(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['--day', '0', '--at', '2000-01-01'])
        assert excinfo.value.code == 2

    def test_bad_timestamp(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['--at', 'yesterday'])
        assert excinfo.value.code == 2

    def test_non_finite_day(self, capsys):
        status, lines, err = run(capsys, ['--day', 'nan'])
        assert status == 1
        assert "finite" in err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(['--version'])
        assert excinfo.value.code == 0
        assert "planetes" in capsys.readouterr().out


def test_parser_prog():
    assert build_parser().prog == 'planetes'
