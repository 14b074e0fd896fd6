"""Tests for the command-line interface."""

import io
import pytest
from nbody_sim.cli.main import main, run_simulation
from nbody_sim.io.universe_io import parse_universe

# Reference final state for the inner solar system after 6312 steps of dt=25000
PLANETS_FINAL = [
    (1.4925e+11, -1.0467e+10, 2.0872e+03, 2.9723e+04, 5.9740e+24, "earth.gif"),
    (-1.1055e+11, -1.9868e+11, 2.1060e+04, -1.1827e+04, 6.4190e+23, "mars.gif"),
    (-1.1708e+10, -5.7384e+10, 4.6276e+04, -9.9541e+03, 3.3020e+23, "mercury.gif"),
    (2.1709e+05, 3.0029e+07, 4.5087e-02, 5.1823e-02, 1.9890e+30, "sun.gif"),
    (6.9283e+10, 8.2658e+10, -2.6894e+04, 2.2585e+04, 4.8690e+24, "venus.gif"),
]


@pytest.fixture
def stdin(monkeypatch, planets_input):
    monkeypatch.setattr("sys.stdin", io.StringIO(planets_input))


def test_cli_zero_time_echoes_input(stdin, capsys, planets_input):
    assert main(["0.0", "25000.0"]) == 0
    captured = capsys.readouterr()
    assert captured.out == planets_input


def test_cli_planets_reference_run(stdin, capsys):
    assert main(["157800000.0", "25000.0"]) == 0
    n, radius, bodies = parse_universe(capsys.readouterr().out)

    assert n == 5
    assert radius == 2.5e11
    for body, expected in zip(bodies, PLANETS_FINAL):
        assert body.label == expected[5]
        assert tuple(body[:5]) == pytest.approx(expected[:5], rel=1e-3)


@pytest.mark.parametrize("argv", [
    [],
    ["1.0"],
    ["1.0", "2.0", "3.0"],
    ["ten", "1.0"],
    ["1.0", "--dt"],
])
def test_cli_bad_arguments(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage:" in captured.err


def test_cli_parse_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1.0\n0 0 0 0 1 a\n"))
    assert main(["1.0", "1.0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "end of input" in captured.err


def test_cli_invalid_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1.0\n0 0 0 0 -5 a\n"))
    assert main(["1.0", "1.0"]) == 1
    assert "non-positive mass" in capsys.readouterr().err


def test_run_simulation_with_streams(planets_input):
    out = io.StringIO()
    sim = run_simulation(10.0, 3.0, stdin=io.StringIO(planets_input), stdout=out)
    assert sim.step_count == 3
    assert out.getvalue().splitlines()[0] == "5"


def test_run_simulation_closes_renderer(planets_input):
    class FakeRenderer:
        def __init__(self):
            self.frames = 0
            self.closed = False

        def observer(self, simulator):
            self.frames += 1

        def close(self):
            self.closed = True

    renderer = FakeRenderer()
    run_simulation(4.0, 1.0, stdin=io.StringIO(planets_input), stdout=io.StringIO(), renderer=renderer)
    assert renderer.frames == 4
    assert renderer.closed
