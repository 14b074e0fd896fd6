"""Plain-text universe format.

Input is a whitespace-separated token stream::

    N
    R
    x y vx vy mass label     (N times)

Output uses the same field order with fixed-width scientific notation.
"""

from pathlib import Path
from typing import IO, Iterator, List, Tuple, Union
from nbody_sim.errors import ParseError
from nbody_sim.physics.universe import Body, Universe

BODY_FIELDS = ("x", "y", "vx", "vy", "mass", "label")


def _tokens(source: Union[str, IO]) -> Iterator[str]:
    if isinstance(source, str):
        yield from source.split()
        return
    for line in source:
        yield from line.split()


def _next_token(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ParseError(f"Unexpected end of input while reading {what}") from None


def _parse_float(token: str, what: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ParseError(f"Expected a number for {what}, got '{token}'") from None


def parse_universe(source: Union[str, IO]) -> Tuple[int, float, List[Body]]:
    """Parse initial conditions.

    Args:
        source: Text, or a readable text stream (e.g. ``sys.stdin``)

    Returns:
        Tuple of (body_count, radius, bodies). A non-positive count yields an
        empty body list; validation is left to ``Simulator.initialize``.

    Raises:
        ParseError: On missing tokens or non-numeric fields
    """
    tokens = _tokens(source)

    token = _next_token(tokens, "number of bodies")
    try:
        n = int(token)
    except ValueError:
        raise ParseError(f"Expected an integer number of bodies, got '{token}'") from None

    radius = _parse_float(_next_token(tokens, "universe radius"), "universe radius")

    bodies = []
    for i in range(max(n, 0)):
        values = []
        for field in BODY_FIELDS[:-1]:
            what = f"{field} of body {i}"
            values.append(_parse_float(_next_token(tokens, what), what))
        label = _next_token(tokens, f"label of body {i}")
        bodies.append(Body(*values, label))

    return n, radius, bodies


def read_universe(path: Union[str, Path]) -> Tuple[int, float, List[Body]]:
    """Parse initial conditions from a file."""
    with open(path, "r") as f:
        return parse_universe(f)


def format_universe(universe: Universe) -> str:
    """Format a universe in the report layout."""
    lines = [f"{len(universe)}", f"{universe.radius:.2e}"]
    for body in universe.bodies():
        lines.append(
            f"{body.x:11.4e} {body.y:11.4e} {body.vx:11.4e} {body.vy:11.4e} "
            f"{body.mass:11.4e} {body.label:>12s}"
        )
    return "\n".join(lines) + "\n"


def write_universe(universe: Universe, stream: IO):
    """Write a universe to a text stream in the report layout."""
    stream.write(format_universe(universe))
