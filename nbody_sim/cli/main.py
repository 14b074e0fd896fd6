"""CLI main entry point.

Usage: nbody-sim T dt < input.txt
"""

import argparse
import logging
import sys
from typing import List, Optional
from nbody_sim.errors import InvalidArgumentError, InvalidInputError, ParseError
from nbody_sim.io.universe_io import parse_universe, write_universe
from nbody_sim.physics.simulator import Simulator

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting with status 2."""

    def error(self, message):
        raise InvalidArgumentError(message)


def build_parser(prog: str = "nbody-sim") -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description="Brute-force N-body simulation. Reads initial conditions from "
                    "standard input and prints the final state.",
        add_help=False,
    )
    parser.add_argument('total_time', type=float, metavar='T',
                        help='Total simulated time in seconds')
    parser.add_argument('dt', type=float, metavar='delta_t',
                        help='Time step in seconds')
    return parser


def run_simulation(total_time: float, dt: float, stdin=None, stdout=None, renderer=None) -> Simulator:
    """Read initial conditions, run to total_time and write the final state."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    body_count, radius, bodies = parse_universe(stdin)

    sim = Simulator()
    sim.initialize(body_count, radius, bodies)
    if renderer is not None:
        sim.add_observer(renderer.observer)

    try:
        steps = sim.run(total_time, dt)
    finally:
        if renderer is not None:
            renderer.close()
    logger.info("Completed %d steps, t=%g", steps, sim.time)

    write_universe(sim.final_state(), stdout)
    return sim


def main(argv: Optional[List[str]] = None, render: bool = False, prog: str = "nbody-sim") -> int:
    """CLI entry point."""
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    parser = build_parser(prog)
    try:
        args = parser.parse_args(argv)
    except InvalidArgumentError as e:
        parser.print_usage(sys.stderr)
        print(f"{prog}: error: {e}", file=sys.stderr)
        return 1

    renderer = None
    if render:
        from nbody_sim.render.renderer_2d import Renderer2D
        # Sprites named by the body labels are looked up in ./images, if present
        renderer = Renderer2D(image_dir="images")

    try:
        run_simulation(args.total_time, args.dt, renderer=renderer)
    except (ParseError, InvalidInputError) as e:
        print(f"{prog}: error: {e}", file=sys.stderr)
        return 1
    return 0


def view(argv: Optional[List[str]] = None) -> int:
    """Entry point that animates the run in a matplotlib window."""
    return main(argv, render=True, prog="nbody-sim-view")


if __name__ == '__main__':
    sys.exit(main())
