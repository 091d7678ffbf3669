"""Main entry point for the GridLife simulation.

Reads a board file and a parameter file, runs the simulation and prints a
statistics line per round plus periodic dumps of every living agent.
"""

import argparse
import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def run_simulation(board_path, parameters_path, seed=None, export_stats=None):
    """Load the inputs and run the simulation to completion.

    Args:
        board_path: Path to the board layout file
        parameters_path: Path to the parameter file
        seed: Optional random seed for deterministic behavior
        export_stats: Optional filename to export JSON stats
    """
    from gridlife.board import load_layout
    from gridlife.config.parameters import load_parameters
    from gridlife.grid import Grid
    from gridlife.simulation import Simulation

    grid = Grid(load_layout(board_path))
    parameters = load_parameters(parameters_path)

    simulation = Simulation(grid, parameters, seed=seed)
    simulation.run()
    if export_stats:
        simulation.export_stats_json(export_stats)


def main(argv=None):
    """Parse command-line arguments and run the simulation."""
    parser = argparse.ArgumentParser(
        description="GridLife artificial-life simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a simulation
  python main.py board.txt parameters.txt

  # Reproducible run with exported stats
  python main.py board.txt parameters.txt --seed 42 --export-stats run.json
        """,
    )

    parser.add_argument("board", help="Board layout file ('x' = food, ' ' = empty)")
    parser.add_argument("parameters", help="Parameter file (one 'name value' pair per line)")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Export per-round stats to a JSON file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )

    args = parser.parse_args(argv)
    logging.getLogger().setLevel(args.log_level)

    from gridlife.exceptions import GridLifeError

    try:
        run_simulation(args.board, args.parameters, seed=args.seed, export_stats=args.export_stats)
    except GridLifeError as e:
        logger.error("ERROR: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
