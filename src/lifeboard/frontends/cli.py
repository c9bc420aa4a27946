"""Command-line interface for Conway's Game of Life."""

import argparse
import time
import traceback
from typing import Any, Dict, Optional, Tuple

from ..core.board import Board
from ..core.config import BOARD_KINDS, BOUNDED_KINDS, SimulationConfig, is_bounded
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def setup_board(self, config: SimulationConfig, verbose: bool = False) -> Board:
        """Create a board and populate it from the configuration.

        Args:
            config: Simulation configuration
            verbose: Print progress updates

        Returns:
            Populated board

        Raises:
            ValueError: If the configured pattern does not exist, or a
                random fill is requested for the sparse board
        """
        board = config.create_board()

        if verbose:
            if is_bounded(board):
                print(f"Initializing {config.width}x{config.height} {config.board} board")
            else:
                print(f"Initializing unbounded {config.board} board")

        if config.pattern:
            pattern = self.pattern_library.get_pattern(config.pattern)
            if pattern is None:
                raise ValueError(f"Pattern '{config.pattern}' not found")
            if verbose:
                print(f"Loading pattern '{config.pattern}' at ({config.pattern_x}, {config.pattern_y})")
            pattern.apply_to_board(board, config.pattern_x, config.pattern_y)
        elif config.randomize:
            if not is_bounded(board):
                raise ValueError("Random fill is only available on dense boards")
            if verbose:
                print(f"Generating random population (seed: {config.seed})")
            board.randomize(config.seed)

        return board

    def run_simulation(
        self,
        config: SimulationConfig,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, str, Dict[str, Any]]:
        """Run a Game of Life simulation.

        Args:
            config: Simulation configuration
            verbose: Print progress updates
            show_grid: Show initial and final board states

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        board = self.setup_board(config, verbose)
        game = GameOfLife(board)

        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nInitial grid:")
            print(self._format_grid(board))

        start_time = time.time()

        if verbose:
            print(f"\nRunning simulation (max {config.max_generations} generations)...")

        final_generation, reason = game.run_until_stable(config.max_generations)

        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_grid and reason != "extinction":
            print(f"\nFinal grid (generation {final_generation}):")
            print(self._format_grid(board))

        return final_generation, reason, stats

    def _format_grid(self, board: Board, max_size: int = 80) -> str:
        """Format board for display, truncating if too large.

        Args:
            board: Board to format
            max_size: Maximum dimension to display

        Returns:
            Formatted board string
        """
        bbox = board.get_bounding_box()
        if is_bounded(board):
            width, height = board.shape
        elif bbox is None:
            return "(empty)"
        else:
            width = bbox[2] - bbox[0] + 1
            height = bbox[3] - bbox[1] + 1

        if width > max_size or height > max_size:
            return f"Grid too large to display ({width}x{height})"

        return str(board)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life simulations from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the acorn on the unbounded sparse board
  lifeboard-cli --pattern Acorn -m 6000 --verbose

  # Random 40x40 dense board, reproducible
  lifeboard-cli --board dense-cached -W 40 -H 40 --random --seed 7

  # Glider on a small rescanning board
  lifeboard-cli --board dense-rescan -W 10 -H 10 --pattern Glider --pattern-y 5 --show-grid

  # List available patterns
  lifeboard-cli --list-patterns
        """,
    )

    parser.add_argument(
        "-b",
        "--board",
        type=str,
        default="sparse",
        choices=list(BOARD_KINDS),
        help="Board engine to use (default: sparse)",
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=50, help="Board width for dense boards (default: 50)")

    parser.add_argument("-H", "--height", type=int, default=50, help="Board height for dense boards (default: 50)")

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=0,
        help="X offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=0,
        help="Y offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="Fill a dense board with a random population (probability 1/2)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible fills",
    )

    # Simulation configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=1000,
        help="Maximum generations to simulate (default: 1000)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final board states (small boards only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a simulation configuration from parsed arguments."""
    return SimulationConfig(
        board=args.board,
        width=args.width,
        height=args.height,
        max_generations=args.max_generations,
        pattern=args.pattern,
        pattern_x=args.pattern_x,
        pattern_y=args.pattern_y,
        randomize=args.random,
        seed=args.seed,
    )


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from GameOfLife.run_until_stable
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "still_life":
        return "Still life - the board stopped changing"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        if "grid_size" in stats:
            print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        if "population_density" in stats:
            print(f"  Population density: {stats['population_density']:.2%}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(
                f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) " f"[{bbox_size[0]}x{bbox_size[1]}]"
            )
    else:
        initial_pop = stats["initial_population"]
        final_pop = stats["population"]
        duration = stats.get("duration_seconds", 0)
        speed = stats.get("generations_per_second", 0)

        print(
            "Population: {} -> {}, "
            "Duration: {:.3f}s, "
            "Speed: {:.0f} gen/s".format(initial_pop, final_pop, duration, speed)
        )


def validate_args(args: argparse.Namespace, pattern_library: Optional[PatternLibrary] = None) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        pattern_library: Library used to check the pattern name

    Returns:
        True if arguments are valid
    """
    errors = []
    bounded = args.board in BOUNDED_KINDS

    if bounded and args.width <= 0:
        errors.append("Width must be positive")

    if bounded and args.height <= 0:
        errors.append("Height must be positive")

    if args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if bounded and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if bounded and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if args.random and not bounded:
        errors.append("Random fill is only available on dense boards")

    if args.random and args.pattern:
        errors.append("Choose either --pattern or --random, not both")

    if args.pattern and pattern_library is not None and pattern_library.get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found (available: {', '.join(pattern_library.list_patterns())})")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args, cli.pattern_library):
        return 1

    config = config_from_args(args)

    # Auto-center pattern on dense boards if no offset specified
    if config.pattern and config.board in BOUNDED_KINDS and config.pattern_x == 0 and config.pattern_y == 0:
        pattern_size = cli.pattern_library.get_pattern(config.pattern).get_size()
        config.pattern_x = max(0, (config.width - pattern_size[0]) // 2)
        config.pattern_y = max(0, (config.height - pattern_size[1]) // 2)
        if args.verbose:
            print(f"Auto-centering pattern at ({config.pattern_x}, {config.pattern_y})")

    try:
        final_generation, reason, stats = cli.run_simulation(
            config, verbose=args.verbose, show_grid=args.show_grid
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1

    print_results(final_generation, reason, stats, args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
