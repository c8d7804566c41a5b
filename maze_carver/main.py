import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Carver: perfect maze generator with ASCII output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--width", type=int, default=20, help="Maze Width")
    parser.add_argument("--height", type=int, default=20, help="Maze Height")
    parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    parser.add_argument("--stats", action="store_true", help="Log maze statistics after carving")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_carver")

    from maze_carver.core.grid import Grid, InvalidDimensions
    try:
        grid = Grid(args.width, args.height)
    except InvalidDimensions as e:
        parser.error(str(e))

    logger.info(f"Carving {args.width}x{args.height} maze (seed={args.seed})...")

    from maze_carver.algo.dfs import RecursiveBacktracker
    generator = RecursiveBacktracker(seed=args.seed)
    for status in generator.run(grid):
        logger.debug(status)

    logger.info(f"Grid state: {grid.state.value}")

    if args.stats:
        from maze_carver.core.analysis import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    print(grid.to_text())
    return 0

if __name__ == "__main__":
    sys.exit(main())
