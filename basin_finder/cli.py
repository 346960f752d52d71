# region Header
"""
cli.py — find low points and basins in a height map file

Usage:
  python -m basin_finder [NAME] [--input-dir DIR] [--workers N] [--render] [--plot FILE]
"""
# endregion

# region Imports
import argparse
import logging
import os
import sys
from typing import Callable, Optional, Sequence

from .analysis import analyze
from .config import DEFAULT_INPUT_DIR, DEFAULT_INPUT_NAME, DEFAULT_LOG_LEVEL, LOG_ENV_VAR
from .errors import BasinFinderError
from .parsing import read_height_grid, resolve_input_path
from .render import BOLD, FG_GREEN, FG_RED, colorize, paint
# endregion

logger = logging.getLogger("basin_finder")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# region Result Display
def display_result(compute: Callable[[], int]) -> str:
    try:
        outcome = compute()
    except BasinFinderError as e:
        return paint(f"Failed to compute result: {paint(str(e), BOLD)}", FG_RED)
    return paint(str(outcome), BOLD, FG_GREEN)
# endregion


# region Argument Parsing
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="basin-finder", description="Find low points and basins in a height map.")
    p.add_argument("name", nargs="?", default=DEFAULT_INPUT_NAME,
                   help="input file, or name resolved as <input-dir>/<name>.input")
    p.add_argument("--input-dir", default=str(DEFAULT_INPUT_DIR))
    p.add_argument("--workers", type=int, default=None,
                   help="expand basins on this many threads")
    p.add_argument("--render", action="store_true", help="print the colourised basin map")
    p.add_argument("--plot", metavar="FILE", default=None, help="save a matplotlib basin map")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                   default=os.environ.get(LOG_ENV_VAR, DEFAULT_LOG_LEVEL).upper())
    return p
# endregion


# region Main
def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} from {LOG_ENV_VAR}")
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        path = resolve_input_path(args.name, args.input_dir)
        grid = read_height_grid(path)
    except (FileNotFoundError, BasinFinderError) as e:
        logger.error("%s", e)
        return 1

    analysis = analyze(grid, max_workers=args.workers)

    if args.render:
        print(colorize(analysis))
    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        from .viz import show_basin_map  # local import: matplotlib only when plotting
        fig = show_basin_map(analysis, title=path.name)
        fig.savefig(args.plot)
        logger.info("Wrote basin map to %s", args.plot)

    logger.info("Solution to part one: %s", display_result(analysis.part_one))
    logger.info("Solution to part two: %s", display_result(analysis.part_two))
    return 0


if __name__ == "__main__":
    sys.exit(main())
# endregion
