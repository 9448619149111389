"""Command-line interface."""

from __future__ import annotations

import argparse
import sys

from .. import config
from ..core.constraints import check_solution
from ..core.model import abbreviate
from ..core.search import SearchState, solve
from ..logging_utils import get_logger, set_verbose
from . import parser

logger = get_logger()


def _trace(state: SearchState) -> None:
    logger.debug("%s", abbreviate(state.solution))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="snakecube",
        description="Snake cube puzzle solver",
        epilog=(
            "Without segments the built-in 4-cube chain is solved; that search commits "
            "several million folds and can take minutes. Progress is logged at INFO."
        ),
    )
    ap.add_argument("size", nargs="?", type=int, default=None, help="Side length of the cube")
    ap.add_argument("segments", nargs="*", type=int, help="Segment lengths of the chain")
    ap.add_argument("-p", "--puzzle", help="Path to a puzzle YAML file")
    ap.add_argument("--trace", action="store_true", help="Log the fold prefix after every move")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.puzzle:
            puz = parser.load_puzzle(args.puzzle)
        elif args.segments:
            puz = parser.Puzzle(size=args.size, segments=list(args.segments))
            parser.validate_puzzle(puz.size, puz.segments)
        else:
            if args.size is not None:
                logger.warning(
                    "Size %d given without segments; ignoring it and using the built-in %d-cube chain",
                    args.size,
                    config.DEFAULT_SIZE,
                )
            else:
                logger.info("No segments given, using the built-in %d-cube chain", config.DEFAULT_SIZE)
            puz = parser.Puzzle(size=config.DEFAULT_SIZE, segments=list(config.DEFAULT_SEGMENTS))
    except parser.InvalidPuzzleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    trace = args.trace or puz.trace
    set_verbose(args.verbose or trace)

    moves = solve(puz.size, puz.segments, observer=_trace if trace else None)
    if moves is None:
        print("No solution found.")
        return 0

    problems = check_solution(puz.size, puz.segments, moves)
    if problems:
        for problem in problems:
            logger.error("Invalid solution: %s", problem)
        return 1

    for move in moves:
        print(move)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
