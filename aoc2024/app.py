import argparse
from pathlib import Path
from typing import Callable, List, Optional

from . import __version__
from .env import input_path, load_env, log_dir, log_level
from .logger import get_logger, reset_logger
from .source import InputError
from .similarity import similarity_score_from_file
from .distance import total_distance_from_file
from .reports import safe_reports_from_file

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _resolve_input(args: argparse.Namespace) -> Path:
    value = getattr(args, "input", None)
    return Path(value) if value else input_path()


def _run(args: argparse.Namespace, label: str, solve: Callable[[Path], int]) -> None:
    path = _resolve_input(args)
    logger = get_logger()
    try:
        result = solve(path)
    except InputError as e:
        logger.error(f"{label} failed", path=str(e.path), error=type(e).__name__)
        raise SystemExit(f"Error: {e}")
    logger.log_metrics_summary()
    print(f"{label}: {result}")


def cmd_similarity(args: argparse.Namespace) -> None:
    _run(args, "Similarity Score", similarity_score_from_file)


def cmd_distance(args: argparse.Namespace) -> None:
    _run(args, "Total Distance", total_distance_from_file)


def cmd_reports(args: argparse.Namespace) -> None:
    _run(args, "Safe Reports", safe_reports_from_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2024", description="List and report puzzle solvers")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for stderr output (or set AOC_LOG_LEVEL; default INFO)",
    )

    subparsers = parser.add_subparsers(dest="command")
    sim = subparsers.add_parser("similarity", help="Sum each left value times its frequency in the right column")
    sim.add_argument("--input", help="Two-column input file (or set AOC_INPUT; default puzzle_input.txt)")
    sim.set_defaults(func=cmd_similarity)

    dist = subparsers.add_parser("distance", help="Sum of distances between the sorted left and right columns")
    dist.add_argument("--input", help="Two-column input file (or set AOC_INPUT; default puzzle_input.txt)")
    dist.set_defaults(func=cmd_distance)

    rep = subparsers.add_parser("reports", help="Count reports whose levels change safely")
    rep.add_argument("--input", help="Report file, one report per line (or set AOC_INPUT)")
    rep.set_defaults(func=cmd_reports)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    # Load .env if present (AOC_INPUT, AOC_LOG_LEVEL, AOC_LOG_DIR)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    level = args.log_level or log_level()
    if level not in LOG_LEVELS:
        raise SystemExit(f"Invalid log level: {level}. Use one of {', '.join(LOG_LEVELS)}")
    directory = log_dir()
    reset_logger()
    get_logger(level=level, log_dir=directory, enable_file=directory is not None)

    # The similarity score is the default solver
    func = getattr(args, "func", cmd_similarity)
    func(args)


if __name__ == "__main__":
    main()
