"""Command-line interface for subsetgen."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from subsetgen.generator import SubsetGenerator, subset_count
from subsetgen.loader import load_problem, load_problem_yaml, problem_from_dict
from subsetgen.logging import configure_cli_logging, get_logger
from subsetgen.problems import (
    SetCoverProblem,
    SubsetSumProblem,
    solve_set_cover,
    solve_subset_sum,
)

logger = get_logger(__name__)


def _format_table(
    headers: List[str], rows: List[List[str]], min_width: int = 8
) -> str:
    """Format the ``inspect`` summary as a simple ASCII table.

    Returns:
        Formatted table string, or ``""`` when there are no rows.
    """
    if not rows:
        return ""

    col_widths = [
        max(min_width, len(headers[col]), *(len(row[col]) for row in rows))
        for col in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _parse_item(token: str) -> Any:
    """Interpret a command-line item as JSON when possible, else as a string."""
    try:
        return json.loads(token)
    except ValueError:
        return token


def _non_negative_int(value: str) -> int:
    """argparse type for ``--limit``."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _enumerate_items(
    items: List[str], include_empty: bool, limit: Optional[int]
) -> None:
    """Print every subset of ``items`` as one JSON array per line.

    Args:
        items: Raw command-line tokens.
        include_empty: Whether to print the empty subset first.
        limit: Print at most this many subsets; ``None`` prints all.
    """
    try:
        values = [_parse_item(token) for token in items]
        total = subset_count(len(values), include_empty)
        logger.info(
            f"Enumerating {total:,} {_plural(total, 'subset')} "
            f"of {len(values)} {_plural(len(values), 'item')}"
        )
        for count, subset in enumerate(
            SubsetGenerator(values, include_empty=include_empty), start=1
        ):
            if limit is not None and count > limit:
                logger.info(f"Stopped after --limit {limit}")
                break
            print(json.dumps(subset))
    except Exception as e:
        logger.error(f"Failed to enumerate subsets: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to enumerate subsets: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect_problem(path: Path) -> None:
    """Validate a problem file and print a short summary."""
    logger.info(f"Inspecting problem from: {path}")
    try:
        data = load_problem_yaml(path.read_text())
        problem = problem_from_dict(data)
        logger.info("✓ Problem validated and loaded successfully")

        if isinstance(problem, SetCoverProblem):
            n = len(problem.families)
            detail = f"universe={problem.universe}"
        else:
            n = len(problem.values)
            detail = f"target={problem.target}"

        print(f"✅ Problem: {data.get('name', path.stem)}")
        print(
            _format_table(
                ["Kind", "Items", "Subsets", "Detail"],
                [[data["kind"], str(n), f"{subset_count(n):,}", detail]],
            )
        )
    except FileNotFoundError:
        logger.error(f"Problem file not found: {path}")
        print(f"❌ ERROR: Problem file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect problem: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to inspect problem: {type(e).__name__}: {e}")
        sys.exit(1)


def _solve_problem(path: Path, stdout: bool) -> None:
    """Load a problem file, solve it and report the result.

    Args:
        path: Problem YAML file.
        stdout: Whether to print the result as JSON instead of a summary line.
    """
    logger.info(f"Loading problem from: {path}")
    _start_time = perf_counter()

    try:
        problem = load_problem(path)
        result_dict: Dict[str, Any]
        if isinstance(problem, SubsetSumProblem):
            sum_result = solve_subset_sum(problem)
            result_dict = sum_result.to_dict()
            summary = (
                f"found subset {list(sum_result.subset)}"
                if sum_result.found
                else "no subset found"
            )
        else:
            cover_result = solve_set_cover(problem)
            result_dict = cover_result.to_dict()
            summary = (
                f"optimum {cover_result.optimum} "
                f"(families {list(cover_result.selection)})"
                if cover_result.optimum is not None
                else "no cover exists"
            )

        if stdout:
            print(json.dumps(result_dict, indent=2))
        else:
            print(f"✅ {result_dict['kind']}: {summary}")

        _elapsed = perf_counter() - _start_time
        logger.info(f"Problem solved in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        logger.error(f"Problem file not found: {path}")
        print(f"❌ ERROR: Problem file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve problem: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to solve problem: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``subsetgen`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="subsetgen",
        description="Enumerate subsets and solve small brute-force problems.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{enumerate,solve,inspect}",
        help="Available commands",
    )

    enum_parser = subparsers.add_parser(
        "enumerate", help="Print every subset of the given items"
    )
    enum_parser.add_argument(
        "items", nargs="*", help="Items (parsed as JSON if possible)"
    )
    enum_parser.add_argument(
        "--include-empty",
        "-e",
        action="store_true",
        help="Also print the empty subset",
    )
    enum_parser.add_argument(
        "--limit",
        "-n",
        type=_non_negative_int,
        default=None,
        help="Print at most this many subsets (0 prints nothing)",
    )

    solve_parser = subparsers.add_parser("solve", help="Solve a problem file")
    solve_parser.add_argument("problem", type=Path, help="Path to problem YAML")
    solve_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the result as JSON",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a problem file"
    )
    inspect_parser.add_argument("problem", type=Path, help="Path to problem YAML")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if configure_cli_logging(args.verbose, args.quiet) == logging.DEBUG:
        logger.debug("Debug logging enabled")

    if args.command == "enumerate":
        _enumerate_items(args.items, args.include_empty, args.limit)
    elif args.command == "solve":
        _solve_problem(args.problem, args.stdout)
    elif args.command == "inspect":
        _inspect_problem(args.problem)


if __name__ == "__main__":
    main()
