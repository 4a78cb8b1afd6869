"""
Compare the mock lifecycle strategies.

Runs each demo module under pytest and prints how its tests failed.
A strategy is isolated when its only failures are assertion failures.

Exit codes:
    0 - every selected strategy is isolated
    1 - at least one strategy failed with a lifecycle or unexpected error
    2 - the demo directory or a demo module is missing

Usage:
    python -m mock_lifecycle
    python -m mock_lifecycle --strategy manual --strategy runner -v
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config import settings
from mock_lifecycle.report import STRATEGIES, StrategyReport, run_strategy

logger = logging.getLogger("mock_lifecycle")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m mock_lifecycle",
        description="Run the mock lifecycle demos and compare their failures.",
    )
    parser.add_argument(
        "--demo-dir",
        default=settings.demo_dir,
        help=f"Directory holding the demo modules (default: {settings.demo_dir})",
    )
    parser.add_argument(
        "--strategy",
        action="append",
        choices=sorted(STRATEGIES),
        help="Strategy to run; repeat to run several (default: all)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print every failure, not just the summary",
    )
    return parser


def print_report(report: StrategyReport, verbose: bool = False) -> None:
    icon = "✅" if report.is_isolated else "❌"
    print(f"{icon} {report.summary()}")
    if verbose:
        for outcome in report.failures():
            kind = outcome.kind.value if outcome.kind else "unknown"
            print(f"    [{kind}] {outcome.nodeid} ({outcome.when}): {outcome.message}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    demo_dir = Path(args.demo_dir)
    if not demo_dir.is_dir():
        print(f"❌ Demo directory not found: {demo_dir}", file=sys.stderr)
        return 2

    names = args.strategy or list(STRATEGIES)
    reports = []
    for name in names:
        try:
            report = run_strategy(name, demo_dir / STRATEGIES[name], settings.pytest_arg_list())
        except FileNotFoundError as e:
            print(f"❌ {e}", file=sys.stderr)
            return 2
        reports.append(report)

    print("\n--- Mock lifecycle strategies ---")
    for report in reports:
        print_report(report, verbose=args.verbose)

    isolated = all(report.is_isolated for report in reports)
    if not isolated:
        logger.warning("At least one strategy leaked mock state between tests")
    return 0 if isolated else 1


if __name__ == "__main__":
    sys.exit(main())
