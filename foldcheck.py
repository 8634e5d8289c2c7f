#!/usr/bin/env python3
"""
Check fold-puzzle problems and solutions.

Prints the exact area of a problem and runs the self-consistency checks on
a solution.

Usage:
  foldcheck --problem data/square_with_hole.problem
  foldcheck --solution data/unit_square.solution --fail-fast
  foldcheck --problem p.txt --solution s.txt --config checks.yaml --plot out.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from formats import FormatError, read_problem, read_solution
from logging_config import setup_logging
from settings import CheckerConfig, load_config
from validator import problem_area, run_checks

logger = logging.getLogger("foldcheck.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="foldcheck",
        description="Exact area and validity checks for fold-puzzle files",
    )
    ap.add_argument("--problem", help="Problem file to measure")
    ap.add_argument("--solution", help="Solution file to validate")
    ap.add_argument("--config", help="YAML checker configuration")
    ap.add_argument("--plot", help="Write a PNG of the loaded problem/solution")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    ap.add_argument("--log-file", help="Also write logs to this file")
    ap.add_argument("--fail-fast", action="store_true", default=None,
                    help="Stop at the first failing check")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if not args.problem and not args.solution:
        ap.error("give --problem, --solution or both")

    try:
        config = load_config(args.config) if args.config else CheckerConfig()
        config = config.override(
            log_level=args.log_level, log_file=args.log_file, fail_fast=args.fail_fast,
        )
    except (OSError, ValueError) as e:
        setup_logging()
        logger.error("%s", e)
        return EXIT_INPUT_ERROR

    try:
        setup_logging(config.log_level, config.log_file)
    except OSError as e:
        setup_logging(config.log_level)
        logger.error("Cannot open log file: %s", e)
        return EXIT_INPUT_ERROR

    try:
        problem = read_problem(args.problem) if args.problem else None
        solution = read_solution(args.solution) if args.solution else None
    except (OSError, FormatError) as e:
        logger.error("%s", e)
        return EXIT_INPUT_ERROR

    status = EXIT_OK

    if problem is not None:
        print(f"Problem: {len(problem.pos_polys)} positive, {len(problem.neg_polys)} negative polygons, "
              f"{len(problem.skeleton)} skeleton edges")
        print(f"Problem area: {problem_area(problem)}")

    if solution is not None:
        print(f"Solution: {len(solution.source)} vertices, {len(solution.facets)} facets")
        report = run_checks(solution, config.checks, fail_fast=config.fail_fast)
        for result in report.results:
            print(f"  {result.name:<28} {'ok' if result.passed else 'FAILED'}")
        print(f"Solution valid: {'yes' if report.valid else 'no'}")
        if not report.valid:
            logger.info("Failed checks: %s", ", ".join(report.failed))
            status = EXIT_INVALID

    if args.plot:
        # matplotlib is heavy; only pull it in when asked
        from visualize import save_figure

        out = save_figure(args.plot, problem=problem, solution=solution)
        logger.info("Wrote %s", out)

    return status


if __name__ == "__main__":
    sys.exit(main())
