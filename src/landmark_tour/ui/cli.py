"""CLI entry point for the landmark tour planner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from landmark_tour.adapters.io.exports import export_tour_xlsx, render_report, serialize_tour_plan, write_json
from landmark_tour.core.config import STRATEGIES, load_paths, load_solver_settings
from landmark_tour.core.errors import MalformedInputError, PreconditionMismatchError, TourPlannerError
from landmark_tour.core.models import TourRequest
from landmark_tour.core.normalization import build_meta, parse_count
from landmark_tour.pipeline.orchestrator import Orchestrator

LOG = logging.getLogger(__name__)

PROMPT = "Please enter the total number of landmarks (including Hotel): "


def build_parser() -> argparse.ArgumentParser:
    paths = load_paths()
    settings = load_solver_settings()
    parser = argparse.ArgumentParser(description="Landmark Tour Planner CLI")
    parser.add_argument("--graph", type=Path, default=paths.graph_path, help="Landmark map data file")
    parser.add_argument("--interest", type=Path, default=paths.interest_path, help="Personal interest file")
    parser.add_argument("--load", type=Path, default=paths.load_path, help="Visitor load file")
    parser.add_argument("--start", type=str, default=settings.start, help=f"Start/end landmark (default: {settings.start})")
    parser.add_argument("--expected", type=int, default=None, help="Expected number of landmarks, including the start")
    parser.add_argument("--no-prompt", action="store_true", help="Skip the landmark count prompt when --expected is absent")
    parser.add_argument("--strategy", choices=STRATEGIES, default=settings.strategy, help="Solver strategy")
    parser.add_argument("--max-landmarks", type=int, default=settings.max_landmarks, help="Largest landmark universe to solve")
    parser.add_argument("--output", type=Path, default=None, help="Write the tour as JSON to this path")
    parser.add_argument("--xlsx", type=Path, default=None, help="Write the tour legs as an Excel workbook")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def prompt_expected_count() -> int:
    try:
        raw = input(PROMPT)
    except EOFError as exc:
        raise MalformedInputError("no landmark count given: input closed") from exc
    count = parse_count(raw)
    if count is None:
        raise MalformedInputError("no landmark count given")
    return count


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    request = TourRequest(
        graph_path=args.graph,
        interest_path=args.interest,
        load_path=args.load,
        start=args.start,
        expected_landmarks=args.expected,
        strategy=args.strategy,
        max_landmarks=args.max_landmarks,
    )
    ask = None if args.no_prompt else prompt_expected_count

    orchestrator = Orchestrator()
    try:
        plan = orchestrator.run(request, ask_expected=ask)
    except PreconditionMismatchError as exc:
        print(str(exc))
        return 1
    except TourPlannerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("\nThree input files are read.\n")
    print("The tour planning is now processing…\n")
    print(render_report(plan))

    if args.output:
        write_json(args.output, serialize_tour_plan(plan, meta=build_meta(args.start)))
        LOG.info("Wrote %s", args.output)
    if args.xlsx:
        export_tour_xlsx(args.xlsx, plan)
        LOG.info("Wrote %s", args.xlsx)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
