"""Pipeline step wiring."""

from __future__ import annotations

from typing import List, Optional

from landmark_tour.adapters.io.readers import read_inputs
from landmark_tour.core.errors import PreconditionMismatchError
from landmark_tour.core.models import TourInputs, TourLeg, TourRequest, TourResult
from landmark_tour.modules.itinerary.builder import build_legs
from landmark_tour.modules.itinerary.graph import TourGraph
from landmark_tour.modules.itinerary.solver import solve_graph


def run_inputs(request: TourRequest) -> TourInputs:
    return read_inputs(request.graph_path, request.interest_path, request.load_path)


def run_graph(inputs: TourInputs) -> TourGraph:
    return TourGraph.from_records(inputs.edges, inputs.interest, inputs.load)


def check_landmark_count(expected: Optional[int], graph: TourGraph) -> None:
    if expected is None:
        return
    if expected != len(graph):
        raise PreconditionMismatchError(expected=expected, found=len(graph))


def run_solve(graph: TourGraph, *, start: str, strategy: str, max_landmarks: int) -> TourResult:
    return solve_graph(graph, start, strategy=strategy, max_landmarks=max_landmarks)


def run_legs(graph: TourGraph, result: TourResult) -> List[TourLeg]:
    return build_legs(graph, result)
