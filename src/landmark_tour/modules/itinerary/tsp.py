"""Exhaustive tour enumeration, used to cross-check the memoized search."""

from __future__ import annotations

from typing import List, Tuple

from landmark_tour.core.errors import MissingIntermediateEdgeError
from landmark_tour.core.models import Landmark, TourResult
from landmark_tour.modules.itinerary.graph import TourGraph
from landmark_tour.modules.itinerary.solver import improves

Suffix = Tuple[float, float, List[Landmark]]


def _best_suffix(graph: TourGraph, start: Landmark, current: Landmark, remaining: Tuple[Landmark, ...]) -> Suffix:
    """Walk every ordering of `remaining` from `current`, with no memo table.

    Each step compares `edge + best suffix`, the same totals the memoized
    search compares, so float rounding ties resolve to the same tour.
    """
    if not remaining:
        score, time = graph.return_weight(current, start).as_tuple()
        return score, time, []

    best_score = float("-inf")
    best_time = float("inf")
    best_path: List[Landmark] = []
    for i, nxt in enumerate(remaining):
        edge = graph.weight(current, nxt)
        if edge is None:
            raise MissingIntermediateEdgeError(current, nxt)
        sub_score, sub_time, sub_path = _best_suffix(graph, start, nxt, remaining[:i] + remaining[i + 1 :])
        score = edge.score + sub_score
        time = edge.time + sub_time
        if improves(score, time, best_score, best_time):
            best_score, best_time, best_path = score, time, [nxt] + sub_path
    return best_score, best_time, best_path


def solve_tour_bruteforce(graph: TourGraph, start: Landmark) -> TourResult:
    others = tuple(name for name in graph.landmarks() if name != start)
    score, time, path = _best_suffix(graph, start, start, others)
    return TourResult(tour=[start] + path + [start], total_score=score, total_time=time)
