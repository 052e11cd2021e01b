"""Exact optimal tour search (Held-Karp over visited-landmark bitmasks).

A tour starts and ends at the start landmark and visits every other landmark
exactly once. Tours are ranked by total attractiveness score (higher is
better), then by total travel time (lower is better). Remaining ties go to the
candidate seen first in canonical landmark order, so results are
deterministic.

The memo table maps ``(current_index, visited_mask)`` to
``(best_score, best_time, best_next_index)`` and lives only as long as one
solve.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from landmark_tour.core.config import STRATEGIES
from landmark_tour.core.errors import MissingIntermediateEdgeError, ValidationError
from landmark_tour.core.models import DEFAULT_START, Landmark, TourResult
from landmark_tour.modules.attractiveness.scoring import RawEdge, coerce_edge, coerce_factor_map
from landmark_tour.modules.itinerary.graph import TourGraph

LOG = logging.getLogger(__name__)

DEFAULT_MAX_LANDMARKS = 20
BRUTEFORCE_MAX_LANDMARKS = 10

MemoKey = Tuple[int, int]
MemoEntry = Tuple[float, float, int]


def improves(score: float, time: float, best_score: float, best_time: float) -> bool:
    return score > best_score or (score == best_score and time < best_time)


class _TourSearch:
    def __init__(self, graph: TourGraph, start: Landmark) -> None:
        self.graph = graph
        self.start = start
        self.landmarks = graph.landmarks()
        self.start_index = graph.index(start)
        self.start_mask = 1 << self.start_index
        self.full_mask = (1 << len(self.landmarks)) - 1
        self.memo: Dict[MemoKey, MemoEntry] = {}

    def _closing(self, current: int) -> Tuple[float, float]:
        return self.graph.return_weight(self.landmarks[current], self.start).as_tuple()

    def _edge(self, current: int, nxt: int) -> Tuple[float, float]:
        source = self.landmarks[current]
        target = self.landmarks[nxt]
        edge = self.graph.weight(source, target)
        if edge is None:
            raise MissingIntermediateEdgeError(source, target)
        return edge.as_tuple()

    def best_from(self, current: int, visited: int) -> Tuple[float, float]:
        if visited == self.full_mask:
            return self._closing(current)

        cached = self.memo.get((current, visited))
        if cached is not None:
            return cached[0], cached[1]

        best_score = float("-inf")
        best_time = float("inf")
        best_next = -1
        for nxt in range(len(self.landmarks)):
            bit = 1 << nxt
            if visited & bit:
                continue
            edge_score, edge_time = self._edge(current, nxt)
            sub_score, sub_time = self.best_from(nxt, visited | bit)
            score = edge_score + sub_score
            time = edge_time + sub_time
            if improves(score, time, best_score, best_time):
                best_score, best_time, best_next = score, time, nxt

        self.memo[(current, visited)] = (best_score, best_time, best_next)
        return best_score, best_time

    def run_recursive(self) -> Tuple[float, float]:
        return self.best_from(self.start_index, self.start_mask)

    def _states(self) -> Iterable[Tuple[int, int]]:
        """Reachable non-terminal states, supersets before subsets."""
        n = len(self.landmarks)
        masks = [
            mask
            for mask in range(self.full_mask)
            if mask & self.start_mask
        ]
        masks.sort(key=lambda mask: bin(mask).count("1"), reverse=True)
        for mask in masks:
            if mask == self.start_mask:
                yield self.start_index, mask
                continue
            for current in range(n):
                if current != self.start_index and mask & (1 << current):
                    yield current, mask

    def run_iterative(self) -> Tuple[float, float]:
        if self.start_mask == self.full_mask:
            return self._closing(self.start_index)
        for current, visited in self._states():
            best_score = float("-inf")
            best_time = float("inf")
            best_next = -1
            for nxt in range(len(self.landmarks)):
                bit = 1 << nxt
                if visited & bit:
                    continue
                edge_score, edge_time = self._edge(current, nxt)
                following = visited | bit
                if following == self.full_mask:
                    sub_score, sub_time = self._closing(nxt)
                else:
                    sub_score, sub_time, _ = self.memo[(nxt, following)]
                score = edge_score + sub_score
                time = edge_time + sub_time
                if improves(score, time, best_score, best_time):
                    best_score, best_time, best_next = score, time, nxt
            self.memo[(current, visited)] = (best_score, best_time, best_next)
        entry = self.memo[(self.start_index, self.start_mask)]
        return entry[0], entry[1]

    def reconstruct(self) -> List[Landmark]:
        current = self.start_index
        visited = self.start_mask
        path = [self.landmarks[current]]
        while visited != self.full_mask:
            nxt = self.memo[(current, visited)][2]
            path.append(self.landmarks[nxt])
            visited |= 1 << nxt
            current = nxt
        path.append(self.start)
        return path


def _check_size(graph: TourGraph, strategy: str, max_landmarks: int) -> None:
    limit = max_landmarks
    if strategy == "bruteforce":
        limit = min(limit, BRUTEFORCE_MAX_LANDMARKS)
    if len(graph) > limit:
        raise ValidationError(
            f"{len(graph)} landmarks exceed the {strategy} solver limit of {limit}"
        )


def solve_graph(
    graph: TourGraph,
    start: Landmark = DEFAULT_START,
    *,
    strategy: str = "recursive",
    max_landmarks: int = DEFAULT_MAX_LANDMARKS,
) -> TourResult:
    if strategy not in STRATEGIES:
        raise ValidationError(f"Unknown solver strategy {strategy!r}; expected one of {', '.join(STRATEGIES)}")
    if start not in graph:
        raise ValidationError(f"Start landmark {start!r} does not appear in any edge")
    _check_size(graph, strategy, max_landmarks)

    if strategy == "bruteforce":
        from landmark_tour.modules.itinerary.tsp import solve_tour_bruteforce

        return solve_tour_bruteforce(graph, start)

    search = _TourSearch(graph, start)
    if strategy == "iterative":
        score, time = search.run_iterative()
    else:
        score, time = search.run_recursive()
    tour = search.reconstruct()
    LOG.debug(
        "Solved %d landmarks with %s search: %d memo entries, score=%s time=%s",
        len(graph),
        strategy,
        len(search.memo),
        score,
        time,
    )
    return TourResult(tour=tour, total_score=score, total_time=time)


def solve_optimal_tour(
    edges: Iterable[RawEdge],
    interest: Optional[Mapping[object, object]] = None,
    load: Optional[Mapping[object, object]] = None,
    start: Landmark = DEFAULT_START,
    *,
    strategy: str = "recursive",
    max_landmarks: int = DEFAULT_MAX_LANDMARKS,
) -> TourResult:
    """Validate raw inputs, build the tour graph and return the optimal tour.

    ``edges`` holds ``(from, to, base_score, travel_time)`` records or
    :class:`EdgeRecord` instances. Landmarks missing from ``interest`` or
    ``load`` use ``0.0``.

    Raises :class:`MalformedInputError` for inputs that do not fit the data
    model and :class:`MissingIntermediateEdgeError` when a required edge is
    absent. The edge back to ``start`` is the only one allowed to be missing.
    """
    records = [coerce_edge(raw) for raw in edges]
    interest_map = coerce_factor_map(interest or {}, name="interest")
    load_map = coerce_factor_map(load or {}, name="load")
    graph = TourGraph.from_records(records, interest_map, load_map)
    return solve_graph(graph, start, strategy=strategy, max_landmarks=max_landmarks)
