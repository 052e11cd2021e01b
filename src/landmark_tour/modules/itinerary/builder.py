"""Leg-by-leg breakdown of a solved tour."""

from __future__ import annotations

from typing import List

from landmark_tour.core.errors import MissingIntermediateEdgeError
from landmark_tour.core.models import TourLeg, TourResult
from landmark_tour.modules.itinerary.graph import TourGraph


def build_legs(graph: TourGraph, result: TourResult) -> List[TourLeg]:
    legs: List[TourLeg] = []
    start = result.start
    cumulative_score = 0.0
    cumulative_time = 0.0
    last = len(result.tour) - 2
    for position, (source, target) in enumerate(zip(result.tour, result.tour[1:]), start=1):
        closing = position - 1 == last
        defaulted = False
        if closing:
            defaulted = not graph.has_return_edge(source, start)
            weight = graph.return_weight(source, start)
        else:
            weight = graph.weight(source, target)
            if weight is None:
                raise MissingIntermediateEdgeError(source, target)
        cumulative_score += weight.score
        cumulative_time += weight.time
        legs.append(
            TourLeg(
                position=position,
                source=source,
                target=target,
                score=weight.score,
                time=weight.time,
                cumulative_score=cumulative_score,
                cumulative_time=cumulative_time,
                defaulted=defaulted,
            )
        )
    return legs
