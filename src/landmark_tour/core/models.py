"""Shared domain models for the landmark tour planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

Landmark = str

DEFAULT_START = "Hotel"


@dataclass(frozen=True)
class EdgeRecord:
    source: Landmark
    target: Landmark
    base_score: float
    base_time: float


@dataclass(frozen=True)
class EdgeWeight:
    score: float
    time: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.score, self.time


ZERO_WEIGHT = EdgeWeight(score=0.0, time=0.0)


@dataclass(frozen=True)
class TourInputs:
    edges: List[EdgeRecord]
    interest: Dict[Landmark, float]
    load: Dict[Landmark, float]


@dataclass(frozen=True)
class TourResult:
    tour: List[Landmark]
    total_score: float
    total_time: float

    @property
    def start(self) -> Landmark:
        return self.tour[0]


@dataclass(frozen=True)
class TourLeg:
    position: int
    source: Landmark
    target: Landmark
    score: float
    time: float
    cumulative_score: float
    cumulative_time: float
    defaulted: bool = False


@dataclass(frozen=True)
class TourRequest:
    graph_path: Path
    interest_path: Path
    load_path: Path
    start: Landmark = DEFAULT_START
    expected_landmarks: Optional[int] = None
    strategy: str = "recursive"
    max_landmarks: int = 20


@dataclass
class TourPlan:
    landmarks: List[Landmark]
    result: TourResult
    legs: List[TourLeg] = field(default_factory=list)
    strategy: str = "recursive"
