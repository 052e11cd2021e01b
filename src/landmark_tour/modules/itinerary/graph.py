"""Directed landmark graph with derived attractiveness weights."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple

from landmark_tour.core.errors import ValidationError
from landmark_tour.core.models import ZERO_WEIGHT, EdgeRecord, EdgeWeight, Landmark
from landmark_tour.modules.attractiveness.scoring import WeightTable, build_weight_table


class TourGraph:
    """Immutable weight lookups over the landmarks discovered in the edge records."""

    def __init__(self, weights: WeightTable, landmarks: Iterable[Landmark]) -> None:
        self._weights: WeightTable = dict(weights)
        self._landmarks: Tuple[Landmark, ...] = tuple(landmarks)
        self._index: Dict[Landmark, int] = {name: i for i, name in enumerate(self._landmarks)}

    @classmethod
    def from_records(
        cls,
        records: Iterable[EdgeRecord],
        interest: Mapping[Landmark, float],
        load: Mapping[Landmark, float],
    ) -> "TourGraph":
        weights, landmarks = build_weight_table(records, interest, load)
        return cls(weights, landmarks)

    def __len__(self) -> int:
        return len(self._landmarks)

    def __contains__(self, landmark: object) -> bool:
        return landmark in self._index

    def landmarks(self) -> Tuple[Landmark, ...]:
        return self._landmarks

    def index(self, landmark: Landmark) -> int:
        try:
            return self._index[landmark]
        except KeyError as exc:
            raise ValidationError(f"Unknown landmark {landmark!r}") from exc

    def weight(self, source: Landmark, target: Landmark) -> Optional[EdgeWeight]:
        return self._weights.get((source, target))

    def return_weight(self, source: Landmark, start: Landmark) -> EdgeWeight:
        # Only the closing edge of a complete tour may be defaulted.
        return self._weights.get((source, start), ZERO_WEIGHT)

    def has_return_edge(self, source: Landmark, start: Landmark) -> bool:
        return (source, start) in self._weights

    def edge_count(self) -> int:
        return len(self._weights)
