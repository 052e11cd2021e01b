"""Derived edge weights from base scores, personal interest and visitor load."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from landmark_tour.core.errors import MalformedInputError
from landmark_tour.core.models import EdgeRecord, EdgeWeight, Landmark
from landmark_tour.core.normalization import normalize_landmark, normalize_real

RawEdge = Union[EdgeRecord, Sequence[object]]
WeightTable = Dict[Tuple[Landmark, Landmark], EdgeWeight]


def coerce_edge(raw: RawEdge) -> EdgeRecord:
    if isinstance(raw, EdgeRecord):
        fields: Sequence[object] = (raw.source, raw.target, raw.base_score, raw.base_time)
    elif isinstance(raw, (list, tuple)) and len(raw) == 4:
        fields = raw
    else:
        raise MalformedInputError(f"edge must be (from, to, base_score, travel_time), got {raw!r}")
    return EdgeRecord(
        source=normalize_landmark(fields[0], field="from"),
        target=normalize_landmark(fields[1], field="to"),
        base_score=normalize_real(fields[2], field="base_score"),
        base_time=normalize_real(fields[3], field="travel_time"),
    )


def coerce_factor_map(raw: Mapping[object, object], *, name: str) -> Dict[Landmark, float]:
    if not isinstance(raw, Mapping):
        raise MalformedInputError(f"{name} must be a mapping of landmark to value")
    return {
        normalize_landmark(key, field=f"{name} landmark"): normalize_real(value, field=f"{name}[{key!r}]")
        for key, value in raw.items()
    }


def derive_weight(
    record: EdgeRecord,
    interest: Mapping[Landmark, float],
    load: Mapping[Landmark, float],
) -> EdgeWeight:
    interest_factor = interest.get(record.target, 0.0)
    load_factor = 1 - load.get(record.target, 0.0)
    return EdgeWeight(score=record.base_score * interest_factor * load_factor, time=record.base_time)


def build_weight_table(
    records: Iterable[EdgeRecord],
    interest: Mapping[Landmark, float],
    load: Mapping[Landmark, float],
) -> Tuple[WeightTable, List[Landmark]]:
    """Derive a weight for every record and collect landmarks in first-seen order.

    A repeated (from, to) pair keeps the weight of its last record.
    """
    weights: WeightTable = {}
    landmarks: List[Landmark] = []
    seen = set()
    for record in records:
        weights[(record.source, record.target)] = derive_weight(record, interest, load)
        for landmark in (record.source, record.target):
            if landmark not in seen:
                seen.add(landmark)
                landmarks.append(landmark)
    return weights, landmarks
