"""Request schemas for the Landmark Tour API."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from landmark_tour.core.models import DEFAULT_START, EdgeRecord


class EdgePayload(BaseModel):
    source: str = Field(..., min_length=1, alias="from")
    target: str = Field(..., min_length=1, alias="to")
    base_score: float = Field(..., allow_inf_nan=False)
    travel_time: float = Field(..., allow_inf_nan=False)

    model_config = {"populate_by_name": True}

    def to_record(self) -> EdgeRecord:
        return EdgeRecord(
            source=self.source,
            target=self.target,
            base_score=self.base_score,
            base_time=self.travel_time,
        )


class TourPayload(BaseModel):
    edges: List[EdgePayload] = Field(..., min_length=1)
    interest: Dict[str, float] = Field(default_factory=dict)
    load: Dict[str, float] = Field(default_factory=dict)
    start: str = Field(DEFAULT_START, min_length=1)
    expected_landmarks: Optional[int] = Field(None, ge=1)
    strategy: str = "recursive"
