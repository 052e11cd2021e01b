"""Normalization helpers for landmark labels and numeric fields."""

from __future__ import annotations

import math
import os
from numbers import Real
from typing import Dict, Optional

from landmark_tour.core.errors import MalformedInputError
from landmark_tour.core.models import DEFAULT_START

DEFAULT_TIME_UNIT = os.getenv("TOUR_PLANNER_TIME_UNIT", "minutes")


def normalize_landmark(value: object, *, field: str = "landmark") -> str:
    if not isinstance(value, str):
        raise MalformedInputError(f"{field} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise MalformedInputError(f"{field} must not be empty")
    if value != value.strip():
        raise MalformedInputError(f"{field} has leading or trailing whitespace: {value!r}")
    return value


def normalize_real(value: object, *, field: str = "value") -> float:
    # bool is a Real subclass; a flag is never a score.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise MalformedInputError(f"{field} must be a real number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise MalformedInputError(f"{field} must be finite, got {value!r}")
    return number


def parse_real(raw: str, *, field: str = "value") -> float:
    try:
        number = float(raw)
    except ValueError as exc:
        raise MalformedInputError(f"{field} is not a number: {raw!r}") from exc
    return normalize_real(number, field=field)


def parse_count(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise MalformedInputError(f"expected an integer landmark count, got {raw!r}") from exc


def build_meta(start: Optional[str] = None) -> Dict[str, str]:
    return {
        "time_unit": DEFAULT_TIME_UNIT,
        "start": start or DEFAULT_START,
        "score_formula": "base_score * interest(to) * (1 - load(to))",
    }
