"""Export helpers for solved tours."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from landmark_tour.core.models import TourLeg, TourPlan
from landmark_tour.core.normalization import DEFAULT_TIME_UNIT, build_meta

LEG_HEADERS = [
    "position",
    "from",
    "to",
    "score",
    "time",
    "cumulative_score",
    "cumulative_time",
    "defaulted",
]


def _serialize_leg(leg: TourLeg) -> Dict[str, Any]:
    return {
        "position": leg.position,
        "from": leg.source,
        "to": leg.target,
        "score": leg.score,
        "time": leg.time,
        "cumulative_score": leg.cumulative_score,
        "cumulative_time": leg.cumulative_time,
        "defaulted": leg.defaulted,
    }


def serialize_tour_plan(plan: TourPlan, *, meta: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    return {
        "tour": list(plan.result.tour),
        "total_score": plan.result.total_score,
        "total_time": plan.result.total_time,
        "landmarks": list(plan.landmarks),
        "strategy": plan.strategy,
        "legs": [_serialize_leg(leg) for leg in plan.legs],
        "meta": meta or build_meta(plan.result.start),
    }


def render_report(plan: TourPlan) -> str:
    lines: List[str] = ["The visited landmarks:"]
    for position, landmark in enumerate(plan.result.tour, start=1):
        lines.append(f"{position}- {landmark}")
    lines.append("")
    lines.append(f"Total attractiveness score: {plan.result.total_score}")
    lines.append("")
    lines.append(f"Total travel time is: {plan.result.total_time} {DEFAULT_TIME_UNIT}")
    return "\n".join(lines)


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2, default=str)


def export_tour_xlsx(path: Path, plan: TourPlan) -> None:
    from openpyxl import Workbook

    wb = Workbook()
    wb.remove(wb.active)

    ws = wb.create_sheet(title="Legs")
    ws.append(LEG_HEADERS)
    for leg in plan.legs:
        row = _serialize_leg(leg)
        ws.append([row[col] for col in LEG_HEADERS])
    ws.freeze_panes = "A2"
    ws.auto_filter.ref = ws.dimensions

    summary = wb.create_sheet(title="Summary")
    summary.append(["tour", " -> ".join(plan.result.tour)])
    summary.append(["total_score", plan.result.total_score])
    summary.append(["total_time", plan.result.total_time])
    summary.append(["strategy", plan.strategy])

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
