from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Tuple

import pytest

Edge = Tuple[str, str, float, float]

SCENARIO_EDGES: List[Edge] = [
    ("Hotel", "A", 10.0, 5.0),
    ("Hotel", "B", 1.0, 1.0),
    ("A", "B", 8.0, 2.0),
    ("B", "A", 2.0, 9.0),
    ("A", "Hotel", 0.0, 5.0),
    ("B", "Hotel", 0.0, 1.0),
]


@pytest.fixture
def scenario_edges() -> List[Edge]:
    return list(SCENARIO_EDGES)


@pytest.fixture
def unit_interest() -> Dict[str, float]:
    return {"Hotel": 1.0, "A": 1.0, "B": 1.0}


@pytest.fixture
def write_inputs(tmp_path: Path) -> Callable[..., Tuple[Path, Path, Path]]:
    def _write(
        edges: List[Edge],
        interest: Dict[str, float],
        load: Dict[str, float],
    ) -> Tuple[Path, Path, Path]:
        graph_path = tmp_path / "landmark_map_data.txt"
        interest_path = tmp_path / "personal_interest.txt"
        load_path = tmp_path / "visitor_load.txt"
        graph_path.write_text(
            "From To BaseScore TravelTime\n"
            + "".join(f"{a} {b} {score} {time}\n" for a, b, score, time in edges),
            encoding="utf-8",
        )
        interest_path.write_text(
            "Landmark Interest\n" + "".join(f"{name} {value}\n" for name, value in interest.items()),
            encoding="utf-8",
        )
        load_path.write_text(
            "Landmark Load\n" + "".join(f"{name} {value}\n" for name, value in load.items()),
            encoding="utf-8",
        )
        return graph_path, interest_path, load_path

    return _write
