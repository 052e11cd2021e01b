"""Configuration helpers for filesystem layout and solver defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from landmark_tour.core.models import DEFAULT_START

GRAPH_FILENAME = "landmark_map_data.txt"
INTEREST_FILENAME = "personal_interest.txt"
LOAD_FILENAME = "visitor_load.txt"

STRATEGIES = ("recursive", "iterative", "bruteforce")


@dataclass(frozen=True)
class PathsConfig:
    root: Path
    data_dir: Path
    outputs_dir: Path

    @staticmethod
    def from_root(root: Path) -> "PathsConfig":
        root = root.resolve()
        env_data = os.getenv("TOUR_PLANNER_DATA_DIR")
        data_dir = Path(env_data).resolve() if env_data else root / "data"
        outputs_dir = root / "outputs"
        return PathsConfig(root=root, data_dir=data_dir, outputs_dir=outputs_dir)

    @property
    def graph_path(self) -> Path:
        return self.data_dir / GRAPH_FILENAME

    @property
    def interest_path(self) -> Path:
        return self.data_dir / INTEREST_FILENAME

    @property
    def load_path(self) -> Path:
        return self.data_dir / LOAD_FILENAME


@dataclass(frozen=True)
class SolverSettings:
    start: str = DEFAULT_START
    strategy: str = "recursive"
    max_landmarks: int = 20


def resolve_repo_root() -> Path:
    env_root = Path.cwd()
    for parent in [env_root] + list(env_root.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return env_root


def load_paths() -> PathsConfig:
    return PathsConfig.from_root(resolve_repo_root())


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def load_solver_settings() -> SolverSettings:
    strategy = os.getenv("TOUR_PLANNER_STRATEGY", "recursive").strip().lower()
    if strategy not in STRATEGIES:
        strategy = "recursive"
    start = os.getenv("TOUR_PLANNER_START", "").strip() or DEFAULT_START
    return SolverSettings(
        start=start,
        strategy=strategy,
        max_landmarks=_env_int("TOUR_PLANNER_MAX_LANDMARKS", 20),
    )
