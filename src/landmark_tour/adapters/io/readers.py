"""Readers for the whitespace-separated landmark input files.

Each file starts with a header line that is skipped. Graph rows are
``from to base_score travel_time``; interest and load rows are
``landmark value``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from landmark_tour.core.errors import InputNotFoundError, MalformedInputError
from landmark_tour.core.models import EdgeRecord, TourInputs
from landmark_tour.core.normalization import parse_real

LOG = logging.getLogger(__name__)


def check_inputs_exist(*paths: Path) -> None:
    missing = [Path(path) for path in paths if not Path(path).exists()]
    if missing:
        raise InputNotFoundError(missing)


def _rows(path: Path, min_fields: int) -> Iterator[Tuple[int, List[str]]]:
    with path.open("r", encoding="utf-8") as handle:
        next(handle, None)
        for line_no, line in enumerate(handle, start=2):
            parts = line.split()
            if not parts:
                continue
            if len(parts) < min_fields:
                raise MalformedInputError(
                    f"expected at least {min_fields} fields, got {len(parts)}",
                    path=path,
                    line=line_no,
                )
            yield line_no, parts


def read_factor_map(path: Path, *, name: str = "value") -> Dict[str, float]:
    values: Dict[str, float] = {}
    for line_no, parts in _rows(path, 2):
        try:
            values[parts[0]] = parse_real(parts[1], field=name)
        except MalformedInputError as exc:
            raise MalformedInputError(str(exc), path=path, line=line_no) from exc
    LOG.debug("Read %d %s entries from %s", len(values), name, path)
    return values


def read_edges(path: Path) -> List[EdgeRecord]:
    records: List[EdgeRecord] = []
    for line_no, parts in _rows(path, 4):
        try:
            records.append(
                EdgeRecord(
                    source=parts[0],
                    target=parts[1],
                    base_score=parse_real(parts[2], field="base_score"),
                    base_time=parse_real(parts[3], field="travel_time"),
                )
            )
        except MalformedInputError as exc:
            raise MalformedInputError(str(exc), path=path, line=line_no) from exc
    LOG.debug("Read %d edge records from %s", len(records), path)
    return records


def read_inputs(graph_path: Path, interest_path: Path, load_path: Path) -> TourInputs:
    graph_path, interest_path, load_path = Path(graph_path), Path(interest_path), Path(load_path)
    check_inputs_exist(interest_path, load_path, graph_path)
    interest = read_factor_map(interest_path, name="interest")
    load = read_factor_map(load_path, name="load")
    edges = read_edges(graph_path)
    return TourInputs(edges=edges, interest=interest, load=load)
