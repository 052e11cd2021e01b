"""Pipeline orchestrator for tour planning."""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, TypeVar

from landmark_tour.core.errors import PreconditionMismatchError, StepFailedError
from landmark_tour.core.models import TourPlan, TourRequest
from landmark_tour.pipeline.results import StepReport
from landmark_tour.pipeline.steps import check_landmark_count, run_graph, run_inputs, run_legs, run_solve

LOG = logging.getLogger(__name__)

T = TypeVar("T")


class Orchestrator:
    def __init__(self) -> None:
        self.reports: List[StepReport] = []

    def _step(self, name: str, action: Callable[[], T]) -> T:
        started = time.perf_counter()
        try:
            value = action()
        except PreconditionMismatchError as exc:
            self.reports.append(StepReport(name=name, ok=False, message=str(exc), elapsed_ms=_elapsed(started)))
            raise
        except Exception as exc:
            LOG.warning("%s step failed: %s", name, exc)
            self.reports.append(StepReport(name=name, ok=False, message=str(exc), elapsed_ms=_elapsed(started)))
            raise StepFailedError(f"{name} step failed: {exc}") from exc
        self.reports.append(StepReport(name=name, ok=True, elapsed_ms=_elapsed(started)))
        return value

    def run(
        self,
        request: TourRequest,
        *,
        ask_expected: Optional[Callable[[], Optional[int]]] = None,
    ) -> TourPlan:
        """Read inputs, check the landmark count, solve and break the tour into legs.

        When the request carries no expected count, `ask_expected` is called once
        the inputs are read (the CLI prompts the user here).
        """
        self.reports.clear()
        inputs = self._step("inputs", lambda: run_inputs(request))
        graph = self._step("graph", lambda: run_graph(inputs))
        expected = request.expected_landmarks
        if expected is None and ask_expected is not None:
            expected = ask_expected()
        self._step("landmark_count", lambda: check_landmark_count(expected, graph))
        result = self._step(
            "solve",
            lambda: run_solve(
                graph,
                start=request.start,
                strategy=request.strategy,
                max_landmarks=request.max_landmarks,
            ),
        )
        legs = self._step("legs", lambda: run_legs(graph, result))
        return TourPlan(
            landmarks=list(graph.landmarks()),
            result=result,
            legs=legs,
            strategy=request.strategy,
        )


def _elapsed(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0
