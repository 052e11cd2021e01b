import pytest

from landmark_tour.core.errors import MissingIntermediateEdgeError, PreconditionMismatchError, StepFailedError
from landmark_tour.core.models import EdgeRecord, TourInputs, TourRequest
from landmark_tour.pipeline.orchestrator import Orchestrator
from landmark_tour.pipeline.steps import check_landmark_count, run_graph, run_legs, run_solve


def _request(paths, **kwargs):
    graph_path, interest_path, load_path = paths
    return TourRequest(graph_path=graph_path, interest_path=interest_path, load_path=load_path, **kwargs)


def test_run_produces_plan_and_reports(write_inputs, scenario_edges, unit_interest):
    orchestrator = Orchestrator()
    plan = orchestrator.run(_request(write_inputs(scenario_edges, unit_interest, {}), expected_landmarks=3))
    assert plan.result.tour == ["Hotel", "A", "B", "Hotel"]
    assert plan.landmarks == ["Hotel", "A", "B"]
    assert [leg.cumulative_score for leg in plan.legs] == [10.0, 18.0, 18.0]
    assert [report.name for report in orchestrator.reports] == ["inputs", "graph", "landmark_count", "solve", "legs"]
    assert all(report.ok for report in orchestrator.reports)


def test_expected_count_is_asked_after_reading(write_inputs, scenario_edges, unit_interest):
    calls = []

    def ask():
        calls.append(True)
        return 3

    plan = Orchestrator().run(_request(write_inputs(scenario_edges, unit_interest, {})), ask_expected=ask)
    assert calls == [True]
    assert plan.result.total_score == 18.0


def test_count_mismatch_stops_before_solving(write_inputs, scenario_edges, unit_interest):
    orchestrator = Orchestrator()
    with pytest.raises(PreconditionMismatchError) as excinfo:
        orchestrator.run(_request(write_inputs(scenario_edges, unit_interest, {}), expected_landmarks=4))
    assert str(excinfo.value) == "Mismatch in number of landmarks: expected 4 but found 3"
    assert [report.name for report in orchestrator.reports][-1] == "landmark_count"


def test_missing_edge_wraps_cause(write_inputs, scenario_edges, unit_interest):
    edges = [edge for edge in scenario_edges if edge[:2] != ("A", "B")]
    orchestrator = Orchestrator()
    with pytest.raises(StepFailedError) as excinfo:
        orchestrator.run(_request(write_inputs(edges, unit_interest, {})))
    assert isinstance(excinfo.value.__cause__, MissingIntermediateEdgeError)
    assert orchestrator.reports[-1].name == "solve"
    assert not orchestrator.reports[-1].ok


def test_steps_run_without_files(scenario_edges, unit_interest):
    graph = run_graph(TourInputs(edges=[EdgeRecord(*edge) for edge in scenario_edges], interest=unit_interest, load={}))
    check_landmark_count(3, graph)
    result = run_solve(graph, start="Hotel", strategy="iterative", max_landmarks=20)
    legs = run_legs(graph, result)
    assert result.tour == ["Hotel", "A", "B", "Hotel"]
    assert legs[-1].cumulative_time == 8.0
