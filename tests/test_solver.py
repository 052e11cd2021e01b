import random

import pytest

from landmark_tour.core.errors import MalformedInputError, MissingIntermediateEdgeError, ValidationError
from landmark_tour.modules.itinerary.solver import solve_optimal_tour

STRATEGIES = ["recursive", "iterative", "bruteforce"]


def _complete_edges(n, seed):
    rng = random.Random(seed)
    names = ["Hotel"] + [f"L{i}" for i in range(1, n)]
    edges = []
    for source in names:
        for target in names:
            if source != target:
                edges.append((source, target, float(rng.randint(0, 6)), float(rng.randint(1, 9))))
    interest = {name: rng.choice([0.5, 1.0, 1.5]) for name in names}
    load = {name: rng.choice([0.0, 0.25, 0.5]) for name in names}
    return names, edges, interest, load


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_concrete_scenario(strategy, scenario_edges, unit_interest):
    result = solve_optimal_tour(scenario_edges, unit_interest, {}, strategy=strategy)
    assert result.tour == ["Hotel", "A", "B", "Hotel"]
    assert result.total_score == 18.0
    assert result.total_time == 8.0


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_equal_score_prefers_smaller_time(strategy):
    edges = [
        ("Hotel", "A", 5.0, 10.0),
        ("Hotel", "B", 5.0, 1.0),
        ("A", "B", 5.0, 1.0),
        ("B", "A", 5.0, 1.0),
        ("A", "Hotel", 0.0, 1.0),
        ("B", "Hotel", 0.0, 1.0),
    ]
    result = solve_optimal_tour(edges, {"A": 1.0, "B": 1.0}, {}, strategy=strategy)
    assert result.tour == ["Hotel", "B", "A", "Hotel"]
    assert result.total_score == 10.0
    assert result.total_time == 3.0


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_full_tie_goes_to_canonical_order(strategy):
    names = ["Hotel", "C", "A", "B"]
    edges = [(a, b, 1.0, 1.0) for a in names for b in names if a != b and b != "Hotel"]
    edges += [(a, "Hotel", 0.0, 1.0) for a in names if a != "Hotel"]
    result = solve_optimal_tour(edges, {name: 1.0 for name in names}, {}, strategy=strategy)
    assert result.tour == ["Hotel", "C", "A", "B", "Hotel"]
    assert result.total_score == 3.0
    assert result.total_time == 4.0


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_missing_return_edge_counts_as_zero(strategy):
    edges = [
        ("Hotel", "A", 3.0, 2.0),
        ("Hotel", "B", 1.0, 1.0),
        ("A", "B", 4.0, 5.0),
        ("B", "A", 1.0, 1.0),
    ]
    result = solve_optimal_tour(edges, {"A": 1.0, "B": 1.0}, {}, strategy=strategy)
    assert result.tour == ["Hotel", "A", "B", "Hotel"]
    assert result.total_score == 7.0
    assert result.total_time == 7.0


def test_missing_intermediate_edge_fails_whole_solve(scenario_edges, unit_interest):
    edges = [edge for edge in scenario_edges if edge[:2] != ("A", "B")]
    with pytest.raises(MissingIntermediateEdgeError) as excinfo:
        solve_optimal_tour(edges, unit_interest, {})
    assert (excinfo.value.source, excinfo.value.target) == ("A", "B")


def test_missing_edge_off_the_optimal_tour_still_fails(scenario_edges, unit_interest):
    edges = [edge for edge in scenario_edges if edge[:2] != ("B", "A")]
    with pytest.raises(MissingIntermediateEdgeError) as excinfo:
        solve_optimal_tour(edges, unit_interest, {})
    assert (excinfo.value.source, excinfo.value.target) == ("B", "A")


@pytest.mark.parametrize("strategy", ["iterative", "bruteforce"])
def test_missing_intermediate_edge_other_strategies(strategy, scenario_edges, unit_interest):
    edges = [edge for edge in scenario_edges if edge[:2] != ("A", "B")]
    with pytest.raises(MissingIntermediateEdgeError):
        solve_optimal_tour(edges, unit_interest, {}, strategy=strategy)


@pytest.mark.parametrize("n", range(2, 9))
def test_every_landmark_visited_once(n):
    names, edges, interest, load = _complete_edges(n, seed=n)
    result = solve_optimal_tour(edges, interest, load)
    assert result.tour[0] == "Hotel"
    assert result.tour[-1] == "Hotel"
    assert result.tour.count("Hotel") == 2
    assert sorted(result.tour[1:-1]) == sorted(names[1:])
    assert len(result.tour) == n + 1


@pytest.mark.parametrize("seed", range(6))
def test_strategies_agree(seed):
    _, edges, interest, load = _complete_edges(6, seed=100 + seed)
    results = [solve_optimal_tour(edges, interest, load, strategy=strategy) for strategy in STRATEGIES]
    assert results[0] == results[1] == results[2]


def test_solver_is_deterministic():
    _, edges, interest, load = _complete_edges(7, seed=7)
    first = solve_optimal_tour(edges, interest, load)
    second = solve_optimal_tour(edges, interest, load)
    assert first == second


def test_single_landmark_tour():
    result = solve_optimal_tour([("Hotel", "Hotel", 2.0, 3.0)], {"Hotel": 1.0}, {})
    assert result.tour == ["Hotel", "Hotel"]
    assert result.total_score == 2.0
    assert result.total_time == 3.0


def test_custom_start(scenario_edges, unit_interest):
    result = solve_optimal_tour(scenario_edges, unit_interest, {}, start="A")
    assert result.tour[0] == result.tour[-1] == "A"
    assert sorted(result.tour[1:-1]) == ["B", "Hotel"]


def test_unknown_start_is_rejected(scenario_edges):
    with pytest.raises(ValidationError):
        solve_optimal_tour(scenario_edges, {}, {}, start="Airport")


def test_landmark_limit(scenario_edges):
    with pytest.raises(ValidationError):
        solve_optimal_tour(scenario_edges, {}, {}, max_landmarks=2)


def test_unknown_strategy(scenario_edges):
    with pytest.raises(ValidationError):
        solve_optimal_tour(scenario_edges, {}, {}, strategy="greedy")


def test_malformed_edge_is_rejected(scenario_edges):
    with pytest.raises(MalformedInputError):
        solve_optimal_tour(scenario_edges + [("A", "B", "lots", 1.0)], {}, {})


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_rounding_ties_resolve_like_the_memoized_search(strategy):
    # 0.1 + 0.2 is just above 0.3, but both whole tours total 1.3.
    edges = [
        ("Hotel", "X", 1.0, 1.0),
        ("Hotel", "A", 0.0, 1.0),
        ("Hotel", "B", 0.0, 1.0),
        ("X", "A", 0.1, 1.0),
        ("X", "B", 0.3, 1.0),
        ("A", "B", 0.2, 50.0),
        ("B", "A", 0.0, 1.0),
        ("A", "X", 0.0, 1.0),
        ("B", "X", 0.0, 1.0),
        ("A", "Hotel", 0.0, 1.0),
        ("B", "Hotel", 0.0, 1.0),
        ("X", "Hotel", 0.0, 1.0),
    ]
    interest = {"X": 1.0, "A": 1.0, "B": 1.0}
    result = solve_optimal_tour(edges, interest, {}, strategy=strategy)
    assert result.tour == ["Hotel", "X", "A", "B", "Hotel"]
    assert result.total_time == 53.0
    assert result == solve_optimal_tour(edges, interest, {}, strategy="recursive")
