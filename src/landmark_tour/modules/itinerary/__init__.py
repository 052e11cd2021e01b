"""Itinerary module."""

from landmark_tour.modules.itinerary.builder import build_legs
from landmark_tour.modules.itinerary.graph import TourGraph
from landmark_tour.modules.itinerary.solver import solve_graph, solve_optimal_tour
from landmark_tour.modules.itinerary.tsp import solve_tour_bruteforce

__all__ = ["TourGraph", "build_legs", "solve_graph", "solve_optimal_tour", "solve_tour_bruteforce"]
