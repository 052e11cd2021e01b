"""Attractiveness module."""

from landmark_tour.modules.attractiveness.scoring import build_weight_table, derive_weight

__all__ = ["build_weight_table", "derive_weight"]
