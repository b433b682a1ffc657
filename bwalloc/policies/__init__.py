"""Allocation policies."""

from .base import Policy
from .greedy import GreedyDensityPolicy, rank_requests
from .proportional import ProportionalPolicy

__all__ = [
    "Policy",
    "GreedyDensityPolicy",
    "ProportionalPolicy",
    "rank_requests",
]
