"""Analysis helpers built on the allocation engine."""

from .optimality import (
    lp_optimal_value,
    optimality_gap,
)
from .capacity_curve import (
    compute_value_curve,
    plot_value_curve,
)

__all__ = [
    "lp_optimal_value",
    "optimality_gap",
    "compute_value_curve",
    "plot_value_curve",
]
