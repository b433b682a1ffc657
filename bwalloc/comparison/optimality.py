"""Cross-check of greedy allocations against the linear-programming optimum."""

from typing import Iterable, Optional, TYPE_CHECKING

import numpy as np
from scipy.optimize import linprog

from ..data import RequestLike, as_requests

if TYPE_CHECKING:
    from ..summary import AllocationSummary


def lp_optimal_value(requests: Iterable[RequestLike], capacity: float) -> float:
    """Solve the fractional knapsack as a linear program.

    Maximizes sum(priority_i * x_i) subject to sum(demand_i * x_i) <= capacity
    and 0 <= x_i <= 1, where x_i is the fraction of request i that is served.

    Args:
        requests: Requests or (name, demand, priority) tuples
        capacity: Total resource available

    Returns:
        Optimal total value

    Raises:
        RuntimeError: If the solver does not report success
    """
    requests = as_requests(requests)
    if not requests:
        return 0.0

    priorities = np.array([r.priority for r in requests], dtype=float)
    demands = np.array([r.demand for r in requests], dtype=float)

    # linprog minimizes; negate the objective
    res = linprog(
        -priorities,
        A_ub=demands.reshape(1, -1),
        b_ub=np.array([capacity], dtype=float),
        bounds=[(0.0, 1.0)] * len(requests),
        method="highs",
    )
    if not res.success:
        raise RuntimeError(f"LP solver failed: {res.message}")

    return float(priorities @ res.x)


def optimality_gap(
    summary: 'AllocationSummary',
    requests: Optional[Iterable[RequestLike]] = None,
) -> float:
    """Difference between the LP optimum and the value achieved by an allocation.

    A greedy density allocation has a gap of zero up to solver precision.

    Args:
        summary: Allocation to check
        requests: Requests of the allocation (default: taken from the summary)

    Returns:
        lp_optimal_value - summary.total_value
    """
    if requests is None:
        requests = [r.request for r in summary.results]
    optimum = lp_optimal_value(requests, summary.capacity_initial)
    return optimum - summary.total_value
