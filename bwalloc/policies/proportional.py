"""Demand-proportional baseline policy."""

import math
from typing import List, Sequence

from .base import Policy
from .greedy import rank_requests
from ..constraints import ResourceConstraint
from ..scoring import ScoredRequest
from ..summary import AllocationResult


class ProportionalPolicy(Policy):
    """Policy that splits capacity in proportion to demand, ignoring priority.

    Every request receives min(demand, capacity * demand / total_demand).
    Used as a baseline for the greedy policy. Results are reported in the
    same density order as the greedy policy so the two can be compared row
    by row.
    """

    def __call__(
        self,
        scored: Sequence[ScoredRequest],
        constraint: ResourceConstraint,
    ) -> List[AllocationResult]:
        capacity = constraint.get_capacity()
        total_demand = math.fsum(s.demand for s in scored)
        scale = min(1.0, capacity / total_demand) if total_demand > 0 else 0.0

        results = []
        for rank, item in enumerate(rank_requests(scored)):
            if item.demand == 0:
                allocated, value, fulfilled = 0.0, item.priority, True
            else:
                allocated = item.demand * scale
                value = item.priority * scale
                fulfilled = scale >= 1.0

            results.append(AllocationResult(
                request=item.request,
                index=item.index,
                rank=rank,
                density=item.density,
                allocated=allocated,
                fulfilled=fulfilled,
                value_earned=value,
            ))

        return results

    def __repr__(self) -> str:
        return "ProportionalPolicy()"
