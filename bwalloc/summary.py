"""Allocation results and their aggregation."""

import math
from dataclasses import dataclass, replace
from typing import Iterator, Sequence, Tuple

import pandas as pd

from .data import Request


@dataclass(frozen=True)
class AllocationResult:
    """Outcome of the allocation pass for a single request.

    Attributes:
        request: The request this result belongs to
        index: Position of the request in the input
        rank: Position of the request in processing order
        density: Priority per unit demand (+inf for unconstrained requests)
        allocated: Amount granted, 0 <= allocated <= demand
        fulfilled: True iff the full demand was granted
        value_earned: priority * allocated / demand, or priority for zero demand
        share: allocated / initial capacity (0 when capacity is 0)
    """
    request: Request
    index: int
    rank: int
    density: float
    allocated: float
    fulfilled: bool
    value_earned: float
    share: float = 0.0

    @property
    def partial(self) -> bool:
        """True if some, but not all, of the demand was granted."""
        return 0 < self.allocated < self.request.demand


@dataclass(frozen=True)
class AllocationSummary:
    """Aggregate view of an allocation pass.

    Results are kept in processing order (density descending, ties by input
    order).
    """
    capacity_initial: float
    capacity_used: float
    capacity_remaining: float
    total_value: float
    results: Tuple[AllocationResult, ...]

    @property
    def pairs(self) -> Iterator[Tuple[Request, AllocationResult]]:
        """(Request, AllocationResult) pairs in processing order."""
        return ((r.request, r) for r in self.results)

    @property
    def n(self) -> int:
        return len(self.results)

    @property
    def n_fulfilled(self) -> int:
        return sum(1 for r in self.results if r.fulfilled)

    @property
    def n_partial(self) -> int:
        return sum(1 for r in self.results if r.partial)

    @property
    def total_demand(self) -> float:
        return math.fsum(r.request.demand for r in self.results)

    @property
    def utilization(self) -> float:
        """Fraction of the initial capacity that was handed out."""
        if self.capacity_initial == 0:
            return 0.0
        return self.capacity_used / self.capacity_initial

    def is_conserved(self, tolerance: float = 1e-9) -> bool:
        """Check capacity_used + capacity_remaining == capacity_initial."""
        return math.isclose(
            self.capacity_used + self.capacity_remaining,
            self.capacity_initial,
            rel_tol=0.0,
            abs_tol=tolerance,
        )

    def to_frame(self) -> pd.DataFrame:
        """One row per request, in processing order."""
        rows = [
            {
                'rank': r.rank,
                'index': r.index,
                'name': r.request.name,
                'demand': r.request.demand,
                'priority': r.request.priority,
                'density': r.density,
                'allocated': r.allocated,
                'fulfilled': r.fulfilled,
                'value_earned': r.value_earned,
                'share': r.share,
            }
            for r in self.results
        ]
        columns = [
            'rank', 'index', 'name', 'demand', 'priority', 'density',
            'allocated', 'fulfilled', 'value_earned', 'share',
        ]
        return pd.DataFrame(rows, columns=columns)


def summarize(
    results: Sequence[AllocationResult],
    capacity_initial: float,
    capacity_remaining: float,
) -> AllocationSummary:
    """Assemble the summary of an allocation pass.

    Args:
        results: Per-request results in processing order
        capacity_initial: Capacity before the pass
        capacity_remaining: Capacity left after the pass

    Returns:
        AllocationSummary with each result's share filled in
    """
    if capacity_initial > 0:
        results = [replace(r, share=r.allocated / capacity_initial) for r in results]
    else:
        results = [replace(r, share=0.0) for r in results]

    return AllocationSummary(
        capacity_initial=capacity_initial,
        capacity_used=capacity_initial - capacity_remaining,
        capacity_remaining=capacity_remaining,
        total_value=math.fsum(r.value_earned for r in results),
        results=tuple(results),
    )
