"""Greedy fractional-knapsack policy."""

from typing import List, Sequence, Tuple

from .base import Policy
from ..constraints import ResourceConstraint
from ..logger import get_logger
from ..scoring import ScoredRequest
from ..summary import AllocationResult

logger = get_logger(__name__)


def rank_requests(scored: Sequence[ScoredRequest]) -> List[ScoredRequest]:
    """Order requests by density, highest first.

    Unconstrained requests come before every finite density. Equal densities
    keep their input order.
    """
    return sorted(
        scored,
        key=lambda s: (-int(s.key.kind), -s.key.value, s.index),
    )


class GreedyDensityPolicy(Policy):
    """Policy that fills requests in order of priority per unit demand.

    Walks the ranked requests and grants each its full demand while capacity
    lasts. The first request that does not fit receives whatever is left and
    earns a proportional share of its priority. Requests with zero demand are
    always fulfilled at no cost, even after capacity has run out.

    Examples:
        policy = GreedyDensityPolicy()
        results = policy(score_requests(requests), CapacityConstraint(100))
    """

    def __call__(
        self,
        scored: Sequence[ScoredRequest],
        constraint: ResourceConstraint,
    ) -> List[AllocationResult]:
        """Allocate capacity across requests in density order.

        Returns:
            One AllocationResult per request, in processing order
        """
        return self.allocate(scored, constraint)[0]

    def allocate(
        self,
        scored: Sequence[ScoredRequest],
        constraint: ResourceConstraint,
    ) -> Tuple[List[AllocationResult], float]:
        """Walk the ranked requests, tracking the capacity left.

        Args:
            scored: Requests with density keys, in input order
            constraint: Constraint providing the capacity

        Returns:
            (results in processing order, remaining capacity after the pass)
        """
        remaining = constraint.get_capacity()
        exhausted_logged = False
        results = []

        for rank, item in enumerate(rank_requests(scored)):
            demand = item.demand
            priority = item.priority

            if demand == 0:
                # Zero demand never competes for capacity
                allocated, value, fulfilled = 0.0, priority, True
            elif remaining <= 0:
                if not exhausted_logged:
                    logger.debug("No more capacity to allocate; remaining requests get nothing")
                    exhausted_logged = True
                allocated, value, fulfilled = 0.0, 0.0, False
            elif demand <= remaining:
                logger.debug(
                    "Considering '%s' (density %s), remaining %.2f: full demand %.2f",
                    item.name, item.key, remaining, demand,
                )
                allocated, value, fulfilled = demand, priority, True
                remaining -= demand
            else:
                logger.debug(
                    "Considering '%s' (density %s), remaining %.2f: partial grant",
                    item.name, item.key, remaining,
                )
                allocated = remaining
                value = priority * (allocated / demand)
                fulfilled = False
                remaining = 0.0

            results.append(AllocationResult(
                request=item.request,
                index=item.index,
                rank=rank,
                density=item.density,
                allocated=allocated,
                fulfilled=fulfilled,
                value_earned=value,
            ))

        return results, remaining

    def __repr__(self) -> str:
        return "GreedyDensityPolicy()"
