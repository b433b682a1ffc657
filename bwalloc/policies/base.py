"""Base class for allocation policies."""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from ..constraints import ResourceConstraint
from ..scoring import ScoredRequest
from ..summary import AllocationResult


class Policy(ABC):
    """Base class for allocation policies.

    A policy turns scored requests into per-request allocations.
    """

    @abstractmethod
    def __call__(
        self,
        scored: Sequence[ScoredRequest],
        constraint: ResourceConstraint,
    ) -> List[AllocationResult]:
        """Compute allocation given scored requests and a constraint.

        Args:
            scored: Requests with density keys, in input order
            constraint: Resource constraint to satisfy

        Returns:
            One AllocationResult per request, in processing order
        """
        pass

    def allocate(
        self,
        scored: Sequence[ScoredRequest],
        constraint: ResourceConstraint,
    ) -> Tuple[List[AllocationResult], float]:
        """Compute allocation and the capacity left over.

        Policies that track the remaining capacity while allocating should
        override this. The default derives it from the results.

        Returns:
            (results in processing order, remaining capacity)
        """
        results = self(scored, constraint)
        used = constraint.get_used([r.allocated for r in results])
        return results, max(constraint.get_capacity() - used, 0.0)
