"""Allocation problem definition."""

from typing import Any, Dict, Iterable, List, Optional

from .config import get_config
from .constraints import CapacityConstraint, ResourceConstraint
from .data import Request, RequestLike, as_requests, validate_requests
from .logger import get_logger
from .policies import GreedyDensityPolicy, Policy, ProportionalPolicy
from .scoring import score_requests
from .summary import AllocationSummary, summarize

logger = get_logger(__name__)


class AllocationProblem:
    """Defines an allocation problem with requests, constraint, and policy.

    An allocation problem combines:
    - Requests (name, demand, priority)
    - Resource constraint (total capacity)
    - Policy (how to split the capacity, greedy by density by default)

    evaluate() runs the pipeline score -> order -> allocate -> summarize once
    and returns an immutable AllocationSummary.
    """

    def __init__(
        self,
        requests: Iterable[RequestLike],
        constraint: ResourceConstraint,
        policy: Optional[Policy] = None,
        tolerance: Optional[float] = None,
    ):
        """Initialize an allocation problem.

        Args:
            requests: Requests or (name, demand, priority) tuples
            constraint: Resource constraint to satisfy
            policy: Allocation policy (default: GreedyDensityPolicy)
            tolerance: Slack for feasibility checks (default: configured tolerance)

        Raises:
            InvalidRequest: If any request has negative or non-finite fields
        """
        self.requests: List[Request] = as_requests(requests)
        validate_requests(self.requests)
        self.constraint = constraint
        self.policy = policy if policy is not None else GreedyDensityPolicy()
        self.tolerance = get_config().tolerance if tolerance is None else tolerance

    def evaluate(self) -> AllocationSummary:
        """Evaluate the problem's policy.

        Returns:
            AllocationSummary with results in processing order

        Raises:
            InvalidRequest: If a density overflows
            ValueError: If the policy hands out more than the capacity
        """
        return self._evaluate_with(self.policy)

    def _evaluate_with(self, policy: Policy) -> AllocationSummary:
        capacity = self.constraint.get_capacity()
        scored = score_requests(self.requests)

        results, remaining = policy.allocate(scored, self.constraint)

        if len(results) != len(self.requests):
            raise ValueError(
                f"Policy returned {len(results)} results but problem has "
                f"{len(self.requests)} requests"
            )

        allocations = [r.allocated for r in results]
        if not self.constraint.is_feasible(allocations, tolerance=self.tolerance):
            raise ValueError(
                f"Allocations are not feasible: used={self.constraint.get_used(allocations):.2f}, "
                f"capacity={capacity:.2f}"
            )

        summary = summarize(results, capacity_initial=capacity, capacity_remaining=remaining)

        logger.info(
            "%r allocated %.2f of %.2f to %d requests (%d fulfilled, %d partial), total value %.2f",
            policy, summary.capacity_used, capacity, summary.n,
            summary.n_fulfilled, summary.n_partial, summary.total_value,
        )
        return summary

    def evaluate_proportional(self) -> AllocationSummary:
        """Evaluate the demand-proportional baseline on the same inputs."""
        return self._evaluate_with(ProportionalPolicy())

    def compare_to_proportional(self) -> Dict[str, Any]:
        """Compare the problem's policy against the proportional baseline.

        Returns:
            Dictionary containing:
                - total_value: Value achieved by the problem's policy
                - baseline_value: Value achieved by proportional allocation
                - value_ratio: total_value / baseline_value (None if baseline is 0)
        """
        total_value = self.evaluate().total_value
        baseline_value = self.evaluate_proportional().total_value
        value_ratio = total_value / baseline_value if baseline_value != 0 else None

        return {
            "total_value": total_value,
            "baseline_value": baseline_value,
            "value_ratio": value_ratio,
        }

    def with_capacity(self, capacity: float) -> 'AllocationProblem':
        """Return a new problem with the same requests and a different capacity."""
        return AllocationProblem(
            requests=self.requests,
            constraint=CapacityConstraint(capacity),
            policy=self.policy,
            tolerance=self.tolerance,
        )


def allocate(
    capacity: float,
    requests: Iterable[RequestLike],
    policy: Optional[Policy] = None,
) -> AllocationSummary:
    """Allocate capacity across requests with the greedy density policy.

    Args:
        capacity: Total resource available, >= 0
        requests: Requests or (name, demand, priority) tuples

    Returns:
        AllocationSummary

    Raises:
        InvalidCapacity: If capacity is negative or not finite
        InvalidRequest: If a request has negative or non-finite fields
    """
    problem = AllocationProblem(
        requests=requests,
        constraint=CapacityConstraint(capacity),
        policy=policy,
    )
    return problem.evaluate()
