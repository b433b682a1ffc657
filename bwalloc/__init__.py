"""bwalloc - Greedy fractional allocation of a divisible resource."""

from .data import Request, RequestData
from .errors import AllocationError, InvalidCapacity, InvalidRequest
from .scoring import DensityKind, DensityKey, ScoredRequest, score_requests
from .constraints import ResourceConstraint, CapacityConstraint
from .policies import GreedyDensityPolicy, ProportionalPolicy, rank_requests
from .summary import AllocationResult, AllocationSummary
from .problem import AllocationProblem, allocate

__all__ = [
    # Core
    "Request",
    "RequestData",
    "AllocationProblem",
    "allocate",
    # Errors
    "AllocationError",
    "InvalidCapacity",
    "InvalidRequest",
    # Scoring
    "DensityKind",
    "DensityKey",
    "ScoredRequest",
    "score_requests",
    # Constraints
    "ResourceConstraint",
    "CapacityConstraint",
    # Policies
    "GreedyDensityPolicy",
    "ProportionalPolicy",
    "rank_requests",
    # Results
    "AllocationResult",
    "AllocationSummary",
]

__version__ = "0.1.0"
