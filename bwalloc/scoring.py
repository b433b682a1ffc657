"""Value density scoring for allocation requests."""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence

from .data import Request
from .errors import InvalidRequest


class DensityKind(IntEnum):
    """Tag of a density key. Higher members outrank lower ones."""
    FINITE = 0
    UNCONSTRAINED = 1


@dataclass(frozen=True, order=True)
class DensityKey:
    """Orderable density.

    Zero-demand requests with positive priority are tagged UNCONSTRAINED and
    compare greater than any finite density, however large. All UNCONSTRAINED
    keys are equal to each other.
    """
    kind: DensityKind
    value: float = 0.0

    @property
    def density(self) -> float:
        """Numeric density, +inf for unconstrained requests."""
        if self.kind is DensityKind.UNCONSTRAINED:
            return math.inf
        return self.value

    def __str__(self) -> str:
        if self.kind is DensityKind.UNCONSTRAINED:
            return "unconstrained"
        return f"{self.value:.2f}"


@dataclass(frozen=True)
class ScoredRequest:
    """A request together with its input position and density key."""
    request: Request
    index: int
    key: DensityKey

    @property
    def name(self) -> str:
        return self.request.name

    @property
    def demand(self) -> float:
        return self.request.demand

    @property
    def priority(self) -> float:
        return self.request.priority

    @property
    def density(self) -> float:
        return self.key.density


def compute_density(request: Request, index: int = 0) -> DensityKey:
    """Compute the density key priority / demand for one request.

    Args:
        request: Validated request
        index: Position of the request, used to report overflow

    Returns:
        FINITE key for positive demand, UNCONSTRAINED for zero demand with
        positive priority, FINITE 0 for zero demand and zero priority

    Raises:
        InvalidRequest: If priority / demand overflows to a non-finite value
    """
    if request.demand == 0:
        if request.priority > 0:
            return DensityKey(DensityKind.UNCONSTRAINED)
        return DensityKey(DensityKind.FINITE, 0.0)

    try:
        density = request.priority / request.demand
    except OverflowError:
        density = math.inf
    if not math.isfinite(density):
        raise InvalidRequest(
            index, request.name,
            f"density {request.priority}/{request.demand} is not finite",
        )
    return DensityKey(DensityKind.FINITE, float(density))


def score_requests(requests: Sequence[Request]) -> List[ScoredRequest]:
    """Attach a density key to every request, keeping input order."""
    return [
        ScoredRequest(request=request, index=i, key=compute_density(request, i))
        for i, request in enumerate(requests)
    ]
