from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class ResourceConstraint(ABC):
    """Abstract base class for resource constraints.

    A resource constraint bounds the total amount of a divisible resource
    that can be handed out across all requests.

    Subclasses must implement:
    - get_capacity(): Total resource available

    Default implementations of get_used() and is_feasible() use it.
    """

    @abstractmethod
    def get_capacity(self) -> float:
        """Get the total resource capacity."""
        pass

    def get_used(self, allocations: Sequence[float]) -> float:
        """Compute the total resource consumed by allocations.

        Args:
            allocations: Amount granted to each request

        Returns:
            Sum of allocations
        """
        return float(np.sum(np.asarray(allocations, dtype=float)))

    def is_feasible(self, allocations: Sequence[float], tolerance: float = 0.0) -> bool:
        """Check if allocations fit within the capacity.

        Args:
            allocations: Amount granted to each request
            tolerance: Slack allowed for floating point accumulation

        Returns:
            True if every allocation is >= 0 and their sum <= capacity + tolerance
        """
        allocations = np.asarray(allocations, dtype=float)
        if np.any(allocations < 0):
            return False
        return self.get_used(allocations) <= self.get_capacity() + tolerance
