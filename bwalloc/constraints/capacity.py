"""Single scalar capacity constraint."""

import math

from .base import ResourceConstraint
from ..errors import InvalidCapacity


class CapacityConstraint(ResourceConstraint):
    """Constraint on the total amount of a divisible resource (e.g. bandwidth).

    Capacity must be a finite number >= 0. Negative capacity is rejected
    rather than clamped to zero.
    """

    def __init__(self, capacity: float):
        """Initialize capacity constraint.

        Args:
            capacity: Total resource available

        Raises:
            InvalidCapacity: If capacity is negative, NaN or infinite
        """
        try:
            value = float(capacity)
        except (TypeError, ValueError, OverflowError):
            raise InvalidCapacity(capacity, "capacity must be a finite number")
        if not math.isfinite(value):
            raise InvalidCapacity(capacity, "capacity must be finite")
        if value < 0:
            raise InvalidCapacity(capacity, "capacity must be >= 0")
        self._capacity = value

    def get_capacity(self) -> float:
        return self._capacity

    def with_capacity(self, capacity: float) -> 'CapacityConstraint':
        """Return a new constraint with a different capacity."""
        return CapacityConstraint(capacity)

    def __repr__(self) -> str:
        return f"CapacityConstraint(capacity={self._capacity})"
