"""Tests for constraint classes."""
import math

import pytest

from bwalloc.constraints import CapacityConstraint
from bwalloc.errors import AllocationError, InvalidCapacity


class TestCapacityConstraint:
    """Tests for the scalar capacity constraint."""

    def test_instantiation(self):
        """Capacity constraint stores its capacity as a float."""
        c = CapacityConstraint(capacity=100)
        assert c.get_capacity() == 100.0
        assert isinstance(c.get_capacity(), float)

    def test_zero_capacity_allowed(self):
        """Zero capacity is valid; nothing can be allocated."""
        c = CapacityConstraint(capacity=0)
        assert c.get_capacity() == 0.0

    def test_negative_capacity_rejected(self):
        """Negative capacity fails fast instead of being clamped."""
        with pytest.raises(InvalidCapacity) as excinfo:
            CapacityConstraint(capacity=-1)
        assert excinfo.value.capacity == -1

    @pytest.mark.parametrize("capacity", [math.nan, math.inf, "lots"])
    def test_non_finite_capacity_rejected(self, capacity):
        """NaN, infinite and non-numeric capacities are rejected."""
        with pytest.raises(InvalidCapacity):
            CapacityConstraint(capacity=capacity)

    def test_huge_integer_capacity_rejected(self):
        """Integers too large for a float raise InvalidCapacity."""
        with pytest.raises(InvalidCapacity) as excinfo:
            CapacityConstraint(capacity=10**400)
        assert excinfo.value.capacity == 10**400

    def test_invalid_capacity_is_value_error(self):
        """InvalidCapacity can be caught as AllocationError or ValueError."""
        with pytest.raises(AllocationError):
            CapacityConstraint(capacity=-5)
        with pytest.raises(ValueError):
            CapacityConstraint(capacity=-5)

    def test_get_used(self):
        """Used capacity is the sum of allocations."""
        c = CapacityConstraint(capacity=100)
        assert c.get_used([10.0, 20.5, 0.0]) == pytest.approx(30.5)

    def test_is_feasible(self):
        """Allocations within capacity are feasible, above are not."""
        c = CapacityConstraint(capacity=100)
        assert c.is_feasible([60.0, 40.0])
        assert not c.is_feasible([60.0, 41.0])

    def test_is_feasible_with_tolerance(self):
        """Tolerance absorbs floating point overshoot."""
        c = CapacityConstraint(capacity=1.0)
        assert not c.is_feasible([1.0 + 1e-12])
        assert c.is_feasible([1.0 + 1e-12], tolerance=1e-9)

    def test_negative_allocation_infeasible(self):
        """Negative allocations are never feasible."""
        c = CapacityConstraint(capacity=100)
        assert not c.is_feasible([-1.0, 2.0])

    def test_with_capacity(self):
        """with_capacity returns a new constraint and leaves the original alone."""
        c = CapacityConstraint(capacity=100)
        c2 = c.with_capacity(50)
        assert c2.get_capacity() == 50.0
        assert c.get_capacity() == 100.0
