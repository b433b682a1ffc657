"""Tests for density scoring."""
import math

import pytest

from bwalloc.data import Request
from bwalloc.errors import InvalidRequest
from bwalloc.scoring import DensityKey, DensityKind, compute_density, score_requests


class TestComputeDensity:
    """Tests for the per-request density key."""

    def test_positive_demand(self):
        """Density is priority / demand."""
        key = compute_density(Request("A", demand=50, priority=40))
        assert key.kind is DensityKind.FINITE
        assert key.value == pytest.approx(0.8)
        assert key.density == pytest.approx(0.8)

    def test_zero_demand_positive_priority_is_unconstrained(self):
        """Zero demand with positive priority gets the unconstrained tag."""
        key = compute_density(Request("free", demand=0, priority=5))
        assert key.kind is DensityKind.UNCONSTRAINED
        assert key.density == math.inf

    def test_zero_demand_zero_priority_is_zero(self):
        """Zero demand and zero priority has density 0."""
        key = compute_density(Request("noop", demand=0, priority=0))
        assert key.kind is DensityKind.FINITE
        assert key.value == 0.0

    def test_zero_priority_positive_demand(self):
        """Zero priority gives density 0 rather than an error."""
        key = compute_density(Request("worthless", demand=10, priority=0))
        assert key == DensityKey(DensityKind.FINITE, 0.0)

    def test_overflow_raises_invalid_request(self):
        """A density that overflows to infinity is reported with its index."""
        with pytest.raises(InvalidRequest) as excinfo:
            compute_density(Request("huge", demand=1e-310, priority=1e300), index=3)
        assert excinfo.value.index == 3
        assert excinfo.value.name == "huge"


class TestDensityKey:
    """Tests for ordering of density keys."""

    def test_unconstrained_beats_any_finite(self):
        """Unconstrained outranks even very large finite densities."""
        unconstrained = DensityKey(DensityKind.UNCONSTRAINED)
        assert unconstrained > DensityKey(DensityKind.FINITE, 1e300)
        assert unconstrained > DensityKey(DensityKind.FINITE, 1e9)

    def test_unconstrained_keys_are_equal(self):
        """All unconstrained keys tie."""
        assert DensityKey(DensityKind.UNCONSTRAINED) == DensityKey(DensityKind.UNCONSTRAINED)

    def test_finite_keys_compare_by_value(self):
        """Finite keys order by their numeric density."""
        assert DensityKey(DensityKind.FINITE, 1.5) > DensityKey(DensityKind.FINITE, 0.8)

    def test_str(self):
        """Keys render as two decimals or as 'unconstrained'."""
        assert str(DensityKey(DensityKind.FINITE, 1.5)) == "1.50"
        assert str(DensityKey(DensityKind.UNCONSTRAINED)) == "unconstrained"


class TestScoreRequests:
    """Tests for scoring a sequence of requests."""

    def test_keeps_input_order_and_index(self):
        """Scored requests keep input order and remember their index."""
        requests = [Request("A", 50, 40), Request("B", 60, 90), Request("C", 30, 15)]
        scored = score_requests(requests)
        assert [s.name for s in scored] == ["A", "B", "C"]
        assert [s.index for s in scored] == [0, 1, 2]
        assert [s.density for s in scored] == pytest.approx([0.8, 1.5, 0.5])

    def test_exposes_request_fields(self):
        """ScoredRequest forwards the request's fields."""
        scored = score_requests([Request("A", 50, 40)])[0]
        assert scored.demand == 50
        assert scored.priority == 40
        assert scored.request == Request("A", 50, 40)

    def test_empty(self):
        """Scoring an empty list gives an empty list."""
        assert score_requests([]) == []
