"""Tests for request input."""
import io

import numpy as np
import pandas as pd
import pytest

from bwalloc.data import Request, RequestData, as_requests, validate_requests
from bwalloc.errors import InvalidRequest


class TestRequest:
    """Tests for the request record."""

    def test_immutable(self):
        """Requests cannot be modified after creation."""
        r = Request("A", 50, 40)
        with pytest.raises(AttributeError):
            r.demand = 10

    def test_long_names_allowed(self):
        """Names have no length cap."""
        name = "x" * 500
        assert Request(name, 1, 1).name == name

    def test_as_requests_from_tuples(self):
        """Tuples are turned into Requests."""
        requests = as_requests([("A", 50, 40), Request("B", 60, 90)])
        assert requests == [Request("A", 50, 40), Request("B", 60, 90)]


class TestValidateRequests:
    """Tests for request validation."""

    def test_valid(self):
        """Zero demand and zero priority are valid."""
        validate_requests([Request("a", 0, 0), Request("b", 1.5, 3)])

    def test_reports_first_offender(self):
        """The first invalid request is reported by index and name."""
        with pytest.raises(InvalidRequest) as excinfo:
            validate_requests([Request("a", 1, 1), Request("b", -1, 1), Request("c", -2, 1)])
        assert excinfo.value.index == 1
        assert excinfo.value.name == "b"
        assert "Request 1 ('b')" in str(excinfo.value)

    def test_non_numeric(self):
        """Non-numeric fields are rejected."""
        with pytest.raises(InvalidRequest):
            validate_requests([Request("a", "ten", 1)])


class TestRequestData:
    """Tests for the tabular request source."""

    def test_instantiation(self):
        """Data can be created from a DataFrame."""
        df = pd.DataFrame({
            'name': ['A', 'B', 'C'],
            'demand': [50, 60, 30],
            'priority': [40, 90, 15],
        })
        data = RequestData(df=df)
        assert data.n == 3
        np.testing.assert_array_equal(data.demands, [50.0, 60.0, 30.0])
        np.testing.assert_array_equal(data.priorities, [40.0, 90.0, 15.0])

    def test_requests(self):
        """Rows become Requests in order."""
        df = pd.DataFrame({'name': ['A', 'B'], 'demand': [50, 60], 'priority': [40, 90]})
        assert RequestData(df=df).requests == [Request("A", 50.0, 40.0), Request("B", 60.0, 90.0)]

    def test_custom_columns(self):
        """Column names can be overridden."""
        df = pd.DataFrame({'task': ['A'], 'mbps': [5.0], 'weight': [2.0]})
        data = RequestData(df=df, name_col='task', demand_col='mbps', priority_col='weight')
        assert data.requests == [Request("A", 5.0, 2.0)]

    def test_missing_column(self):
        """Missing columns raise ValueError."""
        df = pd.DataFrame({'name': ['A'], 'demand': [5.0]})
        with pytest.raises(ValueError, match="priority"):
            RequestData(df=df)

    def test_non_numeric_column(self):
        """Non-numeric demand column raises ValueError."""
        df = pd.DataFrame({'name': ['A'], 'demand': ['lots'], 'priority': [1]})
        with pytest.raises(ValueError, match="numeric"):
            RequestData(df=df)

    def test_requires_dataframe(self):
        """Only DataFrames are accepted."""
        with pytest.raises(TypeError):
            RequestData(df=[("A", 1, 1)])

    def test_from_csv(self):
        """Requests can be loaded from CSV."""
        buf = io.StringIO("name,demand,priority\nA,50,40\nB,60,90\n007,0,5\n")
        data = RequestData.from_csv(buf)
        assert data.requests == [
            Request("A", 50.0, 40.0),
            Request("B", 60.0, 90.0),
            Request("007", 0.0, 5.0),
        ]

    def test_from_requests(self):
        """A RequestData can be built from requests."""
        data = RequestData.from_requests([("A", 50, 40)])
        assert list(data.df.columns) == ['name', 'demand', 'priority']
        assert data.requests == [Request("A", 50.0, 40.0)]
