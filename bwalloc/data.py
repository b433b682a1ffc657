import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .errors import InvalidRequest


@dataclass(frozen=True)
class Request:
    """A named claim on the shared resource.

    Attributes:
        name: Identifier, not required to be unique
        demand: Amount of resource requested (weight), >= 0
        priority: Worth of fully satisfying the request (value), >= 0
    """
    name: str
    demand: float
    priority: float


RequestLike = Union[Request, Tuple[str, float, float]]


def as_requests(items: Iterable[RequestLike]) -> List[Request]:
    """Normalize Requests or (name, demand, priority) tuples into Requests."""
    requests = []
    for item in items:
        if isinstance(item, Request):
            requests.append(item)
        else:
            name, demand, priority = item
            requests.append(Request(name=str(name), demand=demand, priority=priority))
    return requests


def validate_requests(requests: Sequence[Request]) -> None:
    """Check that every request has a finite, non-negative demand and priority.

    Raises:
        InvalidRequest: For the first request that violates the precondition
    """
    for i, request in enumerate(requests):
        for field in ("demand", "priority"):
            value = getattr(request, field)
            try:
                value = float(value)
            except (TypeError, ValueError, OverflowError):
                raise InvalidRequest(i, request.name, f"{field} must be a finite number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidRequest(i, request.name, f"{field} must be finite, got {value}")
            if value < 0:
                raise InvalidRequest(i, request.name, f"{field} must be >= 0, got {value}")


@dataclass
class RequestData:
    """Tabular source of allocation requests.

    Wraps a DataFrame with one row per request. Column names are configurable
    so that exports from other tools can be loaded as they are.

    Examples:
        data = RequestData(df)
        data = RequestData(df, name_col='task', demand_col='mbps', priority_col='weight')
        data = RequestData.from_csv('requests.csv')
    """
    df: pd.DataFrame
    name_col: str = 'name'
    demand_col: str = 'demand'
    priority_col: str = 'priority'

    def __post_init__(self) -> None:
        if not isinstance(self.df, pd.DataFrame):
            raise TypeError("df must be a pandas DataFrame")

        for col in (self.name_col, self.demand_col, self.priority_col):
            if col not in self.df.columns:
                raise ValueError(f"Column '{col}' not found in DataFrame")

        for col in (self.demand_col, self.priority_col):
            if not pd.api.types.is_numeric_dtype(self.df[col]):
                raise ValueError(f"Column '{col}' must be numeric")

    @classmethod
    def from_csv(cls, path, **kwargs) -> 'RequestData':
        """Load requests from a CSV file.

        Args:
            path: Path or buffer accepted by pandas.read_csv
            **kwargs: Column name overrides (name_col, demand_col, priority_col)
        """
        name_col = kwargs.get('name_col', 'name')
        df = pd.read_csv(path, dtype={name_col: str}, keep_default_na=False)
        return cls(df=df, **kwargs)

    @classmethod
    def from_requests(cls, requests: Iterable[RequestLike]) -> 'RequestData':
        rows = [
            {'name': r.name, 'demand': r.demand, 'priority': r.priority}
            for r in as_requests(requests)
        ]
        return cls(df=pd.DataFrame(rows, columns=['name', 'demand', 'priority']))

    @property
    def n(self) -> int:
        """Number of requests."""
        return len(self.df)

    @property
    def demands(self) -> np.ndarray:
        """Demands of shape (n,)."""
        return self.df[self.demand_col].to_numpy(dtype=float)

    @property
    def priorities(self) -> np.ndarray:
        """Priorities of shape (n,)."""
        return self.df[self.priority_col].to_numpy(dtype=float)

    @property
    def requests(self) -> List[Request]:
        """Rows as Request objects, in file order."""
        names = self.df[self.name_col].astype(str).tolist()
        return [
            Request(name=name, demand=float(d), priority=float(p))
            for name, d, p in zip(names, self.demands, self.priorities)
        ]
