"""Exceptions raised when allocation inputs violate their preconditions."""

from typing import Optional


class AllocationError(ValueError):
    """Base class for invalid allocation inputs."""


class InvalidCapacity(AllocationError):
    """Capacity is negative or not a finite number."""

    def __init__(self, capacity: float, reason: Optional[str] = None):
        self.capacity = capacity
        self.reason = reason or "capacity must be a finite number >= 0"
        super().__init__(f"Invalid capacity {capacity!r}: {self.reason}")


class InvalidRequest(AllocationError):
    """A request has a negative or non-finite demand or priority.

    Carries the position of the offending request in the input sequence
    together with its name, so callers can point at the bad row.
    """

    def __init__(self, index: int, name: str, reason: str):
        self.index = index
        self.name = name
        self.reason = reason
        super().__init__(f"Request {index} ('{name}'): {reason}")
