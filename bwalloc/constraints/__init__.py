"""Resource constraints for allocation problems."""

from .base import ResourceConstraint
from .capacity import CapacityConstraint

__all__ = [
    "ResourceConstraint",
    "CapacityConstraint",
]
