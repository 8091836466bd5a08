"""Domain value objects."""

from .value_objects import DEFAULT_CURRENCY, ExecutionID, Money

__all__ = [
    "DEFAULT_CURRENCY",
    "ExecutionID",
    "Money",
]
