"""Domain layer - pure domain models and interfaces."""

from .entities import CompositeItem, Dish, Item, Order, OrderBuilder
from .enums import ExecutionStatus, FailurePolicy
from .exceptions import (
    CyclicChainError,
    CyclicCompositeError,
    EmptyOrderError,
    InvalidPriceError,
    OrderDomainError,
    ProcessingError,
)
from .value_objects import ExecutionID, Money

__all__ = [
    "CompositeItem",
    "CyclicChainError",
    "CyclicCompositeError",
    "Dish",
    "EmptyOrderError",
    "ExecutionID",
    "ExecutionStatus",
    "FailurePolicy",
    "InvalidPriceError",
    "Item",
    "Money",
    "Order",
    "OrderBuilder",
    "OrderDomainError",
    "ProcessingError",
]
