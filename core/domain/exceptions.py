"""
Domain exceptions.

Validation errors subclass ValueError so callers that only know the
builtin type still catch them. They are raised when an object is built or
mutated, never later during price aggregation.
"""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .entities.order import Order


class OrderDomainError(Exception):
    """Base class for all order domain errors."""


class InvalidPriceError(OrderDomainError, ValueError):
    """A dish was given a negative price."""


class EmptyOrderError(OrderDomainError, ValueError):
    """An order was built without any items while items are required."""


class CyclicCompositeError(OrderDomainError, ValueError):
    """A composite item would end up containing itself."""


class CyclicChainError(OrderDomainError, ValueError):
    """A handler chain would loop back onto one of its own handlers."""


class ProcessingError(OrderDomainError):
    """
    A handler stage failed while processing an order.

    Attributes:
        stage: Name of the failing stage
        order: The order being processed
    """

    def __init__(self, stage: str, order: Optional["Order"], message: str):
        super().__init__(f"Stage '{stage}' failed: {message}")
        self.stage = stage
        self.order = order
