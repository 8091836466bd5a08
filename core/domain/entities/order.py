"""
Order value and its builder (Builder pattern).

CRITICAL: This file must contain ZERO imports from:
- pydantic
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .item import Item, render_items
from ..exceptions import EmptyOrderError
from ..value_objects import DEFAULT_CURRENCY, Money


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Order:
    """
    Immutable record of a customer's selection.

    ``total_cost`` is a snapshot taken by the builder: each item's price is
    read at the moment it was added. Items are live references, so if a
    combo in ``items`` changes later, ``total_cost`` does NOT follow.
    Use ``recalculate_total()`` / ``is_total_stale()`` to observe that.
    """
    customer_name: Optional[str]
    items: Tuple[Item, ...] = ()
    total_cost: Money = field(default_factory=Money.zero)

    def recalculate_total(self) -> Money:
        """Sum of the items' current prices."""
        return Money.total(
            (item.get_price() for item in self.items),
            self.total_cost.currency,
        )

    def is_total_stale(self) -> bool:
        """True if the snapshot total no longer matches the items."""
        return self.recalculate_total() != self.total_cost

    def __str__(self) -> str:
        return (
            f"Order{{customerName='{self.customer_name}', "
            f"items={render_items(self.items)}, "
            f"totalCost={self.total_cost.amount}}}"
        )


class OrderBuilder:
    """
    Mutable staging object for an Order.

    Setters return the builder so calls can be chained:

        order = (
            OrderBuilder()
            .set_customer_name("John Doe")
            .add_item(burger)
            .add_item(combo)
            .build()
        )

    ``build()`` may be called repeatedly; every Order gets its own copy of
    the staged item sequence.
    """

    def __init__(
        self,
        currency: str = DEFAULT_CURRENCY,
        require_items: bool = False,
    ) -> None:
        """
        Args:
            currency: Currency of the accumulated total
            require_items: Make ``build()`` reject orders with no items
        """
        self.currency = currency
        self.require_items = require_items
        self.reset()

    def reset(self) -> "OrderBuilder":
        """Clear all staged state."""
        self.customer_name: Optional[str] = None
        self.items: List[Item] = []
        self.total_cost = Money.zero(self.currency)
        return self

    def set_customer_name(self, customer_name: Optional[str]) -> "OrderBuilder":
        self.customer_name = customer_name
        return self

    def add_item(self, item: Item) -> "OrderBuilder":
        """Stage an item and add its current price to the running total."""
        self.items.append(item)
        self.total_cost = self.total_cost + item.get_price()
        logger.debug("Staged %s, running total %s", item, self.total_cost)
        return self

    def build(self) -> Order:
        """
        Produce an Order from the staged state.

        Raises:
            EmptyOrderError: If no items were staged and ``require_items`` is set
        """
        if self.require_items and not self.items:
            raise EmptyOrderError(
                f"Order for {self.customer_name!r} has no items"
            )

        order = Order(
            customer_name=self.customer_name,
            items=tuple(self.items),
            total_cost=self.total_cost,
        )
        logger.debug("Built %s", order)
        return order
