"""
Menu items (Composite pattern).

An Item is anything with a price and a display name. A Dish is a single
priced good; a CompositeItem (a combo) aggregates other items and computes
its price and name from its children every time it is asked.

CRITICAL: This file must contain ZERO imports from:
- pydantic
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from ..exceptions import CyclicCompositeError, InvalidPriceError
from ..value_objects import DEFAULT_CURRENCY, Money


logger = logging.getLogger(__name__)


NAME_SEPARATOR = ", "


class Item(ABC):
    """Capability contract for anything priceable and nameable."""

    @abstractmethod
    def get_price(self) -> Money:
        """Current price of the item."""

    @abstractmethod
    def get_name(self) -> str:
        """Display name of the item."""


def render_items(items: Iterable[Item]) -> str:
    """Render a sequence of items as ``[a, b, c]`` using their str() form."""
    return "[" + ", ".join(str(item) for item in items) + "]"


@dataclass(frozen=True)
class Dish(Item):
    """
    Single priced good (leaf).

    ``price`` may be given as Money or as anything Decimal accepts; plain
    numbers are priced in the default currency.

    Raises:
        InvalidPriceError: If the price is negative
    """
    name: str
    price: Money

    def __post_init__(self):
        if not isinstance(self.price, Money):
            object.__setattr__(self, 'price', Money(amount=self.price))

        if self.price.is_negative():
            raise InvalidPriceError(
                f"Price of '{self.name}' cannot be negative: {self.price}"
            )

    def get_price(self) -> Money:
        return self.price

    def get_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"{self.name} (${self.price.amount})"


class CompositeItem(Item):
    """
    Ordered collection of items priced as the sum of its children.

    Children are held by reference, so a dish shared with an order is the
    same object in both places. Equality is identity: two combos with the
    same contents are still different combos.
    """

    def __init__(
        self,
        items: Optional[Iterable[Item]] = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._items: List[Item] = []
        self.currency = currency
        for item in items or ():
            self.add_item(item)

    @property
    def children(self) -> Tuple[Item, ...]:
        """Read-only snapshot of the current children."""
        return tuple(self._items)

    def add_item(self, item: Item) -> None:
        """
        Append an item.

        Raises:
            CyclicCompositeError: If the item is this composite or already
                contains it at any depth
        """
        if item is self or (isinstance(item, CompositeItem) and item.contains(self)):
            raise CyclicCompositeError("A composite item cannot contain itself")

        self._items.append(item)
        logger.debug("Added %s to composite (now %d items)", item, len(self._items))

    def remove_item(self, item: Item) -> None:
        """Remove the first child equal to ``item``; no-op if there is none."""
        try:
            self._items.remove(item)
        except ValueError:
            logger.debug("remove_item: %s not in composite, ignoring", item)

    def contains(self, item: Item) -> bool:
        """True if ``item`` (by identity) is a child at any nesting depth."""
        pending = [self]
        while pending:
            composite = pending.pop()
            for child in composite._items:
                if child is item:
                    return True
                if isinstance(child, CompositeItem):
                    pending.append(child)
        return False

    def get_price(self) -> Money:
        return Money.total((item.get_price() for item in self._items), self.currency)

    def get_name(self) -> str:
        return NAME_SEPARATOR.join(item.get_name() for item in self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return f"CompositeItem{{items={render_items(self._items)}}}"

    def __repr__(self) -> str:
        return f"CompositeItem(items={self._items!r}, currency={self.currency!r})"
