"""Domain entities."""

from .item import CompositeItem, Dish, Item, render_items
from .order import Order, OrderBuilder

__all__ = [
    "CompositeItem",
    "Dish",
    "Item",
    "Order",
    "OrderBuilder",
    "render_items",
]
