"""Application DTOs."""

from .order_dto import ItemDTO, OrderDTO

__all__ = [
    "ItemDTO",
    "OrderDTO",
]
