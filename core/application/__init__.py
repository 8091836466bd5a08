"""Application layer - DTOs."""

from .dtos import ItemDTO, OrderDTO

__all__ = [
    "ItemDTO",
    "OrderDTO",
]
