"""Application DTOs for Order operations."""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from core.domain.entities import CompositeItem, Item, Order


class ItemDTO(BaseModel):
    """DTO for a menu item; combos carry their children."""

    name: str = Field(..., description="Display name")
    price_amount: Decimal = Field(..., ge=0, description="Current price amount")
    currency: str = Field(default="USD", description="Currency code")
    children: List[ItemDTO] = Field(default_factory=list, description="Combo contents")

    model_config = {"frozen": True}

    @classmethod
    def from_domain(cls, item: Item) -> ItemDTO:
        price = item.get_price()
        children = []
        if isinstance(item, CompositeItem):
            children = [cls.from_domain(child) for child in item]
        return cls(
            name=item.get_name(),
            price_amount=price.amount,
            currency=price.currency,
            children=children,
        )


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    customer_name: Optional[str] = Field(None, description="Customer name")
    items: List[ItemDTO] = Field(default_factory=list, description="Order items")
    total_amount: Decimal = Field(..., ge=0, description="Total captured at build time")
    total_currency: str = Field(default="USD", description="Currency code")
    recalculated_amount: Decimal = Field(..., ge=0, description="Total from current item prices")

    model_config = {"frozen": True}

    @property
    def is_total_stale(self) -> bool:
        return self.total_amount != self.recalculated_amount

    @classmethod
    def from_domain(cls, order: Order) -> OrderDTO:
        return cls(
            customer_name=order.customer_name,
            items=[ItemDTO.from_domain(item) for item in order.items],
            total_amount=order.total_cost.amount,
            total_currency=order.total_cost.currency,
            recalculated_amount=order.recalculate_total().amount,
        )


ItemDTO.model_rebuild()
