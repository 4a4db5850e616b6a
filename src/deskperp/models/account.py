from __future__ import annotations
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    model_config = ConfigDict(extra="allow")

    symbol: str
    side: str
    quantity: Decimal


class OpenOrder(BaseModel):
    model_config = ConfigDict(extra="allow")

    symbol: str
    side: str
    order_digest: Optional[str] = None
    price: Decimal = Decimal(0)
    trigger_price: Optional[Decimal] = None
    original_quantity: Decimal = Decimal(0)
    remaining_quantity: Decimal = Decimal(0)

    @property
    def filled_quantity(self) -> Decimal:
        return self.original_quantity - self.remaining_quantity


class Collateral(BaseModel):
    model_config = ConfigDict(extra="allow")

    asset: str
    amount: Decimal


class SubaccountSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    positions: List[Position] = Field(default_factory=list)
    open_orders: List[OpenOrder] = Field(default_factory=list)
    collaterals: List[Collateral] = Field(default_factory=list)
