from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

BROKER_ID = "DESK"


class Side(str, Enum):
    LONG = "Long"
    SHORT = "Short"


class OrderType(str, Enum):
    MARKET = "Market"
    LIMIT = "Limit"


class TimeInForce(str, Enum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


@dataclass(frozen=True)
class TradeIntent:
    """What the language model pulled out of the conversation, unvalidated."""

    symbol: str
    side: str  # "Long" | "Short"
    amount: str
    price: Optional[str] = None

    @classmethod
    def market(cls, symbol: str, side: str, amount: str):
        return cls(symbol=symbol, side=side, amount=amount, price="0")

    @classmethod
    def limit(cls, symbol: str, side: str, amount: str, price: str):
        return cls(symbol=symbol, side=side, amount=amount, price=price)


class PlaceOrderRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol: str = Field(min_length=1)
    side: Side
    amount: Decimal = Field(gt=0)
    price: Decimal = Field(ge=0)
    nonce: str
    broker_id: Literal["DESK"] = BROKER_ID
    order_type: OrderType
    reduce_only: bool = False
    subaccount: str
    time_in_force: Optional[TimeInForce] = Field(default=None, alias="timeInForce")

    @field_validator("symbol")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def _order_type_matches_price(self):
        expected = OrderType.MARKET if self.price == 0 else OrderType.LIMIT
        if self.order_type != expected:
            raise ValueError(
                f"order_type must be {expected.value} when price is {self.price}"
            )
        return self

    @field_serializer("amount", "price")
    def _plain_decimal(self, v: Decimal) -> str:
        return format(v, "f")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CancelOrderRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str = Field(min_length=1)
    subaccount: str
    order_digest: str = Field(min_length=1)
    nonce: str
    is_conditional_order: bool = False
    wait_for_reply: bool = False

    @field_validator("symbol")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper()

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")
