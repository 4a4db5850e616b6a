from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from deskperp.errors import ValidationFailedError
from deskperp.models.account import OpenOrder
from deskperp.models.order import (
    BROKER_ID,
    CancelOrderRequest,
    OrderType,
    PlaceOrderRequest,
    TimeInForce,
    TradeIntent,
)

QUOTE_SUFFIX = "USD"


def _violations(err: ValidationError) -> list[dict[str, str]]:
    out = []
    for e in err.errors():
        path = ".".join(str(p) for p in e["loc"]) or "<root>"
        out.append({"field": path, "message": e["msg"]})
    return out


def validate(model: Type[BaseModel], payload: Dict[str, Any], what: str):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        violations = _violations(e)
        listing = "; ".join(f"{v['field']}: {v['message']}" for v in violations)
        raise ValidationFailedError(f"Invalid {what}: {listing}", violations) from e


def market_symbol(symbol: str) -> str:
    s = (symbol or "").strip().upper()
    if s and not s.endswith(QUOTE_SUFFIX):
        s += QUOTE_SUFFIX
    return s


def _is_market(price: Any) -> bool:
    if price is None or price == "":
        return True
    try:
        return Decimal(str(price)) == 0
    except InvalidOperation:
        # left to the schema to reject
        return False


def build_place_order(
    intent: TradeIntent,
    subaccount: str,
    nonce: str,
    time_in_force: Optional[TimeInForce | str] = None,
) -> PlaceOrderRequest:
    is_market = _is_market(intent.price)
    payload: Dict[str, Any] = {
        "symbol": market_symbol(intent.symbol),
        "side": intent.side,
        "amount": intent.amount,
        "price": "0" if intent.price in (None, "") else intent.price,
        "nonce": nonce,
        "broker_id": BROKER_ID,
        "order_type": OrderType.MARKET if is_market else OrderType.LIMIT,
        "reduce_only": False,
        "subaccount": subaccount,
    }
    if time_in_force is not None:
        payload["time_in_force"] = time_in_force
    return validate(PlaceOrderRequest, payload, "perp trade content")


def build_cancel_order(
    order: OpenOrder, subaccount: str, nonce: str
) -> CancelOrderRequest:
    payload = {
        "symbol": order.symbol,
        "subaccount": subaccount,
        "order_digest": order.order_digest or "",
        "nonce": nonce,
        "is_conditional_order": False,
        "wait_for_reply": False,
    }
    return validate(CancelOrderRequest, payload, "cancel order")
