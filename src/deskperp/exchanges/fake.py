import itertools
from typing import Any, Dict, List, Optional
from deskperp.auth.signer import ISigner
from deskperp.errors import AuthenticationError, HttpRequestFailedError, MissingOrderDigestError
from deskperp.exchanges.base import IExchangeClient
from deskperp.models.order import CancelOrderRequest, OrderType, PlaceOrderRequest


class FakeDeskExchange(IExchangeClient):
    """In-memory DESK Exchange. Keeps open orders and records every call."""

    name = "fake"

    def __init__(
        self,
        base_url: str = "https://fake.desk.local",
        open_orders: Optional[List[Dict[str, Any]]] = None,
        positions: Optional[List[Dict[str, Any]]] = None,
        collaterals: Optional[List[Dict[str, Any]]] = None,
        reject_auth: bool = False,
        fail_cancel_after: Optional[int] = None,
    ):
        self.base = base_url
        self.open_orders = list(open_orders or [])
        self.positions = list(positions or [])
        self.collaterals = list(collaterals or [])
        self.reject_auth = reject_auth
        self.fail_cancel_after = fail_cancel_after
        self.calls: List[tuple] = []
        self._seq = itertools.count(1)

    def authenticate(self, signer: ISigner, subaccount_id: int, nonce: str) -> str:
        self.calls.append(("auth", signer.address, subaccount_id, nonce))
        if self.reject_auth:
            raise AuthenticationError(code=401, details={"errors": ["invalid signature"]})
        return f"fake-jwt-{next(self._seq)}"

    def place_order(self, jwt: str, order: PlaceOrderRequest) -> Dict[str, Any]:
        self.calls.append(("place", order))
        data = {
            "order_digest": f"0xF{next(self._seq):063x}",
            "symbol": order.symbol,
            "side": order.side.value,
            "order_type": order.order_type.value,
            "quantity": str(order.amount),
            "price": str(order.price),
        }
        if order.order_type == OrderType.LIMIT:
            self.open_orders.append(
                {
                    "symbol": order.symbol,
                    "side": order.side.value,
                    "order_digest": data["order_digest"],
                    "price": str(order.price),
                    "original_quantity": str(order.amount),
                    "remaining_quantity": str(order.amount),
                }
            )
        return {"data": data}

    def cancel_order(self, jwt: str, order: CancelOrderRequest) -> Dict[str, Any]:
        if not order.order_digest:
            raise MissingOrderDigestError()
        done = sum(1 for c in self.calls if c[0] == "cancel")
        self.calls.append(("cancel", order))
        if self.fail_cancel_after is not None and done >= self.fail_cancel_after:
            raise HttpRequestFailedError(
                "Request failed with status code 400",
                status_code=400,
                details={"errors": ["order not found"]},
            )
        self.open_orders = [
            o for o in self.open_orders if o.get("order_digest") != order.order_digest
        ]
        return {"data": {"order_digest": order.order_digest, "status": "cancelled"}}

    def get_subaccount_summary(self, jwt: str, subaccount: str) -> Dict[str, Any]:
        self.calls.append(("summary", subaccount))
        return {
            "data": {
                "subaccount": subaccount,
                "positions": list(self.positions),
                "open_orders": list(self.open_orders),
                "collaterals": list(self.collaterals),
            }
        }
