from typing import Any, Dict, Protocol

from deskperp.auth.signer import ISigner
from deskperp.models.order import CancelOrderRequest, PlaceOrderRequest


class IExchangeClient(Protocol):
    name: str
    base: str

    def authenticate(self, signer: ISigner, subaccount_id: int, nonce: str) -> str: ...
    def place_order(self, jwt: str, order: PlaceOrderRequest) -> Dict[str, Any]: ...
    def cancel_order(self, jwt: str, order: CancelOrderRequest) -> Dict[str, Any]: ...
    def get_subaccount_summary(self, jwt: str, subaccount: str) -> Dict[str, Any]: ...
