# src/deskperp/exchanges/desk.py
from __future__ import annotations
from typing import Any, Dict, Optional
import logging
import requests

from deskperp.auth.session import DEFAULT_TIMEOUT_S, generate_jwt
from deskperp.auth.signer import ISigner
from deskperp.errors import (
    HttpRequestFailedError,
    MissingOrderDigestError,
    MissingParameterError,
)
from deskperp.exchanges.base import IExchangeClient
from deskperp.models.order import CancelOrderRequest, PlaceOrderRequest

log = logging.getLogger("desk")


class DeskClient(IExchangeClient):
    """DESK Exchange REST: auth, place/cancel order, subaccount summary."""

    name = "desk"

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        self.base = (base_url or "").rstrip("/")
        self.timeout = timeout
        self.s = session or requests.Session()

    def _headers(self, jwt: str) -> Dict[str, str]:
        return {
            "authorization": f"Bearer {jwt}",
            "content-type": "application/json",
        }

    # --- Helper: one request, 200 or bust ---
    def _send(
        self, method: str, path: str, jwt: str, payload: Optional[dict] = None
    ) -> Dict[str, Any]:
        url = f"{self.base}{path}"
        try:
            r = self.s.request(
                method,
                url,
                json=payload,
                headers=self._headers(jwt),
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise HttpRequestFailedError(
                f"{method} {path} timed out after {self.timeout}s", code="TIMEOUT"
            ) from e
        except requests.RequestException as e:
            raise HttpRequestFailedError(f"{method} {path} failed: {e}") from e

        try:
            body = r.json()
        except ValueError:
            body = {"raw": r.text}
        if not isinstance(body, dict):
            body = {"data": body}

        # any other code, other 2xx included, is a failure
        if r.status_code != 200:
            log.warning("%s %s failed (status=%s)", method, path, r.status_code)
            raise HttpRequestFailedError(
                f"Request failed with status code {r.status_code}",
                status_code=r.status_code,
                details=body,
            )
        return body

    def authenticate(self, signer: ISigner, subaccount_id: int, nonce: str) -> str:
        return generate_jwt(
            self.base,
            signer,
            subaccount_id,
            nonce,
            session=self.s,
            timeout=self.timeout,
        )

    def place_order(self, jwt: str, order: PlaceOrderRequest) -> Dict[str, Any]:
        if not self.base or not jwt or order is None:
            raise MissingParameterError()
        return self._send("POST", "/v2/place-order", jwt, order.to_payload())

    def cancel_order(self, jwt: str, order: CancelOrderRequest) -> Dict[str, Any]:
        if not self.base or not jwt or order is None:
            raise MissingParameterError()
        if not getattr(order, "order_digest", None):
            raise MissingOrderDigestError()
        return self._send("POST", "/v2/cancel-order", jwt, order.to_payload())

    def get_subaccount_summary(self, jwt: str, subaccount: str) -> Dict[str, Any]:
        if not self.base or not jwt or not subaccount:
            raise MissingParameterError()
        return self._send("GET", f"/v2/subaccount-summary/{subaccount}", jwt)
