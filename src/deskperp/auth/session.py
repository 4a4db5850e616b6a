from __future__ import annotations
from typing import Any, Dict, Optional
import logging
import requests

from deskperp.auth.signer import ISigner
from deskperp.errors import (
    AuthenticationError,
    HttpRequestFailedError,
    MissingParameterError,
    UpstreamDataMissingError,
)

log = logging.getLogger("auth")

AUTH_PATH = "/v2/auth/evm"
DEFAULT_TIMEOUT_S = 5.0


def challenge_message(address: str, subaccount_id: int, nonce: str) -> str:
    return (
        f"generate jwt for {address.lower()} and subaccount id {subaccount_id} "
        f"to trade on happytrading.global with nonce: {nonce}"
    )


def _body(r: requests.Response) -> Dict[str, Any]:
    try:
        data = r.json()
    except ValueError:
        return {"raw": r.text}
    return data if isinstance(data, dict) else {"data": data}


def generate_jwt(
    endpoint: str,
    signer: ISigner,
    subaccount_id: int,
    nonce: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT_S,
) -> str:
    """
    Exchange a signed challenge for a bearer token.

    One attempt only: any status other than 200 raises AuthenticationError,
    a transport failure raises HttpRequestFailedError.
    """
    if not endpoint or signer is None or not nonce:
        raise MissingParameterError()

    message = challenge_message(signer.address, subaccount_id, nonce)
    payload = {
        "account": signer.address,
        "subaccount_id": str(subaccount_id),
        "nonce": nonce,
        "signature": signer.sign_message(message),
    }

    s = session or requests.Session()
    url = f"{endpoint.rstrip('/')}{AUTH_PATH}"
    try:
        r = s.post(
            url,
            json=payload,
            headers={"content-type": "application/json"},
            timeout=timeout,
        )
    except requests.Timeout as e:
        raise HttpRequestFailedError(
            f"POST {AUTH_PATH} timed out after {timeout}s", code="TIMEOUT"
        ) from e
    except requests.RequestException as e:
        raise HttpRequestFailedError(f"POST {AUTH_PATH} failed: {e}") from e

    if r.status_code != 200:
        log.warning("auth rejected (status=%s)", r.status_code)
        raise AuthenticationError(code=r.status_code, details=_body(r))

    body = _body(r)
    data = body.get("data")
    token = data.get("jwt") if isinstance(data, dict) else None
    if not token:
        raise UpstreamDataMissingError(
            "Auth response has no data.jwt", details=body
        )
    log.debug("jwt issued for %s subaccount=%s", signer.address, subaccount_id)
    return token
