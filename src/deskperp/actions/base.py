from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple
import logging

from pydantic import ValidationError

from deskperp.auth.nonce import generate_nonce
from deskperp.auth.signer import EthAccountSigner, ISigner
from deskperp.auth.subaccount import get_subaccount
from deskperp.errors import DeskExchangeError, UpstreamDataMissingError
from deskperp.exchanges.base import IExchangeClient
from deskperp.exchanges.desk import DeskClient
from deskperp.models.account import SubaccountSummary
from deskperp.settings import Settings

log = logging.getLogger("actions")


@dataclass
class ActionResult:
    success: bool
    text: str
    content: Dict[str, Any] = field(default_factory=dict)


Callback = Callable[[ActionResult], None]


@dataclass(frozen=True)
class ExchangeSession:
    """Everything one handler call needs after authenticating."""

    client: IExchangeClient
    signer: ISigner
    jwt: str
    subaccount: str


def open_session(
    settings: Settings,
    signer: Optional[ISigner] = None,
    client: Optional[IExchangeClient] = None,
    nonces: Callable[[], str] = generate_nonce,
) -> ExchangeSession:
    client = client or DeskClient(settings.endpoint, timeout=settings.timeout_s)
    signer = signer or EthAccountSigner.from_settings(settings)
    subaccount = get_subaccount(signer.address, settings.subaccount_id)
    jwt = client.authenticate(signer, settings.subaccount_id, nonces())
    return ExchangeSession(client=client, signer=signer, jwt=jwt, subaccount=subaccount)


def fetch_summary(session: ExchangeSession) -> Tuple[Dict[str, Any], SubaccountSummary]:
    body = session.client.get_subaccount_summary(session.jwt, session.subaccount)
    data = body.get("data")
    if not isinstance(data, dict):
        raise UpstreamDataMissingError(
            "Subaccount summary response has no data", details=body
        )
    try:
        return data, SubaccountSummary.model_validate(data)
    except ValidationError as e:
        raise UpstreamDataMissingError(
            f"Malformed subaccount summary ({e.error_count()} problems)", details=body
        ) from e


def deliver(callback: Optional[Callback], result: ActionResult) -> ActionResult:
    if callback:
        callback(result)
    return result


def report_failure(
    what: str,
    err: DeskExchangeError,
    callback: Optional[Callback] = None,
    **extra: Any,
) -> ActionResult:
    log.error(
        "Error %s: message=%s code=%s data=%s", what, err.message, err.code, err.details
    )
    text = f"Error {what}: {err.message}"
    if err.errors:
        text += f" {err.errors}"
    content = {"error": err.message, "code": err.code, "errors": err.errors}
    content.update(extra)
    return deliver(callback, ActionResult(False, text, content))
