from __future__ import annotations
from typing import Callable, Optional
import logging

from deskperp.actions.base import (
    ActionResult,
    Callback,
    deliver,
    fetch_summary,
    open_session,
    report_failure,
)
from deskperp.actions.formatting import summary_text
from deskperp.actions.registry import register
from deskperp.auth.nonce import generate_nonce
from deskperp.auth.signer import ISigner
from deskperp.errors import DeskExchangeError
from deskperp.exchanges.base import IExchangeClient
from deskperp.settings import Settings

log = logging.getLogger("actions")


@register(
    "GET_PERP_ACCOUNT_SUMMARY",
    similes=[
        "CHECK_ACCOUNT",
        "CHECK_PERP_ACCOUNT",
        "ACCOUNT_SUMMARY",
        "PERP_ACCOUNT_SUMMARY",
    ],
    description="Get the current account summary",
)
def account_summary(
    settings: Settings,
    conversation: str = "",
    *,
    signer: Optional[ISigner] = None,
    client: Optional[IExchangeClient] = None,
    callback: Optional[Callback] = None,
    nonces: Callable[[], str] = generate_nonce,
) -> ActionResult:
    try:
        session = open_session(settings, signer, client, nonces)
        data, summary = fetch_summary(session)
    except DeskExchangeError as e:
        return report_failure("getting account summary", e, callback)

    log.info(
        "summary: positions=%d orders=%d collaterals=%d",
        len(summary.positions),
        len(summary.open_orders),
        len(summary.collaterals),
    )
    return deliver(
        callback, ActionResult(True, summary_text(session.signer.address, summary), data)
    )
