from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Callable, List, Optional, Tuple
import logging

from deskperp.actions.base import (
    ActionResult,
    Callback,
    ExchangeSession,
    deliver,
    fetch_summary,
    open_session,
    report_failure,
)
from deskperp.actions.formatting import cancel_text
from deskperp.actions.registry import register
from deskperp.auth.nonce import generate_nonce
from deskperp.auth.signer import ISigner
from deskperp.errors import DeskExchangeError
from deskperp.exchanges.base import IExchangeClient
from deskperp.execution.builder import build_cancel_order
from deskperp.models.account import OpenOrder
from deskperp.settings import Settings

log = logging.getLogger("actions")


@dataclass(frozen=True)
class CancelOutcome:
    symbol: str
    order_digest: Optional[str]
    success: bool
    error: Optional[str] = None


def cancel_sequentially(
    session: ExchangeSession,
    orders: List[OpenOrder],
    nonces: Callable[[], str] = generate_nonce,
) -> Tuple[List[CancelOutcome], Optional[DeskExchangeError]]:
    """
    Cancel one order at a time, stopping at the first failure.

    Orders cancelled before the failure stay cancelled; the ones after it
    are not attempted.
    """
    outcomes: List[CancelOutcome] = []
    for o in orders:
        try:
            req = build_cancel_order(o, session.subaccount, nonces())
            session.client.cancel_order(session.jwt, req)
        except DeskExchangeError as e:
            log.warning("cancel %s %s failed: %s", o.symbol, o.order_digest, e)
            outcomes.append(CancelOutcome(o.symbol, o.order_digest, False, e.message))
            return outcomes, e
        log.info("cancelled %s %s", o.symbol, o.order_digest)
        outcomes.append(CancelOutcome(o.symbol, o.order_digest, True))
    return outcomes, None


@register(
    "CANCEL_ORDERS",
    similes=["CANCEL_ALL_ORDERS", "CANCEL", "CANCEL_ALL"],
    description="Cancel all open orders on DESK Exchange",
)
def cancel_orders(
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
        _, summary = fetch_summary(session)
    except DeskExchangeError as e:
        return report_failure("canceling orders", e, callback)

    outcomes, err = cancel_sequentially(session, summary.open_orders, nonces)
    results = [asdict(o) for o in outcomes]
    cancelled = sum(1 for o in outcomes if o.success)
    if err is not None:
        return report_failure(
            "canceling orders",
            err,
            callback,
            cancelled=cancelled,
            total=len(summary.open_orders),
            results=results,
        )
    return deliver(
        callback,
        ActionResult(
            True,
            cancel_text(cancelled),
            {"cancelled": cancelled, "total": len(summary.open_orders), "results": results},
        ),
    )
