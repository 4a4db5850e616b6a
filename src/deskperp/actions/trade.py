from __future__ import annotations
from typing import Callable, Optional
import logging

from deskperp.actions.base import (
    ActionResult,
    Callback,
    deliver,
    open_session,
    report_failure,
)
from deskperp.actions.formatting import trade_text
from deskperp.actions.registry import register
from deskperp.auth.nonce import generate_nonce
from deskperp.auth.signer import ISigner
from deskperp.errors import DeskExchangeError, UpstreamDataMissingError
from deskperp.exchanges.base import IExchangeClient
from deskperp.execution.builder import build_place_order
from deskperp.intent.extractor import IntentExtractor
from deskperp.models.order import TimeInForce
from deskperp.settings import Settings

log = logging.getLogger("actions")


@register(
    "PERP_TRADE",
    similes=["PERP_ORDER", "PERP_BUY", "PERP_SELL"],
    description="Place a perpetual contract trade order on DESK Exchange",
)
def perp_trade(
    settings: Settings,
    conversation: str = "",
    *,
    extractor: IntentExtractor,
    signer: Optional[ISigner] = None,
    client: Optional[IExchangeClient] = None,
    callback: Optional[Callback] = None,
    nonces: Callable[[], str] = generate_nonce,
    time_in_force: Optional[TimeInForce | str] = None,
) -> ActionResult:
    """
    intent -> endpoint -> jwt -> validated order -> place-order.

    The first failure ends the call; nothing is retried.
    """
    intent = None
    try:
        intent = extractor.extract(conversation)
        session = open_session(settings, signer, client, nonces)

        order = build_place_order(
            intent, session.subaccount, nonces(), time_in_force=time_in_force
        )
        log.info("Processed order: %s", order.to_payload())

        body = session.client.place_order(session.jwt, order)
        log.info("place-order response: %s", body)
        data = body.get("data")
        if not isinstance(data, dict):
            raise UpstreamDataMissingError(
                "Place order response has no data", details=body
            )
        return deliver(callback, ActionResult(True, trade_text(data), body))
    except DeskExchangeError as e:
        return report_failure(
            "executing trade",
            e,
            callback,
            intent=None if intent is None else vars(intent),
        )
