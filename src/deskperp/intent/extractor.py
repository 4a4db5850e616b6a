from __future__ import annotations
import json
import logging
import re
from typing import Callable, Optional, Protocol

from deskperp.errors import IntentExtractionError
from deskperp.intent.templates import PERP_TRADE_TEMPLATE
from deskperp.models.order import TradeIntent

log = logging.getLogger("actions")

_FENCED = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)
_BARE = re.compile(r"\{.*\}", re.DOTALL)
_REQUIRED = ("symbol", "side", "amount")


class IntentExtractor(Protocol):
    def extract(self, conversation: str) -> TradeIntent: ...


class StaticIntentExtractor:
    """Intent already known (CLI flags, tests)."""

    def __init__(self, intent: TradeIntent):
        self.intent = intent

    def extract(self, conversation: str) -> TradeIntent:
        return self.intent


def parse_intent(text: Optional[str]) -> TradeIntent:
    if not text:
        raise IntentExtractionError()
    fenced = _FENCED.search(text)
    bare = None if fenced else _BARE.search(text)
    if not (fenced or bare):
        raise IntentExtractionError(details={"raw": text})
    try:
        obj = json.loads(fenced.group(1) if fenced else bare.group(0))
    except json.JSONDecodeError as e:
        raise IntentExtractionError(details={"raw": text}) from e
    if not isinstance(obj, dict):
        raise IntentExtractionError(details={"raw": text})
    missing = [k for k in _REQUIRED if _blank(obj.get(k))]
    if missing:
        raise IntentExtractionError(details={"raw": text, "missing": missing})

    price = obj.get("price")
    return TradeIntent(
        symbol=str(obj["symbol"]).strip(),
        side=str(obj["side"]).strip(),
        amount=str(obj["amount"]).strip(),
        price=None if _blank(price) else str(price).strip(),
    )


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class CompletionIntentExtractor:
    """
    Ask a language model for the trade details and parse its JSON reply.

    `complete` is any prompt -> text function; the model provider stays
    outside this package.
    """

    def __init__(
        self, complete: Callable[[str], str], template: str = PERP_TRADE_TEMPLATE
    ):
        self.complete = complete
        self.template = template

    def extract(self, conversation: str) -> TradeIntent:
        prompt = self.template.format(recent_messages=conversation)
        try:
            reply = self.complete(prompt)
        except Exception as e:
            log.warning("completion failed: %s", e)
            raise IntentExtractionError(details={"cause": str(e)}) from e
        log.info("Raw content from LLM: %s", reply)
        return parse_intent(reply)
