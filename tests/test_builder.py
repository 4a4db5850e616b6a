from decimal import Decimal

import pytest
from pydantic import ValidationError

from deskperp.errors import ValidationFailedError
from deskperp.execution.builder import build_cancel_order, build_place_order, market_symbol
from deskperp.models.account import OpenOrder
from deskperp.models.order import (
    CancelOrderRequest,
    OrderType,
    PlaceOrderRequest,
    Side,
    TradeIntent,
)

SUB = "0xabc" + "0" * 24


def test_market_long_hype():
    req = build_place_order(TradeIntent("HYPE", "Long", "1", "0"), SUB, "11")
    assert req.symbol == "HYPEUSD"
    assert req.side == Side.LONG
    assert req.amount == 1
    assert req.order_type == OrderType.MARKET
    assert req.reduce_only is False
    assert req.broker_id == "DESK"
    assert req.subaccount == SUB


def test_limit_short_btc():
    req = build_place_order(TradeIntent("BTC", "Short", "2", "21"), SUB, "11")
    assert req.order_type == OrderType.LIMIT
    assert req.price == 21
    assert req.amount == 2


def test_missing_price_means_market():
    req = build_place_order(TradeIntent("eth", "Long", "0.5"), SUB, "11")
    assert req.order_type == OrderType.MARKET
    assert req.price == 0
    assert req.symbol == "ETHUSD"


@pytest.mark.parametrize(
    "price,expected",
    [("0", "Market"), ("0.000", "Market"), ("0.01", "Limit"), ("20", "Limit"), ("1e3", "Limit")],
)
def test_order_type_follows_price(price, expected):
    req = build_place_order(TradeIntent("sol", "Short", "3", price), SUB, "1")
    assert req.order_type.value == expected
    assert req.symbol == "SOLUSD"


def test_symbol_suffix_not_doubled():
    assert market_symbol("btcusd") == "BTCUSD"
    assert market_symbol("btc") == "BTCUSD"


def test_rejects_buy_side():
    with pytest.raises(ValidationFailedError) as ei:
        build_place_order(TradeIntent("HYPE", "Buy", "1", "0"), SUB, "1")
    assert [v["field"] for v in ei.value.violations] == ["side"]


@pytest.mark.parametrize("amount", ["0", "-1", "abc"])
def test_rejects_non_positive_amount(amount):
    with pytest.raises(ValidationFailedError) as ei:
        build_place_order(TradeIntent("HYPE", "Long", amount, "0"), SUB, "1")
    assert any(v["field"] == "amount" for v in ei.value.violations)


def test_lists_every_violation():
    with pytest.raises(ValidationFailedError) as ei:
        build_place_order(TradeIntent("", "Buy", "0", "0"), SUB, "1")
    fields = {v["field"] for v in ei.value.violations}
    assert {"symbol", "side", "amount"} <= fields
    assert "side" in str(ei.value)


def test_schema_enforces_market_iff_zero_price():
    with pytest.raises(ValidationError):
        PlaceOrderRequest(
            symbol="BTCUSD",
            side="Long",
            amount="1",
            price="10",
            nonce="1",
            order_type="Market",
            subaccount=SUB,
        )


def test_time_in_force_goes_out_under_wire_name():
    req = build_place_order(
        TradeIntent("BTC", "Long", "1", "20"), SUB, "1", time_in_force="IOC"
    )
    payload = req.to_payload()
    assert payload["timeInForce"] == "IOC"
    assert payload["amount"] == "1"
    assert payload["price"] == "20"
    assert "time_in_force" not in payload


def test_payload_omits_unset_time_in_force():
    payload = build_place_order(TradeIntent("BTC", "Long", "1", "0"), SUB, "1").to_payload()
    assert "timeInForce" not in payload
    assert payload["order_type"] == "Market"
    assert payload["side"] == "Long"


def test_cancel_order_mapping():
    o = OpenOrder(symbol="btcusd", side="Long", order_digest="0xdead", price=Decimal("20"))
    req = build_cancel_order(o, SUB, "77")
    assert req == CancelOrderRequest(
        symbol="BTCUSD",
        subaccount=SUB,
        order_digest="0xdead",
        nonce="77",
        is_conditional_order=False,
        wait_for_reply=False,
    )


def test_cancel_rejects_empty_digest():
    with pytest.raises(ValidationFailedError) as ei:
        build_cancel_order(OpenOrder(symbol="BTCUSD", side="Long"), SUB, "1")
    assert [v["field"] for v in ei.value.violations] == ["order_digest"]


def test_exponent_input_goes_out_as_plain_decimal():
    req = build_place_order(TradeIntent("btc", "Long", "2.5E-3", "1e3"), SUB, "1")
    payload = req.to_payload()
    assert payload["price"] == "1000"
    assert payload["amount"] == "0.0025"
