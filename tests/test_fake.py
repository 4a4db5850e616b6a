from deskperp.auth.signer import EthAccountSigner
from deskperp.exchanges.fake import FakeDeskExchange
from deskperp.execution.builder import build_place_order
from deskperp.models.order import TradeIntent


def test_fake_exchange_limit_order_stays_open():
    ex = FakeDeskExchange()
    jwt = ex.authenticate(EthAccountSigner.ephemeral(), 0, "1")
    req = build_place_order(TradeIntent.limit("BTC", "Long", "0.001", "20"), "0xsub", "2")
    body = ex.place_order(jwt, req)
    assert body["data"]["symbol"] == "BTCUSD"
    assert body["data"]["order_type"] == "Limit"
    summary = ex.get_subaccount_summary(jwt, "0xsub")["data"]
    assert [o["order_digest"] for o in summary["open_orders"]] == [body["data"]["order_digest"]]


def test_fake_exchange_market_order_not_left_open():
    ex = FakeDeskExchange()
    req = build_place_order(TradeIntent.market("HYPE", "Short", "1"), "0xsub", "2")
    ex.place_order("jwt", req)
    assert ex.open_orders == []
