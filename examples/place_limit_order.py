# ------------------------------------------------------------
# Dry run of the three actions against the in-memory exchange.
# No key or network needed: a throwaway signer is generated.
# ------------------------------------------------------------
from deskperp.actions.cancel import cancel_orders
from deskperp.actions.summary import account_summary
from deskperp.actions.trade import perp_trade
from deskperp.auth.signer import EthAccountSigner
from deskperp.exchanges.fake import FakeDeskExchange
from deskperp.intent.extractor import StaticIntentExtractor
from deskperp.models.order import TradeIntent
from deskperp.settings import Settings


def main():
    s = Settings(network="testnet")
    ex = FakeDeskExchange(collaterals=[{"asset": "USDC", "amount": "1000"}])
    signer = EthAccountSigner.ephemeral()

    for intent in (
        TradeIntent.limit("BTC", "Short", "2", "21"),
        TradeIntent.limit("HYPE", "Long", "1", "20"),
    ):
        res = perp_trade(
            s, extractor=StaticIntentExtractor(intent), signer=signer, client=ex
        )
        print(res.text)

    print(account_summary(s, signer=signer, client=ex).text)
    print(cancel_orders(s, signer=signer, client=ex).text)


if __name__ == "__main__":
    main()
