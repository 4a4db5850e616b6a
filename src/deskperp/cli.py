import logging
from typing import Optional

import typer

from deskperp.actions.cancel import cancel_orders
from deskperp.actions.summary import account_summary
from deskperp.actions.trade import perp_trade
from deskperp.auth.signer import EthAccountSigner, ISigner
from deskperp.exchanges.base import IExchangeClient
from deskperp.exchanges.desk import DeskClient
from deskperp.exchanges.fake import FakeDeskExchange
from deskperp.intent.extractor import StaticIntentExtractor
from deskperp.logging_config import setup as setup_logging
from deskperp.models.order import TradeIntent
from deskperp.plugin import desk_exchange_plugin
from deskperp.settings import Settings

log = logging.getLogger("cli")

app = typer.Typer(help="DESK Exchange perp trading CLI")


def _prepare(config: Optional[str], use_fake: bool):
    s = Settings.load(config)
    setup_logging(log_dir=s.log_dir)

    client: IExchangeClient
    signer: Optional[ISigner] = None
    if use_fake:
        client = FakeDeskExchange()
        if not s.is_configured:
            signer = EthAccountSigner.ephemeral()
    else:
        client = DeskClient(s.endpoint, timeout=s.timeout_s)
    log.info("network=%s endpoint=%s", s.network, client.base)
    return s, client, signer


def _finish(result) -> None:
    typer.echo(result.text)
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def trade(
    symbol: str = typer.Option(..., help="Coin symbol, e.g. HYPE or BTC"),
    side: str = typer.Option(..., help="Long | Short"),
    amount: str = typer.Option(..., help="Order size"),
    price: str = typer.Option("0", help="Limit price in USD; 0 for a market order"),
    tif: Optional[str] = typer.Option(None, help="GTC / IOC / FOK"),
    config: Optional[str] = typer.Option(None, help="YAML settings file"),
    use_fake: bool = typer.Option(False, help="Run against the in-memory exchange"),
) -> None:
    s, client, signer = _prepare(config, use_fake)
    intent = TradeIntent(symbol=symbol, side=side, amount=amount, price=price)
    result = perp_trade(
        s,
        extractor=StaticIntentExtractor(intent),
        signer=signer,
        client=client,
        time_in_force=tif,
    )
    _finish(result)


@app.command("cancel-all")
def cancel_all(
    config: Optional[str] = typer.Option(None, help="YAML settings file"),
    use_fake: bool = typer.Option(False, help="Run against the in-memory exchange"),
) -> None:
    s, client, signer = _prepare(config, use_fake)
    _finish(cancel_orders(s, signer=signer, client=client))


@app.command()
def summary(
    config: Optional[str] = typer.Option(None, help="YAML settings file"),
    use_fake: bool = typer.Option(False, help="Run against the in-memory exchange"),
) -> None:
    s, client, signer = _prepare(config, use_fake)
    _finish(account_summary(s, signer=signer, client=client))


@app.command()
def actions():
    for a in desk_exchange_plugin.actions:
        typer.echo(f"{a.name} ({', '.join(a.similes)}): {a.description}")


if __name__ == "__main__":
    app()
