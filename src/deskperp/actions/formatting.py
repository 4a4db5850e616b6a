from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Dict

from deskperp.models.account import SubaccountSummary

EXCHANGE = "DESK Exchange"


def format_number(value: Any, decimal_places: int | None = None) -> str:
    """1234.5 -> '1,234.5'; at most `decimal_places` (default 8) decimals."""
    places = decimal_places or 8
    try:
        d = Decimal(str(value))
    except InvalidOperation:
        return str(value)
    if not d.is_finite():
        return str(value)
    with localcontext() as ctx:
        ctx.prec = max(28, d.adjusted() + places + 2)
        q = d.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    s = f"{q:,f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def trade_text(data: Dict[str, Any]) -> str:
    order_type = data.get("order_type")
    at = (
        "market price"
        if order_type == "Market"
        else f"{format_number(data.get('price'))} USD"
    )
    return (
        f"Successfully placed a {data.get('side')} {order_type} order of size "
        f"{format_number(data.get('quantity'))} on {data.get('symbol')} at {at} "
        f"on {EXCHANGE}."
    )


def cancel_text(count: int) -> str:
    if count == 0:
        return "No open orders to cancel."
    return f"Successfully cancelled {count} orders."


def summary_text(address: str, summary: SubaccountSummary) -> str:
    positions = (
        "\n".join(
            f"- {p.side} {format_number(p.quantity)} {p.symbol}"
            for p in summary.positions
        )
        or "- No active position"
    )

    lines = []
    for o in summary.open_orders:
        side = "Buy" if o.side == "Long" else "Sell"
        px = o.price if o.price > 0 else (o.trigger_price or 0)
        lines.append(
            f"- {side} {format_number(o.filled_quantity)}/"
            f"{format_number(o.original_quantity)} {o.symbol} @{format_number(px)}"
        )
    orders = "\n".join(lines) or "- No orders"

    collaterals = (
        "\n".join(
            f"- {format_number(c.amount, 4)} {c.asset}" for c in summary.collaterals
        )
        or "- No collateral"
    )

    return (
        f"Here is the summary of your account {address}\n"
        f"Your positions:\n{positions}\n"
        f"Your orders:\n{orders}\n"
        f"Your collaterals:\n{collaterals}"
    )
