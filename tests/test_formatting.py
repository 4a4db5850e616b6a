import pytest

from deskperp.actions.formatting import cancel_text, format_number, trade_text


@pytest.mark.parametrize(
    "value,places,expected",
    [
        ("1", None, "1"),
        ("1234.5", None, "1,234.5"),
        (0.1, None, "0.1"),
        ("0.123456789", None, "0.12345679"),
        ("1000.123456", 4, "1,000.1235"),
        ("-0.000000001", None, "0"),
        ("n/a", None, "n/a"),
    ],
)
def test_format_number(value, places, expected):
    assert format_number(value, places) == expected


def test_trade_text_limit():
    data = {"side": "Short", "order_type": "Limit", "quantity": "2", "symbol": "BTCUSD", "price": "21000"}
    assert trade_text(data) == (
        "Successfully placed a Short Limit order of size 2 on BTCUSD at 21,000 USD on DESK Exchange."
    )


def test_cancel_text():
    assert cancel_text(2) == "Successfully cancelled 2 orders."
    assert cancel_text(0) == "No open orders to cancel."
