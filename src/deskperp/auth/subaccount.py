from deskperp.errors import InvalidParameterError

SUBACCOUNT_HEX_WIDTH = 24
MAX_SUBACCOUNT_ID = 1 << (SUBACCOUNT_HEX_WIDTH * 4)


def get_subaccount(address: str, subaccount_id) -> str:
    """'0xAbc...' + 24 lowercase hex digits of the subaccount index."""
    if isinstance(subaccount_id, bool):
        raise InvalidParameterError(f"Invalid subaccount id: {subaccount_id!r}")
    try:
        idx = int(subaccount_id)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"Invalid subaccount id: {subaccount_id!r}")
    if isinstance(subaccount_id, float) and idx != subaccount_id:
        raise InvalidParameterError(f"Invalid subaccount id: {subaccount_id!r}")
    if not 0 <= idx < MAX_SUBACCOUNT_ID:
        raise InvalidParameterError(
            f"Subaccount id out of range [0, 2**96): {subaccount_id!r}"
        )
    return f"{address}{idx:0{SUBACCOUNT_HEX_WIDTH}x}"
