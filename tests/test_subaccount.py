import random

import pytest

from deskperp.auth.subaccount import get_subaccount
from deskperp.errors import InvalidParameterError

ADDR = "0x2c7536E3605D9C16a7a3D7b1898e529396a65c23"


def test_subaccount_zero():
    assert get_subaccount(ADDR, 0) == ADDR + "0" * 24


def test_subaccount_hex_is_lowercase_and_padded():
    assert get_subaccount(ADDR, 255) == ADDR + "0" * 22 + "ff"
    assert get_subaccount(ADDR, "10") == ADDR + "0" * 23 + "a"


def test_subaccount_suffix_width_over_range():
    rng = random.Random(7)
    samples = [0, 1, 2**64, 2**96 - 1] + [rng.randrange(2**96) for _ in range(200)]
    for idx in samples:
        sub = get_subaccount(ADDR, idx)
        suffix = sub[len(ADDR):]
        assert sub.startswith(ADDR)
        assert len(suffix) == 24
        assert suffix == suffix.lower()
        assert int(suffix, 16) == idx


@pytest.mark.parametrize("bad", [-1, 2**96, "abc", None, 1.5, True])
def test_subaccount_rejects_bad_index(bad):
    with pytest.raises(InvalidParameterError):
        get_subaccount(ADDR, bad)
