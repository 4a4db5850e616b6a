import time

from deskperp.auth import nonce as nonce_mod
from deskperp.auth.nonce import NonceGenerator, expiry_ms, generate_nonce


def test_nonce_is_decimal_string_with_embedded_expiry():
    before = int(time.time() * 1000)
    n = generate_nonce()
    after = int(time.time() * 1000)
    assert n.isdigit()
    assert before + 60_000 <= expiry_ms(n) <= after + 60_000


def test_nonces_in_rapid_succession_are_distinct():
    values = [generate_nonce() for _ in range(10_000)]
    assert len(set(values)) == 10_000


def test_colliding_draw_is_bumped(monkeypatch):
    monkeypatch.setattr(nonce_mod.secrets, "randbits", lambda k: 7)
    gen = NonceGenerator(clock=lambda: 1_700_000_000.0)
    a, b, c = gen(), gen(), gen()
    base = ((1_700_000_000_000 + 60_000) << 20) + 7
    assert [int(a), int(b), int(c)] == [base, base + 1, base + 2]


def test_random_part_fits_twenty_bits():
    gen = NonceGenerator(clock=lambda: 1.0)
    n = int(gen())
    assert n >> 20 == 1000 + 60_000
    assert 0 <= n & ((1 << 20) - 1) < (1 << 20)
