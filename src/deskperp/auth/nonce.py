from __future__ import annotations
import secrets
import threading
import time

EXPIRY_MS = 60_000
RANDOM_BITS = 20


class NonceGenerator:
    """
    Nonce = ((now_ms + 60s) << 20) + 20 random bits, as a decimal string.

    The upper bits carry the expiry the exchange checks; the lower 20 bits are
    random. Two draws landing on the same value inside one millisecond would
    be rejected as a replay, so a colliding draw is moved past the last
    issued value.
    """

    def __init__(self, clock=time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        expiry = (int(self._clock() * 1000) + EXPIRY_MS) << RANDOM_BITS
        value = expiry + secrets.randbits(RANDOM_BITS)
        with self._lock:
            if value <= self._last:
                value = self._last + 1
            self._last = value
        return str(value)


_default = NonceGenerator()


def generate_nonce() -> str:
    return _default()


def expiry_ms(nonce: str) -> int:
    """Expiry timestamp (ms) embedded in a nonce."""
    return int(nonce) >> RANDOM_BITS
