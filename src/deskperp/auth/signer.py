from __future__ import annotations
from typing import Protocol

from eth_account import Account
from eth_account.messages import encode_defunct

from deskperp.errors import InvalidParameterError, MissingParameterError
from deskperp.settings import Settings


class ISigner(Protocol):
    """Anything that owns an address and can sign a text message for it."""

    @property
    def address(self) -> str: ...

    def sign_message(self, message: str) -> str: ...


class EthAccountSigner:
    """EIP-191 personal-message signer over a local private key."""

    def __init__(self, private_key: str):
        if not private_key:
            raise MissingParameterError("Missing private key")
        try:
            self._account = Account.from_key(private_key)
        except (ValueError, TypeError) as e:
            raise InvalidParameterError("Invalid private key") from e

    @classmethod
    def from_settings(cls, settings: Settings) -> "EthAccountSigner":
        if settings.private_key is None:
            raise MissingParameterError("DESK_EXCHANGE_PRIVATE_KEY is not set")
        return cls(settings.private_key.get_secret_value())

    @classmethod
    def ephemeral(cls) -> "EthAccountSigner":
        """Throwaway key, for dry runs against the fake exchange."""
        return cls(Account.create().key.hex())

    @property
    def address(self) -> str:
        return self._account.address

    def sign_message(self, message: str) -> str:
        signed = self._account.sign_message(encode_defunct(text=message))
        sig = signed.signature.hex()
        return sig if sig.startswith("0x") else "0x" + sig
