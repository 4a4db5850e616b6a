from typing import Any, Dict, List, Optional

import pytest
import requests

from deskperp.auth.signer import EthAccountSigner
from deskperp.exchanges.desk import DeskClient
from deskperp.settings import Settings

# well-known throwaway key from the eth-account docs
TEST_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
ENDPOINT = "https://stg-trade-api.happytrading.global"


class StubResponse:
    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("no json body")
        return self._body

    @property
    def text(self) -> str:
        return "" if self._body is None else str(self._body)


class StubSession:
    """
    Replaces requests.Session. Routes map a path suffix to a response, an
    exception instance, or a list of those served in order.
    """

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = dict(routes or {})
        self.calls: List[Dict[str, Any]] = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "json": json, "headers": headers, "timeout": timeout}
        )
        for suffix, resp in self.routes.items():
            if suffix in url:
                if isinstance(resp, list):
                    resp = resp.pop(0)
                if isinstance(resp, Exception):
                    raise resp
                return resp
        return StubResponse(404, {"errors": ["not found"]})

    def post(self, url, **kw):
        return self.request("POST", url, **kw)

    def get(self, url, **kw):
        return self.request("GET", url, **kw)

    def paths(self) -> List[str]:
        return [c["url"].replace(ENDPOINT, "") for c in self.calls]


def auth_ok(jwt: str = "jwt-123") -> StubResponse:
    return StubResponse(200, {"data": {"jwt": jwt}})


@pytest.fixture
def signer():
    return EthAccountSigner(TEST_KEY)


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.delenv("DESK_EXCHANGE_PRIVATE_KEY", raising=False)
    monkeypatch.delenv("DESK_EXCHANGE_NETWORK", raising=False)
    return Settings(network="testnet", private_key=TEST_KEY)


@pytest.fixture
def stub_session():
    return StubSession({"/v2/auth/evm": auth_ok()})


@pytest.fixture
def client(stub_session):
    return DeskClient(ENDPOINT, session=stub_session)


@pytest.fixture
def timeout_error():
    return requests.Timeout("read timed out")
