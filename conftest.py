"""
Pytest configuration and fixtures for zus-relay tests.

Provides a fake upstream client so no test talks to the real API,
plus a Flask test client and a clean session store per test.
"""

import os

os.environ.setdefault("LOG_FILE_ENABLED", "false")

import threading
from typing import Callable, Dict, List, Optional
from unittest.mock import patch

import pytest

from core import session as session_store
from models import UpstreamResult


class FakeZusClient:
    """
    Stand-in for services.zus_client.ZusClient.

    Responses are registered per (method, path). A registered value may be
    an UpstreamResult, a list of them (served in order, last one repeats),
    or a callable taking the recorded call and returning one.
    """

    def __init__(self):
        self.routes: Dict[tuple, object] = {}
        self.calls: List[dict] = []
        self._lock = threading.Lock()

    def on(self, method: str, path: str, response) -> "FakeZusClient":
        self.routes[(method.upper(), path)] = response
        return self

    def request(self, method, path, data=None, bearer=None, device_id=None, params=None,
                bearer_fallback=True) -> UpstreamResult:
        call = {
            "method": method.upper(),
            "path": path,
            "data": dict(data or {}),
            "bearer": bearer,
            "device_id": device_id,
            "params": dict(params or {}),
            "bearer_fallback": bearer_fallback,
        }
        with self._lock:
            self.calls.append(call)
            response = self.routes.get((call["method"], path))
            if isinstance(response, list):
                response = response.pop(0) if len(response) > 1 else response[0]

        if response is None:
            return UpstreamResult(status=404, body={"message": "Not Found"})
        if callable(response):
            return response(call)
        return response

    def get(self, path, **kwargs):
        return self.request("GET", path, **kwargs)

    def post(self, path, **kwargs):
        return self.request("POST", path, **kwargs)

    def delete(self, path, **kwargs):
        return self.request("DELETE", path, **kwargs)

    def calls_to(self, path: str) -> List[dict]:
        return [c for c in self.calls if c["path"] == path]


def ok(body: Optional[dict] = None, status: int = 200) -> UpstreamResult:
    return UpstreamResult(status=status, body=body, error=None)


def network_error(message: str = "Connection refused") -> UpstreamResult:
    return UpstreamResult(status=0, body=None, error=message)


@pytest.fixture(autouse=True)
def reset_sessions():
    session_store.sessions.clear()
    yield
    session_store.sessions.clear()


@pytest.fixture
def fake_upstream():
    fake = FakeZusClient()
    with patch("services.auth_service.zus_client", fake), \
         patch("services.gift_card_service.zus_client", fake), \
         patch("services.wallet_service.zus_client", fake):
        yield fake


@pytest.fixture
def client(fake_upstream):
    from server import app
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
