"""
Shared fixtures for ShopSavvy client tests

Requests are served by httpx.MockTransport so no test touches the network.
"""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from ShopSavvy.clients.shopsavvy_client import ShopSavvyClient

TEST_API_KEY = "ss_test_valid_key_12345"
TEST_BASE_URL = "https://api.shopsavvy.test/v1"


def json_response(payload: Any, status_code: int = 200,
                  headers: Optional[Dict[str, str]] = None) -> httpx.Response:
    """Build an httpx response with a JSON body"""
    return httpx.Response(status_code, content=json.dumps(payload).encode(), headers=headers)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport, in order"""
    return []


@pytest.fixture
def make_client(recorded_requests) -> Callable[..., ShopSavvyClient]:
    """
    Factory building a client whose transport answers with ``responder``

    ``responder`` is either an httpx.Response returned for every request or a
    callable taking the httpx.Request.
    """
    def _make(responder, client_class=ShopSavvyClient, **kwargs) -> ShopSavvyClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if callable(responder):
                return responder(request)
            return responder

        kwargs.setdefault("base_url", TEST_BASE_URL)
        return client_class(api_key=TEST_API_KEY, transport=httpx.MockTransport(handler), **kwargs)

    return _make


@pytest.fixture
def respond_json() -> Callable[..., httpx.Response]:
    """The json_response builder, for tests that need canned responses"""
    return json_response
