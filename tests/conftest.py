import json
import socket
from typing import Any, Callable, Dict, List

import httpx
import pytest

from homesearch.config import Settings


@pytest.fixture(autouse=True)
def block_network(monkeypatch):
    real_connect = socket.socket.connect

    def guarded_connect(sock, address):
        host = address[0]
        if host not in ("127.0.0.1", "localhost"):
            raise RuntimeError("Network access blocked in tests")
        return real_connect(sock, address)

    monkeypatch.setattr(socket.socket, "connect", guarded_connect)


@pytest.fixture
def make_http_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by handler and recorded."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], seen: List[httpx.Request] = None):
        def _record(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_record))

    return _make


@pytest.fixture
def json_response() -> Callable[[Any], Callable[[httpx.Request], httpx.Response]]:
    def _handler_for(payload: Any, status_code: int = 200):
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, content=json.dumps(payload), headers={"Content-Type": "application/json"})

        return _handler

    return _handler_for


@pytest.fixture
def live_settings() -> Settings:
    return Settings(rentcast_api_key="test-key", rentcast_base_url="https://rentcast.test/v1")


@pytest.fixture
def mock_settings() -> Settings:
    return Settings(rentcast_api_key=None, rentcast_base_url="https://rentcast.test/v1")


@pytest.fixture
def rentcast_record() -> Dict[str, Any]:
    return {
        "id": "5500-Grand-Lake-Dr,-San-Antonio,-TX-78238",
        "formattedAddress": "5500 Grand Lake Dr, San Antonio, TX 78238",
        "addressLine1": "5500 Grand Lake Dr",
        "city": "San Antonio",
        "state": "TX",
        "zipCode": "78238",
        "latitude": 29.475962,
        "longitude": -98.351442,
        "propertyType": "Single Family",
        "bedrooms": 3,
        "bathrooms": 2,
        "squareFootage": 1878,
        "yearBuilt": 1973,
        "price": 289000,
    }
