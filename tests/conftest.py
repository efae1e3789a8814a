"""Pytest configuration and fixtures."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def api_key():
    """Test API key."""
    return "test_api_key_123456"


@pytest.fixture
def api_secret():
    """Test API secret."""
    return "test_api_secret_789012"


def create_async_response(status=200, json_data=None, text=None):
    """Create a mock aiohttp response usable as ``async with``."""
    if text is None:
        text = json.dumps(json_data if json_data is not None else {})
    resp = MagicMock()
    resp.status = status
    resp.read = AsyncMock(return_value=text.encode())
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    return resp


def attach_session(client, status=200, json_data=None, text=None):
    """Patch ``client`` to answer every request with one canned response."""
    mock_session = MagicMock()
    mock_session.request = MagicMock(return_value=create_async_response(status, json_data, text))
    client._ensure_session = AsyncMock(return_value=mock_session)
    return mock_session


def sent_request(mock_session):
    """(method, url, data, headers) of the single request sent through ``mock_session``."""
    call = mock_session.request.call_args
    method, url = call.args
    return method, url, call.kwargs.get("data"), call.kwargs.get("headers")


@pytest.fixture
def sample_gate_ticker():
    """Sample Gate.io ticker."""
    return {
        "contract": "BTC_USDT",
        "last": "45000.1",
        "change_percentage": "1.25",
        "total_size": "120000",
        "volume_24h": "5000000",
        "mark_price": "45001.2",
        "funding_rate": "0.0001",
        "index_price": "45000.5",
    }


@pytest.fixture
def sample_gate_order():
    """Sample Gate.io futures order."""
    return {
        "id": 123456789,
        "user": 42,
        "contract": "BTC_USDT",
        "size": 10,
        "price": "45000",
        "tif": "gtc",
        "status": "open",
        "left": 10,
        "text": "t-my-order",
    }


@pytest.fixture
def sample_xt_ticker():
    """Sample XT.com ticker envelope."""
    return {
        "returnCode": 0,
        "msgInfo": "success",
        "error": None,
        "result": {
            "a": "1000",
            "c": "45000.5",
            "h": "46000",
            "l": "44000",
            "o": "44500",
            "r": "0.0112",
            "s": "btc_usdt",
            "t": 1700000000000,
            "v": "22.5",
        },
    }
