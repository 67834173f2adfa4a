"""
Pytest configuration and shared fixtures for the test suite.

This module provides mock aiohttp sessions and responses, pre-built clients
for both tiers and sample API payloads.
"""

import json
import logging
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from click.testing import CliRunner

from coinpaprika.core.config import ClientConfig
from coinpaprika.data.client import Client


def make_response(status: int = 200, payload: Any = None, body: Optional[bytes] = None) -> MagicMock:
    """Create a mock aiohttp response with an unread body."""
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": "application/json"}
    if body is None:
        body = json.dumps(payload).encode() if payload is not None else b""
    response.read = AsyncMock(return_value=body)
    response.release = MagicMock()
    return response


@pytest.fixture
def response_factory():
    """Factory for mock aiohttp responses."""
    return make_response


@pytest.fixture
def mock_session():
    """Mock aiohttp session; set ``request.return_value`` or ``side_effect``."""
    session = MagicMock()
    session.request = AsyncMock(return_value=make_response(200, {}))
    session.close = AsyncMock()
    return session


@pytest.fixture
def client(mock_session):
    """Free tier client with a mocked session and no retry delay."""
    client = Client(config=ClientConfig.free(retry_delay=0))
    client._session = mock_session
    return client


@pytest.fixture
def keyed_client(mock_session):
    """Keyed tier client with a mocked session and no retry delay."""
    client = Client(config=ClientConfig.keyed("test-api-key", retry_delay=0))
    client._session = mock_session
    return client


@pytest.fixture
def cli_runner():
    """Create a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``setup_logging`` side effects between tests."""
    yield
    package_logger = logging.getLogger("coinpaprika")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real COINPAPRIKA_* variables out of the tests."""
    for key in ("API_KEY", "BASE_URL", "USER_AGENT", "TIMEOUT", "MAX_RETRIES",
                "RETRY_DELAY", "BACKOFF_FACTOR"):
        monkeypatch.delenv(f"COINPAPRIKA_{key}", raising=False)


@pytest.fixture
def ticker_payload():
    """Sample /tickers/{coin_id} response."""
    return {
        "id": "btc-bitcoin",
        "name": "Bitcoin",
        "symbol": "BTC",
        "rank": 1,
        "circulating_supply": 19500000,
        "total_supply": 19500000,
        "max_supply": 21000000,
        "beta_value": 0.9,
        "first_data_at": "2010-07-17T00:00:00Z",
        "last_updated": "2024-01-05T12:00:00Z",
        "quotes": {
            "USD": {
                "price": 44000.12,
                "volume_24h": 21000000000.5,
                "market_cap": 860000000000,
                "percent_change_24h": -1.2,
                "ath_price": 68692.137,
                "ath_date": "2021-11-10T16:51:15Z"
            }
        }
    }


@pytest.fixture
def coin_details_payload():
    """Sample /coins/{coin_id} response."""
    return {
        "id": "btc-bitcoin",
        "name": "Bitcoin",
        "symbol": "BTC",
        "parent": None,
        "rank": 1,
        "is_new": False,
        "is_active": True,
        "type": "coin",
        "logo": "https://static.coinpaprika.com/coin/btc-bitcoin/logo.png",
        "tags": [
            {"id": "segwit", "name": "Segwit", "coin_counter": 10, "ico_counter": 0}
        ],
        "team": [
            {"id": "satoshi-nakamoto", "name": "Satoshi Nakamoto", "position": "Founder"}
        ],
        "description": "Bitcoin is a cryptocurrency and worldwide payment system.",
        "message": "",
        "open_source": True,
        "hardware_wallet": True,
        "started_at": "2009-01-03T00:00:00Z",
        "development_status": "Working product",
        "proof_type": "Proof of Work",
        "org_structure": "Decentralized",
        "hash_algorithm": "SHA256",
        "contracts": [
            {"contract": "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599", "platform": "eth-ethereum",
             "type": "ERC20"}
        ],
        "links": {"website": ["https://bitcoin.org/"]},
        "links_extended": [{"url": "https://bitcoin.org/", "type": "website"}],
        "whitepaper": {"link": "https://bitcoin.org/bitcoin.pdf", "thumbnail": None},
        "first_data_at": "2010-07-17T00:00:00Z",
        "last_data_at": "2024-01-05T12:00:00Z"
    }
