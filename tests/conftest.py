"""
Pytest configuration and fixtures for Crypto Sentiment Dashboard tests
"""

import copy
import json
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.data.sample_data import SAMPLE_DATA
from src.services.sentiment_pipeline import ResultEnvelope


def build_mock_session(
    status: int = 200,
    json_data: Any = None,
    json_error: Optional[Exception] = None,
    get_error: Optional[Exception] = None,
    text: str = "",
    body: Optional[bytes] = None,
) -> MagicMock:
    """
    Create an aiohttp.ClientSession stand-in

    Usage:
        with patch('aiohttp.ClientSession', return_value=build_mock_session(...)):
            ...

    ``body`` is what ``response.read()`` returns; by default it is the
    JSON encoding of ``json_data`` (or a non-JSON payload when
    ``json_error`` is set).
    """
    mock_response = MagicMock()
    mock_response.status = status
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=json_data)
    mock_response.text = AsyncMock(return_value=text)
    if body is None:
        if json_error is not None:
            body = b"<html>Bad Gateway</html>"
        else:
            body = json.dumps(json_data).encode()
    mock_response.read = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    # False so exceptions raised inside "async with" propagate
    mock_response.__aexit__ = AsyncMock(return_value=False)

    mock_session = MagicMock()
    if get_error is not None:
        mock_session.get = MagicMock(side_effect=get_error)
    else:
        mock_session.get = MagicMock(return_value=mock_response)
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=False)
    return mock_session


@pytest.fixture
def mock_session_factory():
    """Factory fixture around build_mock_session"""
    return build_mock_session


@pytest.fixture
def sample_records():
    """Deep copy of the sample dataset records (canonical order)"""
    return copy.deepcopy(SAMPLE_DATA["data"])


@pytest.fixture
def live_body():
    """A realistic LunarCrush success body with some null metrics"""
    return {
        "config": {"generated": 1749100000, "sort": "sentiment"},
        "data": [
            {
                "id": 1,
                "symbol": "BTC",
                "name": "Bitcoin",
                "price": 104000.5,
                "volume_24h": 31000000000,
                "market_cap": 2060000000000,
                "sentiment": 81,
                "galaxy_score": 70.2,
                "percent_change_24h": 0.8,
                "percent_change_7d": 2.1,
                "market_cap_rank": 1,
                "alt_rank": 12,
            },
            {
                "id": 5994,
                "symbol": "SHIB",
                "name": "Shiba Inu",
                "price": 0.0000123,
                "volume_24h": None,
                "market_cap": 7200000000,
                "sentiment": None,
                "galaxy_score": 55,
                "percent_change_24h": -3.2,
                "market_cap_rank": None,
                "alt_rank": 40,
            },
            {
                "id": 77777,
                "symbol": "NEW",
                "name": "Fresh Listing",
                "market_cap_rank": 0,
            },
        ],
    }


def make_envelope(limit: int, synthetic: bool = False) -> ResultEnvelope:
    """Envelope with ``limit`` distinguishable records"""
    records = [
        {"id": i, "symbol": f"C{limit}_{i}", "rank": i + 1}
        for i in range(limit)
    ]
    return ResultEnvelope(records=records, is_synthetic=synthetic)


@pytest.fixture
def envelope_factory():
    """Factory fixture around make_envelope"""
    return make_envelope
