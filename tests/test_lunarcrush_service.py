"""
Unit tests for LunarCrush API service
"""
import asyncio
from unittest.mock import patch

import aiohttp
import pytest

from src.core.exceptions import MissingApiTokenError, TransportError, UpstreamAPIError
from src.services.lunarcrush_service import LunarCrushService


@pytest.fixture
def service():
    """LunarCrush service with a test token"""
    return LunarCrushService(
        api_token="test-token",
        base_url="https://lunarcrush.test/api4/public/",
        timeout=5,
    )


def test_build_params_only_sends_desc_when_set(service):
    assert service._build_params(30, False) == {"sort": "sentiment", "limit": 30}
    assert service._build_params(10, True) == {"sort": "sentiment", "limit": 10, "desc": 1}


def test_headers_carry_bearer_token(service):
    assert service._headers()["Authorization"] == "Bearer test-token"


def test_is_configured():
    assert LunarCrushService(api_token="abc").is_configured is True
    assert LunarCrushService(api_token="").is_configured is False


@pytest.mark.asyncio
async def test_get_coins_list_success(service, live_body, mock_session_factory):
    """Test successful coin list fetch"""
    mock_session = mock_session_factory(status=200, json_data=live_body)

    with patch('aiohttp.ClientSession', return_value=mock_session):
        result = await service.get_coins_list(limit=3, desc=True)

    assert result == live_body

    call = mock_session.get.call_args
    assert call.args[0] == "https://lunarcrush.test/api4/public/coins/list/v1"
    assert call.kwargs["params"] == {"sort": "sentiment", "limit": 3, "desc": 1}
    assert call.kwargs["headers"]["Authorization"] == "Bearer test-token"


@pytest.mark.asyncio
async def test_get_coins_list_missing_token_makes_no_request(mock_session_factory):
    """Test that a missing token fails before any I/O"""
    service = LunarCrushService(api_token="")
    mock_session = mock_session_factory()

    with patch('aiohttp.ClientSession', return_value=mock_session):
        with pytest.raises(MissingApiTokenError):
            await service.get_coins_list()

    mock_session.get.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 429, 500, 503])
async def test_get_coins_list_upstream_error(service, mock_session_factory, status):
    """Test non-200 statuses raise UpstreamAPIError with the status"""
    mock_session = mock_session_factory(status=status, text="upstream says no")

    with patch('aiohttp.ClientSession', return_value=mock_session):
        with pytest.raises(UpstreamAPIError) as exc_info:
            await service.get_coins_list()

    assert exc_info.value.status == status
    assert str(status) in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    aiohttp.ClientConnectionError("connection reset"),
    asyncio.TimeoutError(),
])
async def test_get_coins_list_network_error(service, mock_session_factory, error):
    """Test network errors and timeouts become TransportError"""
    mock_session = mock_session_factory(get_error=error)

    with patch('aiohttp.ClientSession', return_value=mock_session):
        with pytest.raises(TransportError):
            await service.get_coins_list()


@pytest.mark.asyncio
async def test_get_coins_list_invalid_json(service, mock_session_factory):
    """Test undecodable bodies become TransportError"""
    mock_session = mock_session_factory(status=200, json_error=ValueError("Expecting value"))

    with patch('aiohttp.ClientSession', return_value=mock_session):
        with pytest.raises(TransportError):
            await service.get_coins_list()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_body", [b"", b"  \n"])
async def test_get_coins_list_empty_body(service, mock_session_factory, raw_body):
    """Test that an empty 200 body is a TransportError, not a None result"""
    mock_session = mock_session_factory(status=200, json_data=None, body=raw_body)

    with patch('aiohttp.ClientSession', return_value=mock_session):
        with pytest.raises(TransportError, match="Empty response body"):
            await service.get_coins_list()
