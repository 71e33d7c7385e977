# coding: utf-8
"""
LunarCrush API Service for cryptocurrency sentiment data

Talks to the LunarCrush public API v4 on behalf of the proxy endpoint.
The bearer token never leaves the server: the dashboard calls
/api/sentiment and this service injects the credential.

Endpoint used:
- GET coins/list/v1?sort=sentiment&limit=N[&desc=1]

Response shape:
    {"config": {...}, "data": [{"id": 1, "symbol": "BTC", ...}, ...]}
"""
import asyncio
from typing import Optional, Dict, Any

import aiohttp
from loguru import logger

from config.config import (
    LUNARCRUSH_API_TOKEN,
    LUNARCRUSH_BASE_URL,
    LUNARCRUSH_TIMEOUT_SECONDS,
    DEFAULT_LIMIT,
)
from src.core.exceptions import MissingApiTokenError, UpstreamAPIError, TransportError


class LunarCrushService:
    """
    Service for fetching ranked coin lists from LunarCrush

    Authentication:
    - Requires LUNARCRUSH_API_TOKEN in environment variables
    - Sent as ``Authorization: Bearer <token>``

    Errors are raised, not swallowed, so the proxy can map them
    to its uniform ``{"error": ...}`` response:
    - MissingApiTokenError: token not configured (checked before any I/O)
    - UpstreamAPIError: non-200 status (401 and 429 logged separately)
    - TransportError: network failure, timeout or undecodable JSON
    """

    SORT_FIELD = "sentiment"

    def __init__(
        self,
        api_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize LunarCrush service

        Args:
            api_token: Bearer token (loaded from config if not provided)
            base_url: API root, must end with '/'
            timeout: Total request timeout in seconds
        """
        self.api_token = api_token if api_token is not None else LUNARCRUSH_API_TOKEN
        self.base_url = base_url or LUNARCRUSH_BASE_URL
        self.timeout = timeout or LUNARCRUSH_TIMEOUT_SECONDS

        if not self.api_token:
            logger.warning(
                "LunarCrush API token not configured. "
                "The dashboard will fall back to sample data. "
                "Set LUNARCRUSH_API_TOKEN in .env to enable live data."
            )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_token)

    def _build_params(self, limit: int, desc: bool) -> Dict[str, Any]:
        """Build upstream query parameters (desc is only sent when set)"""
        params: Dict[str, Any] = {"sort": self.SORT_FIELD, "limit": limit}
        if desc:
            params["desc"] = 1
        return params

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }

    async def get_coins_list(
        self, limit: int = DEFAULT_LIMIT, desc: bool = False
    ) -> Dict[str, Any]:
        """
        Get coins ranked by sentiment

        Args:
            limit: Number of coins to return
            desc: Sort highest sentiment first

        Returns:
            Raw LunarCrush body ``{"config": {...}, "data": [...]}``

        Raises:
            MissingApiTokenError: If no token is configured
            UpstreamAPIError: If LunarCrush answers with a non-200 status
            TransportError: On network errors, timeouts or invalid JSON
        """
        if not self.api_token:
            raise MissingApiTokenError()

        url = f"{self.base_url}coins/list/v1"
        params = self._build_params(limit, desc)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    url,
                    params=params,
                    headers=self._headers(),
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status == 200:
                        if not (await response.read()).strip():
                            logger.error("LunarCrush returned an empty response body")
                            raise TransportError("Empty response body")
                        data = await response.json()
                        count = len(data.get("data") or []) if isinstance(data, dict) else 0
                        logger.debug(f"LunarCrush returned {count} coins (limit={limit}, desc={desc})")
                        return data
                    elif response.status == 401:
                        logger.error("LunarCrush API authentication failed. Check your API token.")
                    elif response.status == 429:
                        logger.warning("LunarCrush rate limit exceeded.")
                    else:
                        logger.error(
                            f"LunarCrush API error: {response.status} - "
                            f"{await response.text()}"
                        )
                    raise UpstreamAPIError(response.status)

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error making LunarCrush request: {e}")
            raise TransportError(str(e)) from e


# Global instance used by the proxy router
lunarcrush_service = LunarCrushService()
