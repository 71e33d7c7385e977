"""
Sentiment API Endpoint
Thin proxy to LunarCrush that injects the server-side API token
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger

from config.config import DEFAULT_LIMIT
from src.core.exceptions import MissingApiTokenError
import src.services.lunarcrush_service as lunarcrush_module

# Create router
router = APIRouter(tags=["sentiment"])

MISSING_KEY_MESSAGE = "Missing API key. Please set LUNARCRUSH_API_TOKEN in .env"
GENERIC_ERROR_MESSAGE = "Failed to fetch data"


def parse_limit(raw: Optional[str]) -> int:
    """Parse the ``limit`` query value; absent or non-integer means DEFAULT_LIMIT"""
    if raw is None or raw == "":
        return DEFAULT_LIMIT
    try:
        return int(raw)
    except ValueError:
        logger.debug(f"Invalid limit '{raw}', using default {DEFAULT_LIMIT}")
        return DEFAULT_LIMIT


@router.get("/sentiment")
async def get_sentiment(desc: Optional[str] = None, limit: Optional[str] = None):
    """
    Get coins ranked by sentiment (public endpoint)

    Query params:
        desc: "1" for highest sentiment first, anything else ascending
        limit: number of coins (default 30)

    Returns:
        200 with the LunarCrush body ``{"config": {...}, "data": [...]}``
        500 with ``{"error": "..."}`` on any failure
    """
    service = lunarcrush_module.lunarcrush_service

    try:
        # Credential check comes first so it is reported distinctly
        if not service.is_configured:
            raise MissingApiTokenError()

        descending = desc == "1"
        data = await service.get_coins_list(limit=parse_limit(limit), desc=descending)
        return JSONResponse(content=data)

    except MissingApiTokenError as e:
        logger.error(f"Failed to fetch sentiment data: {e}")
        return JSONResponse(status_code=500, content={"error": MISSING_KEY_MESSAGE})

    except Exception as e:
        logger.error(f"Failed to fetch sentiment data: {e}")
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})
