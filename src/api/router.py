"""
FastAPI Router for the Crypto Sentiment Dashboard API
"""

from fastapi import APIRouter

# Import sub-routers
from src.api.sentiment import router as sentiment_router


# Main router (mounted under /api by api_server.py)
router = APIRouter()

router.include_router(sentiment_router)  # /api/sentiment proxy to LunarCrush
