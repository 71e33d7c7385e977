"""Services for sentiment data acquisition"""
from .lunarcrush_service import LunarCrushService
from .sentiment_pipeline import SentimentPipeline, QueryParams, ResultEnvelope
from .dashboard_state import DashboardState

__all__ = [
    'LunarCrushService',
    'SentimentPipeline',
    'QueryParams',
    'ResultEnvelope',
    'DashboardState',
]
