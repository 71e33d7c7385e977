"""
Exception hierarchy for sentiment data acquisition.

Raised inside the upstream client and the pipeline; the proxy endpoint and
the pipeline translate them at their boundaries so nothing reaches the
presentation layer.
"""

from typing import Optional


class SentimentDataError(Exception):
    """Base error for sentiment data acquisition"""
    pass


class ConfigurationError(SentimentDataError):
    """Required configuration is missing or invalid"""
    pass


class MissingApiTokenError(ConfigurationError):
    """LunarCrush API token is not configured"""

    def __init__(self, message: str = "API_TOKEN is missing. Please set LUNARCRUSH_API_TOKEN in .env"):
        super().__init__(message)


class TransportError(SentimentDataError):
    """Network failure, timeout, non-success status or undecodable body"""
    pass


class UpstreamAPIError(TransportError):
    """Upstream gateway answered with a non-success status"""

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"API Error: {status}")


class ShapeError(SentimentDataError):
    """Success response that lacks the expected list structure"""
    pass
