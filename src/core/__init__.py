"""
Core module - shared types and errors for the sentiment data stack.
"""

from src.core.enums import (
    FailureKind,
    FetchStatus,
    ViewMode,
    SentimentLevel,
)
from src.core.exceptions import (
    SentimentDataError,
    ConfigurationError,
    MissingApiTokenError,
    TransportError,
    UpstreamAPIError,
    ShapeError,
)

__all__ = [
    "FailureKind",
    "FetchStatus",
    "ViewMode",
    "SentimentLevel",
    "SentimentDataError",
    "ConfigurationError",
    "MissingApiTokenError",
    "TransportError",
    "UpstreamAPIError",
    "ShapeError",
]
