"""
Core Enums - shared types for the sentiment data stack.

Defines:
- FailureKind: why an envelope did not come from a clean upstream response
- FetchStatus: lifecycle of a dashboard fetch
- ViewMode: how the dashboard lays out records
- SentimentLevel: color bucket for a 0-100 score
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of a failed or degraded acquisition.

    - CONFIGURATION: upstream credential missing (falls back to sample data)
    - TRANSPORT: network error, timeout, non-200 status, bad JSON (falls back)
    - SHAPE: 200 response without a list ``data`` field (empty, NOT synthetic)
    """

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    SHAPE = "shape"

    @classmethod
    def triggers_fallback(cls, kind: "FailureKind") -> bool:
        """Check whether this failure substitutes the sample dataset."""
        return kind in (cls.CONFIGURATION, cls.TRANSPORT)


class FetchStatus(str, Enum):
    """Dashboard fetch lifecycle."""

    IDLE = "idle"
    FETCHING = "fetching"
    COMPLETE = "complete"


class ViewMode(str, Enum):
    """Dashboard layout."""

    GRID = "grid"
    TABLE = "table"


class SentimentLevel(str, Enum):
    """Score bucket used for color coding (thresholds in config)."""

    HIGH = "high"  # green
    MEDIUM = "medium"  # blue
    LOW = "low"  # yellow
    POOR = "poor"  # red
    UNKNOWN = "unknown"  # no data
