"""
Display formatters for the sentiment dashboard
"""
import time
from typing import Optional, Union

from config.config import SENTIMENT_THRESHOLDS
from src.core.enums import SentimentLevel

Number = Union[int, float]


def format_time_since(timestamp: Optional[float], now: Optional[float] = None) -> str:
    """
    Human-readable age of a unix timestamp (seconds)

    Examples:
        "42 seconds ago", "5 minutes ago", "3 hours ago", "2 days ago"
    """
    if not timestamp:
        return "N/A"

    current = time.time() if now is None else now
    seconds = int(current - timestamp)

    if seconds < 60:
        return f"{seconds} seconds ago"
    if seconds < 3600:
        return f"{seconds // 60} minutes ago"
    if seconds < 86400:
        return f"{seconds // 3600} hours ago"
    return f"{seconds // 86400} days ago"


def format_number(num: Optional[Number]) -> str:
    """1_250_000 -> '1.3M', 5_400 -> '5.4K', smaller numbers unchanged"""
    if num is None:
        return "N/A"

    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    elif num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return str(num)


def format_price(price: Optional[Number], min_decimals: int = 2, max_decimals: int = 6) -> str:
    """
    Grouped price with between ``min_decimals`` and ``max_decimals`` digits

    Examples:
        106859.23 -> '106,859.23'
        0.0052705 -> '0.005271'
    """
    if price is None:
        return "N/A"

    text = f"{float(price):,.{max_decimals}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) < min_decimals:
        fraction = fraction.ljust(min_decimals, "0")
    return f"{whole}.{fraction}" if fraction else whole


def format_percentage(percent: Optional[Number], decimals: int = 2) -> str:
    """1.23456 -> '+1.23%', -0.5 -> '-0.50%'"""
    if percent is None:
        return "N/A"

    sign = "+" if percent >= 0 else ""
    return f"{sign}{percent:.{decimals}f}%"


def format_score(score: Optional[Number]) -> str:
    """Sentiment / galaxy score with one decimal"""
    if score is None:
        return "N/A"
    return f"{float(score):.1f}"


def sentiment_level(score: Optional[Number]) -> SentimentLevel:
    """Bucket a 0-100 score using SENTIMENT_THRESHOLDS"""
    if score is None:
        return SentimentLevel.UNKNOWN
    if score >= SENTIMENT_THRESHOLDS["HIGH"]:
        return SentimentLevel.HIGH
    if score >= SENTIMENT_THRESHOLDS["MEDIUM"]:
        return SentimentLevel.MEDIUM
    if score >= SENTIMENT_THRESHOLDS["LOW"]:
        return SentimentLevel.LOW
    return SentimentLevel.POOR
