"""
Configuration module for the Crypto Sentiment Dashboard

Loads configuration from environment variables using python-dotenv
"""

import os
from pathlib import Path
from typing import Dict, List
from dotenv import load_dotenv

# Load .env file (override=True ensures .env has priority over shell environment)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path, override=True)


# LunarCrush API (upstream gateway)
LUNARCRUSH_API_TOKEN: str = os.getenv("LUNARCRUSH_API_TOKEN", "")
LUNARCRUSH_BASE_URL: str = os.getenv(
    "LUNARCRUSH_BASE_URL", "https://lunarcrush.com/api4/public/"
)
LUNARCRUSH_TIMEOUT_SECONDS: float = float(os.getenv("LUNARCRUSH_TIMEOUT_SECONDS", "10"))

# Proxy endpoint consumed by the sentiment pipeline
PROXY_BASE_URL: str = os.getenv("PROXY_BASE_URL", "http://localhost:8000")
PROXY_TIMEOUT_SECONDS: float = float(os.getenv("PROXY_TIMEOUT_SECONDS", "10"))

# Environment
ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Dashboard frontend URL (CORS)
WEBAPP_URL: str = os.getenv("WEBAPP_URL", "http://localhost:3000")


# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
DEFAULT_LIMIT: int = 30
DEFAULT_SORT_DESCENDING: bool = False
AVAILABLE_DISPLAY_LIMITS: List[int] = [10, 20, 30, 50, 100]

# Sentiment score thresholds for color coding (below LOW is poor)
SENTIMENT_THRESHOLDS: Dict[str, int] = {
    "HIGH": 70,
    "MEDIUM": 50,
    "LOW": 30,
}

AUTO_REFRESH_INTERVAL_SECONDS: int = int(os.getenv("AUTO_REFRESH_INTERVAL_SECONDS", "60"))

# Tooltip copy for the dashboard metrics
METRIC_DESCRIPTIONS: Dict[str, str] = {
    "SENTIMENT": (
        "Sentiment score represents the overall attitude from social media posts. "
        "Higher scores (0-100) indicate more positive sentiment."
    ),
    "GALAXY_SCORE": (
        "Galaxy score is a proprietary rating that combines social activity, "
        "market activity, and price performance into a single score (0-100)."
    ),
    "MARKET_CAP": (
        "The total value of all coins currently in circulation "
        "(price × circulating supply)."
    ),
    "VOLUME": "The total amount of coins traded in the last 24 hours.",
    "PRICE_CHANGE": "Percentage change in coin price over the specified time period.",
}


def validate_config() -> bool:
    """Validate required configuration variables"""
    errors = []

    if not LUNARCRUSH_API_TOKEN:
        errors.append("LUNARCRUSH_API_TOKEN is required (dashboard will serve demo data)")

    if not LUNARCRUSH_BASE_URL.endswith("/"):
        errors.append("LUNARCRUSH_BASE_URL must end with '/'")

    if LUNARCRUSH_TIMEOUT_SECONDS <= 0 or PROXY_TIMEOUT_SECONDS <= 0:
        errors.append("Request timeouts must be positive")

    if DEFAULT_LIMIT not in AVAILABLE_DISPLAY_LIMITS:
        errors.append("DEFAULT_LIMIT must be one of AVAILABLE_DISPLAY_LIMITS")

    if errors:
        error_message = "\n".join(f"  - {error}" for error in errors)
        raise ValueError(
            f"Configuration validation failed:\n{error_message}\n\n"
            "Please check your .env file and ensure all required variables are set."
        )

    return True


if __name__ == "__main__":
    print("🔧 Sentiment Dashboard Configuration")
    print(f"  Environment: {ENVIRONMENT}")
    print(f"  Log level: {LOG_LEVEL}")
    print(f"  LunarCrush base URL: {LUNARCRUSH_BASE_URL}")
    print(f"  LunarCrush token: {'set' if LUNARCRUSH_API_TOKEN else 'MISSING'}")
    print(f"  Proxy base URL: {PROXY_BASE_URL}")

    try:
        validate_config()
        print("\n✅ Configuration validation passed!")
    except ValueError as e:
        print(f"\n❌ {e}")
