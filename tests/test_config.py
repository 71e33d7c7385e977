"""
Unit tests for configuration
"""

import pytest


def test_config_defaults():
    """Test that display configuration loads correctly"""
    from config.config import (
        DEFAULT_LIMIT,
        DEFAULT_SORT_DESCENDING,
        AVAILABLE_DISPLAY_LIMITS,
        SENTIMENT_THRESHOLDS,
        METRIC_DESCRIPTIONS,
    )

    assert DEFAULT_LIMIT == 30
    assert DEFAULT_SORT_DESCENDING is False
    assert AVAILABLE_DISPLAY_LIMITS == [10, 20, 30, 50, 100]
    assert DEFAULT_LIMIT in AVAILABLE_DISPLAY_LIMITS

    assert SENTIMENT_THRESHOLDS["HIGH"] > SENTIMENT_THRESHOLDS["MEDIUM"] > SENTIMENT_THRESHOLDS["LOW"]
    assert set(METRIC_DESCRIPTIONS) == {"SENTIMENT", "GALAXY_SCORE", "MARKET_CAP", "VOLUME", "PRICE_CHANGE"}


def test_validate_config_passes_with_token(monkeypatch):
    """Test validation with a complete configuration"""
    import config.config as cfg

    monkeypatch.setattr(cfg, "LUNARCRUSH_API_TOKEN", "token")
    monkeypatch.setattr(cfg, "LUNARCRUSH_BASE_URL", "https://lunarcrush.com/api4/public/")

    assert cfg.validate_config() is True


def test_validate_config_missing_token(monkeypatch):
    """Test that a missing token is reported"""
    import config.config as cfg

    monkeypatch.setattr(cfg, "LUNARCRUSH_API_TOKEN", "")

    with pytest.raises(ValueError, match="LUNARCRUSH_API_TOKEN"):
        cfg.validate_config()


def test_validate_config_collects_all_errors(monkeypatch):
    """Test that every problem is listed in one error"""
    import config.config as cfg

    monkeypatch.setattr(cfg, "LUNARCRUSH_API_TOKEN", "")
    monkeypatch.setattr(cfg, "LUNARCRUSH_BASE_URL", "https://lunarcrush.com/api4/public")
    monkeypatch.setattr(cfg, "PROXY_TIMEOUT_SECONDS", 0)

    with pytest.raises(ValueError) as exc_info:
        cfg.validate_config()

    message = str(exc_info.value)
    assert "LUNARCRUSH_API_TOKEN" in message
    assert "must end with '/'" in message
    assert "timeouts must be positive" in message
