"""
Tests for dashboard view models
"""
from unittest.mock import AsyncMock

import pytest

from src.services.dashboard_state import DashboardState
from src.services.sentiment_pipeline import ResultEnvelope, normalize_records
from src.utils.sentiment_view import (
    SYNTHETIC_NOTICE,
    build_coin_detail,
    build_grid_card,
    build_table_row,
    build_view,
)


@pytest.fixture
def btc(sample_records):
    return normalize_records(sample_records)[3]


def test_grid_card(btc):
    card = build_grid_card(btc)

    assert card["key"] == "BTC_1"
    assert card["rank"] == "Rank #1"
    assert card["price"].startswith("$")
    assert card["volume_24h"].startswith("$")
    assert card["change_24h_direction"] in ("up", "down")


def test_table_row_handles_zeroed_metrics():
    record = normalize_records([{"id": 9, "symbol": "NEW", "name": "Fresh"}])[0]
    row = build_table_row(record)

    assert row["rank"] == 1
    assert row["price"] == "$0.00"
    assert row["change_24h"] == "+0.00%"
    assert row["volume_24h"] == "$0"
    assert row["sentiment"] == "0.0"
    assert row["sentiment_level"] == "poor"


def test_coin_detail_includes_metric_descriptions(btc):
    detail = build_coin_detail(btc)

    labels = [metric["label"] for metric in detail["metrics"]]
    assert labels[:2] == ["Sentiment Score", "Galaxy Score"]
    assert "Market Cap" in labels
    assert all(metric["description"] for metric in detail["metrics"] if metric["label"] != "Price")


@pytest.mark.asyncio
async def test_build_view_grid_with_demo_notice(sample_records):
    envelope = ResultEnvelope(records=normalize_records(sample_records), is_synthetic=True)
    state = DashboardState(acquire=AsyncMock(return_value=envelope))
    await state.load()

    view = build_view(state)

    assert view["view_mode"] == "grid"
    assert view["notice"] == SYNTHETIC_NOTICE
    assert view["status"] == "complete"
    assert len(view["items"]) == 5
    assert view["selected"] is None
    assert view["last_updated"].endswith("ago")


@pytest.mark.asyncio
async def test_build_view_table_with_selection(sample_records):
    envelope = ResultEnvelope(records=normalize_records(sample_records))
    state = DashboardState(acquire=AsyncMock(return_value=envelope))
    await state.load()
    state.set_view_mode("table")
    state.select_coin("ETH")

    view = build_view(state)

    assert view["view_mode"] == "table"
    assert view["notice"] is None
    assert view["items"][0]["symbol"] == "ETP"
    assert view["selected"]["symbol"] == "ETH"


def test_build_view_before_first_load():
    view = build_view(DashboardState(acquire=AsyncMock()))

    assert view["items"] == []
    assert view["status"] == "idle"
    assert view["last_updated"] == "N/A"
