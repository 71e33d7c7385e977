"""
Sentiment View Models
Turns normalized records into display-ready dicts for grid, table and
detail views. Rendering itself (HTML, Mini App) happens elsewhere.
"""

from typing import Any, Dict, List

from loguru import logger

from config.config import METRIC_DESCRIPTIONS
from src.core.enums import ViewMode
from src.services.dashboard_state import DashboardState
from src.utils.formatters import (
    format_number,
    format_percentage,
    format_price,
    format_score,
    format_time_since,
    sentiment_level,
)

SYNTHETIC_NOTICE = "Using Demo Data - Please check your API key in .env file"


def _change_direction(value: Any) -> str:
    return "up" if (value or 0) >= 0 else "down"


def build_grid_card(coin: Dict[str, Any]) -> Dict[str, Any]:
    """One card of the grid view"""
    return {
        "key": f"{coin.get('symbol')}_{coin.get('id')}",
        "name": coin.get("name"),
        "symbol": coin.get("symbol"),
        "rank": f"Rank #{coin['rank']}",
        "price": f"${format_price(coin['price'])}",
        "sentiment": format_score(coin["sentiment"]),
        "sentiment_level": sentiment_level(coin["sentiment"]).value,
        "galaxy_score": format_score(coin["galaxy_score"]),
        "galaxy_level": sentiment_level(coin["galaxy_score"]).value,
        "volume_24h": f"${format_number(coin['volume_24h'])}",
        "change_24h": format_percentage(coin["percent_change_24h"]),
        "change_24h_direction": _change_direction(coin["percent_change_24h"]),
    }


def build_table_row(coin: Dict[str, Any]) -> Dict[str, Any]:
    """One row of the table view (columns: rank, coin, price, 24h %, volume, sentiment, galaxy)"""
    return {
        "rank": coin["rank"],
        "name": coin.get("name"),
        "symbol": coin.get("symbol"),
        "price": f"${format_price(coin['price'])}",
        "change_24h": format_percentage(coin["percent_change_24h"]),
        "change_24h_direction": _change_direction(coin["percent_change_24h"]),
        "volume_24h": f"${format_number(coin['volume_24h'])}",
        "sentiment": format_score(coin["sentiment"]),
        "sentiment_level": sentiment_level(coin["sentiment"]).value,
        "galaxy_score": format_score(coin["galaxy_score"]),
    }


def build_grid_cards(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [build_grid_card(coin) for coin in records]


def build_table_rows(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [build_table_row(coin) for coin in records]


def build_coin_detail(coin: Dict[str, Any]) -> Dict[str, Any]:
    """
    Detail (modal) view for a selected coin

    Each metric carries its tooltip text from METRIC_DESCRIPTIONS.
    """
    return {
        "name": coin.get("name"),
        "symbol": coin.get("symbol"),
        "rank": coin["rank"],
        "logo": coin.get("logo"),
        "metrics": [
            {
                "label": "Sentiment Score",
                "value": format_score(coin["sentiment"]),
                "level": sentiment_level(coin["sentiment"]).value,
                "description": METRIC_DESCRIPTIONS["SENTIMENT"],
            },
            {
                "label": "Galaxy Score",
                "value": format_score(coin["galaxy_score"]),
                "level": sentiment_level(coin["galaxy_score"]).value,
                "description": METRIC_DESCRIPTIONS["GALAXY_SCORE"],
            },
            {
                "label": "Price",
                "value": f"${format_price(coin['price'])}",
            },
            {
                "label": "Market Cap",
                "value": f"${format_number(coin['market_cap'])}",
                "description": METRIC_DESCRIPTIONS["MARKET_CAP"],
            },
            {
                "label": "24h Volume",
                "value": f"${format_number(coin['volume_24h'])}",
                "description": METRIC_DESCRIPTIONS["VOLUME"],
            },
            {
                "label": "24h Change",
                "value": format_percentage(coin["percent_change_24h"]),
                "description": METRIC_DESCRIPTIONS["PRICE_CHANGE"],
            },
            {
                "label": "7d Change",
                "value": format_percentage(coin["percent_change_7d"]),
                "description": METRIC_DESCRIPTIONS["PRICE_CHANGE"],
            },
        ],
    }


def build_view(state: DashboardState) -> Dict[str, Any]:
    """
    Full dashboard view for the current state

    Returns:
        {
            "view_mode": "grid" | "table",
            "items": [...cards or rows...],
            "notice": str | None,       # set when sample data is shown
            "status": "idle" | "fetching" | "complete",
            "last_updated": "5 minutes ago",
            "selected": {...} | None
        }
    """
    if state.view_mode == ViewMode.TABLE:
        items = build_table_rows(state.records)
    else:
        items = build_grid_cards(state.records)

    notice = SYNTHETIC_NOTICE if state.is_synthetic else None
    if notice:
        logger.debug(f"Rendering {len(items)} sample records with demo notice")

    return {
        "view_mode": state.view_mode.value,
        "items": items,
        "notice": notice,
        "status": state.fetch_status.value,
        "is_loading": state.is_loading,
        "is_refreshing": state.is_refreshing,
        "sort_descending": state.sort_descending,
        "limit": state.limit,
        "last_updated": format_time_since(state.last_updated),
        "selected": build_coin_detail(state.selected_coin) if state.selected_coin else None,
    }
