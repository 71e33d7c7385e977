# coding: utf-8
"""
Sentiment Pipeline - fetch, normalize and fall back.

Calls the /api/sentiment proxy, repairs every record so the dashboard never
sees a missing metric, and substitutes the sample dataset when the proxy
fails. The sample data gets the same sort/limit treatment the live query
would have had, so callers can't tell the shapes apart; only
``is_synthetic`` differs.

Failure routing:
    configuration (missing key)  -> sample data, is_synthetic=True
    transport (status/network)   -> sample data, is_synthetic=True
    shape (200 without data[])   -> [] , is_synthetic=False
"""
import asyncio
import copy
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

import aiohttp
from loguru import logger

from config.config import PROXY_BASE_URL, PROXY_TIMEOUT_SECONDS
from src.core.enums import FailureKind
from src.core.exceptions import (
    ConfigurationError,
    SentimentDataError,
    ShapeError,
    TransportError,
)
from src.data.sample_data import SAMPLE_DATA


SENTIMENT_ENDPOINT = "/api/sentiment"

# Display fields that must never be None (absent/null -> 0)
NUMERIC_FIELD_DEFAULTS: Dict[str, float] = {
    "sentiment": 0,
    "galaxy_score": 0,
    "percent_change_24h": 0,
    "percent_change_7d": 0,
    "volume_24h": 0,
    "market_cap": 0,
    "price": 0,
    "market_cap_rank": 0,
    "alt_rank": 0,
}

# Evaluated in order; first truthy value wins, else position + 1
RANK_SOURCE_FIELDS = ("market_cap_rank", "alt_rank")

# Marker in the proxy's error body for a missing credential
MISSING_KEY_MARKER = "missing api key"


@dataclass(frozen=True)
class QueryParams:
    """Sort/limit requested by the dashboard. None means "not sent"."""
    sort_descending: Optional[bool] = None
    limit: Optional[int] = None


@dataclass
class ResultEnvelope:
    """Uniform pipeline output consumed by the dashboard."""
    records: List[Dict[str, Any]] = field(default_factory=list)
    is_synthetic: bool = False
    failure: Optional[FailureKind] = None
    error: Optional[str] = None
    generated: Optional[int] = None

    @property
    def is_degraded(self) -> bool:
        return self.failure is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": self.records,
            "is_synthetic": self.is_synthetic,
            "failure": self.failure.value if self.failure else None,
            "error": self.error,
            "generated": self.generated,
        }


# ==============================================================================
# PURE HELPERS
# ==============================================================================

def build_query(params: QueryParams) -> Dict[str, str]:
    """
    Encode params for the proxy, omitting anything left as None.

    Examples:
        QueryParams(True, 20)  -> {"desc": "1", "limit": "20"}
        QueryParams(False)     -> {"desc": "0"}
    """
    query: Dict[str, str] = {}
    if params.sort_descending is not None:
        query["desc"] = "1" if params.sort_descending else "0"
    if params.limit is not None:
        query["limit"] = str(params.limit)
    return query


def emulate(base_sequence: Sequence[Mapping[str, Any]], params: QueryParams) -> List[Dict[str, Any]]:
    """
    Apply the live query's sort/limit semantics to a static sequence.

    Descending is an order reversal of the canonical sequence, not a value
    sort. Truncation only happens for a truthy limit, so 0 keeps everything
    and a negative limit drops that many trailing records. Operates on a deep
    copy; ``base_sequence`` is left untouched.
    """
    records = copy.deepcopy(list(base_sequence))
    if params.sort_descending:
        records.reverse()
    if params.limit:
        records = records[:params.limit]
    return records


def compute_rank(raw: Mapping[str, Any], index: int) -> int:
    """market_cap_rank, else alt_rank, else index + 1 (zero counts as missing)."""
    for field_name in RANK_SOURCE_FIELDS:
        value = raw.get(field_name)
        if value:
            return value
    return index + 1


def normalize_record(raw: Any, index: int) -> Dict[str, Any]:
    """Copy a raw record, default missing display metrics to 0 and set rank."""
    source: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    record = dict(source)
    record["rank"] = compute_rank(source, index)
    for field_name, default in NUMERIC_FIELD_DEFAULTS.items():
        if record.get(field_name) is None:
            record[field_name] = default
    return record


def normalize_records(raw_records: Sequence[Any]) -> List[Dict[str, Any]]:
    """Normalize every record, preserving order."""
    return [normalize_record(raw, index) for index, raw in enumerate(raw_records)]


def extract_records(body: Any) -> List[Any]:
    """
    Pull the ``data`` list out of a success body.

    Raises:
        ShapeError: body is not an object or ``data`` is missing / not a list
    """
    if not isinstance(body, Mapping):
        raise ShapeError(f"Expected JSON object, got {type(body).__name__}")
    data = body.get("data")
    if not isinstance(data, list):
        raise ShapeError("Response has no 'data' list")
    return data


def _generated_of(body: Any) -> Optional[int]:
    if isinstance(body, Mapping) and isinstance(body.get("config"), Mapping):
        return body["config"].get("generated")
    return None


def classify_failure(error: SentimentDataError) -> FailureKind:
    """Map an acquisition error onto its FailureKind."""
    if isinstance(error, ConfigurationError):
        return FailureKind.CONFIGURATION
    if isinstance(error, ShapeError):
        return FailureKind.SHAPE
    return FailureKind.TRANSPORT


FALLBACK_REASONS: Dict[FailureKind, str] = {
    FailureKind.CONFIGURATION: "API key is missing",
    FailureKind.TRANSPORT: "API access is unavailable",
}


# ==============================================================================
# PIPELINE
# ==============================================================================

class SentimentPipeline:
    """
    Stateless fetch-and-normalize pipeline.

    ``acquire`` never raises: every failure ends in a valid envelope.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        sample_data: Optional[Mapping[str, Any]] = None,
    ):
        self.base_url = (base_url or PROXY_BASE_URL).rstrip("/")
        self.timeout = timeout or PROXY_TIMEOUT_SECONDS
        self.sample_data = sample_data if sample_data is not None else SAMPLE_DATA

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}{SENTIMENT_ENDPOINT}"

    async def _fetch(self, params: QueryParams) -> Any:
        """
        GET the proxy and return the decoded JSON body.

        Raises:
            ConfigurationError: proxy reports the API key is missing
            TransportError: non-200 status, network error, timeout, empty or bad JSON
        """
        query = build_query(params)
        logger.info(f"Fetching sentiment data from: {self.endpoint_url} {query}")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    self.endpoint_url,
                    params=query,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        message = await self._error_message(response)
                        if MISSING_KEY_MARKER in message.lower():
                            raise ConfigurationError(message)
                        raise TransportError(f"API Error: {response.status} {message}".strip())

                    # aiohttp decodes an empty body to None instead of failing
                    raw_body = await response.read()
                    if not raw_body.strip():
                        raise TransportError("Empty response body")
                    return await response.json(content_type=None)

        except SentimentDataError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise TransportError(str(e) or type(e).__name__) from e
        except Exception as e:
            logger.exception(f"Unexpected error calling sentiment proxy: {e}")
            raise TransportError(str(e) or type(e).__name__) from e

    @staticmethod
    async def _error_message(response: Any) -> str:
        """Best-effort read of the proxy's ``{"error": ...}`` body."""
        try:
            body = await response.json(content_type=None)
        except (aiohttp.ClientError, ValueError):
            return ""
        if isinstance(body, Mapping) and isinstance(body.get("error"), str):
            return body["error"]
        return ""

    def fallback(self, params: QueryParams, failure: FailureKind, error: str) -> ResultEnvelope:
        """Build a synthetic envelope from the sample dataset."""
        raw = emulate(self.sample_data.get("data", []), params)
        return ResultEnvelope(
            records=normalize_records(raw),
            is_synthetic=True,
            failure=failure,
            error=error,
            generated=_generated_of(self.sample_data),
        )

    async def acquire(self, params: QueryParams) -> ResultEnvelope:
        """
        Fetch, normalize and (if needed) fall back.

        Args:
            params: sort/limit requested by the dashboard

        Returns:
            ResultEnvelope; ``is_synthetic`` is True iff sample data was used
        """
        start = time.monotonic()
        body: Any = None

        try:
            body = await self._fetch(params)
            raw_records = extract_records(body)
        except SentimentDataError as e:
            kind = classify_failure(e)
            if FailureKind.triggers_fallback(kind):
                logger.error(f"Failed to fetch sentiment data ({kind.value}): {e}")
                logger.warning(f"Using sample data as fallback - {FALLBACK_REASONS[kind]}")
                return self.fallback(params, kind, str(e))

            logger.warning(f"Unexpected sentiment response shape: {e}")
            return ResultEnvelope(
                records=[],
                is_synthetic=False,
                failure=kind,
                error=str(e),
                generated=_generated_of(body),
            )

        records = normalize_records(raw_records)
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(f"✅ Sentiment data loaded: {len(records)} coins in {elapsed_ms:.0f}ms")
        return ResultEnvelope(records=records, is_synthetic=False, generated=_generated_of(body))


# Global instance
sentiment_pipeline = SentimentPipeline()


async def get_sentiment_data(params: Optional[QueryParams] = None) -> ResultEnvelope:
    """Convenience wrapper around the global pipeline."""
    return await sentiment_pipeline.acquire(params or QueryParams())
