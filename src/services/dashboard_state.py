# coding: utf-8
"""
Dashboard State - explicit UI state for the sentiment dashboard.

Owns the records on screen, sort order, display limit, view mode and the
selected coin. The pipeline stays a pure params -> envelope function; all
mutable state lives here.

Ordering rules:
- A request whose params equal the last applied params is skipped unless it
  is a manual refresh.
- Each fetch takes a generation number. When it resolves, its envelope is
  applied only if no newer fetch has started since (last request wins).
  Superseded fetches run to completion; their result is dropped.
"""
import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

from loguru import logger

from config.config import (
    AUTO_REFRESH_INTERVAL_SECONDS,
    AVAILABLE_DISPLAY_LIMITS,
    DEFAULT_LIMIT,
    DEFAULT_SORT_DESCENDING,
)
from src.core.enums import FailureKind, FetchStatus, ViewMode
from src.services.sentiment_pipeline import QueryParams, ResultEnvelope, sentiment_pipeline


AcquireFn = Callable[[QueryParams], Awaitable[ResultEnvelope]]


class DashboardState:
    """
    State object for one dashboard session.

    Example:
        state = DashboardState()
        await state.load()
        await state.set_sort_descending(True)
        await state.set_limit(50)
        await state.refresh()
    """

    def __init__(
        self,
        acquire: Optional[AcquireFn] = None,
        sort_descending: bool = DEFAULT_SORT_DESCENDING,
        limit: int = DEFAULT_LIMIT,
    ):
        self._acquire = acquire or sentiment_pipeline.acquire

        # Query state
        self.sort_descending = sort_descending
        self.limit = limit

        # Data state (replaced wholesale by each applied envelope)
        self.records: List[Dict[str, Any]] = []
        self.is_synthetic = False
        self.failure: Optional[FailureKind] = None
        self.error: Optional[str] = None
        self.last_updated: Optional[float] = None

        # UI state
        self.view_mode = ViewMode.GRID
        self.selected_coin: Optional[Dict[str, Any]] = None
        self.fetch_status = FetchStatus.IDLE
        self.is_loading = False
        self.is_refreshing = False

        # Params of the newest started request, and of the last one actually applied
        self._last_applied: Optional[QueryParams] = None
        self._applied_params: Optional[QueryParams] = None
        self._generation = 0

    @property
    def current_params(self) -> QueryParams:
        return QueryParams(sort_descending=self.sort_descending, limit=self.limit)

    @property
    def last_applied_params(self) -> Optional[QueryParams]:
        return self._last_applied

    @property
    def generation(self) -> int:
        return self._generation

    # =========================================================================
    # FETCH ORCHESTRATION
    # =========================================================================

    def _begin(self, params: QueryParams, manual_refresh: bool) -> Optional[int]:
        """
        Compare, record and claim a generation in one synchronous step.

        Returns None when the request is redundant.
        """
        if not manual_refresh and params == self._last_applied:
            return None

        self._last_applied = params
        self._generation += 1

        if manual_refresh:
            self.is_refreshing = True
        else:
            self.is_loading = True
        self.fetch_status = FetchStatus.FETCHING
        return self._generation

    def _apply(self, generation: int, envelope: ResultEnvelope) -> bool:
        """Apply an envelope if it belongs to the latest fetch."""
        if generation != self._generation:
            logger.debug(
                f"Discarding stale sentiment result (generation {generation}, "
                f"latest {self._generation})"
            )
            return False

        self.records = envelope.records
        self.is_synthetic = envelope.is_synthetic
        self.failure = envelope.failure
        self.error = envelope.error
        self.last_updated = time.time()
        self._applied_params = self._last_applied

        # Detail view would point at a record that no longer exists
        if self.selected_coin is not None:
            self.selected_coin = self._find_record(self.selected_coin.get("symbol"))

        self.is_loading = False
        self.is_refreshing = False
        self.fetch_status = FetchStatus.COMPLETE

        if envelope.is_synthetic:
            logger.warning("⚠️ Dashboard is showing sample data (API key missing or error occurred)")
        return True

    def _abort(self, generation: int) -> None:
        """
        Undo ``_begin`` for a fetch that raised or was cancelled.

        Only the latest fetch owns the flags; an older one leaves them alone.
        """
        if generation != self._generation:
            return

        logger.warning(f"Sentiment fetch (generation {generation}) did not complete")
        self._last_applied = self._applied_params
        self.is_loading = False
        self.is_refreshing = False
        self.fetch_status = FetchStatus.COMPLETE if self.last_updated else FetchStatus.IDLE

    async def request(self, params: QueryParams, manual_refresh: bool = False) -> bool:
        """
        Fetch ``params`` and apply the result unless superseded.

        Returns:
            True if the envelope was applied, False if skipped or stale
        """
        generation = self._begin(params, manual_refresh)
        if generation is None:
            logger.debug(f"Params unchanged ({params}), skipping fetch")
            return False

        try:
            envelope = await self._acquire(params)
        except BaseException:
            self._abort(generation)
            raise
        return self._apply(generation, envelope)

    async def load(self) -> bool:
        """Initial load with the current sort/limit."""
        return await self.request(self.current_params)

    async def refresh(self) -> bool:
        """Manual refresh; always fetches."""
        return await self.request(self.current_params, manual_refresh=True)

    async def set_sort_descending(self, descending: bool) -> bool:
        self.sort_descending = bool(descending)
        return await self.request(self.current_params)

    async def set_limit(self, limit: int) -> bool:
        """
        Change the display limit.

        Raises:
            ValueError: limit is not one of AVAILABLE_DISPLAY_LIMITS
        """
        if limit not in AVAILABLE_DISPLAY_LIMITS:
            raise ValueError(
                f"Unsupported limit {limit}; choose one of {AVAILABLE_DISPLAY_LIMITS}"
            )
        self.limit = limit
        return await self.request(self.current_params)

    async def auto_refresh(
        self,
        interval: float = AUTO_REFRESH_INTERVAL_SECONDS,
        iterations: Optional[int] = None,
    ) -> None:
        """Refresh every ``interval`` seconds (forever unless ``iterations`` is set)."""
        count = 0
        while iterations is None or count < iterations:
            await asyncio.sleep(interval)
            await self.refresh()
            count += 1

    # =========================================================================
    # VIEW STATE
    # =========================================================================

    def set_view_mode(self, mode: str) -> None:
        self.view_mode = ViewMode(mode)

    def _find_record(self, symbol: Optional[str]) -> Optional[Dict[str, Any]]:
        for record in self.records:
            if record.get("symbol") == symbol:
                return record
        return None

    def select_coin(self, symbol: str) -> Optional[Dict[str, Any]]:
        """Open the detail view for ``symbol``; returns the record or None."""
        self.selected_coin = self._find_record(symbol)
        return self.selected_coin

    def clear_selection(self) -> None:
        self.selected_coin = None
