# infinite_paper/core/fetch_coordinator.py

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from ..events import EventType
from ..interfaces.event_bus import EventBus as EventBusInterface
from ..models.page_window import PageWindow
from .page_store import PageStore

logger = logging.getLogger(__name__)

FetchPage = Callable[[int], Awaitable[Sequence[Any]]]


class FetchCoordinator:
    """
    Fills the gaps of a PageStore by fetching missing pages concurrently.

    Every page is marked loading before its task is created, so running
    ``reconcile`` again while fetches are in flight never issues a second
    request for the same page. Completions carry the ticket they were
    started with; anything the store no longer expects is dropped.
    """

    def __init__(
        self,
        store: PageStore,
        fetch_page: FetchPage,
        *,
        page_size: int,
        event_bus: Optional[EventBusInterface] = None,
    ) -> None:
        self._store = store
        self._fetch_page = fetch_page
        self._page_size = page_size
        self._event_bus = event_bus
        self._tasks: Dict[int, asyncio.Task] = {}

    # ------------------------------------------------------------------ #
    # state
    # ------------------------------------------------------------------ #

    @property
    def is_fetching(self) -> bool:
        """True while at least one tracked page is loading."""
        return self._store.any_loading()

    @property
    def in_flight(self) -> int:
        """Number of fetch tasks that have not finished yet, stale ones included."""
        return len(self._tasks)

    # ------------------------------------------------------------------ #
    # scheduling
    # ------------------------------------------------------------------ #

    def reconcile(self, window: PageWindow) -> List[int]:
        """
        Start a fetch for every idle or failed page of ``window``.

        Must be called from a running event loop.

        Returns:
            The pages for which a fetch was started
        """
        missing = self._store.pages_needing_fetch(window)
        if not missing:
            return []

        loop = asyncio.get_running_loop()
        for page in missing:
            ticket = self._store.mark_loading(page)
            self._publish(EventType.PAGE_LOAD_STARTED, page=page)
            task = loop.create_task(self._load(page, ticket), name=f"fetch-page-{page}")
            self._tasks[ticket] = task
            task.add_done_callback(lambda _task, ticket=ticket: self._tasks.pop(ticket, None))

        logger.debug(f"Requested pages {missing}")
        return missing

    async def settle(self) -> None:
        """Wait until every outstanding fetch has completed."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks.values()), return_exceptions=True)

    def cancel_all(self) -> None:
        """Cancel outstanding fetch tasks. Only used on session teardown."""
        for task in list(self._tasks.values()):
            task.cancel()
        if self._tasks:
            logger.info(f"Cancelled {len(self._tasks)} in-flight fetches")
        self._tasks.clear()

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    async def _load(self, page: int, ticket: int) -> None:
        try:
            items = tuple(await self._fetch_page(page))
        except Exception as exc:
            logger.warning(f"Fetching page {page} failed: {exc!r}")
            if self._store.commit_error(page, exc, ticket):
                self._publish(EventType.PAGE_LOAD_FAILED, page=page, error=exc)
            else:
                self._discarded(page)
            return

        if len(items) != self._page_size:
            logger.warning(f"Page {page} returned {len(items)} items, expected {self._page_size}")

        if self._store.commit_loaded(page, items, ticket):
            self._publish(EventType.PAGE_LOADED, page=page, count=len(items))
        else:
            self._discarded(page)

    def _discarded(self, page: int) -> None:
        logger.debug(f"Discarded stale result for page {page}")
        self._publish(EventType.RESULT_DISCARDED, page=page)

    def _publish(self, event_type: EventType, **data: Any) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event_type, **data)
