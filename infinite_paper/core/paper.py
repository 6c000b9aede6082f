# infinite_paper/core/paper.py
"""
Session coordinator for an infinitely scrolling, paginated list.

An ``InfinitePaper`` owns everything a host needs to render a huge,
page-fetched dataset as one continuous list: the resident page window,
the page cache, the current and furthest pages, and the derived item
slots and pagination bar. Hosts feed it visible ranges and jump requests
and re-render from its properties (or from its events).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, Mapping, Optional, TypeVar, Union

from ..config import PaperOptions
from ..errors import SessionClosedError
from ..events import EventType
from ..interfaces.event_bus import EventBus as EventBusInterface
from ..interfaces.page_source import PageSource
from ..models.item_slot import ItemSlot
from ..models.page_record import PageRecord
from ..models.page_window import JumpTarget, PageWindow
from ..models.pagination import PaginationItem
from .event_bus import EventBus
from .fetch_coordinator import FetchCoordinator, FetchPage
from .item_projector import project_items
from .page_store import PageStore
from .pagination_renderer import build_pagination
from .viewport_mapper import IndexKind, ViewportMapper, ViewportUpdate
from .window_manager import clamp_page, compute_window

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InfinitePaper(Generic[T]):
    """
    Windowed page cache plus the viewport logic that moves it.

    Operations that may start fetches (``start``, ``handle_visible_range``,
    ``scroll_to_page``, ``reload_page``) must run on the event loop that
    should own the fetch tasks.
    """

    def __init__(
        self,
        options: PaperOptions,
        fetch_page: Union[FetchPage, PageSource],
        *,
        on_page_change: Optional[Callable[[int], Any]] = None,
        event_bus: Optional[EventBusInterface] = None,
    ) -> None:
        if isinstance(fetch_page, PageSource):
            fetch_page = fetch_page.fetch_page

        self.options = options
        self._on_page_change = on_page_change
        self._owns_event_bus = event_bus is None
        self.event_bus: EventBusInterface = event_bus or EventBus()

        self._store = PageStore()
        self._coordinator = FetchCoordinator(
            self._store,
            fetch_page,
            page_size=options.page_size,
            event_bus=self.event_bus,
        )
        self._mapper = ViewportMapper(
            page_size=options.page_size,
            total_pages=options.total_pages,
            window_size=options.window_size,
            prefetch_threshold_pages=options.prefetch_threshold_pages,
        )

        total = options.total_pages
        self._current_page = clamp_page(options.initial_page, total)
        self._max_accessible_page = min(self._current_page, total)
        self._pending_page: Optional[int] = None
        self._window = compute_window(self._current_page, total, options.window_size)
        self._store.reconcile(self._window)
        self._closed = False

        logger.info(
            f"Session created: {total} pages of {options.page_size}, "
            f"window {self._window.start_page}-{self._window.end_page}"
        )

    # ------------------------------------------------------------------ #
    # lifecycle
    # ------------------------------------------------------------------ #

    def start(self) -> List[int]:
        """Request the pages of the initial window. Returns the pages requested."""
        self._ensure_open()
        return self._coordinator.reconcile(self._window)

    async def settle(self) -> None:
        """Wait for every fetch started so far to complete."""
        await self._coordinator.settle()

    def close(self) -> None:
        """Cancel in-flight fetches and drop all cached pages."""
        if self._closed:
            return
        self._closed = True
        self._coordinator.cancel_all()
        self._store.clear()
        if self._owns_event_bus:
            self.event_bus.clear_all_subscriptions()
        logger.info("Session closed")

    async def __aenter__(self) -> InfinitePaper[T]:
        self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # read side
    # ------------------------------------------------------------------ #

    @property
    def page_size(self) -> int:
        return self.options.page_size

    @property
    def total_pages(self) -> int:
        return self.options.total_pages

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def max_accessible_page(self) -> int:
        """Highest page reached by scrolling or jumping."""
        return self._max_accessible_page

    @property
    def pending_page(self) -> Optional[int]:
        """Target of the last jump while it still owns the current page."""
        return self._pending_page

    @property
    def page_window(self) -> PageWindow:
        return self._window

    @property
    def window_offset(self) -> int:
        """Global index of the first item in the window."""
        return self._window.offset(self.options.page_size)

    @property
    def pages(self) -> Mapping[int, PageRecord[T]]:
        return self._store.pages

    @property
    def is_fetching(self) -> bool:
        return self._coordinator.is_fetching

    @property
    def has_next_page(self) -> bool:
        return self._current_page < self.options.total_pages

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def items(self) -> List[ItemSlot[T]]:
        """One slot per item position of the window, placeholders included."""
        return project_items(self._window, self._store, self.options.page_size)

    @property
    def pagination_items(self) -> List[PaginationItem]:
        return build_pagination(self._current_page, self._max_accessible_page)

    # ------------------------------------------------------------------ #
    # host signals
    # ------------------------------------------------------------------ #

    def handle_visible_range(
        self,
        visible_start_index: int,
        visible_stop_index: int,
        kind: IndexKind = IndexKind.AUTO,
    ) -> ViewportUpdate:
        """
        Update the current page and window from the rows a host can see.

        Args:
            visible_start_index: First visible index
            visible_stop_index: Last visible index (inclusive)
            kind: What the indices are relative to; see ``IndexKind``
        """
        self._ensure_open()
        update = self._mapper.map_range(
            visible_start_index,
            visible_stop_index,
            window=self._window,
            current_page=self._current_page,
            max_accessible_page=self._max_accessible_page,
            materialized_count=len(self._window) * self.options.page_size,
            kind=kind,
            pending_page=self._pending_page,
        )

        self._pending_page = update.pending_page
        self._current_page = update.current_page
        self._max_accessible_page = update.max_accessible_page
        if update.window_changed:
            self._set_window(update.window)

        if update.page_changed:
            self.event_bus.publish(EventType.PAGE_CHANGED, page=update.current_page)
            if self._on_page_change is not None:
                self._on_page_change(update.current_page)
        return update

    def scroll_to_page(self, target_page: int) -> JumpTarget:
        """
        Recenter the window on ``target_page``.

        Returns where the host should scroll: the global index of the
        target page's first item and the global index of the first item of
        the new window.
        """
        self._ensure_open()
        total = self.options.total_pages
        if total < 1:
            return JumpTarget(target_global_index=0, target_window_offset=0)

        page = clamp_page(target_page, total)
        window = compute_window(page, total, self.options.window_size)

        self._current_page = page
        self._max_accessible_page = max(self._max_accessible_page, page)
        self._pending_page = page
        self.event_bus.publish(EventType.JUMP_REQUESTED, page=page)
        self._set_window(window)

        return JumpTarget(
            target_global_index=(page - 1) * self.options.page_size,
            target_window_offset=window.offset(self.options.page_size),
        )

    set_page = scroll_to_page

    def go_to_next_page(self) -> Optional[JumpTarget]:
        """Advance one page, e.g. when an end-of-list sentinel became visible."""
        self._ensure_open()
        if not self.has_next_page:
            return None
        return self.scroll_to_page(self._current_page + 1)

    on_visible_bottom = go_to_next_page

    def reload_page(self, page: int) -> bool:
        """
        Fetch a resident page again.

        Returns:
            False if the page is not resident or is already loading
        """
        self._ensure_open()
        if not self._store.invalidate(page):
            return False
        logger.info(f"Reloading page {page}")
        self.event_bus.publish(EventType.PAGE_INVALIDATED, page=page)
        self._coordinator.reconcile(self._window)
        return True

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #

    def _set_window(self, window: PageWindow) -> None:
        if window == self._window:
            return
        previous, self._window = self._window, window
        evicted = self._store.reconcile(window)
        for page in evicted:
            self.event_bus.publish(EventType.PAGE_EVICTED, page=page)
        self.event_bus.publish(
            EventType.WINDOW_CHANGED,
            start_page=window.start_page,
            end_page=window.end_page,
            previous=previous,
        )
        self._coordinator.reconcile(window)

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Session has been closed")
