"""
Textual application that browses a paginated dataset as one endless list
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from infinite_paper.config import PaperOptions
from infinite_paper.core.mock_page_source import MockPageSource
from infinite_paper.core.paper import InfinitePaper
from infinite_paper.core.viewport_mapper import IndexKind
from infinite_paper.events import EventType
from infinite_paper.interfaces.page_source import PageSource
from infinite_paper.ui.controllers.status_bar import StatusBarController
from infinite_paper.ui.widgets.pagination import Pagination
from infinite_paper.ui.widgets.paper_table import PaperTable

logger = logging.getLogger(__name__)


class PaperApp(App):
    """Scroll through pages, or jump with the pagination bar."""

    CSS = """
    #paper-table {
        height: 1fr;
    }

    #status-bar {
        height: 1;
        background: $panel;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("n", "next_page", "Next Page", show=True),
        Binding("p", "prev_page", "Prev Page", show=True),
        Binding("r", "reload_page", "Reload Page", show=True),
        Binding("home", "first_page", "First Page", show=False),
    ]

    # ------------------------------------------------------------------ #
    # init / mount
    # ------------------------------------------------------------------ #

    def __init__(self, config: Dict[str, Any], source: Optional[PageSource] = None) -> None:
        super().__init__()
        self.config = config
        self.options = PaperOptions.from_config(config)
        demo = config.get("demo", {})
        self.source = source or MockPageSource(
            self.options.page_size,
            self.options.page_size * self.options.total_pages,
            latency=float(demo.get("latency", 0.0)),
            failing_pages=demo.get("failing_pages", ()),
        )
        self.paper: Optional[InfinitePaper] = None
        self._window_offset = 0

    def compose(self) -> ComposeResult:
        yield Header()
        yield Pagination(id="pagination")
        yield PaperTable(id="paper-table")
        yield Static(id="status-bar", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.title = "Infinite Paper"
        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))

        self.paper = InfinitePaper(self.options, self.source)
        bus = self.paper.event_bus
        bus.subscribe(EventType.WINDOW_CHANGED, self._on_window_changed)
        bus.subscribe(EventType.PAGE_LOADED, self._on_page_status)
        bus.subscribe(EventType.PAGE_LOAD_FAILED, self._on_page_status)
        bus.subscribe(EventType.PAGE_LOAD_STARTED, self._on_page_status)
        bus.subscribe(EventType.PAGE_CHANGED, self._on_page_changed)

        self._rebuild_table()
        self.paper.start()
        self._refresh_chrome()

    def on_unmount(self) -> None:
        if self.paper is not None:
            self.paper.close()

    # ------------------------------------------------------------------ #
    # session events
    # ------------------------------------------------------------------ #

    def _on_window_changed(self, **_event: Any) -> None:
        table = self.query_one(PaperTable)
        # Rows shift when the window moves; keep the same items on screen
        shift = self._window_offset - self.paper.window_offset
        scroll_y = table.scroll_y + shift
        self._rebuild_table()
        self.call_after_refresh(table.scroll_to, y=max(0, scroll_y), animate=False)
        self._refresh_chrome()

    def _on_page_status(self, page: int, **_event: Any) -> None:
        slots = [slot for slot in self.paper.items if slot.page == page]
        self.query_one(PaperTable).update_page(slots, self.paper.pages.get(page))
        self._refresh_chrome()

    def _on_page_changed(self, page: int, **_event: Any) -> None:
        logger.debug(f"Current page is now {page}")
        self._refresh_chrome()

    # ------------------------------------------------------------------ #
    # widget messages
    # ------------------------------------------------------------------ #

    def on_paper_table_visible_range_changed(self, event: PaperTable.VisibleRangeChanged) -> None:
        self.paper.handle_visible_range(event.start, event.stop, IndexKind.RELATIVE)
        self._refresh_chrome()

    def on_pagination_page_changed(self, event: Pagination.PageChanged) -> None:
        self.jump_to(event.page)

    # ------------------------------------------------------------------ #
    # key-binding actions
    # ------------------------------------------------------------------ #

    def action_next_page(self) -> None:
        if self.paper.has_next_page:
            self.jump_to(self.paper.current_page + 1)

    def action_prev_page(self) -> None:
        self.jump_to(self.paper.current_page - 1)

    def action_first_page(self) -> None:
        self.jump_to(1)

    def action_reload_page(self) -> None:
        if not self.paper.reload_page(self.paper.current_page):
            self.notify(f"Page {self.paper.current_page} is not ready to reload", severity="warning")

    def jump_to(self, page: int) -> None:
        # A window move rebuilds the table through WINDOW_CHANGED first
        target = self.paper.scroll_to_page(page)
        table = self.query_one(PaperTable)
        self.call_after_refresh(table.scroll_to_slot, target.index_in_window)
        self._refresh_chrome()

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    def _rebuild_table(self) -> None:
        self._window_offset = self.paper.window_offset
        self.query_one(PaperTable).show_slots(self.paper.items, self.paper.pages)

    def _refresh_chrome(self) -> None:
        self.query_one(Pagination).update_items(self.paper.pagination_items)
        self.status_controller.update(self.paper)
