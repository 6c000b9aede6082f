# infinite_paper/core/pagination_controller.py

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .window_manager import clamp_page

logger = logging.getLogger(__name__)


class InfinitePagination:
    """
    Page cursor for hosts that append pages instead of windowing them.

    No caching or fetching happens here: the cursor only tracks which page
    the user is on and tells the host when it changes.
    """

    def __init__(
        self,
        total_pages: int,
        *,
        initial_page: int = 1,
        on_page_change: Optional[Callable[[int], Any]] = None,
    ) -> None:
        self.total_pages = total_pages
        self._on_page_change = on_page_change
        self._current_page = clamp_page(initial_page, total_pages)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def has_next_page(self) -> bool:
        return self._current_page < self.total_pages

    def set_page(self, page: float) -> int:
        """Move to ``page`` (clamped). The callback only fires on change."""
        clamped = clamp_page(page, self.total_pages)
        if clamped != self._current_page:
            self._current_page = clamped
            logger.debug(f"Page changed to {clamped}")
            if self._on_page_change is not None:
                self._on_page_change(clamped)
        return self._current_page

    def go_to_next_page(self) -> int:
        return self.set_page(self._current_page + 1)

    # The end-of-list sentinel became visible
    on_visible_bottom = go_to_next_page
