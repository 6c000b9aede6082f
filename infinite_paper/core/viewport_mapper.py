# infinite_paper/core/viewport_mapper.py
"""
Turns visible index ranges reported by a host into page and window updates.

Hosts do not agree on what an index means: a virtualized list that only
holds the resident window reports offsets into that list, while a list
sized to the whole dataset reports absolute positions. ``IndexKind``
lets the host say which one it sends; ``AUTO`` guesses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..models.page_window import PageWindow
from .window_manager import clamp_page, compute_window, page_from_index

logger = logging.getLogger(__name__)


class IndexKind(Enum):
    GLOBAL = "global"
    RELATIVE = "relative"
    AUTO = "auto"


@dataclass(frozen=True)
class ViewportUpdate:
    """Outcome of one visible-range report."""

    kind: IndexKind
    top_page: int
    bottom_page: int
    current_page: int
    page_changed: bool
    max_accessible_page: int
    window: PageWindow
    window_changed: bool
    jumped: bool
    pending_page: Optional[int]


class ViewportMapper:
    """Stateless mapping from visible ranges to session updates."""

    def __init__(
        self,
        *,
        page_size: int,
        total_pages: int,
        window_size: int,
        prefetch_threshold_pages: int = 1,
    ) -> None:
        self.page_size = page_size
        self.total_pages = total_pages
        self.window_size = window_size
        self.prefetch_threshold_pages = prefetch_threshold_pages

    # ------------------------------------------------------------------ #
    # index interpretation
    # ------------------------------------------------------------------ #

    def resolve_kind(
        self,
        start_index: int,
        stop_index: int,
        kind: IndexKind,
        window: PageWindow,
        materialized_count: int,
    ) -> IndexKind:
        """Decide whether an ``AUTO`` range is relative or global."""
        if kind is not IndexKind.AUTO:
            return kind

        offset = window.offset(self.page_size)
        relative_top = page_from_index(offset + start_index, self.page_size)
        relative_bottom = page_from_index(offset + stop_index, self.page_size)
        fits_window = relative_top in window and relative_bottom in window
        within_list = start_index < materialized_count and stop_index < materialized_count

        return IndexKind.RELATIVE if fits_window and within_list else IndexKind.GLOBAL

    def to_global(
        self, start_index: int, stop_index: int, kind: IndexKind, window: PageWindow
    ) -> Tuple[int, int]:
        if kind is IndexKind.RELATIVE:
            offset = window.offset(self.page_size)
            return offset + start_index, offset + stop_index
        return start_index, stop_index

    # ------------------------------------------------------------------ #
    # mapping
    # ------------------------------------------------------------------ #

    def map_range(
        self,
        start_index: int,
        stop_index: int,
        *,
        window: PageWindow,
        current_page: int,
        max_accessible_page: int,
        materialized_count: int,
        kind: IndexKind = IndexKind.AUTO,
        pending_page: Optional[int] = None,
    ) -> ViewportUpdate:
        """
        Compute the session update for one visible-range report.

        The window jumps (recenters on the new current page) whenever the
        visible pages are not fully inside it; otherwise it slides toward
        whichever edge the viewport is close to.
        """
        start_index, stop_index = max(0, start_index), max(0, stop_index)
        if stop_index < start_index:
            start_index, stop_index = stop_index, start_index

        if self.total_pages < 1:
            return ViewportUpdate(
                kind=kind, top_page=current_page, bottom_page=current_page,
                current_page=current_page, page_changed=False,
                max_accessible_page=max_accessible_page, window=window,
                window_changed=False, jumped=False, pending_page=None,
            )

        resolved = self.resolve_kind(start_index, stop_index, kind, window, materialized_count)
        global_start, global_stop = self.to_global(start_index, stop_index, resolved, window)
        top_page = clamp_page(page_from_index(global_start, self.page_size), self.total_pages)
        bottom_page = clamp_page(page_from_index(global_stop, self.page_size), self.total_pages)

        # A jump target stays the current page for every report that covers it;
        # the first report without it releases the pin
        if pending_page is not None and top_page <= pending_page <= bottom_page:
            next_page = pending_page
        else:
            next_page = top_page
            pending_page = None

        next_max = max(max_accessible_page, min(self.total_pages, max(top_page, bottom_page)))

        should_jump = not (top_page >= window.start_page and bottom_page <= window.end_page)
        if should_jump:
            next_window = compute_window(next_page, self.total_pages, self.window_size)
        else:
            next_window = self._slide(window, top_page, bottom_page)

        window_changed = next_window != window
        if window_changed:
            logger.debug(
                f"{'Jump' if should_jump else 'Slide'} window "
                f"{window.start_page}-{window.end_page} -> "
                f"{next_window.start_page}-{next_window.end_page}"
            )

        return ViewportUpdate(
            kind=resolved,
            top_page=top_page,
            bottom_page=bottom_page,
            current_page=next_page,
            page_changed=next_page != current_page,
            max_accessible_page=next_max,
            window=next_window,
            window_changed=window_changed,
            jumped=should_jump,
            pending_page=pending_page,
        )

    def _slide(self, window: PageWindow, top_page: int, bottom_page: int) -> PageWindow:
        threshold = self.prefetch_threshold_pages
        near_top = top_page < window.start_page + threshold
        near_bottom = bottom_page > window.end_page - threshold

        if near_top and window.start_page > 1:
            return compute_window(top_page, self.total_pages, self.window_size)
        if near_bottom and window.end_page < self.total_pages:
            return compute_window(bottom_page, self.total_pages, self.window_size)
        return window
