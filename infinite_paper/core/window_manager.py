# infinite_paper/core/window_manager.py
"""Decides which contiguous range of pages stays resident."""

from __future__ import annotations

import math

from infinite_paper.models.page_window import PageWindow


def compute_window(target_page: int, total_pages: int, window_size: int) -> PageWindow:
    """
    Center a window of ``window_size`` pages on ``target_page``.

    The window is shifted, never shrunk, when it would run past either end
    of the dataset; it only covers fewer pages when the dataset itself is
    smaller than the window.
    """
    if total_pages < 1:
        return PageWindow.empty()

    window_size = max(1, window_size)
    half = window_size // 2
    start_page = max(1, min(target_page - half, total_pages - window_size + 1))
    end_page = min(total_pages, start_page + window_size - 1)
    return PageWindow(start_page=start_page, end_page=end_page)


def page_from_index(index: int, page_size: int) -> int:
    """1-based page holding the 0-based global ``index``."""
    return index // page_size + 1


def clamp_page(page: float, total_pages: int) -> int:
    """Clamp ``page`` into ``[1, total_pages]`` (``1`` for an empty dataset or NaN)."""
    if isinstance(page, float) and math.isnan(page):
        return 1
    return int(min(max(1, page), max(1, total_pages)))
