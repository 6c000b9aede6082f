# infinite_paper/core/pagination_renderer.py
"""
Builds the numbered pagination bar shown next to an infinite list.

Pages past the furthest page the user has reached are not linked, so the
bar grows as the user scrolls instead of advertising deep pages up front.
"""

from __future__ import annotations

from typing import List

from ..models.pagination import PaginationItem

# Bars with at most this many pages are shown in full
MAX_SLOTS = 7
# Current pages up to this one keep the leading block of pages
LEADING_BLOCK_LIMIT = 4
LEADING_BLOCK_SIZE = 5
# Current pages within this distance of the end keep the trailing block
TRAILING_BLOCK_DISTANCE = 3
TRAILING_BLOCK_SIZE = 5


def build_pagination(current_page: int, max_accessible_page: int) -> List[PaginationItem]:
    """Return prev, page links with ellipses, and next, in display order."""
    if max_accessible_page < 1:
        return []

    total = max_accessible_page
    current = min(max(1, current_page), total)
    items: List[PaginationItem] = [
        PaginationItem.prev(max(1, current - 1), disabled=current <= 1)
    ]

    def add_pages(first: int, last: int) -> None:
        for page in range(first, last + 1):
            items.append(PaginationItem.page_link(page, is_current=page == current))

    if total <= MAX_SLOTS:
        add_pages(1, total)
    elif current <= LEADING_BLOCK_LIMIT:
        add_pages(1, LEADING_BLOCK_SIZE)
        items.append(PaginationItem.ellipsis())
        add_pages(total, total)
    elif current >= total - TRAILING_BLOCK_DISTANCE:
        add_pages(1, 1)
        items.append(PaginationItem.ellipsis())
        add_pages(total - TRAILING_BLOCK_SIZE + 1, total)
    else:
        add_pages(1, 1)
        items.append(PaginationItem.ellipsis())
        add_pages(current - 1, current + 1)
        items.append(PaginationItem.ellipsis())
        add_pages(total, total)

    items.append(PaginationItem.next(min(total, current + 1), disabled=current >= total))
    return items
