"""Infinite paper data models."""

from infinite_paper.models.item_slot import ItemSlot
from infinite_paper.models.page_record import PageRecord, PageStatus
from infinite_paper.models.page_window import JumpTarget, PageWindow
from infinite_paper.models.pagination import PaginationItem, PaginationItemType

__all__ = [
    "ItemSlot",
    "JumpTarget",
    "PageRecord",
    "PageStatus",
    "PageWindow",
    "PaginationItem",
    "PaginationItemType",
]
