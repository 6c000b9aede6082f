"""Pagination control descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PaginationItemType(Enum):
    PAGE = "page"
    ELLIPSIS = "ellipsis"
    PREV = "prev"
    NEXT = "next"


@dataclass(frozen=True, slots=True)
class PaginationItem:
    """One control in the pagination bar.

    Only ``PAGE`` items use ``is_current``; only ``PREV``/``NEXT`` use
    ``disabled``. Ellipses carry no page.
    """

    type: PaginationItemType
    page: Optional[int] = None
    is_current: bool = False
    disabled: bool = False

    # ------------- constructors -------------
    @classmethod
    def page_link(cls, page: int, *, is_current: bool = False) -> PaginationItem:
        return cls(PaginationItemType.PAGE, page=page, is_current=is_current)

    @classmethod
    def ellipsis(cls) -> PaginationItem:
        return cls(PaginationItemType.ELLIPSIS)

    @classmethod
    def prev(cls, page: int, *, disabled: bool) -> PaginationItem:
        return cls(PaginationItemType.PREV, page=page, disabled=disabled)

    @classmethod
    def next(cls, page: int, *, disabled: bool) -> PaginationItem:
        return cls(PaginationItemType.NEXT, page=page, disabled=disabled)

    @property
    def is_navigable(self) -> bool:
        """True if activating this item should move to ``page``."""
        return self.page is not None and not self.disabled and not self.is_current
