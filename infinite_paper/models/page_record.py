"""Per-page cache record."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class PageStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class PageRecord(Generic[T]):
    """
    Fetch state of one resident page.

    ``items`` is only set when the page is loaded and ``error`` only when
    the last fetch failed. ``ticket`` identifies the fetch that owns a
    loading record.
    """

    page: int
    status: PageStatus = PageStatus.IDLE
    items: Optional[Tuple[T, ...]] = None
    error: Optional[Any] = None
    ticket: int = 0

    # ------------- helpers -------------
    @property
    def is_loaded(self) -> bool:
        return self.status is PageStatus.LOADED

    @property
    def is_loading(self) -> bool:
        return self.status is PageStatus.LOADING

    @property
    def needs_fetch(self) -> bool:
        return self.status in (PageStatus.IDLE, PageStatus.ERROR)

    def as_loading(self, ticket: int) -> PageRecord[T]:
        return replace(self, status=PageStatus.LOADING, items=None, error=None, ticket=ticket)

    def as_loaded(self, items: Tuple[T, ...]) -> PageRecord[T]:
        return replace(self, status=PageStatus.LOADED, items=items, error=None)

    def as_error(self, error: Any) -> PageRecord[T]:
        return replace(self, status=PageStatus.ERROR, items=None, error=error)

    def as_idle(self) -> PageRecord[T]:
        return PageRecord(page=self.page)
