# infinite_paper/core/page_store.py

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..errors import PageStateError
from ..models.page_record import PageRecord, PageStatus
from ..models.page_window import PageWindow

logger = logging.getLogger(__name__)


class PageStore:
    """
    Per-page fetch state for the pages of the current window.

    Records are replaced, never mutated in place, so a record handed out
    earlier stays a consistent snapshot. Commits for pages that are no
    longer tracked are ignored.
    """

    def __init__(self) -> None:
        self._records: Dict[int, PageRecord] = {}
        self._next_ticket = 0

    # ------------------------------------------------------------------ #
    # queries
    # ------------------------------------------------------------------ #

    def get(self, page: int) -> Optional[PageRecord]:
        return self._records.get(page)

    def __contains__(self, page: object) -> bool:
        return page in self._records

    def __len__(self) -> int:
        return len(self._records)

    @property
    def pages(self) -> Mapping[int, PageRecord]:
        """Read-only view of the records, keyed by page."""
        return MappingProxyType(self._records)

    def pages_needing_fetch(self, window: PageWindow) -> List[int]:
        """In-window pages that are idle or failed, in page order."""
        return [
            page for page in window
            if page in self._records and self._records[page].needs_fetch
        ]

    def any_loading(self) -> bool:
        return any(record.is_loading for record in self._records.values())

    # ------------------------------------------------------------------ #
    # window alignment
    # ------------------------------------------------------------------ #

    def reconcile(self, window: PageWindow) -> List[int]:
        """
        Align the tracked pages with ``window``.

        Missing pages get an idle record, pages outside the window are
        dropped and in-range records are kept as they are.

        Returns:
            The pages that were dropped, in ascending order
        """
        evicted = sorted(page for page in self._records if page not in window)
        records: Dict[int, PageRecord] = {}
        for page in window:
            records[page] = self._records.get(page) or PageRecord(page=page)
        self._records = records

        if evicted:
            logger.debug(f"Evicted pages {evicted[0]}-{evicted[-1]} ({len(evicted)} total)")
        return evicted

    def clear(self) -> None:
        self._records = {}

    # ------------------------------------------------------------------ #
    # transitions
    # ------------------------------------------------------------------ #

    def mark_loading(self, page: int) -> int:
        """
        Move an idle or failed page to loading.

        Returns:
            The ticket a completion must present to be committed
        """
        record = self._require(page, PageStatus.LOADING)
        if not record.needs_fetch:
            raise PageStateError(page, record.status.value, PageStatus.LOADING.value)
        self._next_ticket += 1
        self._records[page] = record.as_loading(self._next_ticket)
        return self._next_ticket

    def commit_loaded(self, page: int, items: Iterable[Any], ticket: Optional[int] = None) -> bool:
        """Store fetched items. Returns False if the result was stale."""
        record = self._accepts_completion(page, ticket)
        if record is None:
            return False
        self._records[page] = record.as_loaded(tuple(items))
        return True

    def commit_error(self, page: int, error: Any, ticket: Optional[int] = None) -> bool:
        """Attach a fetch failure. Returns False if the result was stale."""
        record = self._accepts_completion(page, ticket)
        if record is None:
            return False
        self._records[page] = record.as_error(error)
        return True

    def invalidate(self, page: int) -> bool:
        """
        Send a loaded or failed page back to idle so it gets fetched again.

        Untracked pages and pages with a fetch in flight are left alone.
        """
        record = self._records.get(page)
        if record is None or record.is_loading:
            return False
        self._records[page] = record.as_idle()
        return True

    # internal
    def _require(self, page: int, target: PageStatus) -> PageRecord:
        record = self._records.get(page)
        if record is None:
            raise PageStateError(page, "untracked", target.value)
        return record

    def _accepts_completion(self, page: int, ticket: Optional[int]) -> Optional[PageRecord]:
        record = self._records.get(page)
        if record is None or not record.is_loading:
            return None
        if ticket is not None and record.ticket != ticket:
            return None
        return record
