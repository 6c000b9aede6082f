"""Resident page range and jump results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PageWindow:
    """Inclusive range of pages kept in memory.

    ``PageWindow.empty()`` (start 1, end 0) stands for a dataset without
    pages and contains nothing.
    """

    start_page: int
    end_page: int

    @classmethod
    def empty(cls) -> PageWindow:
        return cls(start_page=1, end_page=0)

    @property
    def is_empty(self) -> bool:
        return self.end_page < self.start_page

    def __len__(self) -> int:
        return max(0, self.end_page - self.start_page + 1)

    def __contains__(self, page: object) -> bool:
        return isinstance(page, int) and self.start_page <= page <= self.end_page

    def __iter__(self):
        return iter(range(self.start_page, self.end_page + 1))

    def offset(self, page_size: int) -> int:
        """Global index of the first item in the window."""
        return (self.start_page - 1) * page_size


@dataclass(frozen=True, slots=True)
class JumpTarget:
    """Where the host should scroll after ``scroll_to_page``."""

    target_global_index: int
    target_window_offset: int

    @property
    def index_in_window(self) -> int:
        return self.target_global_index - self.target_window_offset
