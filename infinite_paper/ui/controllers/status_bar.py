# infinite_paper/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from textual.widgets import Static

from infinite_paper.core.paper import InfinitePaper
from infinite_paper.models.page_record import PageStatus


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar

    def update(self, paper: InfinitePaper) -> None:
        """Refresh the whole status line from a session."""
        self._bar.update(self.build_text(paper))

    @staticmethod
    def build_text(paper: InfinitePaper) -> str:
        window = paper.page_window
        statuses = [record.status for record in paper.pages.values()]
        loaded = sum(1 for status in statuses if status is PageStatus.LOADED)
        failed = sum(1 for status in statuses if status is PageStatus.ERROR)

        parts: list[str] = [
            f"Page: {paper.current_page}",
            f"Reached: {paper.max_accessible_page}/{paper.total_pages}",
        ]
        if window.is_empty:
            parts.append("Window: empty")
        else:
            parts.append(f"Window: {window.start_page}-{window.end_page}")
            parts.append(f"Loaded: {loaded}/{len(window)}")
        if failed:
            parts.append(f"Failed: {failed}")
        if paper.is_fetching:
            parts.append("Fetching...")
        return " | ".join(parts)
