"""
DataTable showing the item slots of the resident window
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from rich.text import Text
from textual.message import Message
from textual.widgets import DataTable

from infinite_paper.models.item_slot import ItemSlot
from infinite_paper.models.page_record import PageRecord, PageStatus


def slot_text(slot: ItemSlot, record: Optional[PageRecord]) -> Text:
    """Cell content for one slot."""
    if not slot.is_placeholder:
        return Text(str(slot.item))
    if record is not None and record.status is PageStatus.ERROR:
        return Text(f"Failed: {record.error} (r to retry)", style="bold red")
    if record is not None and record.status is PageStatus.LOADED:
        return Text("—", style="dim")
    return Text("Loading...", style="dim italic")


class PaperTable(DataTable):
    """
    Virtual list of the window's slots that reports which rows are visible
    """

    class VisibleRangeChanged(Message):
        """Rows visible in the table, relative to the first slot of the window"""
        def __init__(self, start: int, stop: int) -> None:
            super().__init__()
            self.start = start
            self.stop = stop

    def __init__(
        self,
        *,
        poll_interval: float = 0.1,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True
        self._poll_interval = poll_interval
        self._last_range: Optional[tuple[int, int]] = None

    def on_mount(self) -> None:
        """Set up columns and start watching the viewport"""
        self.add_column("#", key="index", width=8)
        self.add_column("Page", key="page", width=6)
        self.add_column("Item", key="item")
        self.set_interval(self._poll_interval, self._sync_visible_range)

    # ------------------------------------------------------------------ #
    # content
    # ------------------------------------------------------------------ #

    def show_slots(self, slots: Iterable[ItemSlot], pages: Mapping[int, PageRecord]) -> None:
        """Replace every row with the given slots."""
        self.clear()
        for slot in slots:
            self.add_row(
                str(slot.global_index + 1),
                str(slot.page),
                slot_text(slot, pages.get(slot.page)),
                key=str(slot.global_index),
            )
        self._last_range = None

    def update_page(self, slots: Iterable[ItemSlot], record: Optional[PageRecord]) -> None:
        """Refresh the item cells of one page in place."""
        for slot in slots:
            self.update_cell(str(slot.global_index), "item", slot_text(slot, record))

    def scroll_to_slot(self, index_in_window: int) -> None:
        """Bring a row to the top of the viewport and select it."""
        if 0 <= index_in_window < self.row_count:
            self.move_cursor(row=index_in_window, animate=False)
            self.scroll_to(y=index_in_window, animate=False)

    # ------------------------------------------------------------------ #
    # viewport tracking
    # ------------------------------------------------------------------ #

    def visible_range(self) -> Optional[tuple[int, int]]:
        if self.row_count == 0:
            return None
        start = min(int(self.scroll_y), self.row_count - 1)
        visible_rows = max(1, self.size.height - (1 if self.show_header else 0))
        stop = min(self.row_count - 1, start + visible_rows - 1)
        return start, stop

    def _sync_visible_range(self) -> None:
        current = self.visible_range()
        if current is None or current == self._last_range:
            return
        self._last_range = current
        self.post_message(self.VisibleRangeChanged(*current))
