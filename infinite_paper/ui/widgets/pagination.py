"""
Pagination bar that renders PaginationItem descriptors as buttons
"""

from __future__ import annotations

from typing import Iterable, Optional

from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Label

from infinite_paper.models.pagination import PaginationItem, PaginationItemType


def item_label(item: PaginationItem) -> str:
    """Text shown for a pagination descriptor."""
    if item.type is PaginationItemType.PREV:
        return "< Prev"
    if item.type is PaginationItemType.NEXT:
        return "Next >"
    if item.type is PaginationItemType.ELLIPSIS:
        return "…"
    return str(item.page)


class PageButton(Button):
    """Button bound to the page a descriptor points at."""

    def __init__(self, item: PaginationItem) -> None:
        super().__init__(
            item_label(item),
            variant="primary" if item.is_current else "default",
            disabled=item.disabled,
            classes="page-button",
        )
        self.item = item


class Pagination(Horizontal):
    """
    Pagination bar driven by a list of descriptors
    """

    DEFAULT_CSS = """
    Pagination {
        height: 3;
        align: center middle;
    }

    Pagination > Button {
        min-width: 5;
        margin: 0 1;
    }

    Pagination > .ellipsis {
        padding: 1 1;
    }
    """

    class PageChanged(Message):
        """Page changed message"""
        def __init__(self, page: int) -> None:
            super().__init__()
            self.page = page

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._items: tuple[PaginationItem, ...] = ()

    def update_items(self, items: Iterable[PaginationItem]) -> None:
        """
        Rebuild the bar from new descriptors

        Args:
            items: Output of build_pagination, in display order
        """
        items = tuple(items)
        if items == self._items:
            return
        self._items = items

        self.remove_children()
        widgets = []
        for item in items:
            if item.type is PaginationItemType.ELLIPSIS:
                widgets.append(Label(item_label(item), classes="ellipsis"))
            else:
                widgets.append(PageButton(item))
        if widgets:
            self.mount(*widgets)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Turn a press into a PageChanged message"""
        event.stop()
        if isinstance(event.button, PageButton) and event.button.item.is_navigable:
            self.post_message(self.PageChanged(event.button.item.page))
