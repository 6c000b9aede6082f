# infinite_paper/core/item_projector.py

from __future__ import annotations

from typing import List

from ..models.item_slot import ItemSlot
from ..models.page_window import PageWindow
from .page_store import PageStore


def project_items(window: PageWindow, store: PageStore, page_size: int) -> List[ItemSlot]:
    """
    Flatten the resident window into one slot per item position.

    Every page contributes exactly ``page_size`` slots whether or not it is
    loaded; positions without a loaded item are placeholders.
    """
    slots: List[ItemSlot] = []
    global_index = window.offset(page_size)

    for page in window:
        record = store.get(page)
        items = record.items if record is not None and record.is_loaded else ()
        for index_in_page in range(page_size):
            has_item = index_in_page < len(items)
            slots.append(
                ItemSlot(
                    page=page,
                    index_in_page=index_in_page,
                    global_index=global_index,
                    item=items[index_in_page] if has_item else None,
                    is_placeholder=not has_item,
                )
            )
            global_index += 1

    return slots
