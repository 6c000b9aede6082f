"""Flat list entry produced from the resident window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ItemSlot(Generic[T]):
    page: int
    index_in_page: int
    global_index: int
    item: Optional[T] = None
    is_placeholder: bool = True
