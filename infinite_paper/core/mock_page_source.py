# infinite_paper/core/mock_page_source.py

import asyncio
import logging
from typing import Callable, Iterable, List, Optional

from ..errors import PageFetchError
from ..interfaces.page_source import PageSource

logger = logging.getLogger(__name__)

class MockPageSource(PageSource):
    """In-memory page source for the demo host and for tests."""

    def __init__(
        self,
        page_size: int,
        total_items: int,
        *,
        latency: float = 0.0,
        failing_pages: Iterable[int] = (),
        item_factory: Optional[Callable[[int], object]] = None,
    ):
        self.page_size = page_size
        self.total_items = total_items
        self.latency = latency
        self.failing_pages = set(failing_pages)
        self.item_factory = item_factory or (lambda index: f"Article #{index + 1}")
        self.calls: List[int] = []
        logger.info(f"MockPageSource initialized with {total_items} items")

    @property
    def total_pages(self) -> int:
        return (self.total_items + self.page_size - 1) // self.page_size

    async def fetch_page(self, page: int) -> List[object]:
        """Produce the items of ``page``, after ``latency`` seconds."""
        self.calls.append(page)
        if self.latency:
            await asyncio.sleep(self.latency)

        if page in self.failing_pages:
            raise PageFetchError(page, "Simulated fetch error")

        start = (page - 1) * self.page_size
        stop = min(start + self.page_size, self.total_items)
        return [self.item_factory(index) for index in range(start, stop)]
