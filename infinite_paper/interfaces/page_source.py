# infinite_paper/interfaces/page_source.py

from typing import Any, Sequence

class PageSource:
    """
    Interface for whatever backs the paginated dataset.

    The session only ever calls ``fetch_page``; how pages are produced
    (HTTP, database, in-memory) is up to the implementation.
    """

    async def fetch_page(self, page: int) -> Sequence[Any]:
        """
        Fetch one page of items.

        Args:
            page: 1-based page number

        Returns:
            Items of that page, ideally exactly ``page_size`` of them

        Raises:
            Any exception. The failure is attached to the page record and
            the page can be retried with ``reload_page``.
        """
        raise NotImplementedError("Subclasses must implement this method")
