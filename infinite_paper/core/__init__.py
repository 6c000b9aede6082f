# infinite_paper/core/__init__.py
from .event_bus import EventBus
from .fetch_coordinator import FetchCoordinator
from .item_projector import project_items
from .mock_page_source import MockPageSource
from .page_store import PageStore
from .pagination_controller import InfinitePagination
from .pagination_renderer import build_pagination
from .paper import InfinitePaper
from .viewport_mapper import IndexKind, ViewportMapper, ViewportUpdate
from .window_manager import compute_window

__all__ = [
    "EventBus",
    "FetchCoordinator",
    "IndexKind",
    "InfinitePagination",
    "InfinitePaper",
    "MockPageSource",
    "PageStore",
    "ViewportMapper",
    "ViewportUpdate",
    "build_pagination",
    "compute_window",
    "project_items",
]

"""
Core components for the infinite_paper package.
"""
