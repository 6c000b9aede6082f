"""Windowed page cache for infinitely scrolling, paginated lists."""

from infinite_paper.config import PaperOptions, load_config
from infinite_paper.core import (
    EventBus,
    IndexKind,
    InfinitePagination,
    InfinitePaper,
    MockPageSource,
    build_pagination,
    compute_window,
)
from infinite_paper.errors import ConfigError, PageStateError, PaperError, SessionClosedError
from infinite_paper.events import EventType

__all__ = [
    "ConfigError",
    "EventBus",
    "EventType",
    "IndexKind",
    "InfinitePagination",
    "InfinitePaper",
    "MockPageSource",
    "PageStateError",
    "PaperError",
    "PaperOptions",
    "SessionClosedError",
    "build_pagination",
    "compute_window",
    "load_config",
]

__version__ = "0.1.0"
