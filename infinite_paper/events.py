# File: infinite_paper/events.py

from enum import Enum

class EventType(Enum):
    # Viewport events
    PAGE_CHANGED = "page_changed"
    JUMP_REQUESTED = "jump_requested"
    WINDOW_CHANGED = "window_changed"

    # Cache events
    PAGE_EVICTED = "page_evicted"
    PAGE_INVALIDATED = "page_invalidated"

    # Fetch events
    PAGE_LOAD_STARTED = "page_load_started"
    PAGE_LOADED = "page_loaded"
    PAGE_LOAD_FAILED = "page_load_failed"
    RESULT_DISCARDED = "result_discarded"
