# infinite_paper/errors.py

class PaperError(Exception):
    """Base class for all infinite_paper errors."""
    pass

class ConfigError(PaperError):
    """Error related to configuration."""
    pass

class PageStateError(PaperError):
    """Illegal page status transition."""

    def __init__(self, page: int, current: str, target: str):
        super().__init__(f"Page {page} cannot move from '{current}' to '{target}'")
        self.page = page
        self.current = current
        self.target = target

class SessionClosedError(PaperError):
    """Operation attempted on a closed session."""
    pass

class PageFetchError(PaperError):
    """Error a page source may raise when a page cannot be produced."""

    def __init__(self, page: int, message: str = "Page fetch failed"):
        super().__init__(f"{message} (page {page})")
        self.page = page
