from typing import Optional

class FeedError(Exception):
    """Base class for failures that abort a whole feed pipeline run."""

class FetchFailure(FeedError):
    """Upstream answered with a non-success status, or the request never completed.

    ``status`` is the upstream HTTP status, or ``None`` when no response arrived.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

class FetchTimeout(FetchFailure):
    """The upstream request timed out before a response arrived."""

    def __init__(self, message: str):
        super().__init__(message, status=None)

class MalformedFeed(FeedError):
    """The response body is not parseable markup."""
