from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
from pydantic import BaseModel
from src.config import settings

FEED_PATH = "/feeds/videos.xml"

class FeedKind(str, Enum):
    TRENDING = "trending"
    CHANNEL = "channel"

class FeedRequest(BaseModel):
    kind: FeedKind
    # Region code for trending feeds, channel id for channel feeds
    value: str

    @classmethod
    def trending(cls, region_code: Optional[str] = None) -> "FeedRequest":
        return cls(kind=FeedKind.TRENDING, value=region_code if region_code is not None else settings.DEFAULT_REGION)

    @classmethod
    def channel(cls, channel_id: str) -> "FeedRequest":
        return cls(kind=FeedKind.CHANNEL, value=channel_id)

    def url(self, base_url: Optional[str] = None) -> str:
        base = (base_url or settings.YOUTUBE_BASE_URL).rstrip("/")
        if self.kind == FeedKind.TRENDING:
            return f"{base}{FEED_PATH}?chart=mostPopular&hl=en&region={self.value}"
        return f"{base}{FEED_PATH}?channel_id={self.value}"

    @property
    def label(self) -> str:
        if self.kind == FeedKind.TRENDING:
            return "trending videos"
        return "channel feed"

class FeedSource(ABC):
    @abstractmethod
    def fetch_feed(self, request: FeedRequest, timeout: Optional[float] = None) -> str:
        """Fetch the raw feed document for a request."""
        pass
