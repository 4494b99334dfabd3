import requests
from typing import List, Optional
from src.core.errors import FetchFailure, FetchTimeout
from src.core.feed import FeedRequest, FeedSource
from src.models.video import VideoRecord
from src.services.normalizer import normalize_feed
from src.utils.xmlmap import decode_markup
from src.utils.logger import logger
from src.config import settings

class YouTubeFeedProvider(FeedSource):
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = base_url or settings.YOUTUBE_BASE_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT

    def _headers(self) -> dict:
        return {
            'User-Agent': settings.USER_AGENT,
            # Always observe live upstream state
            'Cache-Control': 'no-cache',
            'Pragma': 'no-cache',
        }

    def _decode(self, resp) -> str:
        # A charset in Content-Type wins; otherwise the XML declaration decides
        if "charset" in resp.headers.get("Content-Type", "").lower():
            return resp.text
        return decode_markup(resp.content)

    def fetch_feed(self, request: FeedRequest, timeout: Optional[float] = None) -> str:
        url = request.url(self.base_url)
        logger.info(f"Fetching {request.label} from {url}")
        try:
            resp = requests.get(url, headers=self._headers(), timeout=timeout if timeout is not None else self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"Timed out fetching {request.label}: {e}")
            raise FetchTimeout(f"Timed out fetching {request.label}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Could not reach upstream for {request.label}: {e}")
            raise FetchFailure(f"Failed to fetch {request.label} ({e})") from e

        if not 200 <= resp.status_code < 300:
            logger.error(f"Upstream returned {resp.status_code} for {request.label}")
            raise FetchFailure(f"Failed to fetch {request.label} ({resp.status_code})", status=resp.status_code)
        return self._decode(resp)

    def get_videos(self, request: FeedRequest, timeout: Optional[float] = None) -> List[VideoRecord]:
        return normalize_feed(self.fetch_feed(request, timeout=timeout))

    def get_trending(self, region_code: Optional[str] = None) -> List[VideoRecord]:
        return self.get_videos(FeedRequest.trending(region_code))

    def get_channel_latest(self, channel_id: str) -> List[VideoRecord]:
        return self.get_videos(FeedRequest.channel(channel_id))

def get_trending(region_code: str = "US") -> List[VideoRecord]:
    return YouTubeFeedProvider().get_trending(region_code)

def get_channel_latest(channel_id: str) -> List[VideoRecord]:
    return YouTubeFeedProvider().get_channel_latest(channel_id)
