from typing import Any, Dict, List, Optional
from src.config import settings
from src.models.video import VideoRecord, WATCH_URL
from src.utils.logger import logger
from src.utils.xmlmap import parse_markup

def _first(value: Any) -> Any:
    if isinstance(value, list):
        return value[0] if value else None
    return value

def _text(value: Any) -> Optional[str]:
    value = _first(value)
    # Elements carrying attributes come back as dicts with the text under "#text"
    if isinstance(value, dict):
        value = value.get("#text")
    if value is None:
        return None
    return str(value)

def _attr(value: Any, name: str) -> Optional[str]:
    value = _first(value)
    if isinstance(value, dict):
        return value.get("@" + name)
    return None

def _as_entries(feed: Any) -> List[Dict[str, Any]]:
    if not isinstance(feed, dict):
        return []
    entries = feed.get("entry")
    if entries is None:
        return []
    # A feed with a single <entry> yields a bare object instead of a list
    if not isinstance(entries, list):
        entries = [entries]
    return [e for e in entries if e]

def project_entry(entry: Any) -> VideoRecord:
    if not isinstance(entry, dict):
        logger.warning("Feed entry has no child elements, using defaults")
        return VideoRecord(link=WATCH_URL.format(video_id=""))

    video_id = _text(entry.get("yt:videoId")) or ""
    author = _first(entry.get("author"))
    media = _first(entry.get("media:group"))
    if not isinstance(media, dict):
        media = {}

    author_name = _text(author.get("name")) if isinstance(author, dict) else None

    return VideoRecord(
        id=video_id,
        title=_text(entry.get("title")) or "",
        author=author_name or "Unknown",
        link=_attr(entry.get("link"), "href") or WATCH_URL.format(video_id=video_id),
        published_at=_text(entry.get("published")) or "",
        thumbnail=_attr(media.get("media:thumbnail"), "url") or "",
        description=_text(media.get("media:description")) or "",
    )

def normalize_feed(content: str, limit: Optional[int] = None) -> List[VideoRecord]:
    """Turn a raw feed document into at most ``limit`` records, in feed order.

    Raises MalformedFeed when ``content`` is not XML. A well-formed document
    without entries yields an empty list.
    """
    if limit is None:
        limit = settings.MAX_FEED_ITEMS
    document = parse_markup(content)
    entries = _as_entries(document.get("feed"))
    if len(entries) > limit:
        logger.debug(f"Feed has {len(entries)} entries, keeping the first {limit}")
    records = [project_entry(entry) for entry in entries[:limit]]
    logger.info(f"Normalized {len(records)} feed entries")
    return records
