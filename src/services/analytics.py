import re
from datetime import timezone
from typing import List, Optional, Sequence
from dateutil import parser as date_parser
from src.models.analytics import ChannelSnapshot
from src.models.video import VideoRecord

DURATION_RE = re.compile(r"(\d+):(\d+)")
MS_PER_DAY = 1000 * 60 * 60 * 24

UNKNOWN_LENGTH = "Unknown"
NEEDS_DATA = "Needs data"
IRREGULAR = "Irregular"
MULTIPLE_PER_DAY = "Multiple uploads per day"

def _to_int(group: Optional[str]) -> int:
    try:
        return int(group or "0")
    except ValueError:
        return 0

def average_duration(videos: Sequence[VideoRecord]) -> str:
    """Average "mm:ss" hint found in descriptions, e.g. "9.0 min".

    Only the first hint of each description counts; videos without one are
    left out of the average.
    """
    lengths = []
    for video in videos:
        match = DURATION_RE.search(video.description or "")
        if not match:
            continue
        minutes = _to_int(match.group(1))
        seconds = _to_int(match.group(2))
        lengths.append(minutes + seconds / 60)

    if not lengths:
        return UNKNOWN_LENGTH
    avg = sum(lengths) / len(lengths)
    return f"{avg:.1f} min"

def _timestamp_ms(value: str) -> Optional[float]:
    # Strict ISO-8601; partial values such as "12:00" are rejected
    try:
        parsed = date_parser.isoparse(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.timestamp() * 1000
    except (ValueError, OverflowError):
        return None

def upload_cadence(videos: Sequence[VideoRecord]) -> str:
    """Average gap between uploads, e.g. "3.0 days per upload"."""
    if len(videos) < 2:
        return NEEDS_DATA

    timestamps: List[float] = []
    for video in videos:
        ts = _timestamp_ms(video.published_at)
        if ts is not None:
            timestamps.append(ts)
    # Unparseable timestamps leave no gap to measure
    if len(timestamps) < 2:
        return IRREGULAR

    timestamps.sort(reverse=True)
    diffs = [timestamps[idx] - timestamps[idx + 1] for idx in range(len(timestamps) - 1)]
    days = (sum(diffs) / len(diffs)) / MS_PER_DAY

    if days <= 0:
        return IRREGULAR
    if days < 1:
        return MULTIPLE_PER_DAY
    return f"{days:.1f} days per upload"

def build_snapshot(videos: Sequence[VideoRecord]) -> ChannelSnapshot:
    return ChannelSnapshot(
        videos=list(videos),
        latest_upload=videos[0].title if videos else None,
        average_length=average_duration(videos),
        upload_cadence=upload_cadence(videos),
    )
