"""
Video Record Domain Model
Canonical per-video metadata and the normalizer that builds it
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .video_source import DetailFetchFailure, SearchHit
from ..formatting import format_duration

DEFAULT_DESCRIPTION = "No description"
DEFAULT_CATEGORY = "Unknown"
COUNT_RE = re.compile(r"[0-9]{1,3}(?:,[0-9]{3})+|[0-9]+")


class ParseFailure(DetailFetchFailure):
    """Raised when a numeric field of a detail response is malformed."""
    pass


@dataclass(frozen=True)
class VideoRecord:
    """
    Domain model representing a single video's normalized metadata.
    Immutable once created; `duration` is always derived from `duration_seconds`.
    """
    title: str
    description: str
    duration: str
    duration_seconds: int
    views: int
    publish_date: Optional[str]
    url: str
    video_id: str
    thumbnail: str
    channel_name: str
    channel_url: str
    keywords: Tuple[str, ...] = ()
    category: str = DEFAULT_CATEGORY

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to the export mapping (JSON keys)."""
        return {
            "title": self.title,
            "description": self.description,
            "duration": self.duration,
            "durationSeconds": self.duration_seconds,
            "views": self.views,
            "publishDate": self.publish_date,
            "url": self.url,
            "videoId": self.video_id,
            "thumbnail": self.thumbnail,
            "channelName": self.channel_name,
            "channelUrl": self.channel_url,
            "keywords": list(self.keywords),
            "category": self.category,
        }


def parse_count(value: Any, field_name: str) -> int:
    """
    Parse a non-negative integer from an int, integral float or digit string.

    Raises:
        ParseFailure: If the value is missing, negative or not numeric
    """
    if isinstance(value, bool) or value is None:
        raise ParseFailure(f"Field '{field_name}' is not numeric: {value!r}")

    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ParseFailure(f"Field '{field_name}' is not an integer: {value!r}")
        number = int(value)
    elif isinstance(value, str):
        cleaned = value.strip()
        if not COUNT_RE.fullmatch(cleaned):
            raise ParseFailure(f"Field '{field_name}' is not numeric: {value!r}")
        number = int(cleaned.replace(",", ""))
    else:
        raise ParseFailure(f"Field '{field_name}' has unsupported type {type(value).__name__}")

    if number < 0:
        raise ParseFailure(f"Field '{field_name}' cannot be negative: {number}")

    return number


def normalize_video(hit: SearchHit, details: Dict[str, Any]) -> VideoRecord:
    """
    Map a search hit plus its detail descriptor into one VideoRecord.

    Raises:
        ParseFailure: If length or view count cannot be parsed
    """
    duration_seconds = parse_count(details.get("length_seconds"), "length_seconds")
    views = parse_count(details.get("view_count"), "view_count")

    thumbnails = details.get("thumbnails") or []
    thumbnail = (thumbnails[0] or {}).get("url", "") if thumbnails else ""

    author = details.get("author") or {}

    return VideoRecord(
        title=details.get("title") or hit.title,
        description=details.get("description") or DEFAULT_DESCRIPTION,
        duration=format_duration(duration_seconds),
        duration_seconds=duration_seconds,
        views=views,
        publish_date=details.get("publish_date"),
        url=hit.url,
        video_id=details.get("video_id") or hit.video_id,
        thumbnail=thumbnail or "",
        channel_name=author.get("name") or "",
        channel_url=author.get("channel_url") or "",
        keywords=tuple(details.get("keywords") or []),
        category=details.get("category") or DEFAULT_CATEGORY
    )
