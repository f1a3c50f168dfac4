"""
Video Source Interface
Search and detail capabilities consumed by the channel extractor
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List


class SearchFailure(Exception):
    """Raised when the channel/keyword search fails outright."""
    pass


class DetailFetchFailure(Exception):
    """Raised when detailed info for a single video cannot be retrieved."""
    pass


@dataclass(frozen=True)
class SearchHit:
    """A single search result; only the URL is required downstream."""
    url: str
    title: str = ""
    video_id: str = ""


class VideoSource(ABC):
    """
    External capability providing video search and per-video details.

    get_details() returns a detail descriptor dict with the keys:
    title, description, length_seconds, view_count, publish_date, video_id,
    thumbnails (list of {"url": ...}), author ({"name", "channel_url"}),
    keywords, category.
    """

    @abstractmethod
    def search(self, query: str, limit: int) -> List[SearchHit]:
        """Return up to `limit` hits for the query, in the service's order."""

    @abstractmethod
    def get_details(self, url: str) -> Dict[str, Any]:
        """Return the detail descriptor for one video URL."""
