"""
yt-dlp Video Source
Search and metadata extraction through the yt-dlp Python API (no credentials)
"""

import logging
import re
from typing import Any, Dict, List, Optional

import yt_dlp

from .video_source import DetailFetchFailure, SearchFailure, SearchHit, VideoSource

logger = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={}"
CHANNEL_ID_RE = re.compile(r"^UC[\w-]{22}$")
CHANNEL_URL_RE = re.compile(r"youtube\.com/(channel/UC[\w-]{22}|@[\w.-]+)")


class YtDlpClient(VideoSource):
    """
    Video source backed by yt-dlp.

    Query handling:
    - Channel ID (UC...), handle (@...) or channel URL: list the channel's /videos tab
    - Anything else: keyword search (ytsearchN:query)
    """

    def __init__(self, extra_opts: Optional[Dict[str, Any]] = None):
        self._base_opts = {
            'quiet': True,
            'no_warnings': True,
            'skip_download': True,
        }
        if extra_opts:
            self._base_opts.update(extra_opts)

    def search(self, query: str, limit: int) -> List[SearchHit]:
        """Flat-extract up to `limit` entries for a channel or keyword query."""
        target = self._channel_listing_url(query)
        if target:
            logger.info(f"Listing channel uploads: {target}")
        else:
            target = f"ytsearch{limit}:{query}"
            logger.info(f"Keyword search: {query!r}")

        opts = dict(self._base_opts, extract_flat='in_playlist', playlistend=limit)

        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                info = ydl.extract_info(target, download=False)
        except Exception as e:
            raise SearchFailure(f"yt-dlp search failed for {query!r}: {e}") from e

        entries = (info or {}).get("entries") or []
        hits = []
        for entry in entries:
            if not entry:
                continue
            video_id = entry.get("id", "")
            url = entry.get("url") or entry.get("webpage_url")
            if not url or not url.startswith("http"):
                if not video_id:
                    continue
                url = WATCH_URL.format(video_id)
            hits.append(SearchHit(url=url, title=entry.get("title") or "", video_id=video_id))

        return hits[:limit]

    def get_details(self, url: str) -> Dict[str, Any]:
        """Extract full metadata for one video without downloading it."""
        opts = dict(self._base_opts, noplaylist=True)

        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                info = ydl.extract_info(url, download=False)
        except Exception as e:
            raise DetailFetchFailure(f"yt-dlp could not extract {url}: {e}") from e

        if not info:
            raise DetailFetchFailure(f"yt-dlp returned no metadata for {url}")

        categories = info.get("categories") or []
        return {
            "title": info.get("title"),
            "description": info.get("description"),
            "length_seconds": info.get("duration"),
            "view_count": info.get("view_count"),
            "publish_date": self._format_upload_date(info.get("upload_date")),
            "video_id": info.get("id"),
            "thumbnails": [
                {"url": t["url"]} for t in info.get("thumbnails") or [] if t.get("url")
            ],
            "author": {
                "name": info.get("channel") or info.get("uploader"),
                "channel_url": info.get("channel_url") or info.get("uploader_url"),
            },
            "keywords": info.get("tags") or [],
            "category": categories[0] if categories else None,
        }

    def _channel_listing_url(self, query: str) -> Optional[str]:
        """Map channel identifiers to their uploads tab, or None for free text."""
        identifier = query.strip()

        if CHANNEL_ID_RE.match(identifier):
            return f"https://www.youtube.com/channel/{identifier}/videos"

        if identifier.startswith("@") and " " not in identifier:
            return f"https://www.youtube.com/{identifier}/videos"

        if identifier.startswith("http"):
            match = CHANNEL_URL_RE.search(identifier)
            if match:
                return f"https://www.youtube.com/{match.group(1)}/videos"

        return None

    @staticmethod
    def _format_upload_date(upload_date: Optional[str]) -> Optional[str]:
        """yt-dlp reports YYYYMMDD; exports use YYYY-MM-DD."""
        if upload_date and len(upload_date) == 8 and upload_date.isdigit():
            return f"{upload_date[:4]}-{upload_date[4:6]}-{upload_date[6:]}"
        return upload_date
