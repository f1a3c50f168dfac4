"""
YouTube Data API Client
Video source backed by the YouTube Data API v3
"""

import re
import logging
from typing import Any, Dict, List, Optional
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .channel_info import ChannelInfo
from .video_source import DetailFetchFailure, SearchFailure, SearchHit, VideoSource

logger = logging.getLogger(__name__)

ISO_DURATION_RE = re.compile(r"^P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?$")
VIDEO_ID_RE = re.compile(r"(?:v=|youtu\.be/|/shorts/|/embed/)([\w-]{11})")
MAX_PAGE_SIZE = 50


class ChannelResolutionError(SearchFailure):
    """Exception raised for errors in channel resolution."""
    pass


def parse_iso_duration(duration: str) -> Optional[int]:
    """Convert an ISO-8601 duration (PT1H2M3S) to seconds; None if malformed."""
    match = ISO_DURATION_RE.match(duration or "")
    if not match or not any(match.groups()):
        return None
    days, hours, minutes, seconds = (int(g) if g else 0 for g in match.groups())
    return days * 86400 + hours * 3600 + minutes * 60 + seconds


def extract_video_id(url: str) -> Optional[str]:
    """Pull the 11-character video ID out of a watch/short/embed URL."""
    match = VIDEO_ID_RE.search(url)
    return match.group(1) if match else None


class YouTubeClient(VideoSource):
    """
    YouTube Data API client.

    Channel queries (searched within the channel, newest first):
    - Channel ID (starts with 'UC')
    - Handle (starts with '@')
    - Channel URL (/channel/UC... or /@handle)
    Any other query is a keyword video search.
    """

    def __init__(self, api_key: str, region_code: str = "US"):
        """Initialize the YouTube API service."""
        self._region_code = region_code
        self._categories: Optional[Dict[str, str]] = None
        # static_discovery=False prevents the 'file_cache' warning in logs
        self._service = build('youtube', 'v3', developerKey=api_key, static_discovery=False)

    def search(self, query: str, limit: int) -> List[SearchHit]:
        """Search videos for a channel identifier or keyword query."""
        identifier = query.strip()
        params = {
            "part": "snippet",
            "type": "video",
            "maxResults": min(limit, MAX_PAGE_SIZE),
        }

        if self._is_channel_identifier(identifier):
            channel = self.resolve_channel(identifier)
            logger.info(f"Searching uploads of {channel.title} ({channel.channel_id})")
            params.update(channelId=channel.channel_id, order="date")
        else:
            logger.info(f"Keyword search: {identifier!r}")
            params.update(q=identifier)

        try:
            response = self._service.search().list(**params).execute()
        except HttpError as e:
            raise SearchFailure(f"API error searching for {identifier}: {e}")

        hits = []
        for item in response.get("items", []):
            video_id = item.get("id", {}).get("videoId")
            if not video_id:
                continue
            hits.append(SearchHit(
                url=f"https://www.youtube.com/watch?v={video_id}",
                title=item.get("snippet", {}).get("title", ""),
                video_id=video_id
            ))
        return hits[:limit]

    def get_details(self, url: str) -> Dict[str, Any]:
        """videos.list lookup mapped onto the detail descriptor."""
        video_id = extract_video_id(url)
        if not video_id:
            raise DetailFetchFailure(f"Could not find a video ID in URL: {url}")

        try:
            response = self._service.videos().list(
                part="snippet,contentDetails,statistics",
                id=video_id
            ).execute()
        except HttpError as e:
            raise DetailFetchFailure(f"API error fetching video {video_id}: {e}")

        items = response.get("items", [])
        if not items:
            raise DetailFetchFailure(f"Video not found or private: {video_id}")

        item = items[0]
        snippet = item.get("snippet", {})
        stats = item.get("statistics", {})
        content_details = item.get("contentDetails", {})

        # Thumbnails come keyed by size; keep the smallest-first order
        thumbnails = [
            {"url": thumb["url"]}
            for key in ("default", "medium", "high", "standard", "maxres")
            for thumb in [snippet.get("thumbnails", {}).get(key)]
            if thumb and thumb.get("url")
        ]

        channel_id = snippet.get("channelId", "")
        return {
            "title": snippet.get("title"),
            "description": snippet.get("description"),
            "length_seconds": parse_iso_duration(content_details.get("duration", "")),
            "view_count": stats.get("viewCount"),
            "publish_date": snippet.get("publishedAt"),
            "video_id": item.get("id", video_id),
            "thumbnails": thumbnails,
            "author": {
                "name": snippet.get("channelTitle"),
                "channel_url": f"https://www.youtube.com/channel/{channel_id}" if channel_id else None,
            },
            "keywords": snippet.get("tags", []),
            "category": self._category_title(snippet.get("categoryId")),
        }

    def resolve_channel(self, channel_input: str) -> ChannelInfo:
        """Resolve a channel ID, @handle or channel URL into ChannelInfo."""
        identifier = channel_input.strip()
        channel_id = None

        # 1. Direct Channel ID
        if identifier.startswith("UC") and len(identifier) == 24:
            channel_id = identifier
            logger.info(f"Resolving by channel ID: {channel_id}")

        # 2. Handle (@username)
        elif identifier.startswith("@"):
            channel_id = self._resolve_by_handle(identifier)
            logger.info(f"Resolved handle {identifier} to {channel_id}")

        # 3. Channel URL
        elif identifier.startswith("http"):
            channel_id = self._resolve_from_url(identifier)
            logger.info(f"Resolved URL to {channel_id}")

        if not channel_id:
            raise ChannelResolutionError(f"Could not determine a channel ID for: {identifier}")

        return self._fetch_channel(channel_id)

    @staticmethod
    def _is_channel_identifier(identifier: str) -> bool:
        if identifier.startswith("UC") and len(identifier) == 24:
            return True
        if identifier.startswith("@") and " " not in identifier:
            return True
        return identifier.startswith("http") and ("/channel/" in identifier or "/@" in identifier)

    def _resolve_by_handle(self, handle: str) -> str:
        """Uses channels().list(forHandle=...) for deterministic handle resolution."""
        try:
            response = self._service.channels().list(
                part="id",
                forHandle=handle
            ).execute()

            items = response.get("items", [])
            if not items:
                raise ChannelResolutionError(f"Handle not found: {handle}")

            return items[0]["id"]
        except HttpError as e:
            raise ChannelResolutionError(f"API error resolving handle {handle}: {e}")

    def _resolve_from_url(self, url: str) -> str:
        """Extracts channel ID or Handle from a YouTube URL."""
        if "/channel/" in url:
            match = re.search(r"channel/(UC[\w-]{22})", url)
            if match:
                return match.group(1)

        if "/@" in url:
            match = re.search(r"/(@[\w.-]+)", url)
            if match:
                return self._resolve_by_handle(match.group(1))

        raise ChannelResolutionError(
            f"URL is not a supported channel format (/channel/ or /@): {url}"
        )

    def _fetch_channel(self, channel_id: str) -> ChannelInfo:
        """Fetch the channel snippet to confirm it exists."""
        try:
            response = self._service.channels().list(
                part="snippet",
                id=channel_id
            ).execute()
        except HttpError as e:
            raise ChannelResolutionError(f"API error fetching channel metadata: {e}")

        items = response.get("items", [])
        if not items:
            raise ChannelResolutionError(f"Resolved channel ID does not exist: {channel_id}")

        snippet = items[0].get("snippet", {})
        return ChannelInfo(
            channel_id=channel_id,
            title=snippet.get("title", "Unknown"),
            custom_url=snippet.get("customUrl", "")
        )

    def _category_title(self, category_id: Optional[str]) -> Optional[str]:
        """Human-readable category name; None when unavailable."""
        if not category_id:
            return None
        if self._categories is None:
            self._categories = self._load_categories()
        return self._categories.get(category_id)

    def _load_categories(self) -> Dict[str, str]:
        """One videoCategories.list call per client for the configured region."""
        try:
            response = self._service.videoCategories().list(
                part="snippet",
                regionCode=self._region_code
            ).execute()
        except HttpError as e:
            logger.warning(f"Could not load video categories for {self._region_code}: {e}")
            return {}

        return {
            item["id"]: item.get("snippet", {}).get("title")
            for item in response.get("items", [])
            if item.get("id")
        }
