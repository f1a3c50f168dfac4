"""
Channel Extractor Service
Search -> per-video detail fetch -> normalized VideoRecord sequence
"""

import logging
import time
from typing import Callable, List, Optional

from .video_record import ParseFailure, VideoRecord, normalize_video
from .video_source import DetailFetchFailure, SearchFailure, SearchHit, VideoSource

logger = logging.getLogger(__name__)

DEFAULT_FETCH_DELAY = 0.1
DEFAULT_SEARCH_LIMIT = 50


class ChannelExtractor:
    """
    Service responsible for extracting video metadata for a channel query.

    Responsibilities:
    - Run one search and keep the first N hits in the service's order.
    - Fetch details sequentially with a courtesy pause between fetches.
    - Normalize each response; log and skip items that fail.
    """

    def __init__(
        self,
        source: VideoSource,
        fetch_delay: float = DEFAULT_FETCH_DELAY,
        search_limit: int = DEFAULT_SEARCH_LIMIT,
        sleep: Callable[[float], None] = time.sleep
    ):
        self._source = source
        self._fetch_delay = fetch_delay
        self._search_limit = search_limit
        self._sleep = sleep

    def extract(self, channel_query: str, max_videos: int) -> List[VideoRecord]:
        """
        Retrieves normalized metadata for up to `max_videos` videos.

        Never raises: search failures and per-item failures are logged and
        result in an empty or shorter list.

        Returns:
            List[VideoRecord]: Successfully normalized videos, in search order.
        """
        if max_videos <= 0:
            logger.info("max_videos is 0, nothing to extract")
            return []

        try:
            hits = self._search(channel_query, max_videos)
        except Exception as e:
            logger.error(f"Error extracting channel info for {channel_query!r}: {e}")
            return []

        if not hits:
            return []

        selected = hits[:max_videos]
        logger.info(f"Found {len(hits)} videos, processing first {len(selected)}...")

        videos: List[VideoRecord] = []
        for index, hit in enumerate(selected):
            if index > 0 and self._fetch_delay > 0:
                self._sleep(self._fetch_delay)

            logger.info(f"Processing video {index + 1}/{len(selected)}: {hit.title or hit.url}")
            record = self._fetch_record(hit)
            if record is not None:
                videos.append(record)

        logger.info(f"Extraction complete: {len(videos)}/{len(selected)} videos collected")
        return videos

    def extract_video(self, url: str) -> Optional[VideoRecord]:
        """Fetch and normalize a single video by URL; None on failure."""
        return self._fetch_record(SearchHit(url=url))

    def _search(self, channel_query: str, max_videos: int) -> List[SearchHit]:
        logger.info(f"Searching for channel: {channel_query}")
        limit = max(self._search_limit, max_videos)

        try:
            hits = self._source.search(channel_query, limit)
        except SearchFailure as e:
            logger.error(f"Search failed: {e}")
            return []

        if not hits:
            logger.warning(f"No videos found for channel: {channel_query}")
            return []

        return list(hits)

    def _fetch_record(self, hit: SearchHit) -> Optional[VideoRecord]:
        label = hit.title or hit.video_id or hit.url
        try:
            details = self._source.get_details(hit.url)
            return normalize_video(hit, details)
        except ParseFailure as e:
            logger.warning(f"Skipping video with malformed metadata: {label} ({hit.url}) - {e}")
        except DetailFetchFailure as e:
            logger.warning(f"Error processing video: {label} ({hit.url}) - {e}")
        except Exception as e:
            logger.error(f"Unexpected error processing video: {label} ({hit.url}) - {e}")
        return None
