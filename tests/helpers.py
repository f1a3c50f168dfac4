"""Shared builders for the test-suite."""

from extraction_pipeline.core.formatting import format_duration
from extraction_pipeline.core.youtube import DetailFetchFailure, SearchHit, VideoRecord, VideoSource


def make_record(title="Video", views=0, duration_seconds=0, publish_date=None, channel_name="Channel"):
    return VideoRecord(
        title=title,
        description="No description",
        duration=format_duration(duration_seconds),
        duration_seconds=duration_seconds,
        views=views,
        publish_date=publish_date,
        url=f"https://www.youtube.com/watch?v={title}",
        video_id=title,
        thumbnail="",
        channel_name=channel_name,
        channel_url="https://www.youtube.com/@channel",
    )


def make_details(video_id, views=100, length=60, title=None):
    return {
        "title": title or f"Title {video_id}",
        "description": f"About {video_id}",
        "length_seconds": length,
        "view_count": views,
        "publish_date": "2024-01-15",
        "video_id": video_id,
        "thumbnails": [{"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"}],
        "author": {"name": "Channel", "channel_url": "https://www.youtube.com/@channel"},
        "keywords": ["tag"],
        "category": "Entertainment",
    }


class FakeSource(VideoSource):
    """In-memory source; `failing` lists video ids whose detail fetch fails."""

    def __init__(self, video_ids, failing=(), details=None, search_error=None):
        self.video_ids = list(video_ids)
        self.failing = set(failing)
        self.details = details or {}
        self.search_error = search_error
        self.search_calls = []
        self.detail_calls = []

    def search(self, query, limit):
        self.search_calls.append((query, limit))
        if self.search_error:
            raise self.search_error
        return [
            SearchHit(url=f"https://www.youtube.com/watch?v={vid}", title=f"Title {vid}", video_id=vid)
            for vid in self.video_ids
        ][:limit]

    def get_details(self, url):
        self.detail_calls.append(url)
        video_id = url.rsplit("=", 1)[-1]
        if video_id in self.failing:
            raise DetailFetchFailure(f"unavailable: {video_id}")
        return self.details.get(video_id) or make_details(video_id)
