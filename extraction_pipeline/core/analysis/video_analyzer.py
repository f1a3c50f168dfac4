"""
Video Analyzer
Aggregate statistics, view filtering and ranking of extracted videos
"""

import pandas as pd
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..youtube.video_record import VideoRecord

SORT_FIELDS = ("views", "duration", "publishDate")
_SORT_ALIASES = {"publish_date": "publishDate", "duration_seconds": "duration"}


@dataclass(frozen=True)
class ChannelStatistics:
    """Aggregates over one extraction run."""
    video_count: int
    total_views: int
    average_views: int
    total_duration_seconds: int
    channel_name: str


def compute_statistics(videos: Sequence[VideoRecord]) -> Optional[ChannelStatistics]:
    """
    Sum views and durations over the batch.

    average_views rounds half up: 3 views over 2 videos -> 2.
    Returns None for an empty batch.
    """
    if not videos:
        return None

    df = pd.DataFrame(
        [(v.views, v.duration_seconds) for v in videos],
        columns=["views", "duration_seconds"]
    )
    count = len(df)
    total_views = int(df["views"].sum())

    return ChannelStatistics(
        video_count=count,
        total_views=total_views,
        average_views=(2 * total_views + count) // (2 * count),
        total_duration_seconds=int(df["duration_seconds"].sum()),
        channel_name=videos[0].channel_name
    )


def filter_by_views(videos: Sequence[VideoRecord], min_views: int) -> List[VideoRecord]:
    """Keep videos with at least `min_views`, preserving order."""
    return [v for v in videos if v.views >= min_views]


def _publish_date_key(video: VideoRecord) -> Tuple[int, int]:
    # Missing or unparseable dates sort as the earliest possible value
    if not video.publish_date:
        return (0, 0)
    ts = pd.to_datetime(video.publish_date, utc=True, errors="coerce")
    if pd.isna(ts):
        return (0, 0)
    return (1, ts.value)


def sort_videos(
    videos: Sequence[VideoRecord],
    sort_by: str = "views",
    descending: bool = True
) -> List[VideoRecord]:
    """
    Return a new list ordered by views, duration or publishDate.

    The sort is stable in both directions: equal keys keep input order.

    Raises:
        ValueError: If sort_by is not a supported field
    """
    field = _SORT_ALIASES.get(sort_by, sort_by)

    if field == "views":
        key = lambda v: v.views
    elif field == "duration":
        key = lambda v: v.duration_seconds
    elif field == "publishDate":
        key = _publish_date_key
    else:
        raise ValueError(f"Unsupported sort field {sort_by!r}; expected one of {', '.join(SORT_FIELDS)}")

    return sorted(videos, key=key, reverse=descending)
