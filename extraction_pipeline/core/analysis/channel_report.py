"""
Channel Report
Console rendering of the statistics block and the ranked sample
"""

from typing import List, Sequence

from .video_analyzer import ChannelStatistics
from ..formatting import format_duration, format_number
from ..youtube.video_record import VideoRecord


def render_statistics(stats: ChannelStatistics) -> List[str]:
    """Lines of the statistics block, in fixed order."""
    return [
        "📊 CHANNEL STATISTICS:",
        f"📹 Total videos processed: {stats.video_count}",
        f"👀 Total views: {format_number(stats.total_views)}",
        f"📈 Average views per video: {format_number(stats.average_views)}",
        f"⏱️  Total duration: {format_duration(stats.total_duration_seconds)}",
        f"📺 Channel: {stats.channel_name}",
    ]


def render_sample(videos: Sequence[VideoRecord], limit: int = 3) -> List[str]:
    """Lines listing the first `limit` videos of an already ranked list."""
    if limit <= 0 or not videos:
        return []

    lines = ["📝 SAMPLE VIDEOS:"]
    for index, video in enumerate(videos[:limit], 1):
        lines.extend([
            f"{index}. {video.title}",
            f"   👀 Views: {format_number(video.views)}",
            f"   ⏱️  Duration: {video.duration}",
            f"   🔗 URL: {video.url}",
        ])
    return lines


def print_report(stats: ChannelStatistics, ranked: Sequence[VideoRecord], sample_size: int = 3):
    """Print the statistics block followed by the ranked sample."""
    print("\n" + "\n".join(render_statistics(stats)))

    sample = render_sample(ranked, sample_size)
    if sample:
        print("\n" + "\n".join(sample))
