"""
Statistics, filtering, ranking and console reporting
"""

from .channel_report import print_report, render_sample, render_statistics
from .video_analyzer import ChannelStatistics, compute_statistics, filter_by_views, sort_videos

__all__ = [
    "ChannelStatistics",
    "compute_statistics",
    "filter_by_views",
    "print_report",
    "render_sample",
    "render_statistics",
    "sort_videos",
]
