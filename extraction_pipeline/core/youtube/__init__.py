"""
YouTube sources, video records and the channel extractor
"""

from .channel_extractor import ChannelExtractor
from .channel_info import ChannelInfo
from .video_record import ParseFailure, VideoRecord, normalize_video
from .video_source import DetailFetchFailure, SearchFailure, SearchHit, VideoSource
from .youtube_client import ChannelResolutionError, YouTubeClient
from .ytdlp_client import YtDlpClient

__all__ = [
    "ChannelExtractor",
    "ChannelInfo",
    "ChannelResolutionError",
    "DetailFetchFailure",
    "ParseFailure",
    "SearchFailure",
    "SearchHit",
    "VideoRecord",
    "VideoSource",
    "YouTubeClient",
    "YtDlpClient",
    "normalize_video",
]
