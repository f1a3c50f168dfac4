"""
Application Configuration Model
Represents a validated configuration state
"""

from typing import Optional, Tuple


class AppConfig:
    """
    Immutable configuration object for the Channel Video Extractor.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        channel: str = "@MrBeast",
        max_videos: int = 20,
        search_limit: int = 50,
        fetch_delay: float = 0.1,
        source: str = "ytdlp",
        api_key: Optional[str] = None,
        output_dir: str = ".",
        export_formats: Tuple[str, ...] = ("json", "csv"),
        min_views: int = 0,
        sort_by: str = "views",
        descending: bool = True,
        sample_size: int = 3
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            channel: Default channel query (@handle, channel ID, URL or name)
            max_videos: Cap on videos processed per run (>= 0)
            search_limit: Fixed cap on search hits requested (> 0)
            fetch_delay: Pause in seconds between detail fetches (>= 0)
            source: Video source backend ("ytdlp" or "api")
            api_key: YouTube Data API key (required for the "api" source)
            output_dir: Directory receiving the export files
            export_formats: Export formats to write ("json", "csv")
            min_views: Minimum views for the ranked sample
            sort_by: Ranking field ("views", "duration", "publishDate")
            descending: Ranking direction
            sample_size: Number of ranked videos printed after the report
        """
        self._channel = channel
        self._max_videos = max_videos
        self._search_limit = search_limit
        self._fetch_delay = fetch_delay
        self._source = source
        self._api_key = api_key
        self._output_dir = output_dir
        self._export_formats = tuple(export_formats)
        self._min_views = min_views
        self._sort_by = sort_by
        self._descending = descending
        self._sample_size = sample_size

    @property
    def channel(self) -> str:
        """Default channel query."""
        return self._channel

    @property
    def max_videos(self) -> int:
        """Maximum number of videos to process."""
        return self._max_videos

    @property
    def search_limit(self) -> int:
        """Number of search hits requested from the source."""
        return self._search_limit

    @property
    def fetch_delay(self) -> float:
        """Courtesy pause between detail fetches, in seconds."""
        return self._fetch_delay

    @property
    def source(self) -> str:
        """Video source backend."""
        return self._source

    @property
    def api_key(self) -> Optional[str]:
        """YouTube Data API key."""
        return self._api_key

    @property
    def output_dir(self) -> str:
        """Directory for export files."""
        return self._output_dir

    @property
    def export_formats(self) -> Tuple[str, ...]:
        return self._export_formats

    @property
    def min_views(self) -> int:
        """Minimum views threshold for the ranked sample."""
        return self._min_views

    @property
    def sort_by(self) -> str:
        return self._sort_by

    @property
    def descending(self) -> bool:
        return self._descending

    @property
    def sample_size(self) -> int:
        return self._sample_size

    def replace(self, **overrides) -> "AppConfig":
        """Return a copy with the given fields overridden (used for CLI flags)."""
        values = {
            "channel": self._channel,
            "max_videos": self._max_videos,
            "search_limit": self._search_limit,
            "fetch_delay": self._fetch_delay,
            "source": self._source,
            "api_key": self._api_key,
            "output_dir": self._output_dir,
            "export_formats": self._export_formats,
            "min_views": self._min_views,
            "sort_by": self._sort_by,
            "descending": self._descending,
            "sample_size": self._sample_size,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return AppConfig(**values)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"AppConfig(channel={self.channel!r}, "
            f"max_videos={self.max_videos}, "
            f"source={self.source!r}, "
            f"export_formats={self.export_formats!r})"
        )
