"""
YouTube Channel Video Extractor
Search a channel, fetch per-video metadata, report and export
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from extraction_pipeline.core.analysis import (
    compute_statistics,
    filter_by_views,
    print_report,
    sort_videos,
)
from extraction_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError
from extraction_pipeline.core.config.config_loader import SUPPORTED_FORMATS, SUPPORTED_SORT_FIELDS
from extraction_pipeline.core.youtube import ChannelExtractor, VideoSource, YouTubeClient, YtDlpClient
from shared.storage import ExportManager

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

logger = logging.getLogger(__name__)


def setup_logging(logs_dir: Path = Path("logs")) -> logging.Logger:
    """Configure logging with file and console handlers."""
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_file = logs_dir / "app.log"

    # Configure logging format
    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # Configure root logger
    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract video metadata for a YouTube channel and export it to JSON/CSV."
    )
    parser.add_argument("channel", nargs="?", help="Channel handle, ID, URL or search text (default from config).")
    parser.add_argument("--max-videos", type=int, help="Maximum number of videos to process.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config.yaml.")
    parser.add_argument("--min-views", type=int, help="Minimum views for the ranked sample.")
    parser.add_argument("--sort-by", choices=SUPPORTED_SORT_FIELDS, help="Ranking field.")
    parser.add_argument("--ascending", action="store_true", help="Rank in ascending order.")
    parser.add_argument("--format", dest="formats", action="append", choices=SUPPORTED_FORMATS,
                        help="Export format; repeat for several (default from config).")
    return parser.parse_args(argv)


def load_configuration(config_path: Path, args: argparse.Namespace) -> AppConfig:
    """Load and validate configuration, then apply CLI overrides."""
    logger.info(f"Loading configuration from: {config_path}")

    loader = ConfigLoader(config_path)
    config = loader.load()

    for name in ("max_videos", "min_views"):
        value = getattr(args, name)
        if value is not None and value < 0:
            raise ConfigValidationError(f"--{name.replace('_', '-')} must be non-negative, got {value}")

    config = config.replace(
        channel=args.channel.strip() if args.channel and args.channel.strip() else None,
        max_videos=args.max_videos,
        min_views=args.min_views,
        sort_by=args.sort_by,
        descending=False if args.ascending else None,
        export_formats=tuple(dict.fromkeys(args.formats)) if args.formats else None
    )

    logger.info("Configuration validated successfully")
    logger.info(f"  Channel: {config.channel}")
    logger.info(f"  Max Videos: {config.max_videos}")
    logger.info(f"  Source: {config.source}")
    logger.info(f"  Exports: {', '.join(config.export_formats) or 'none'}")

    return config


def build_source(config: AppConfig) -> VideoSource:
    """Pick the video source backend named in the configuration."""
    if config.source == "api":
        return YouTubeClient(config.api_key)
    return YtDlpClient()


def run(config: AppConfig, source: VideoSource) -> int:
    """Extract, report and export for one channel. Returns the exit code."""
    print("🚀 YouTube Channel Video Extractor")
    print("=" * 37)

    extractor = ChannelExtractor(
        source,
        fetch_delay=config.fetch_delay,
        search_limit=config.search_limit
    )
    videos = extractor.extract(config.channel, config.max_videos)

    if not videos:
        print("❌ No videos were extracted. Please check the channel name and try again.")
        return 0

    stats = compute_statistics(videos)
    ranked = sort_videos(
        filter_by_views(videos, config.min_views),
        config.sort_by,
        config.descending
    )
    print_report(stats, ranked, config.sample_size)

    exporter = ExportManager(config.output_dir)
    written = exporter.export(videos, config.channel, config.export_formats)

    print("\n✅ Extraction completed successfully!")
    for path in written:
        print(f"📂 {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry for the extractor CLI."""
    args = parse_args(argv)
    setup_logging()

    try:
        config = load_configuration(args.config, args)
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        return 1
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        return 1

    try:
        return run(config, build_source(config))
    except Exception:
        logger.exception("Unhandled error during extraction")
        return 1


if __name__ == "__main__":
    sys.exit(main())
