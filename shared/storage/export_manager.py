"""
Export Manager
Persists extracted video records as JSON and CSV files
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

logger = logging.getLogger(__name__)

CSV_HEADERS = ["Title", "Views", "Duration", "Publish Date", "URL", "Video ID", "Channel Name"]


class ExportFailure(Exception):
    """Raised when an export file cannot be written."""
    pass


def sanitize_channel_id(channel: str) -> str:
    """Replace every character outside [A-Za-z0-9] with '_'."""
    return re.sub(r"[^a-zA-Z0-9]", "_", channel)


def quote_csv_text(value: str) -> str:
    """Wrap in double quotes, doubling any inner quote."""
    return '"' + (value or "").replace('"', '""') + '"'


class ExportManager:
    """
    Service responsible for writing run results to the output directory.

    Responsibilities:
    - Name files after the sanitized channel identifier.
    - Write the full record list as indented JSON.
    - Write the CSV companion with quoted free-text columns.
    - Keep one failing export from affecting the others.

    Records are any objects exposing to_dict() with the VideoRecord export keys.
    """

    def __init__(self, output_dir: str = "."):
        """
        Initialize the ExportManager.

        Args:
            output_dir (str): Directory receiving the export files.
        """
        self._root = Path(output_dir)

    def json_path(self, channel: str) -> Path:
        return self._root / f"{sanitize_channel_id(channel)}_videos.json"

    def csv_path(self, channel: str) -> Path:
        return self._root / f"{sanitize_channel_id(channel)}_videos.csv"

    def write_json(self, videos: Sequence[Any], channel: str) -> Path:
        """
        Writes the records as an indented JSON array.

        Raises:
            ExportFailure: If the file cannot be written
        """
        path = self.json_path(channel)
        content = json.dumps([v.to_dict() for v in videos], indent=2, ensure_ascii=False)
        self._write(path, content)
        logger.info(f"💾 Results saved to: {path}")
        return path

    def write_csv(self, videos: Sequence[Any], channel: str) -> Path:
        """
        Writes the CSV companion file.

        Title and Channel Name are always quoted; other columns are written as-is.

        Raises:
            ExportFailure: If the file cannot be written
        """
        path = self.csv_path(channel)
        lines = [",".join(CSV_HEADERS)]
        lines.extend(self._csv_row(v.to_dict()) for v in videos)
        self._write(path, "\n".join(lines))
        logger.info(f"💾 CSV file saved to: {path}")
        return path

    def export(self, videos: Sequence[Any], channel: str, formats: Iterable[str]) -> List[Path]:
        """
        Writes every requested format; failures are logged and skipped.

        Returns:
            List[Path]: Files written successfully.
        """
        writers = {"json": self.write_json, "csv": self.write_csv}
        written = []

        for fmt in formats:
            writer = writers.get(fmt)
            if writer is None:
                logger.warning(f"Unknown export format skipped: {fmt}")
                continue
            try:
                written.append(writer(videos, channel))
            except ExportFailure as e:
                logger.error(f"❌ Error saving {fmt.upper()} file: {e}")

        return written

    @staticmethod
    def _csv_row(data: Dict[str, Any]) -> str:
        fields = [
            quote_csv_text(data.get("title", "")),
            str(data.get("views", "")),
            data.get("duration") or "",
            data.get("publishDate") or "",
            data.get("url") or "",
            data.get("videoId") or "",
            quote_csv_text(data.get("channelName", "")),
        ]
        return ",".join(fields)

    def _write(self, path: Path, content: str):
        """Creates the output directory on demand and overwrites the file."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise ExportFailure(f"{path}: {e}") from e

    def __repr__(self):
        return f"ExportManager(root={self._root})"
