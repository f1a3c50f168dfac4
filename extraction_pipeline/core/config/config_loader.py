"""
Configuration Loader
Loads and validates YAML configuration files
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import yaml

from .app_config import AppConfig

SUPPORTED_SOURCES = ("ytdlp", "api")
SUPPORTED_FORMATS = ("json", "csv")
SUPPORTED_SORT_FIELDS = ("views", "duration", "publishDate")


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates configuration from YAML files.

    Responsibilities:
    - Read YAML configuration file
    - Validate types and value ranges
    - Fill defaults for optional sections
    - Return validated AppConfig instance
    """

    def __init__(self, config_path: Path):
        """
        Initialize ConfigLoader with path to config file.

        Args:
            config_path: Path to YAML configuration file
        """
        self._config_path = config_path

    def load(self) -> AppConfig:
        """
        Load and validate configuration from YAML file.

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
        """
        config_data = self._load_yaml()
        defaults = AppConfig()

        channel = self._validate_channel(config_data, defaults.channel)
        max_videos = self._validate_int(config_data, "max_videos", defaults.max_videos, minimum=0)
        search_limit = self._validate_int(config_data, "search_limit", defaults.search_limit, minimum=1)
        fetch_delay = self._validate_fetch_delay(config_data, defaults.fetch_delay)
        source, api_key = self._validate_source(config_data)

        output = self._validate_output_config(config_data, defaults)
        report = self._validate_report_config(config_data, defaults)

        return AppConfig(
            channel=channel,
            max_videos=max_videos,
            search_limit=search_limit,
            fetch_delay=fetch_delay,
            source=source,
            api_key=api_key,
            output_dir=output["dir"],
            export_formats=output["formats"],
            min_views=report["min_views"],
            sort_by=report["sort_by"],
            descending=report["descending"],
            sample_size=report["sample_size"]
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data."""
        if not self._config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            # An empty file means "all defaults"
            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigValidationError(
                    "Configuration must be a YAML mapping/dictionary"
                )

            return data

        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

    def _validate_channel(self, config: Dict[str, Any], default: str) -> str:
        """Validate channel field."""
        if "channel" not in config:
            return default

        channel = config["channel"]

        if not isinstance(channel, str):
            raise ConfigValidationError(
                f"Field 'channel' must be a string, got {type(channel).__name__}"
            )

        if not channel.strip():
            raise ConfigValidationError("Field 'channel' cannot be empty")

        return channel.strip()

    def _validate_int(
        self,
        config: Dict[str, Any],
        name: str,
        default: int,
        minimum: int,
        label: Optional[str] = None
    ) -> int:
        """Validate an integer field with a lower bound."""
        label = label or name
        if name not in config or config[name] is None:
            return default

        value = config[name]

        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigValidationError(
                f"Field '{label}' must be an integer, got {type(value).__name__}"
            )

        if value < minimum:
            raise ConfigValidationError(
                f"Field '{label}' must be at least {minimum}, got {value}"
            )

        return value

    def _validate_fetch_delay(self, config: Dict[str, Any], default: float) -> float:
        """Validate fetch_delay field (seconds)."""
        if "fetch_delay" not in config or config["fetch_delay"] is None:
            return default

        delay = config["fetch_delay"]

        if isinstance(delay, bool) or not isinstance(delay, (int, float)):
            raise ConfigValidationError(
                f"Field 'fetch_delay' must be a number, got {type(delay).__name__}"
            )

        if delay < 0:
            raise ConfigValidationError(
                f"Field 'fetch_delay' must be non-negative, got {delay}"
            )

        return float(delay)

    def _validate_source(self, config: Dict[str, Any]) -> Tuple[str, Optional[str]]:
        """Validate source backend and the api_key it may require."""
        source = config.get("source", "ytdlp")
        api_key = config.get("api_key")

        if not isinstance(source, str) or source.strip() not in SUPPORTED_SOURCES:
            raise ConfigValidationError(
                f"Field 'source' must be one of {', '.join(SUPPORTED_SOURCES)}, got {source!r}"
            )
        source = source.strip()

        if api_key is not None:
            if not isinstance(api_key, str):
                raise ConfigValidationError(
                    f"Field 'api_key' must be a string, got {type(api_key).__name__}"
                )
            api_key = api_key.strip() or None

        if source == "api" and not api_key:
            raise ConfigValidationError("Field 'api_key' is required when source is 'api'")

        return source, api_key

    def _validate_output_config(self, config: Dict[str, Any], defaults: AppConfig) -> Dict[str, Any]:
        """Validate output section."""
        result = {
            "dir": defaults.output_dir,
            "formats": defaults.export_formats
        }

        if "output" not in config or config["output"] is None:
            return result

        output = config["output"]
        if not isinstance(output, dict):
            raise ConfigValidationError(
                f"Section 'output' must be a mapping, got {type(output).__name__}"
            )

        out_dir = output.get("dir", result["dir"])
        if not isinstance(out_dir, str) or not out_dir.strip():
            raise ConfigValidationError("output.dir must be a non-empty string")
        result["dir"] = out_dir.strip()

        formats = output.get("formats", list(result["formats"]))
        if isinstance(formats, str):
            formats = [formats]
        if not isinstance(formats, list):
            raise ConfigValidationError(
                f"output.formats must be a list, got {type(formats).__name__}"
            )
        for fmt in formats:
            if fmt not in SUPPORTED_FORMATS:
                raise ConfigValidationError(
                    f"output.formats entries must be one of {', '.join(SUPPORTED_FORMATS)}, got {fmt!r}"
                )
        result["formats"] = tuple(dict.fromkeys(formats))

        return result

    def _validate_report_config(self, config: Dict[str, Any], defaults: AppConfig) -> Dict[str, Any]:
        """Validate report section."""
        result = {
            "min_views": defaults.min_views,
            "sort_by": defaults.sort_by,
            "descending": defaults.descending,
            "sample_size": defaults.sample_size
        }

        if "report" not in config or config["report"] is None:
            return result

        report = config["report"]
        if not isinstance(report, dict):
            raise ConfigValidationError(
                f"Section 'report' must be a mapping, got {type(report).__name__}"
            )

        result["min_views"] = self._validate_int(
            report, "min_views", result["min_views"], minimum=0, label="report.min_views"
        )
        result["sample_size"] = self._validate_int(
            report, "sample_size", result["sample_size"], minimum=0, label="report.sample_size"
        )

        sort_by = report.get("sort_by", result["sort_by"])
        if sort_by not in SUPPORTED_SORT_FIELDS:
            raise ConfigValidationError(
                f"report.sort_by must be one of {', '.join(SUPPORTED_SORT_FIELDS)}, got {sort_by!r}"
            )
        result["sort_by"] = sort_by

        descending = report.get("descending", result["descending"])
        if not isinstance(descending, bool):
            raise ConfigValidationError(
                f"report.descending must be boolean, got {type(descending).__name__}"
            )
        result["descending"] = descending

        return result
