"""
Formatting helpers for durations and counts
"""

from .formatters import InvalidInput, format_duration, format_number, parse_duration

__all__ = ["InvalidInput", "format_duration", "format_number", "parse_duration"]
