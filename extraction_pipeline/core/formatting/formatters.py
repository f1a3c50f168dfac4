"""
Display Formatters
Duration and view-count rendering for reports and exports
"""

from typing import Union


class InvalidInput(ValueError):
    """Raised when a formatter receives a value outside its contract."""
    pass


def _to_seconds(value: Union[int, str]) -> int:
    """Coerce an int or a digit string into a non-negative second count."""
    if isinstance(value, bool):
        raise InvalidInput(f"Duration must be an integer number of seconds, got {value!r}")

    if isinstance(value, int):
        seconds = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdecimal():
        seconds = int(value.strip())
    else:
        raise InvalidInput(f"Duration must be an integer number of seconds, got {value!r}")

    if seconds < 0:
        raise InvalidInput(f"Duration cannot be negative, got {seconds}")

    return seconds


def format_duration(seconds: Union[int, str]) -> str:
    """
    Format a second count as H:MM:SS, or M:SS when under an hour.

    Args:
        seconds: Non-negative integer, or its decimal string form

    Returns:
        str: e.g. "0:59", "12:05", "1:01:01"

    Raises:
        InvalidInput: If the value is negative or not an integer
    """
    total = _to_seconds(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def parse_duration(text: str) -> int:
    """Inverse of format_duration: "1:01:01" -> 3661."""
    parts = text.strip().split(":") if isinstance(text, str) else []
    if len(parts) not in (2, 3) or not all(p.isascii() and p.isdecimal() for p in parts):
        raise InvalidInput(f"Malformed duration: {text!r}")

    numbers = [int(p) for p in parts]
    if any(n >= 60 for n in numbers[1:]):
        raise InvalidInput(f"Malformed duration: {text!r}")

    if len(numbers) == 2:
        numbers.insert(0, 0)
    hours, minutes, secs = numbers
    return hours * 3600 + minutes * 60 + secs


def format_number(value: int) -> str:
    """Group digits in threes with commas, independent of the runtime locale."""
    return f"{value:,}"
