"""Race-time codec - single source of truth for time notation.

Times are stored as integer milliseconds. Display notation is "SS.hh" or
"M:SS.hh". Parsing accepts one or two hundredths digits; a single digit is
tenths ("1:02.5" is 62500 ms, the same as "1:02.50", not "1:02.05").
"""

import re

from swimstats.domain.errors import ValidationError

_WITH_MINUTES = re.compile(r"^([0-9]+):([0-9]{1,2})\.([0-9]{1,2})$")
_WITHOUT_MINUTES = re.compile(r"^([0-9]{1,2})\.([0-9]{1,2})$")


def format_time(ms: int) -> str:
    """Convert milliseconds to display format (M:SS.hh or SS.hh).

    Sub-hundredth milliseconds are truncated. Non-positive values render
    as "0.00".
    """
    if ms <= 0:
        return "0.00"

    total_seconds = ms // 1000
    hundredths = (ms % 1000) // 10
    minutes = total_seconds // 60
    seconds = total_seconds % 60

    if minutes == 0:
        return f"{seconds}.{hundredths:02d}"
    return f"{minutes}:{seconds:02d}.{hundredths:02d}"


def _parse_hundredths(digits: str) -> int:
    # "5" means .50, "05" means .05
    value = int(digits)
    if len(digits) == 1:
        value *= 10
    return value


def parse_time(text: str) -> int:
    """Convert display format to milliseconds.

    Supported formats: "28.45", "28.4", "1:05.32", "16:42.1".

    Args:
        text: Time string as typed by a user

    Returns:
        Time in milliseconds (always > 0)

    Raises:
        ValidationError: If the string is empty, malformed, or out of range
    """
    text = text.strip()
    if not text:
        raise ValidationError("time", "time cannot be empty")

    minutes = 0
    if match := _WITH_MINUTES.match(text):
        minutes = int(match.group(1))
        seconds = int(match.group(2))
        hundredths = _parse_hundredths(match.group(3))
    elif match := _WITHOUT_MINUTES.match(text):
        seconds = int(match.group(1))
        hundredths = _parse_hundredths(match.group(2))
    else:
        raise ValidationError("time", "invalid time format, expected SS.hh or M:SS.hh")

    if seconds >= 60 and minutes > 0:
        raise ValidationError("time", "seconds must be less than 60 when minutes are present")
    if hundredths > 99:
        raise ValidationError("time", "hundredths must be less than 100")

    total_ms = (minutes * 60 + seconds) * 1000 + hundredths * 10
    if total_ms <= 0:
        raise ValidationError("time", "time must be greater than zero")

    return total_ms


def time_difference(time1_ms: int, time2_ms: int) -> str:
    """Format the gap between two times with a sign.

    Positive ("+") means time1 is slower than time2.
    """
    diff = time1_ms - time2_ms
    if diff == 0:
        return "0.00"

    prefix = "+"
    if diff < 0:
        prefix = "-"
        diff = -diff

    return prefix + format_time(diff)


def time_difference_percent(time1_ms: int, time2_ms: int) -> float:
    """Percentage by which time1 is slower than time2 (negative when faster)."""
    if time2_ms == 0:
        return 0.0
    return (time1_ms - time2_ms) / time2_ms * 100
