"""Time and byte-size unit conversions.

Inputs are parsed leniently: only a leading integer is read (``"12abc"`` is
12, ``"1.9"`` is 1) and anything unparseable counts as 0.
"""

import math
import re
from typing import Any

LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")

BYTE_UNITS: tuple[tuple[int, str], ...] = (
    (1, "byte"),
    (1024, "KB"),
    (1024**2, "MB"),
    (1024**3, "GB"),
    (1024**4, "TB"),
)


def _parse_int(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if (match := LEADING_INT_PATTERN.match(str(value))) is None:
        return 0
    return int(match.group(1))


def time_string_to_seconds(hms: str) -> int:
    """Convert a ``HH:MM:SS`` string to seconds.

    Missing or unparseable components count as 0 and component ranges are not
    validated (``"00:90:00"`` is 5400).
    """
    parts = (str(hms).split(":") + ["", "", ""])[:3]
    hours, minutes, seconds = (_parse_int(part) for part in parts)
    return hours * 3600 + minutes * 60 + seconds


def seconds_to_time_string(sec: Any) -> str:
    """Convert seconds to a ``HH:MM:SS`` string.

    Each component is zero-padded to two digits. Hours are not wrapped, so
    ``360000`` seconds gives ``"100:00:00"``.
    """
    hours, rest = divmod(_parse_int(sec), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def milliseconds_to_time_string(ms: Any) -> str:
    """Convert milliseconds to a ``HH:MM:SS`` string, dropping the remainder."""
    return seconds_to_time_string(_parse_int(ms) // 1000)


def bytes_to_human_units(b: Any) -> str:
    """Convert a byte count to a human readable size.

    The sign is dropped. Counts below 1 KB are reported as an integer
    (``"1 byte"``, ``"512 bytes"``), larger ones with two decimals in the
    largest unit that fits below the next threshold (``"1.50 KB"``). Counts
    past the last threshold (1 TB and up) fall back to the raw byte count.

    Args:
        b: Bytes to convert.

    Returns:
        str: e.g. ``"42.00 KB"``, ``"10.00 MB"`` or ``"2.50 GB"``.
    """
    b = abs(_parse_int(b))

    # "byte" is never scaled and the last unit has no upper threshold
    ladder = zip(BYTE_UNITS[1:-1], BYTE_UNITS[2:])
    for (threshold, label), (next_threshold, _) in ladder:
        if threshold <= b < next_threshold:
            return f"{b / threshold:.2f} {label}"

    return f"{b} byte" + ("s" if b > 1 else "")


def bytes_rate_to_human_units(b: Any) -> str:
    """Convert a byte count per second to a human readable rate (``"10.00 MB/s"``)."""
    return bytes_to_human_units(b) + "/s"
