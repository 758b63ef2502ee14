"""Human-readable rendering of sizes and timestamps."""

from datetime import datetime
from typing import Optional

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_file_size(size: Optional[int]) -> str:
    """Format a byte count, e.g. ``"0 B"``, ``"512 B"``, ``"1.5 KB"``.

    Whole bytes are shown without decimals, larger units with one.
    Anything past terabytes stays in TB.
    """
    if not size or size <= 0:
        return "0 B"

    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1

    if unit == 0:
        return f"{size} B"
    return f"{value:.1f} {_SIZE_UNITS[unit]}"


def format_timestamp(value: Optional[datetime]) -> str:
    """``YYYY-MM-DD HH:MM:SS``, or ``"-"`` when unknown."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M:%S")
