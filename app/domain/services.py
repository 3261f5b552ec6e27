# app/domain/services.py
from __future__ import annotations

import re

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def format_time(time_str: str | None) -> str:
    """
    Convert a 24-hour "HH:MM" string to "H:MM AM/PM".
    Anything that doesn't parse is returned unchanged.
    """
    if not time_str:
        return ""
    hour, sep, rest = time_str.partition(":")
    if not sep:
        return time_str
    try:
        h = int(hour.strip())
    except ValueError:
        return time_str
    if not 0 <= h <= 23:
        return time_str
    minute = rest.split(":", 1)[0]
    ampm = "PM" if h >= 12 else "AM"
    return f"{h % 12 or 12}:{minute} {ampm}"


def sanitize_filename(filename: str | None, default: str) -> str:
    """Keep alphanumerics, dot and hyphen; everything else becomes '_'."""
    if not filename:
        return default
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)


def single_line(value: str) -> str:
    """Collapse CR/LF so user text can't add mail headers."""
    return " ".join(value.splitlines())
