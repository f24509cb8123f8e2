"""Stateless field validators shared by every section rule.

Each validator inspects one raw value and records its findings in the
``DiagnosticSink`` it is given. None of them raise on bad input.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any
from urllib.parse import urlsplit

from resume_validator.models.diagnostic import DiagnosticSink

PRESENT_MARKER = "present"

CANONICAL_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4, "may": 5, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10, "november": 11,
    "december": 12,
}

# year-month-day, year-month, day-month-year (numeric, any of - / . as separator)
_YMD = re.compile(r"^(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})$")
_YM = re.compile(r"^(\d{4})[-/.](\d{1,2})$")
_DMY = re.compile(r"^(\d{1,2})[-/.](\d{1,2})[-/.](\d{4})$")
_COMPACT = re.compile(r"^(\d{4})(\d{2})(\d{2})$")
# "5 January 2020", "15th Jan 2020", "January 5th, 2020", "Jan 2020"
_D_MON_Y = re.compile(r"^(\d{1,2})(?:st|nd|rd|th)?\s+([A-Za-z]+)\.?,?\s+(\d{4})$")
_MON_D_Y = re.compile(r"^([A-Za-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})$")
_MON_Y = re.compile(r"^([A-Za-z]+)\.?,?\s+(\d{4})$")

# RFC 3986 unreserved, reserved and percent characters
_URI_CHARS = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*$")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_NUMERIC_PORT = re.compile(r":\d+$")


def _month_number(name: str) -> int:
    key = name.lower()
    for full, number in _MONTHS.items():
        if key == full or key == full[:3] or (full == "september" and key == "sept"):
            return number
    raise ValueError(f"Unknown month name: {name!r}")


def parse_date(value: Any) -> date:
    """Parse a calendar date without relying on the current locale.

    Accepts native ``date``/``datetime`` values and the textual forms commonly
    found in resume data. Raises ValueError when nothing matches or the
    resulting day does not exist.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()

    # ISO 8601 date-times ("2020-01-15T10:00:00", "2020-01-15 10:00")
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    m = _YMD.match(text)
    if m:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    m = _YM.match(text)
    if m:
        return date(int(m.group(1)), int(m.group(2)), 1)
    m = _DMY.match(text)
    if m:
        return date(int(m.group(3)), int(m.group(2)), int(m.group(1)))
    m = _COMPACT.match(text)
    if m:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    m = _D_MON_Y.match(text)
    if m:
        return date(int(m.group(3)), _month_number(m.group(2)), int(m.group(1)))
    m = _MON_D_Y.match(text)
    if m:
        return date(int(m.group(3)), _month_number(m.group(1)), int(m.group(2)))
    m = _MON_Y.match(text)
    if m:
        return date(int(m.group(2)), _month_number(m.group(1)), 1)

    raise ValueError(f"Unrecognized date: {text!r}")


def is_present_marker(value: Any) -> bool:
    """True for the open-ended end date marker ("present", any case/padding)."""
    return value is not None and str(value).strip().lower() == PRESENT_MARKER


def validate_date(sink: DiagnosticSink, value: Any, context: str, field_name: str) -> None:
    """Error on unparseable dates, warning on parseable but non-canonical ones."""
    if value is None:
        return
    if isinstance(value, date):
        return

    date_str = str(value).strip()
    try:
        parse_date(date_str)
    except ValueError:
        sink.error(context, f"Invalid date format for '{field_name}': {value}")
        return

    if not CANONICAL_DATE_PATTERN.match(date_str):
        sink.warning(context, f"{field_name} '{date_str}' should be in YYYY-MM-DD format")


def validate_date_or_present(
    sink: DiagnosticSink, value: Any, context: str, field_name: str
) -> None:
    if value is None or is_present_marker(value):
        return
    validate_date(sink, value, context, field_name)


def validate_date_range(
    sink: DiagnosticSink,
    start: Any,
    end: Any,
    context: str,
    start_field: str = "startdate",
    end_field: str = "enddate",
) -> None:
    """Error when ``end`` falls before ``start``.

    Unparseable bounds are ignored here; the per-field check reports them.
    """
    if start is None or end is None:
        return
    if is_present_marker(end):
        return

    try:
        start_d = parse_date(start)
        end_d = parse_date(end)
    except ValueError:
        return

    if end_d < start_d:
        sink.error(
            context,
            f"{end_field} ({end_d.isoformat()}) is before {start_field} ({start_d.isoformat()})",
        )


def validate_durations(sink: DiagnosticSink, durations: Any, context: str) -> None:
    """Structural check of a free-text durations list. Only ever warns."""
    if not isinstance(durations, list):
        return

    if not durations:
        sink.warning(context, "durations array is empty")

    for idx, item in enumerate(durations):
        if isinstance(item, dict) and item.get("duration") is not None:
            if not str(item["duration"]).strip():
                sink.warning(context, f"duration[{idx}] is empty")
        else:
            sink.warning(context, f"duration[{idx}] has invalid structure")


def _split_uri(url: str):
    if not _URI_CHARS.match(url):
        raise ValueError("contains characters not allowed in a URI")
    if _BAD_PERCENT.search(url):
        raise ValueError("malformed percent-encoding")
    parts = urlsplit(url)  # raises on unbalanced IPv6 brackets
    try:
        parts.port
    except ValueError:
        # A numeric port outside 0-65535 is still well-formed.
        if not _NUMERIC_PORT.search(parts.netloc):
            raise
    return parts


def validate_url(sink: DiagnosticSink, value: Any, context: str, field_name: str) -> None:
    """Error on malformed URIs, warning on schemes other than http(s)."""
    if value is None:
        return
    url_str = str(value).strip()
    if not url_str:
        return

    try:
        parts = _split_uri(url_str)
    except ValueError:
        sink.error(context, f"Invalid URL format for '{field_name}': {url_str}")
        return

    if parts.scheme.lower() not in ("http", "https"):
        sink.warning(context, f"{field_name} '{url_str}' should start with http:// or https://")
