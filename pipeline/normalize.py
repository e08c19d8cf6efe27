"""
Field Normalization

PURE CONVERSION - NO NETWORK

- EMAIL: spoken form ("asha at gmail dot com") -> canonical address
- MOBILE: digits only, last 10 kept (drops country code)
- DURATION: seconds -> "2 min 5 sec"
- VISIT DATE: any parseable date -> ISO 8601 UTC / en-IN display string

None of these raise on bad input; they fall back to empty values.
"""

import logging
import math
import re
from datetime import datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as dtparser

logger = logging.getLogger(__name__)

MOBILE_DIGITS = 10
ZERO_DURATION = "0 sec"

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_WHITESPACE_RE = re.compile(r"\s+")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_AT_RE = re.compile(r"\bat\b")

# Applied in order, before the standalone "at"
_SPOKEN_TOKENS = (
    (re.compile(r"\bat\s+the\s+rate(\s+of)?\b"), "@"),
    (re.compile(r"\b(dot|period|point)\b"), "."),
    (re.compile(r"\bunderscore\b"), "_"),
    (re.compile(r"\b(dash|hyphen)\b"), "-"),
)


# ============================================================================
# EMAIL
# ============================================================================

def spoken_to_email(text: Any) -> str:
    """
    Convert a spoken email address into its written form.

    "Asha dot K at gmail dot com" -> "asha.k@gmail.com"

    Returns "" when the result does not look like an address.
    """
    if text is None:
        return ""
    value = str(text).strip().lower()
    if not value:
        return ""

    if "@" not in value:
        for pattern, replacement in _SPOKEN_TOKENS:
            value = pattern.sub(replacement, value)
    if "@" not in value:
        # Only the last "at" separates local part and domain
        matches = list(_AT_RE.finditer(value))
        if matches:
            last = matches[-1]
            value = value[: last.start()] + "@" + value[last.end():]

    value = _WHITESPACE_RE.sub("", value).strip(".,;")
    if _EMAIL_RE.match(value):
        return value

    logger.debug("Could not resolve spoken email", extra={"length": len(str(text))})
    return ""


# ============================================================================
# MOBILE
# ============================================================================

def clean_mobile(mobile: Any) -> str:
    """Keep digits only, and only the last 10 of them."""
    if mobile is None or mobile == "" or mobile is False:
        return ""
    numeric = _NON_DIGIT_RE.sub("", str(mobile))
    if len(numeric) <= MOBILE_DIGITS:
        return numeric
    return numeric[-MOBILE_DIGITS:]


# ============================================================================
# DURATION
# ============================================================================

def format_duration(seconds: Any) -> str:
    """
    Render a call duration given in seconds.

    125.5 -> "2 min 5 sec 500 ms". Zero components are omitted; missing,
    non-numeric or non-positive input gives "0 sec".
    """
    if seconds is None or isinstance(seconds, bool):
        return ZERO_DURATION
    try:
        value = float(seconds)
    except (TypeError, ValueError):
        return ZERO_DURATION
    if not math.isfinite(value) or value <= 0:
        return ZERO_DURATION

    total_ms = math.floor(value * 1000)
    minutes, remainder = divmod(total_ms, 60_000)
    secs, millis = divmod(remainder, 1000)

    parts = []
    if minutes > 0:
        parts.append(f"{minutes} min")
    if secs > 0:
        parts.append(f"{secs} sec")
    if millis > 0:
        parts.append(f"{millis} ms")
    return " ".join(parts) or ZERO_DURATION


# ============================================================================
# VISIT DATE
# ============================================================================

def parse_visit_date(value: Any) -> Optional[datetime]:
    """
    Parse a visit date into an aware datetime.

    Numbers and all-digit strings are epoch milliseconds. Naive values are
    taken as UTC. The result is always in UTC; dates that cannot be
    represented there (calendar edges) give None.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        text = str(value).strip()
        if not text:
            return None
        if text.isdigit():
            return datetime.fromtimestamp(int(text) / 1000, tz=timezone.utc)
        parsed = dtparser.parse(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        logger.warning(f"Unparseable visit date {value!r}: {e}")
        return None


def to_iso_timestamp(value: Any) -> str:
    """Visit date as ISO 8601 UTC with milliseconds, e.g. 2024-05-01T10:00:00.000Z"""
    parsed = parse_visit_date(value)
    if parsed is None:
        return ""
    return f"{parsed:%Y-%m-%dT%H:%M:%S}.{parsed.microsecond // 1000:03d}Z"


def _display_zone(tz_name: str):
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown display timezone {tz_name!r}, using UTC")
        return timezone.utc


def format_service_time(value: Any, tz_name: str = "Asia/Kolkata") -> str:
    """Visit date for humans, en-IN style: 1/5/2024, 3:30:00 pm"""
    parsed = parse_visit_date(value)
    if parsed is None:
        return ""
    try:
        local = parsed.astimezone(_display_zone(tz_name))
    except OverflowError:
        logger.warning(f"Visit date {value!r} out of range for {tz_name}")
        return ""
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{local.day}/{local.month}/{local.year}, {hour}:{local:%M:%S} {meridiem}"
