"""Canonicalize extracted date and time phrases for storage.

``normalize_date`` returns ``None`` for phrases it cannot parse, while
``normalize_time`` hands unrecognized phrases back unchanged. Both log a
warning instead of raising.
"""

import logging
import re
from datetime import datetime

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

ORDINAL_SUFFIX = re.compile(r"\b(\d+)(?:st|nd|rd|th)\b", re.IGNORECASE)
CLOCK_TIME = re.compile(r"(\d{1,2})(?::(\d{2}))?\s*(AM|PM)", re.IGNORECASE)

# Two defaults that disagree on year, month and day. A phrase missing any of
# those parses differently against each one.
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def normalize_date(phrase: str | None) -> str | None:
    """Convert "Wednesday, February 25th, 2026" into "2026-02-25"."""
    if not phrase:
        return None

    cleaned = ORDINAL_SUFFIX.sub(r"\1", phrase)
    try:
        first, second = (
            date_parser.parse(cleaned, dayfirst=False, default=default)
            for default in _FILL_DEFAULTS
        )
    except (ValueError, OverflowError):
        logger.warning("Failed to parse date: %r -> cleaned: %r", phrase, cleaned)
        return None

    if first.date() != second.date():
        logger.warning("Incomplete date, refusing to guess: %r", phrase)
        return None

    return first.strftime("%Y-%m-%d")


def normalize_time(phrase: str | None) -> str | None:
    """Convert "7 PM" into "19:00:00"; unrecognized input is returned as-is."""
    if not phrase:
        return None

    match = CLOCK_TIME.search(phrase)
    if not match:
        logger.warning("Unrecognized time format, storing as-is: %r", phrase)
        return phrase

    hours = int(match.group(1))
    minutes = match.group(2) or "00"
    period = match.group(3).upper()

    if not 1 <= hours <= 12 or int(minutes) > 59:
        logger.warning("Out-of-range clock time, storing as-is: %r", phrase)
        return phrase

    if period == "PM" and hours != 12:
        hours += 12
    if period == "AM" and hours == 12:
        hours = 0

    return f"{hours:02d}:{minutes}:00"
