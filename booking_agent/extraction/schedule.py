"""Appointment date and time phrase extraction."""

import re

_WEEKDAY = r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"
_MONTH = (
    r"(?:January|February|March|April|May|June|July"
    r"|August|September|October|November|December)"
)

DATE_PATTERN = re.compile(
    _WEEKDAY + r",?\s+(" + _MONTH + r"\s+\d{1,2}(?:st|nd|rd|th)?,?\s+\d{4})",
    re.IGNORECASE,
)
TIME_PATTERN = re.compile(r"\b(\d{1,2}(?::\d{2})?\s*(?:AM|PM))\b", re.IGNORECASE)


def extract_date(summary: str) -> str | None:
    """Return the first "Weekday, Month Day, Year" phrase, weekday included."""
    match = DATE_PATTERN.search(summary or "")
    return match.group(0) if match else None


def extract_time(summary: str) -> str | None:
    match = TIME_PATTERN.search(summary or "")
    return match.group(1) if match else None
