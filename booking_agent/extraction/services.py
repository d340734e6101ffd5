"""Requested-service detection for barbershop bookings."""

import re
from dataclasses import dataclass

DEFAULT_SERVICE = "appointment"
MENS_HAIRCUT = "men's haircut"
KIDS_HAIRCUT = "kid's haircut"
BEARD_TRIM = "beard trim"


@dataclass(frozen=True)
class ServiceOverride:
    """A summary saying the caller changed their mind replaces all detections."""

    service: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class ServiceDetector:
    service: str
    pattern: re.Pattern[str]
    suppressed_by: str | None = None


SERVICE_OVERRIDES = (
    ServiceOverride(
        BEARD_TRIM,
        re.compile(r"changed.*(?:to|request to)\s+(?:a\s+)?beard\s*trim", re.IGNORECASE),
    ),
    ServiceOverride(
        MENS_HAIRCUT,
        re.compile(
            r"changed.*(?:to|request to)\s+(?:a\s+)?(?:men['’]s\s+)?haircut", re.IGNORECASE
        ),
    ),
)

# Output order is the order of this tuple.
SERVICE_DETECTORS = (
    ServiceDetector(
        MENS_HAIRCUT,
        re.compile(r"\b(?:men['’]s\s+)?haircut\b", re.IGNORECASE),
        suppressed_by=KIDS_HAIRCUT,
    ),
    ServiceDetector(
        KIDS_HAIRCUT,
        re.compile(
            r"\b(?:kid|child)(?:['’]s|s['’]|s)?\s+haircut"
            r"|haircut\s+for\s+(?:his|her|their)\s+(?:son|daughter|child)",
            re.IGNORECASE,
        ),
    ),
    ServiceDetector(BEARD_TRIM, re.compile(r"\bbeard\s*trim\b", re.IGNORECASE)),
)


def detect_services(summary: str) -> list[str]:
    """Return every detected service in ``SERVICE_DETECTORS`` order."""
    summary = summary or ""
    matched = {
        detector.service
        for detector in SERVICE_DETECTORS
        if detector.pattern.search(summary)
    }
    return [
        detector.service
        for detector in SERVICE_DETECTORS
        if detector.service in matched and detector.suppressed_by not in matched
    ]


def extract_service(summary: str) -> str:
    """Return the requested service label; never empty."""
    summary = summary or ""

    for override in SERVICE_OVERRIDES:
        if override.pattern.search(summary):
            return override.service

    services = detect_services(summary)
    if not services:
        return DEFAULT_SERVICE
    return " and ".join(services)
