"""Special-request (hairstyle) extraction.

Tiers are tried in priority order against the request window of the summary;
only the first tier that yields a value contributes. The keyword tier scans
the full summary and transcript.
"""

import re
from dataclasses import dataclass

# Text after these markers is confirmation boilerplate, not the request itself.
REQUEST_WINDOW_END = re.compile(r"\. The appointment|\.  The|The appointment")

HAIRSTYLE_TERMS = (
    "low fade",
    "mid fade",
    "high fade",
    "skin fade",
    "bald fade",
    "taper",
    "buzz cut",
    "crew cut",
    "undercut",
    "line up",
    "faded beard",
)


def _mentions(value: str, word: str) -> bool:
    return re.search(rf"\b{re.escape(word)}\b", value, re.IGNORECASE) is not None


@dataclass(frozen=True)
class SpecialRequestTier:
    name: str
    pattern: re.Pattern[str]
    reject: re.Pattern[str] | None = None

    def apply(self, text: str, exclude_names: tuple[str, ...] = ()) -> str | None:
        match = self.pattern.search(text)
        if not match:
            return None

        value = match.group(1).strip()
        if not value:
            return None
        if self.reject is not None and self.reject.search(value):
            return None
        if any(_mentions(value, name) for name in exclude_names):
            return None
        return value


QUOTED_REQUEST = SpecialRequestTier(
    "quoted_request",
    re.compile(r"requesting (?:a\s+)?[\"“]([^\"”]+)[\"”]", re.IGNORECASE),
)
WITH_STYLE = SpecialRequestTier(
    "with_style",
    re.compile(
        r"(?:haircut|trim)\s+with\s+(?:a\s+)?([a-z\s]+?)(?:\s+for|\.|,|$)", re.IGNORECASE
    ),
    reject=re.compile(r"\b(?:his|her|their|my|the|sammy|bobby|johnny)\b", re.IGNORECASE),
)
UNQUOTED_REQUEST = SpecialRequestTier(
    "unquoted_request",
    re.compile(r"requesting\s+(?:a\s+)?([a-z\s]+?)(?:\.|,|\bfor\b)", re.IGNORECASE),
    reject=re.compile(r"\b(?:haircut|appointment|book\w*|his|her)\b", re.IGNORECASE),
)

WINDOW_TIERS = (QUOTED_REQUEST, WITH_STYLE, UNQUOTED_REQUEST)

_HAIRSTYLE_PATTERNS = tuple(
    (term, re.compile(r"\b" + r"\s+".join(map(re.escape, term.split())) + r"\b", re.IGNORECASE))
    for term in HAIRSTYLE_TERMS
)


def request_window(summary: str) -> str:
    return REQUEST_WINDOW_END.split(summary or "", maxsplit=1)[0]


def find_hairstyle_terms(text: str) -> list[str]:
    """Known hairstyle terms present in ``text``, in vocabulary order."""
    return [term for term, pattern in _HAIRSTYLE_PATTERNS if pattern.search(text)]


def extract_special_requests(
    summary: str, transcript: str = "", customer_name: str | None = None
) -> str | None:
    """Style notes for the booking; the caller's own name never counts as a style."""
    window = request_window(summary)
    exclude_names = (customer_name,) if customer_name else ()
    for tier in WINDOW_TIERS:
        value = tier.apply(window, exclude_names)
        if value:
            return value

    terms = find_hairstyle_terms(f"{summary or ''}\n{transcript or ''}")
    return ", ".join(terms) if terms else None
