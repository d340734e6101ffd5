"""Customer name extraction from call summaries and transcripts.

Rules run in the order they appear in ``SUMMARY_RULES`` and then
``TRANSCRIPT_RULES``; the first rule that yields a non-excluded name wins.
"""

import re

from booking_agent.core.config import ASSISTANT_NAME, EXCLUDED_NAMES
from booking_agent.extraction.rules import PatternRule, first_match, lowered

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

GENERIC_TOKENS = (
    "The",
    "Customer",
    "AI",
    "User",
    "Caller",
    "Assistant",
    "Men",
    "Kids",
    "It",
    "He",
    "She",
    "They",
    "This",
    "There",
)

NAME_EXCLUSIONS = lowered(
    (*WEEKDAYS, *MONTHS, *GENERIC_TOKENS, ASSISTANT_NAME, *EXCLUDED_NAMES)
)

# A capitalized word that is not the start of a possessive ("Men's").
_NAME = r"([A-Z][a-z]+)\b(?!['’])"


def _rule(name: str, pattern: str) -> PatternRule:
    return PatternRule(name=name, pattern=re.compile(pattern), exclude=NAME_EXCLUSIONS)


CHILD_NAME = _rule(
    "child_name",
    r"\b(?i:for\s+(?:their|his|her)\s+(?:son|daughter|child)),\s+" + _NAME,
)
LEADING_SUBJECT = _rule("leading_subject", r"\A\s*" + _NAME + r"\s+(?:successfully|called)\b")
USER_REFERENCE = _rule("user_reference", r"\b(?i:(?:the\s+)?user),?\s+" + _NAME)
FOR_NAME = _rule("for_name", r"\bfor\s+" + _NAME)
CAPITALIZED_WORD = _rule("capitalized_word", r"\b" + _NAME)

SELF_INTRODUCTION = _rule(
    "self_introduction",
    r"(?i:\b(?:my\s+name\s+is|i['’]m|call\s+me|this\s+is))\s+" + _NAME,
)
NAME_IS = _rule("name_is", r"(?i:\bname['’]s)\s+" + _NAME)

SUMMARY_RULES = (CHILD_NAME, LEADING_SUBJECT, USER_REFERENCE, FOR_NAME, CAPITALIZED_WORD)
TRANSCRIPT_RULES = (SELF_INTRODUCTION, NAME_IS)


def extract_name(summary: str, transcript: str = "") -> str | None:
    """Return the customer's first name, or ``None`` when no rule matches."""
    return first_match(SUMMARY_RULES, summary or "") or first_match(
        TRANSCRIPT_RULES, transcript or ""
    )
