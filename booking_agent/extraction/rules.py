"""Rule-table primitives shared by the field extractors."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PatternRule:
    """A single regex rule with its own exclusion filter.

    ``apply`` walks every match in order and returns the first captured value
    that is not excluded. Exclusions are compared case-insensitively.
    """

    name: str
    pattern: re.Pattern[str]
    group: int = 1
    exclude: frozenset[str] = field(default_factory=frozenset)

    def apply(self, text: str) -> str | None:
        if not text:
            return None

        for match in self.pattern.finditer(text):
            value = match.group(self.group)
            if value and value.lower() not in self.exclude:
                return value
        return None


def first_match(rules: Iterable[PatternRule], text: str) -> str | None:
    """Run ``rules`` in precedence order; the first non-empty result wins."""
    for rule in rules:
        value = rule.apply(text)
        if value:
            return value
    return None


def lowered(tokens: Iterable[str]) -> frozenset[str]:
    return frozenset(token.strip().lower() for token in tokens if token.strip())
