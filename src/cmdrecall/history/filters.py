"""Admission control for submitted commands."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence


class FilterRule:
    """A single admission rule. A matching rule rejects the input."""

    name: str = "rule"

    def matches(self, text: str) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class PatternRule(FilterRule):
    """Rejects input containing a match for a regular expression."""

    pattern: str

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"pattern:{self.pattern}"

    def validate(self) -> None:
        """Compile now so a bad pattern surfaces at configuration time."""
        re.compile(self.pattern)

    def matches(self, text: str) -> bool:
        # re caches compiled patterns; a malformed one raises re.error here.
        return re.search(self.pattern, text) is not None


@dataclass(frozen=True)
class PredicateRule(FilterRule):
    """Rejects input for which ``predicate`` returns a truthy value."""

    predicate: Callable[[str], Any]
    label: Optional[str] = None

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.label or getattr(self.predicate, "__name__", "predicate")

    def matches(self, text: str) -> bool:
        return bool(self.predicate(text))


def _is_blank(text: str) -> bool:
    return not text.strip()


def _is_multiline(text: str) -> bool:
    return "\n" in text or "\r" in text


reject_blank = PredicateRule(_is_blank, label="blank")
reject_multiline = PredicateRule(_is_multiline, label="multiline")

DEFAULT_RULES: Sequence[FilterRule] = (reject_blank,)


def first_match(text: str, rules: Iterable[FilterRule]) -> Optional[FilterRule]:
    """Return the first rule that matches ``text``, in configured order.

    Rules after the first match are never evaluated.
    """
    for rule in rules:
        if rule.matches(text):
            return rule
    return None


def should_reject(text: str, rules: Iterable[FilterRule] = DEFAULT_RULES) -> bool:
    """True if any rule matches. An empty rule list admits everything."""
    return first_match(text, rules) is not None


def rules_from_patterns(patterns: Iterable[str]) -> List[FilterRule]:
    """Build pattern rules from configured regex strings."""
    return [PatternRule(pattern) for pattern in patterns]
