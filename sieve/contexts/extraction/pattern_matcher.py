"""
Pattern matching over request text.

Applies the named patterns from extraction_patterns independently of each
other: overlapping matches from different patterns are all kept. Matches of
one pattern are returned in document order.
"""

import re
from dataclasses import dataclass
from typing import Optional

from sieve.contexts.extraction.exceptions import UnknownPatternError
from sieve.contexts.extraction.extraction_patterns import (
    DEFAULT_CONFIDENCE,
    META_GRAMMARS,
    PATTERN_CONFIDENCE,
    PATTERN_REGISTRY,
    PATTERN_RULES,
    PatternName,
)
from sieve.contexts.extraction.logger import log_pattern_summary


@dataclass(frozen=True)
class PatternMatch:
    """
    A single pattern hit.

    Attributes:
        pattern: Name of the rule that produced it
        value: First capture group (or the whole match)
        confidence: Fixed confidence of the rule
        position: Zero-based offset of the match in the searched text
    """

    pattern: str
    value: str
    confidence: float
    position: int


@dataclass(frozen=True)
class PatternStats:
    """Summary of one pattern's matches in a text."""

    pattern: str
    count: int
    confidence: float
    first_position: Optional[int] = None


def _pattern_key(pattern_name: str | PatternName) -> str:
    return pattern_name.value if isinstance(pattern_name, PatternName) else str(pattern_name)


def pattern_confidence(pattern_name: str | PatternName) -> float:
    """
    Get the fixed confidence for a pattern name.

    Names missing from the confidence table get DEFAULT_CONFIDENCE.
    """
    return PATTERN_CONFIDENCE.get(_pattern_key(pattern_name), DEFAULT_CONFIDENCE)


def _scan(text: str, name: str, regex: re.Pattern) -> list[PatternMatch]:
    """Collect every match of one regex, left to right."""
    confidence = pattern_confidence(name)
    matches = []
    for match in regex.finditer(text):
        value = match.group(1) if regex.groups and match.group(1) else match.group(0)
        matches.append(
            PatternMatch(pattern=name, value=value, confidence=confidence, position=match.start())
        )
    return matches


def find(text: str, pattern_name: str | PatternName) -> list[PatternMatch]:
    """
    Find all matches of one named pattern.

    Args:
        text: Text to search
        pattern_name: Registered pattern name (e.g., "date", PatternName.REQUEST_ID)

    Returns:
        Matches in document order; [] for an unknown name or empty text
    """
    key = _pattern_key(pattern_name)
    rule = PATTERN_REGISTRY.get(key)
    if rule is None or not text:
        return []
    return _scan(text, key, rule.regex)


def find_all(text: str) -> dict[str, list[PatternMatch]]:
    """
    Apply every registered pattern to text.

    Args:
        text: Text to search

    Returns:
        Dict of pattern name to matches, in registry order. Patterns without
        matches are omitted.
    """
    results = {}
    if not text:
        return results

    for rule in PATTERN_RULES:
        matches = _scan(text, rule.name.value, rule.regex)
        if matches:
            results[rule.name.value] = matches

    log_pattern_summary(results)
    return results


def get_pattern_stats(text: str, pattern_name: str | PatternName) -> PatternStats:
    """
    Summarize one pattern's matches in text.

    Raises:
        UnknownPatternError: If pattern_name is not in the registry
    """
    key = _pattern_key(pattern_name)
    if key not in PATTERN_REGISTRY:
        raise UnknownPatternError(key, available=PATTERN_REGISTRY.keys())

    matches = find(text, key)
    return PatternStats(
        pattern=key,
        count=len(matches),
        confidence=pattern_confidence(key),
        first_position=matches[0].position if matches else None,
    )


def extract_meta_info(cv_line: str) -> dict[str, str]:
    """
    Parse a "CV - A - B - C - D - E" tracking line.

    Tries the role-first grammar, then the company-first grammar
    (see MetaLinePatterns). This is a best guess, not a validated parse.

    Args:
        cv_line: One meta line

    Returns:
        Dict of field name to value; {} when neither grammar matches

    Example:
        >>> extract_meta_info("CV - QA Engineer - Playwright - Company - manager - R-12793")
        {'role': 'QA Engineer', 'technology': 'Playwright', 'company': 'Company',
         'manager': 'manager', 'request_id': 'R-12793'}
    """
    if not cv_line:
        return {}

    normalized = re.sub(r"\s+", " ", cv_line).strip()

    for grammar, fields in META_GRAMMARS:
        match = grammar.match(normalized)
        if match:
            return {field: value.strip() for field, value in zip(fields, match.groups())}

    return {}


def extract_dates(text: str) -> list[str]:
    """
    Extract all dates: ISO dates first, then localized dates.

    Each group keeps its own document order.
    """
    iso_dates = [match.value for match in find(text, PatternName.DATE)]
    local_dates = [match.value for match in find(text, PatternName.DATE_RU)]
    return iso_dates + local_dates
