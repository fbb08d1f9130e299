"""
Named extraction patterns and their fixed confidences.

The registry is a closed, ordered set of (name, regex, confidence) rules.
Adding a pattern means adding a PatternName member, a rule and (optionally)
a confidence entry; find_all() iterates the rules in declaration order.

Pattern classes follow one convention across the package:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# =============================================================================
# PATTERN NAMES
# =============================================================================


class PatternName(str, Enum):
    """Names of the registered extraction patterns."""

    DATE = "date"
    DATE_RU = "date_ru"
    SALESFORCE_URL = "salesforce_url"
    EMAIL = "email"
    REQUEST_ID = "request_id"
    OPPORTUNITY_ID = "opportunity_id"
    CV_ID = "cv_id"
    LEVEL = "level"
    LEVEL_RU = "level_ru"
    ENGLISH_LEVEL = "english_level"
    LANGUAGE_LEVEL = "language_level"
    TEAM_SIZE = "team_size"
    YEARS_EXPERIENCE = "years_experience"
    LOCATION = "location"
    TIMEZONE = "timezone"


# =============================================================================
# FIELD PATTERNS
# =============================================================================


@dataclass(frozen=True)
class FieldPatterns:
    """
    Regex patterns for typed values in request text.

    Group 1 holds the value; patterns without a group yield the whole match.
    """

    # Dates - e.g., "2025-08-14", "14.08.2025", "1/9/25"
    DATE: re.Pattern = re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")
    DATE_RU: re.Pattern = re.compile(r"\b(\d{1,2}[./]\d{1,2}[./]\d{2,4})\b")

    # Links and contacts
    SALESFORCE_URL: re.Pattern = re.compile(r"(https://[^/\s]*salesforce\.com\S*)")
    EMAIL: re.Pattern = re.compile(r"\b([\w.+-]+@[\w-]+(?:\.[\w-]+)+)\b")

    # Identifiers - e.g., "R-12793", "006e0000012AbCd", "123456"
    REQUEST_ID: re.Pattern = re.compile(r"\b(R-\d{4,6})\b")
    OPPORTUNITY_ID: re.Pattern = re.compile(r"\b(\d{6}e\d{7}[A-Z0-9]+)\b")
    CV_ID: re.Pattern = re.compile(r"\b(\d{6})\b")

    # Seniority
    LEVEL: re.Pattern = re.compile(r"\b(Junior|Middle|Senior|Lead|Principal)\b", re.IGNORECASE)
    LEVEL_RU: re.Pattern = re.compile(r"\b(джуниор|мидл|сеньор|синьор|лид|principal)\b", re.IGNORECASE)

    # Language proficiency, optionally preceded by the language name
    ENGLISH_LEVEL: re.Pattern = re.compile(
        r"(?:английск|english)\S*\s*\S*\s*\b([ABC][12]|Native|Intermediate|Advanced|Elementary)\b",
        re.IGNORECASE,
    )
    LANGUAGE_LEVEL: re.Pattern = re.compile(
        r"\b([ABC][12]|Native|Intermediate|Advanced|Elementary)\b", re.IGNORECASE
    )

    # Quantities - e.g., "5 сотрудников", "3 people", "3+ years"
    TEAM_SIZE: re.Pattern = re.compile(
        r"(\d+)\s*(?:человек|сотрудник|специалист|people|persons?)", re.IGNORECASE
    )
    YEARS_EXPERIENCE: re.Pattern = re.compile(r"(\d+)\+?\s*(?:год|лет|years?)", re.IGNORECASE)

    # Geography and work mode; region codes stay case-sensitive ("US", not "us")
    LOCATION: re.Pattern = re.compile(
        r"\b((?-i:РФ|РБ|EU|US)|Remote|Office|Hybrid|Удален\w*|Офис\w*)\b", re.IGNORECASE
    )
    TIMEZONE: re.Pattern = re.compile(r"\b((?-i:[A-Z]{3,4}))\s*(?:время|timezone)", re.IGNORECASE)


@dataclass(frozen=True)
class PatternRule:
    """One registry entry."""

    name: PatternName
    regex: re.Pattern


# Declaration order is the iteration order of find_all()
PATTERN_RULES = (
    PatternRule(PatternName.DATE, FieldPatterns.DATE),
    PatternRule(PatternName.DATE_RU, FieldPatterns.DATE_RU),
    PatternRule(PatternName.SALESFORCE_URL, FieldPatterns.SALESFORCE_URL),
    PatternRule(PatternName.EMAIL, FieldPatterns.EMAIL),
    PatternRule(PatternName.REQUEST_ID, FieldPatterns.REQUEST_ID),
    PatternRule(PatternName.OPPORTUNITY_ID, FieldPatterns.OPPORTUNITY_ID),
    PatternRule(PatternName.CV_ID, FieldPatterns.CV_ID),
    PatternRule(PatternName.LEVEL, FieldPatterns.LEVEL),
    PatternRule(PatternName.LEVEL_RU, FieldPatterns.LEVEL_RU),
    PatternRule(PatternName.ENGLISH_LEVEL, FieldPatterns.ENGLISH_LEVEL),
    PatternRule(PatternName.LANGUAGE_LEVEL, FieldPatterns.LANGUAGE_LEVEL),
    PatternRule(PatternName.TEAM_SIZE, FieldPatterns.TEAM_SIZE),
    PatternRule(PatternName.YEARS_EXPERIENCE, FieldPatterns.YEARS_EXPERIENCE),
    PatternRule(PatternName.LOCATION, FieldPatterns.LOCATION),
    PatternRule(PatternName.TIMEZONE, FieldPatterns.TIMEZONE),
)

PATTERN_REGISTRY = MappingProxyType({rule.name.value: rule for rule in PATTERN_RULES})

# =============================================================================
# CONFIDENCES
# =============================================================================

DEFAULT_CONFIDENCE = 0.70

# Patterns missing here (date_ru, level_ru, language_level) use DEFAULT_CONFIDENCE
PATTERN_CONFIDENCE = MappingProxyType(
    {
        PatternName.DATE.value: 0.95,
        PatternName.SALESFORCE_URL.value: 0.99,
        PatternName.EMAIL.value: 0.95,
        PatternName.REQUEST_ID.value: 0.95,
        PatternName.OPPORTUNITY_ID.value: 0.90,
        PatternName.CV_ID.value: 0.80,
        PatternName.LEVEL.value: 0.85,
        PatternName.ENGLISH_LEVEL.value: 0.90,
        PatternName.TEAM_SIZE.value: 0.75,
        PatternName.YEARS_EXPERIENCE.value: 0.70,
        PatternName.LOCATION.value: 0.85,
        PatternName.TIMEZONE.value: 0.80,
    }
)

# =============================================================================
# META LINE GRAMMARS
# =============================================================================

# Country / region tokens that identify the country slot of the second grammar
COUNTRY_MARKERS = (
    "РФ",
    "РБ",
    "EU",
    "US",
    "USA",
    "UK",
    "Russia",
    "Belarus",
    "Poland",
    "Georgia",
    "Armenia",
    "Kazakhstan",
    "Uzbekistan",
    "Europe",
    "Россия",
    "Беларусь",
    "Польша",
    "Грузия",
    "Армения",
    "Казахстан",
    "Узбекистан",
    "Европа",
    "США",
)

_COUNTRY_ALTERNATION = "|".join(re.escape(c) for c in COUNTRY_MARKERS)


@dataclass(frozen=True)
class MetaLinePatterns:
    """
    Grammars for the "CV - A - B - C - D - E" tracking line.

    Both grammars read five dash-delimited segments; the last segment takes
    the rest of the line (request ids contain a dash themselves).

    ROLE_FIRST:    CV - role - technology - company - manager - request id
    COMPANY_FIRST: CV - company - manager - country - technology - request id

    The third segment decides between them: a country token selects
    COMPANY_FIRST, anything else ROLE_FIRST.
    """

    ROLE_FIRST: re.Pattern = re.compile(
        r"^CV\s*-\s*([^-]*)-\s*([^-]*)-"
        rf"(?!\s*(?i:{_COUNTRY_ALTERNATION})\s*-)"
        r"\s*([^-]*)-\s*([^-]*)-\s*(.*)$"
    )

    COMPANY_FIRST: re.Pattern = re.compile(
        r"^CV\s*-\s*([^-]*)-\s*([^-]*)-"
        rf"\s*((?i:{_COUNTRY_ALTERNATION}))\s*-"
        r"\s*([^-]*)-\s*(.*)$"
    )


# Field names assigned to the five segments, per grammar, in order
META_GRAMMARS = (
    (MetaLinePatterns.ROLE_FIRST, ("role", "technology", "company", "manager", "request_id")),
    (MetaLinePatterns.COMPANY_FIRST, ("company", "manager", "country", "technology", "request_id")),
)
