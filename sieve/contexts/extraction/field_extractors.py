"""
Typed field extraction from numbered request items.

Structured requests put each field under a fixed item number (see
REQUEST_FIELD_ITEMS). Extractors here read those items, fall back to the
whole text where that makes sense, and report a confidence for what they
found. None of them raise on odd input; an unusable item yields a result
with value None (or an empty collection) and confidence 0.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from sieve.contexts.extraction.extraction_patterns import PatternName
from sieve.contexts.extraction.pattern_matcher import (
    extract_dates,
    extract_meta_info,
    find,
)

NOT_AVAILABLE = "N/A"

# Field name -> item number
REQUEST_FIELD_ITEMS = MappingProxyType(
    {
        "industry": 1,
        "domain": 2,
        "solution_type": 3,
        "expected_load": 4,
        "levels": 6,
        "required_level": 7,
        "min_english_level": 8,
        "additional_language": 10,
        "min_additional_language_level": 11,
        "team_size": 12,
        "working_hours": 13,
        "detailed_requirements": 14,
        "technologies": 15,
        "collaboration_duration": 17,
        "client_deadline": 20,
        "sales_manager": 22,
        "regional_group": 23,
        "required_location": 24,
        "project_status": 27,
        "project_coordinator": 31,
        "primary_request_details": 33,
        "sales_manager_summary": 34,
        "vendor_experience": 35,
    }
)

# Base confidence per extraction method
METHOD_CONFIDENCE = MappingProxyType({"regex": 0.9, "nlp": 0.7, "hybrid": 0.8, "pattern": 0.85})

# Item contents that mean "no data"
EMPTY_VALUES = frozenset(
    {
        "н/д",
        "нет данных",
        "отсутствует",
        "нет",
        "no data",
        "n/a",
        "na",
        "not available",
        "-",
        "--",
        "—",
        "–",
        "...",
        "tbd",
        "tbc",
    }
)


# =============================================================================
# RESULT TYPE AND HELPERS
# =============================================================================


@dataclass
class ExtractionResult:
    """
    Outcome of one field extractor.

    Attributes:
        value: Extracted value (None when nothing usable was found)
        confidence: Score in [0, 1], two decimals
        method: One of regex, nlp, hybrid, pattern
        source: Text the value was read from
        metadata: Extractor-specific details
    """

    value: Any
    confidence: float
    method: str
    source: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


def normalize_value(value: Any) -> Any:
    """Strip strings; blank strings become None."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def create_result(
    value: Any,
    confidence: float,
    method: str,
    source: Optional[str] = None,
    metadata: Optional[dict[str, Any]] = None,
) -> ExtractionResult:
    """Build an ExtractionResult with clamped, rounded confidence and a normalized value."""
    return ExtractionResult(
        value=normalize_value(value),
        confidence=round(min(max(confidence, 0.0), 1.0), 2),
        method=method,
        source=source,
        metadata=metadata or {},
    )


def evaluate_field(value: Any, method: str) -> float:
    """
    Base confidence for a value extracted with a given method.

    Args:
        value: Extracted value
        method: Extraction method name

    Returns:
        0 for None or "N/A", else the method's base confidence
    """
    if value is None or value == NOT_AVAILABLE:
        return 0.0
    return METHOD_CONFIDENCE[method]


def aggregate_confidence(field_confidences: Mapping[str, float]) -> float:
    """Mean of field confidences (0 when there are none)."""
    values = list(field_confidences.values())
    if not values:
        return 0.0
    return sum(values) / len(values)


def normalize_field_value(value: Any) -> Any:
    """Convert empty-looking values (None, blank, "-", "No data") to "N/A"."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, str) and (not value.strip() or value in ("-", "No data")):
        return NOT_AVAILABLE
    return value


def is_empty_value(value: Optional[str]) -> bool:
    """Check if an item's content means "no data"."""
    return value is None or not value.strip() or value.strip().lower() in EMPTY_VALUES


def find_in_numbered_list(
    numbered_list: Mapping[int, str], item_numbers: tuple[int, ...]
) -> Optional[str]:
    """Return the first present, non-"N/A" item among item_numbers."""
    for number in item_numbers:
        value = numbered_list.get(number)
        if value and value != NOT_AVAILABLE:
            return value
    return None


# Fields whose item repeats its own label before the value
FIELD_LABELS = MappingProxyType(
    {
        "sales_manager": ("Сейлс менеджер", "Sales manager"),
        "project_coordinator": ("Проектный координатор", "Project coordinator"),
    }
)

NA_MARKER = re.compile(r"(?<!\w)n/a(?!\w)", re.IGNORECASE)


def strip_field_label(field_name: str, value: str) -> str:
    """
    Remove the field's own label from the start of an item.

    Spellings of "n/a" become "N/A"; an item holding nothing but the label
    gives "N/A". Fields without a label in FIELD_LABELS only get the
    "N/A" cleanup.

    Example:
        >>> strip_field_label("sales_manager", "Сейлс менеджер Ivan Petrov")
        'Ivan Petrov'
    """
    for label in FIELD_LABELS.get(field_name, ()):
        value = re.sub(rf"^\s*{re.escape(label)}\s*:?\s*", "", value, flags=re.IGNORECASE)
    return NA_MARKER.sub(NOT_AVAILABLE, value).strip() or NOT_AVAILABLE


def extract_list_field(numbered_list: Mapping[int, str], field_name: str) -> ExtractionResult:
    """
    Read a mapped field straight from its numbered item.

    Labelled fields (FIELD_LABELS) have their label stripped first.

    Args:
        numbered_list: Item number -> text
        field_name: Key of REQUEST_FIELD_ITEMS

    Raises:
        KeyError: If field_name isn't mapped to an item
    """
    value = find_in_numbered_list(numbered_list, (REQUEST_FIELD_ITEMS[field_name],))
    if value is None:
        return create_result(None, 0, "pattern")

    source = value
    if field_name in FIELD_LABELS:
        value = strip_field_label(field_name, value)
    return create_result(value, evaluate_field(value, "pattern"), "pattern", source=source)


# =============================================================================
# DEVELOPER GRADE
# =============================================================================

GRADE_ALIASES = MappingProxyType(
    {
        "jun": "Junior",
        "junior": "Junior",
        "mid": "Middle",
        "middle": "Middle",
        "sen": "Senior",
        "senior": "Senior",
        "strong": "Senior",
        "lead": "Lead",
        "arch": "Architect",
        "architect": "Architect",
        "principal": "Principal",
        "expert": "Principal",
        "sdet": "SDET",
        "testops": "TestOps",
    }
)

# Only these grades take +, ++, - or --
MODIFIABLE_GRADES = frozenset({"Junior", "Middle", "Senior"})

GRADE_MODIFIER = re.compile(r"[+\-]{1,2}")
GRADE_SEPARATORS = re.compile(r"[,;/–—]")
GRADE_NOISE = re.compile(r"[^a-z0-9+\-\s]")


def _grade_tokens(text: str) -> list[str]:
    spaced = GRADE_MODIFIER.sub(lambda match: f" {match.group(0)} ", text.lower())
    spaced = GRADE_SEPARATORS.sub(" ", spaced)
    return GRADE_NOISE.sub("", spaced).split()


def extract_developer_grade(
    text: str, numbered_list: Optional[Mapping[int, str]] = None
) -> ExtractionResult:
    """
    Extract developer grades (Junior, Middle+, Lead, SDET, ...).

    Reads item 6 when present, otherwise the whole text. A modifier token
    attaches to the grade token right before it, and only to Junior, Middle
    or Senior.

    Args:
        text: Full request text
        numbered_list: Item number -> text

    Returns:
        ExtractionResult with a deduplicated list of grades
        (confidence 0.99, or 0.4 when none were found)

    Example:
        >>> extract_developer_grade("", {6: "Middle+, Senior / Lead+"}).value
        ['Middle+', 'Senior', 'Lead']
    """
    grade_text = (numbered_list or {}).get(REQUEST_FIELD_ITEMS["levels"]) or text or ""

    grades = []
    after_grade = False
    for token in _grade_tokens(grade_text):
        canonical = GRADE_ALIASES.get(token)
        if canonical:
            grades.append(canonical)
            after_grade = True
        elif GRADE_MODIFIER.fullmatch(token) and after_grade:
            # Only right after a grade: "Senior, R-123" leaves Senior alone
            if grades[-1].rstrip("+-") in MODIFIABLE_GRADES:
                grades[-1] += token
        else:
            after_grade = False

    return create_result(
        list(dict.fromkeys(grades)),
        0.99 if grades else 0.4,
        "regex",
        source=grade_text,
        metadata={"original": grade_text, "extracted": grades},
    )


# =============================================================================
# LANGUAGE REQUIREMENTS
# =============================================================================

LANGUAGE_MAP = MappingProxyType(
    {
        "английский": "English",
        "english": "English",
        "англ": "English",
        "русский": "Russian",
        "russian": "Russian",
        "испанский": "Spanish",
        "spanish": "Spanish",
        "немецкий": "German",
        "german": "German",
        "французский": "French",
        "french": "French",
        "польский": "Polish",
        "polish": "Polish",
        "украинский": "Ukrainian",
        "ukrainian": "Ukrainian",
        "чешский": "Czech",
        "czech": "Czech",
        "португальский": "Portuguese",
        "portuguese": "Portuguese",
        "итальянский": "Italian",
        "italian": "Italian",
        "голландский": "Dutch",
        "dutch": "Dutch",
    }
)

LEVEL_MAP = MappingProxyType(
    {
        "a1": "A1",
        "beginner": "A1",
        "начальный": "A1",
        "a2": "A2",
        "elementary": "A2",
        "базовый": "A2",
        "b1": "B1",
        "intermediate": "B1",
        "средний": "B1",
        "b2": "B2",
        "upper-intermediate": "B2",
        "upper intermediate": "B2",
        "выше среднего": "B2",
        "c1": "C1",
        "advanced": "C1",
        "продвинутый": "C1",
        "c2": "C2",
        "proficient": "C2",
        "свободное владение": "C2",
        "native": "Native",
        "носитель": "Native",
    }
)

# Longest alias first so "upper-intermediate" wins over "intermediate"
SORTED_LANGUAGE_ALIASES = tuple(sorted(LANGUAGE_MAP.items(), key=lambda item: -len(item[0])))
SORTED_LEVEL_ALIASES = tuple(sorted(LEVEL_MAP.items(), key=lambda item: -len(item[0])))

LANGUAGE_EMPTY_MARKERS = frozenset({"n/a", "na", "нет", "не требуется", "none"})

LEVEL_NOISE = re.compile(r"[\s,()\-]")

# A standalone + or - (not a hyphen inside a word like "upper-intermediate")
LEVEL_MODIFIER = re.compile(r"(?<![^\W\d_])([+-])(?![^\W\d_])")


@dataclass(frozen=True)
class LanguageRequirement:
    """One language the candidate must (or should) speak."""

    language: str
    level: str
    priority: str
    modifier: Optional[str] = None


def _is_language_skipped(text: Optional[str]) -> bool:
    return not text or not text.strip() or text.strip(" .").lower() in LANGUAGE_EMPTY_MARKERS


def _parse_language_level(
    text: str, language: str, priority: str
) -> Optional[LanguageRequirement]:
    normalized = LEVEL_NOISE.sub("", text.lower())
    if not normalized:
        return None

    for alias, level in SORTED_LEVEL_ALIASES:
        if LEVEL_NOISE.sub("", alias) in normalized:
            modifier = LEVEL_MODIFIER.search(text)
            return LanguageRequirement(
                language=language,
                level=level,
                priority=priority,
                modifier=modifier.group(1) if modifier else None,
            )
    return None


def _find_language(text: str) -> Optional[tuple[str, str]]:
    lowered = text.lower()
    for alias, language in SORTED_LANGUAGE_ALIASES:
        if alias in lowered:
            return language, alias
    return None


def extract_language_requirements(numbered_list: Mapping[int, str]) -> ExtractionResult:
    """
    Extract language requirements from items 8, 10 and 11.

    Item 8 holds the required English level. Item 10 names an additional
    (preferred) language; its level comes from item 11, or from the rest of
    item 10 when item 11 is missing.

    Returns:
        ExtractionResult with a list of LanguageRequirement
        (confidence 0.95, or 0 when none were found)
    """
    requirements = []

    english_text = numbered_list.get(REQUEST_FIELD_ITEMS["min_english_level"])
    if not _is_language_skipped(english_text):
        requirement = _parse_language_level(english_text, "English", "required")
        if requirement:
            requirements.append(requirement)

    additional_text = numbered_list.get(REQUEST_FIELD_ITEMS["additional_language"])
    if not _is_language_skipped(additional_text):
        found = _find_language(additional_text)
        if found:
            language, alias = found
            level_text = numbered_list.get(REQUEST_FIELD_ITEMS["min_additional_language_level"])
            if _is_language_skipped(level_text):
                level_text = re.sub(re.escape(alias), "", additional_text, count=1, flags=re.IGNORECASE)
            requirement = _parse_language_level(level_text, language, "preferred")
            if requirement:
                requirements.append(requirement)

    return create_result(requirements, 0.95 if requirements else 0, "regex")


# =============================================================================
# LOCATION
# =============================================================================

REGION_MAP = MappingProxyType(
    {
        "рф": "RU",
        "россия": "RU",
        "russia": "RU",
        "рб": "BY",
        "беларусь": "BY",
        "belarus": "BY",
        "eu": "EU",
        "европа": "EU",
        "europe": "EU",
        "us": "US",
        "сша": "US",
        "usa": "US",
        "армения": "AM",
        "armenia": "AM",
        "грузия": "GE",
        "georgia": "GE",
    }
)

# Work type -> substrings that indicate it, checked in order
WORK_TYPE_MARKERS = (
    ("Remote", ("remote", "удален")),
    ("Office", ("office", "офис")),
    ("Hybrid", ("hybrid", "гибрид")),
    ("Remote", ("no restrictions",)),
)

GLOBAL_MARKER = "no restrictions"
FRIENDLY_COUNTRIES_MARKER = "дружественные страны"


@dataclass(frozen=True)
class Location:
    """Where the candidate may work from."""

    regions: tuple[str, ...]
    work_type: str
    is_global: bool


def _work_type(lowered: str) -> str:
    for work_type, markers in WORK_TYPE_MARKERS:
        if any(marker in lowered for marker in markers):
            return work_type
    return NOT_AVAILABLE


def extract_location(numbered_list: Mapping[int, str]) -> ExtractionResult:
    """
    Extract location constraints from item 24.

    Region aliases are matched as whole words ("us" does not match inside
    "russia"). "Дружественные страны" maps to RU; "no restrictions" marks
    the location as global.

    Returns:
        ExtractionResult with a Location (confidence 0.95 when regions were
        found or the location is global, else 0.5), or value None when item
        24 is missing
    """
    location_text = numbered_list.get(REQUEST_FIELD_ITEMS["required_location"])
    if not location_text or not location_text.strip():
        return create_result(None, 0, "regex")

    lowered = location_text.lower()
    is_global = GLOBAL_MARKER in lowered

    if FRIENDLY_COUNTRIES_MARKER in lowered:
        regions = ("RU",)
    elif is_global:
        regions = ()
    else:
        found = [
            code
            for alias, code in REGION_MAP.items()
            if re.search(rf"(?<!\w){re.escape(alias)}(?!\w)", lowered)
        ]
        regions = tuple(dict.fromkeys(found))

    location = Location(regions=regions, work_type=_work_type(lowered), is_global=is_global)
    confidence = 0.95 if regions or is_global else 0.5
    return create_result(location, confidence, "regex", source=location_text)


# =============================================================================
# HEADCOUNT
# =============================================================================


def extract_requested_headcount(numbered_list: Mapping[int, str]) -> ExtractionResult:
    """Extract the first integer of item 12 (confidence 0.95, or 0 if absent)."""
    headcount_text = numbered_list.get(REQUEST_FIELD_ITEMS["team_size"])
    if not headcount_text or not headcount_text.strip():
        return create_result(None, 0, "regex")

    match = re.search(r"\d+", headcount_text)
    if not match:
        return create_result(None, 0, "regex", source=headcount_text)
    return create_result(int(match.group(0)), 0.95, "regex", source=headcount_text)


# =============================================================================
# META INFO
# =============================================================================

META_LINE_PREFIX = "CV -"
DATES_CONFIDENCE = 0.9

# Identifier patterns copied into the meta info, first match only
META_IDENTIFIER_PATTERNS = (
    PatternName.REQUEST_ID,
    PatternName.SALESFORCE_URL,
    PatternName.CV_ID,
)


def extract_meta_fields(text: str, meta_info: str = "") -> ExtractionResult:
    """
    Collect tracking data from the meta block and the full text.

    The first "CV -" line of the meta block gives the base fields. Later CV
    lines only fill gaps; their technology segment (";"-separated) becomes
    additional_technologies. Then the first request_id / salesforce_url /
    cv_id match and all dates of the text are added.

    Args:
        text: Full request text
        meta_info: Meta block from the section splitter

    Returns:
        ExtractionResult with a dict; confidence is the mean confidence of
        the patterns that contributed (dates count DATES_CONFIDENCE)
    """
    meta = {}
    confidences = []

    cv_lines = [
        line.strip()
        for line in (meta_info or "").split("\n")
        if line.strip().startswith(META_LINE_PREFIX)
    ]
    for index, cv_line in enumerate(cv_lines):
        cv_data = extract_meta_info(cv_line)
        if index == 0:
            meta.update(cv_data)
            continue

        if cv_data.get("role") and "role" not in meta:
            meta["role"] = cv_data["role"]
        if cv_data.get("technology"):
            meta["additional_technologies"] = [
                technology.strip() for technology in cv_data["technology"].split(";")
            ]
        if cv_data.get("request_id") and "request_id" not in meta:
            meta["request_id"] = cv_data["request_id"]
        meta[f"cv_line_{index + 1}"] = cv_data

    for pattern in META_IDENTIFIER_PATTERNS:
        matches = find(text, pattern)
        if matches:
            meta[pattern.value] = matches[0].value
            confidences.append(matches[0].confidence)

    dates = extract_dates(text)
    if dates:
        meta["dates"] = dates
        confidences.append(DATES_CONFIDENCE)

    confidence = sum(confidences) / len(confidences) if confidences else 0
    return create_result(
        meta,
        confidence,
        "pattern",
        source=meta_info or "Full text",
        metadata={"cv_lines": len(cv_lines)},
    )


# =============================================================================
# MISSING DATA
# =============================================================================


def extract_missing_data(numbered_list: Mapping[int, str]) -> ExtractionResult:
    """
    Report every mapped field whose item is absent or holds an empty marker.

    Returns:
        ExtractionResult with a dict of field name -> "N/A" (confidence 1.0)
    """
    missing = {
        field_name: NOT_AVAILABLE
        for field_name, number in REQUEST_FIELD_ITEMS.items()
        if is_empty_value(numbered_list.get(number))
    }
    return create_result(
        missing,
        1.0,
        "pattern",
        source="Numbered list analysis",
        metadata={"missing_count": len(missing), "total_expected": len(REQUEST_FIELD_ITEMS)},
    )


# =============================================================================
# ALL FIELDS
# =============================================================================


def extract_fields(
    text: str, numbered_list: Mapping[int, str], meta_info: str = ""
) -> dict[str, ExtractionResult]:
    """
    Run every field extractor.

    Args:
        text: Full normalized request text
        numbered_list: Item number -> text
        meta_info: Meta block from the section splitter

    Returns:
        Dict of result name -> ExtractionResult: meta_info, developer_grades,
        language_requirements, location, requested_headcount, missing_data,
        then one entry per REQUEST_FIELD_ITEMS field
    """
    results = {
        "meta_info": extract_meta_fields(text, meta_info),
        "developer_grades": extract_developer_grade(text, numbered_list),
        "language_requirements": extract_language_requirements(numbered_list),
        "location": extract_location(numbered_list),
        "requested_headcount": extract_requested_headcount(numbered_list),
        "missing_data": extract_missing_data(numbered_list),
    }
    for field_name in REQUEST_FIELD_ITEMS:
        results[field_name] = extract_list_field(numbered_list, field_name)
    return results
