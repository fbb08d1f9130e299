"""
End-to-end request parsing.

Runs the pipeline stages in order and bundles their outputs:

    normalize -> split -> patterns -> entities -> fields

The parser keeps no state between calls and does no file I/O. Its output is
handed to whatever assembles the final request record.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from sieve.contexts.extraction.entities import ENTITY_DICTIONARIES
from sieve.contexts.extraction.entity_classifier import ClassifiedEntities, EntityClassifier
from sieve.contexts.extraction.entity_registry import extract_keywords
from sieve.contexts.extraction.field_extractors import (
    ExtractionResult,
    aggregate_confidence,
    extract_fields,
)
from sieve.contexts.extraction.logger import log_request_parsed
from sieve.contexts.extraction.pattern_matcher import PatternMatch, find_all
from sieve.contexts.intake.normalizer import normalize
from sieve.contexts.intake.section_splitter import SplitResult, get_missing_items, split

# Results that describe the request rather than a field of it
NON_FIELD_RESULTS = ("missing_data",)


@dataclass
class ParsedRequest:
    """
    Everything the pipeline extracted from one request.

    Attributes:
        raw_text: Input as given
        normalized_text: Output of normalize()
        sections: Meta block, description and numbered list
        missing_items: Gaps in item numbering
        patterns: Pattern name -> matches (patterns without matches omitted)
        meta_info: Parsed tracking line plus identifiers and dates
        technologies: Classified technology terms
        keywords: Entity type -> canonical names found in the text
        fields: Result name -> ExtractionResult
        confidence: Mean confidence of the fields that produced a value
        warnings: Human-readable notes about gaps in the request
    """

    raw_text: str
    normalized_text: str
    sections: SplitResult
    missing_items: list[int] = field(default_factory=list)
    patterns: dict[str, list[PatternMatch]] = field(default_factory=dict)
    meta_info: dict = field(default_factory=dict)
    technologies: ClassifiedEntities = field(default_factory=ClassifiedEntities)
    keywords: dict[str, list[str]] = field(default_factory=dict)
    fields: dict[str, ExtractionResult] = field(default_factory=dict)
    confidence: float = 0.0
    warnings: list[str] = field(default_factory=list)

    @property
    def request_id(self) -> Optional[str]:
        return self.meta_info.get("request_id")


def _has_value(value) -> bool:
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return value is not None


def _collect_warnings(sections: SplitResult, missing_items: list[int], meta_info: dict) -> list[str]:
    warnings = []
    if not sections.numbered_list:
        warnings.append("No numbered list found")
    if missing_items:
        warnings.append(f"Missing item numbers: {missing_items}")
    if not meta_info.get("request_id"):
        warnings.append("No request id found")
    return warnings


def parse_request_text(
    text: Optional[str],
    dictionaries: Optional[Mapping[str, Mapping[str, tuple[str, ...]]]] = None,
) -> ParsedRequest:
    """
    Parse one raw staffing request.

    Args:
        text: Raw request text (None or empty gives an empty result)
        dictionaries: Entity type -> category dictionary overrides. A
                      "technology" entry replaces the classifier's default terms.

    Returns:
        ParsedRequest

    Example:
        >>> parsed = parse_request_text(raw)
        >>> parsed.sections.numbered_list[1]
        'Индустрия проекта FinTech'
        >>> parsed.missing_items
        [3]
    """
    dictionaries = dictionaries or {}

    normalized = normalize(text)
    sections = split(normalized)
    missing_items = get_missing_items(sections.numbered_list)
    patterns = find_all(normalized)

    technologies = EntityClassifier(dictionaries.get("technology")).classify(normalized)
    keywords = {
        entity_type: extract_keywords(normalized, entity_type, dictionaries.get(entity_type))
        for entity_type in ENTITY_DICTIONARIES
    }

    fields = extract_fields(normalized, sections.numbered_list, sections.meta_info)
    meta_info = fields["meta_info"].value or {}

    confidence = aggregate_confidence(
        {
            name: result.confidence
            for name, result in fields.items()
            if name not in NON_FIELD_RESULTS and result.confidence > 0 and _has_value(result.value)
        }
    )
    warnings = _collect_warnings(sections, missing_items, meta_info)

    parsed = ParsedRequest(
        raw_text=text or "",
        normalized_text=normalized,
        sections=sections,
        missing_items=missing_items,
        patterns=patterns,
        meta_info=meta_info,
        technologies=technologies,
        keywords=keywords,
        fields=fields,
        confidence=round(confidence, 2),
        warnings=warnings,
    )

    log_request_parsed(parsed.request_id, parsed.confidence, warnings)
    return parsed
