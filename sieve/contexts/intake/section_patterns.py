"""
Line-level patterns for request normalization and section splitting.

Pattern classes follow one convention across the package:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# NORMALIZATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class NormalizationPatterns:
    """
    Regex patterns used by the text normalizer.

    All patterns operate on text whose line endings are already "\\n".
    """

    # Any whitespace run that does not contain a newline
    HORIZONTAL_WHITESPACE: re.Pattern = re.compile(r"[^\S\n]+")

    # Three or more newlines, possibly separated by whitespace-only lines
    EXCESS_BLANK_LINES: re.Pattern = re.compile(r"\n\s*\n\s*\n")

    # Bullet glyph at line start: • · ▪ ▫ ◦ ‣ and hyphen/en dash/em dash
    BULLET_MARKER: re.Pattern = re.compile(r"^[ \t]*[•·▪▫◦‣\-–—][ \t]*", re.MULTILINE)

    # Numbered marker at line start: "1." / "1)" / "12.", but not "1.5" or "14.08.2025"
    NUMBERED_MARKER: re.Pattern = re.compile(r"^[ \t]*(\d+)[.)](?!\d)[ \t]*", re.MULTILINE)


@dataclass(frozen=True)
class MarkupPatterns:
    """Patterns for stripping HTML and reducing text to a matching-safe alphabet."""

    HTML_TAG: re.Pattern = re.compile(r"<[^>]*>")
    HTML_ENTITY: re.Pattern = re.compile(r"&[^;\s]+;")

    # Everything outside word chars, whitespace and - . , : ; ( ) /
    NON_MATCHING_CHARS: re.Pattern = re.compile(r"[^\w\s\-.,:;()/]")
    PUNCTUATION_SPACING: re.Pattern = re.compile(r"\s*([.,:;])\s*")
    WHITESPACE_RUN: re.Pattern = re.compile(r"\s+")


# =============================================================================
# SECTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionPatterns:
    """
    Regex patterns for detecting section boundaries in a request.

    A request is laid out as:
        CV - <role> - <technology> - <company> - <manager> - <request id>
        https://<org>.my.salesforce.com/...
        Описание
        <free text>
        1. <item>
        2. <item>
    """

    # Start of a numbered item (used for state transitions); item numbers start at 1
    NUMBERED_ITEM_START: re.Pattern = re.compile(r"^(?!0+\.)\d+\.\s")

    # Full numbered item: number and content
    NUMBERED_ITEM: re.Pattern = re.compile(r"^(\d+)\.\s*(.*)$")


# Meta block: only the first few lines are considered
META_WINDOW = 4
META_LINE_PREFIX = "CV -"
META_LINE_MARKERS = ("salesforce.com", "https://")

# Lowercase markers that open the free-text description
DESCRIPTION_MARKERS = ("описание", "description")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def is_meta_line(line: str) -> bool:
    """
    Check if a line belongs to the meta block.

    Args:
        line: Stripped line

    Returns:
        True for a "CV -" tracking line or a link line
    """
    return line.startswith(META_LINE_PREFIX) or any(
        marker in line for marker in META_LINE_MARKERS
    )


def is_description_marker(line: str) -> bool:
    """Check if a line announces the description (case-insensitive)."""
    lowered = line.lower()
    return any(marker in lowered for marker in DESCRIPTION_MARKERS)


def is_numbered_item(line: str) -> bool:
    """Check if a line opens a numbered item ("<n>. text")."""
    return SectionPatterns.NUMBERED_ITEM_START.match(line) is not None
