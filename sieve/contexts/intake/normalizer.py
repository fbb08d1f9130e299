"""
Request text normalizer for the Intake context.

Canonicalizes raw request text before section splitting. Every later stage
assumes the normalized form: "\\n" line endings, single spaces, at most one
blank line in a row, "- " bullets and "<n>. " numbering.

Design principle: Normalize BEFORE parsing. Nothing downstream mutates the
normalized text.
"""

import unicodedata

from sieve.contexts.intake.section_patterns import MarkupPatterns, NormalizationPatterns

# Invisible characters removed before anything else
INVISIBLE_CHARS = (
    "\ufeff",  # BOM / zero-width no-break space
    "\u200b",  # zero-width space
    "\u200c",  # zero-width non-joiner
    "\u200d",  # zero-width joiner
    "\u2060",  # word joiner
)

# Typographic punctuation -> ASCII equivalent
PUNCTUATION_REPLACEMENTS = {
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201a": "'",  # single low-9 quote
    "\u201b": "'",  # single high-reversed-9 quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    "\u201e": '"',  # double low-9 quote
    "\u201f": '"',  # double high-reversed-9 quote
    # Dashes
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
}


def normalize(text: str | None) -> str:
    """
    Normalize request text for consistent parsing.

    Steps, in order:
    1. Remove BOM and zero-width characters, apply NFC
    2. Standardize line breaks to "\\n"
    3. Collapse horizontal whitespace runs to one space
    4. Collapse 3+ newlines to a single blank line
    5. Canonicalize bullets to "- "
    6. Canonicalize numbered markers to "<n>. "
    7. Straighten quotes and dashes
    8. Trim every line, then the whole text

    Args:
        text: Raw request text (may be empty or None)

    Returns:
        Normalized text ("" for empty input)
    """
    if not text:
        return ""

    for char in INVISIBLE_CHARS:
        text = text.replace(char, "")
    text = unicodedata.normalize("NFC", text)

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    text = NormalizationPatterns.HORIZONTAL_WHITESPACE.sub(" ", text)
    text = NormalizationPatterns.EXCESS_BLANK_LINES.sub("\n\n", text)

    text = NormalizationPatterns.BULLET_MARKER.sub("- ", text)
    text = NormalizationPatterns.NUMBERED_MARKER.sub(r"\1. ", text)

    for char, replacement in PUNCTUATION_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return "\n".join(line.strip() for line in text.split("\n")).strip()


def get_lines(text: str | None) -> list[str]:
    """
    Normalize text and return its non-empty lines.

    Args:
        text: Raw request text

    Returns:
        List of trimmed, non-empty lines
    """
    return [line for line in normalize(text).split("\n") if line]


def strip_html(text: str) -> str:
    """
    Remove HTML tags and entity references.

    Tags are dropped; each "&entity;" becomes a single space. No other
    normalization is applied.
    """
    if not text:
        return ""
    text = MarkupPatterns.HTML_TAG.sub("", text)
    return MarkupPatterns.HTML_ENTITY.sub(" ", text)


def clean_for_matching(text: str | None) -> str:
    """
    Aggressively clean text for pattern matching.

    Normalizes, drops characters outside word characters, whitespace and
    "- . , : ; ( ) /", then tightens spacing around punctuation and collapses
    all whitespace (newlines included) to single spaces.

    Not a substitute for normalize(): line structure is lost.

    Args:
        text: Raw request text

    Returns:
        Single-line, matching-safe text
    """
    cleaned = MarkupPatterns.NON_MATCHING_CHARS.sub("", normalize(text))
    cleaned = MarkupPatterns.PUNCTUATION_SPACING.sub(r"\1 ", cleaned)
    return MarkupPatterns.WHITESPACE_RUN.sub(" ", cleaned).strip()
